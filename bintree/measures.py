"""Traversals and measurements over binary trees built from Node."""

from __future__ import annotations

from collections.abc import Iterator

from bintree.node import Node


def preorder(tree: Node | None) -> Iterator[int]:
    """Yield values node, left subtree, right subtree."""
    if tree is None:
        return
    yield tree.value
    yield from preorder(tree.left)
    yield from preorder(tree.right)


def inorder(tree: Node | None) -> Iterator[int]:
    """Yield values left subtree, node, right subtree."""
    if tree is None:
        return
    yield from inorder(tree.left)
    yield tree.value
    yield from inorder(tree.right)


def postorder(tree: Node | None) -> Iterator[int]:
    """Yield values left subtree, right subtree, node."""
    if tree is None:
        return
    yield from postorder(tree.left)
    yield from postorder(tree.right)
    yield tree.value


def height(tree: Node | None) -> int:
    """Return the number of edges on the longest downward path; 0 for a leaf or None."""
    if tree is None or tree.is_leaf():
        return 0
    return 1 + max(height(tree.left), height(tree.right))


def _levels(tree: Node | None) -> int:
    """Return the number of nodes on the longest downward path."""
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def size(tree: Node | None) -> int:
    """Return the number of nodes in the tree."""
    if tree is None:
        return 0
    return size(tree.left) + 1 + size(tree.right)


def leaves(tree: Node | None) -> int:
    """Return the number of nodes without children."""
    if tree is None:
        return 0
    own = 1 if tree.is_leaf() else 0
    return leaves(tree.left) + own + leaves(tree.right)


def internal_nodes(tree: Node | None) -> int:
    """Return the number of nodes with at least one child."""
    if tree is None:
        return 0
    own = 0 if tree.is_leaf() else 1
    return own + internal_nodes(tree.left) + internal_nodes(tree.right)


def balance(tree: Node | None) -> int:
    """Return the left subtree's height minus the right subtree's height."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Node | None) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    if tree.is_leaf():
        return True
    if tree.left is None or tree.right is None:
        return False
    return is_full(tree.left) and is_full(tree.right)


def is_perfect(tree: Node | None) -> bool:
    """Return True if the tree is full and all its leaves are on one level."""
    if tree is None:
        return False
    if tree.is_leaf():
        return True
    if tree.left is None or tree.right is None:
        return False
    return (
        is_perfect(tree.left)
        and is_perfect(tree.right)
        and height(tree.left) == height(tree.right)
    )