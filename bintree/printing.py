"""Text rendering of binary trees."""

from __future__ import annotations

import sys
from typing import TextIO

from bintree.node import Node

_MIN_LINE = 2


def _write(row: list[str], column: int, text: str) -> None:
    end = column + len(text)
    if end > len(row):
        row.extend(" " * (end - len(row)))
    row[column:end] = text


def _layout(node: Node | None, offset: int, depth: int, rows: list[list[str]]) -> int:
    """Place a subtree's labels and connectors; return the width it occupies."""
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _layout(node.left, offset, depth + 1, rows)
    right = _layout(node.right, offset + left + width, depth + 1, rows)
    _write(rows[depth], offset + left, label)
    if depth:
        if is_left:
            start, length = offset + left + width // 2, width + right
        else:
            start, length = offset - width // 2, left + width
        _write(rows[depth - 1], start, "-" * length)
        _write(rows[depth - 1], offset + left + width // 2, ".")
    return left + width + right


def _levels(tree: Node | None) -> int:
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def render(tree: Node | None) -> str:
    """Return a multi-line drawing of the tree, or an empty string for None."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(_levels(tree))]
    _layout(tree, 0, 0, rows)
    lines = []
    for row in rows:
        text = "".join(row)
        keep = max(len(text.rstrip(" ")), _MIN_LINE)
        lines.append(text.ljust(keep)[:keep])
    return "\n".join(lines)


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the drawing of the tree to ``file`` (standard output by default)."""
    if tree is None:
        return
    print(render(tree), file=file if file is not None else sys.stdout)