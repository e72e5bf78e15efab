"""Binary tree node with parent links and structural helpers."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value.

    Creating a node records its parent but does not attach it to that
    parent; assign it to ``parent.left`` or ``parent.right`` for that, or
    use :meth:`insert_left` and :meth:`insert_right`.
    """

    value: int
    parent: Node | None = field(default=None, repr=False)
    left: Node | None = None
    right: Node | None = None

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; any existing left child becomes its left child."""
        new_node = Node(value, parent=self, left=self.left)
        if self.left is not None:
            self.left.parent = new_node
        self.left = new_node
        return new_node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; any existing right child becomes its right child."""
        new_node = Node(value, parent=self, right=self.right)
        if self.right is not None:
            self.right.parent = new_node
        self.right = new_node
        return new_node

    def detach(self) -> Node:
        """Remove this subtree from its parent and return it as a standalone tree."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            if parent.right is self:
                parent.right = None
        self.parent = None
        return self

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def depth(self) -> int:
        """Return the number of edges between this node and the root."""
        count = 0
        node = self.parent
        while node is not None:
            count += 1
            node = node.parent
        return count

    def sibling(self) -> Node | None:
        """Return the other child of this node's parent, or None."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is self:
            return parent.right
        return parent.left

    def uncle(self) -> Node | None:
        """Return the sibling of this node's parent, or None."""
        if self.parent is None:
            return None
        return self.parent.sibling()