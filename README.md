# bintree

A small binary tree library. Each `Node` holds an integer value and links to its
parent and to its left and right children. On top of the nodes the package offers
traversals, measures such as height, size and balance, and an ASCII drawing of a
whole tree.

## Installation

```
pip install .
```

## Building a tree

```python
from bintree.node import Node

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
right.insert_right(128)
```

`insert_left` and `insert_right` create a new child and return it. If the node
already had a child on that side, the old child moves down and becomes the new
node's child on the same side.

`Node(value, parent=...)` only records the parent; it does not attach the new
node to it. To attach it, assign it to `parent.left` or `parent.right`, or use
the insert methods.

A node can tell where it sits in its tree:

```python
root.is_root()               # True
right.is_leaf()              # False
left.right.depth()           # 2
left.sibling() is right      # True
left.right.uncle() is right  # True
```

`sibling()` and `uncle()` return `None` when there is no such node.
`detach()` cuts a node and its whole subtree loose from its parent and returns
it as a tree of its own.

## Traversals and measures

```python
from bintree import measures

list(measures.preorder(root))   # [98, 12, 54, 402, 128]
list(measures.inorder(root))    # [12, 54, 98, 402, 128]
list(measures.postorder(root))  # [54, 12, 128, 402, 98]

measures.height(root)           # 2 (edges on the longest downward path)
measures.size(root)             # 5
measures.leaves(root)           # 2
measures.internal_nodes(root)   # 3 (nodes with at least one child)
measures.balance(root)          # 0 (left height minus right height)
measures.is_full(root)          # False
measures.is_perfect(root)       # False
```

The traversals are generators of values. Every function accepts `None` as an
empty tree: traversals yield nothing, counts and `height` give 0, and `is_full`
and `is_perfect` give `False`.

## Printing

```python
from bintree.printing import print_tree, render

print_tree(root)
text = render(root)
```

Each value is shown as a field of at least three digits in parentheses, with
dotted lines leading from each node to its children. For the tree above:

```
  .-------(098)--.
(012)--.       (402)--.
     (054)          (128)
```

`render` returns the drawing as a string without a trailing newline (an empty
string for `None`). `print_tree` writes it to standard output unless a `file`
is given, and writes nothing for `None`.

## What it does not do

The package is a plain linked tree. It does not keep values ordered, does not
rebalance, and has no command-line program.