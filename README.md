# bintree

A small library for binary trees whose nodes hold integers. You can build
them, look at their shape, walk them in the usual orders, and draw them as
ASCII art.

## Installation

```
pip install .
```

## Building a tree

`bintree.tree.Node` is a node with a `value` and links to its `parent`,
`left` child and `right` child.

```python
from bintree.tree import Node

root = Node(98)
root.left = Node(12, root)
root.right = Node(402, root)
root.left.left = Node(6, root.left)
root.left.right = Node(16, root.left)
```

`Node(value, parent)` records the parent but does not attach the new node to
it; you choose which side it goes on.

`insert_left(value)` and `insert_right(value)` create a child, attach it, and
return it. If the slot already held a child, that child moves down to become
the child on the same side of the new node:

```python
root.insert_right(128)   # 402 becomes 128's right child
```

`delete()` takes apart the subtree rooted at a node: it is detached from its
parent and every node in it loses its links.

## Drawing a tree

```python
from bintree.render import render, print_tree

print_tree(root)      # writes to standard output
text = render(root)   # returns the same drawing as a string
```

`print_tree` takes an optional `file` to write to instead. For the tree
built with 98, 12, 402, 6 and 16 above (before `insert_right`), the drawing
is:

```
       .-------(098)--.
  .--(012)--.       (402)
(006)     (016)
```

Each level of the tree is one line; values are shown as three-digit,
zero-padded labels. `render(None)` returns an empty string.

## Inspecting a tree

```python
from bintree.properties import (
    is_leaf, is_root, height, depth, size, leaves, internal_nodes,
    balance, is_full, is_perfect, sibling, uncle,
)

height(root)          # edges on the longest path down to a leaf
depth(root.right)     # edges between this node and the root
size(root)            # number of nodes
leaves(root)          # number of nodes with no children
internal_nodes(root)  # number of nodes with at least one child
balance(root)         # levels in the left subtree minus levels in the right
is_full(root)         # True when every node has either 0 or 2 children
is_perfect(root)      # True when every inner node has two children and all leaves share one level
sibling(root.left)    # the other child of the parent, or None
uncle(root.left.left) # the sibling of the parent, or None
```

Given `None`, these return `0`, `False` or `None`, as suits each one. A
single node has height 0.

## Traversal

```python
from bintree.traversal import preorder, inorder, postorder

list(preorder(root))
list(inorder(root))
list(postorder(root))
```

Each of these is a generator that yields the values stored in the nodes. The
walks are iterative, so deep trees do not hit the recursion limit.