# bintree

A small binary tree library: build trees of integer-valued nodes that keep a
link to their parent, walk them in pre-, in- and post-order, measure them, and
draw them as ASCII art.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Building a tree

Every node is a `bintree.node.Node`. A node has a `value`, a `parent`, and two
children, `left` and `right` (each `None` when absent).

```python
from bintree.node import Node

root = Node(98, None)
root.insert_left(12)
root.insert_right(402)
root.left.insert_right(54)
root.insert_right(128)
```

`Node(value, parent)` records the parent but does not attach the node to it;
assign the node to `parent.left` or `parent.right` yourself, or use
`insert_left` / `insert_right`, which create the node and attach it. If that
side is already taken, the existing child moves one level down and becomes
the new node's child on the same side. Both return the new node.

## Walking a tree

`preorder()`, `inorder()` and `postorder()` are generators of the node values
in that order:

```python
list(root.inorder())    # [12, 54, 98, 128, 402]
```

## Measuring a tree

- `height()`: edges on the longest path down to a leaf (0 for a leaf)
- `depth()`: edges from the node up to the root (0 for the root)
- `size()`: number of nodes in the subtree
- `leaves()`: number of nodes in the subtree with no children
- `internal_nodes()`: number of nodes in the subtree with at least one child
- `balance()`: levels of the left subtree minus levels of the right subtree
- `is_leaf()`, `is_root()`: whether the node has no children / no parent
- `is_full()`: every node in the subtree has zero or two children
- `is_perfect()`: the subtree is full and all its leaves are at one depth
- `sibling()`, `uncle()`: the other child of the parent, or the parent's
  sibling; `None` where there is none

`delete()` detaches a subtree from its parent and clears every link inside
it.

## Drawing a tree

```python
import sys
from bintree.render import render, print_tree

text = render(root)           # one line per level, each ending in "\n"
print_tree(root)              # writes to standard output
print_tree(root, sys.stderr)  # or to any text stream
```

Each node is drawn as its value padded to three digits in parentheses, with
dashes and dots linking it to its children. An empty tree (`None`) draws as
the empty string. The tree built above draws as:

```
  .-------(098)--.
(012)--.       (128)--.
     (054)          (402)
```