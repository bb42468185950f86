# bstree

An unbalanced binary search tree of comparable values (integers in the
examples). It supports insertion, lookup, removal, minimum and maximum, and
in-order, pre-order and post-order traversal. It also ships a command that
exercises the tree and reports the results.

## Installation

```
pip install .
```

## Using the tree

```python
from bstree.tree import BinarySearchTree, format_traversal

tree = BinarySearchTree(15)
for value in (10, 9, 11, 16, 18):
    tree.insert(value)

15 in tree            # True
tree.find(42)         # False
len(tree)             # 6

tree.remove(11)
list(tree.pre_order())                    # [15, 10, 9, 16, 18]
format_traversal(tree.in_order())         # "9 10 15 16 18 "

tree.find_min()       # 9
tree.find_max()       # 18
```

`BinarySearchTree()` with no argument starts an empty tree; passing a value
makes it the root. The root node is available as `tree.root`, a `Node` with
`value`, `left` and `right` attributes.

- `in_order()`, `pre_order()` and `post_order()` are generators. Iterating
  over the tree itself yields the same values as `in_order()`, that is, in
  sorted order.
- Duplicate values are allowed and are placed in the right subtree.
- `remove(value)` removes one occurrence; removing a value that is not in the
  tree leaves the tree unchanged. A node with two children takes the value of
  its in-order successor.
- `find_min()` and `find_max()` raise `ValueError` on an empty tree.

`format_traversal(values)` writes each value followed by a single space. An
empty sequence is written as `empty tree`.

The tree is not self-balancing: inserting values in sorted order produces a
chain, and operations then take time proportional to the number of values.

## Self-check command

```
tree-tester
```

This prints the root value of a sample tree, then builds a few small trees and
prints a `PASS` or `FAIL` line for creation, insertion, lookup, minimum and
maximum. For removal, the three traversals and the size it prints the expected
and the actual output next to each other. The same checks can be run from code
with `bstree.selfcheck.run_all_checks(out)`, which writes its report to the
text stream `out` and returns the number of failed checks.

## Running the tests

```
pip install .[test]
pytest
```