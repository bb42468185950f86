"""An unbalanced binary search tree of comparable values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(slots=True)
class Node:
    """A tree node holding a value and its two children."""

    value: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


class BinarySearchTree:
    """Binary search tree; equal values are placed in the right subtree."""

    def __init__(self, value=None):
        self.root: Optional[Node] = None
        self._size = 0
        if value is not None:
            self.root = Node(value)
            self._size = 1

    def insert(self, value) -> None:
        """Add a value; duplicates are kept and go to the right."""
        new = Node(value)
        if self.root is None:
            self.root = new
        else:
            node = self.root
            while True:
                if value < node.value:
                    if node.left is None:
                        node.left = new
                        break
                    node = node.left
                else:
                    if node.right is None:
                        node.right = new
                        break
                    node = node.right
        self._size += 1

    def find(self, value) -> bool:
        """Return True if the value is stored in the tree."""
        node = self.root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def __contains__(self, value) -> bool:
        return self.find(value)

    def remove(self, value) -> None:
        """Remove one occurrence of the value; absent values are ignored."""
        parent: Optional[Node] = None
        node = self.root
        while node is not None:
            if value < node.value:
                parent, node = node, node.left
            elif value > node.value:
                parent, node = node, node.right
            else:
                break
        if node is None:
            return

        if node.left is not None and node.right is not None:
            # Replace with the in-order successor and unlink the successor.
            succ_parent = node
            succ = node.right
            while succ.left is not None:
                succ_parent, succ = succ, succ.left
            node.value = succ.value
            if succ_parent is node:
                node.right = succ.right
            else:
                succ_parent.left = succ.right
        else:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self.root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child
        self._size -= 1

    def find_max(self):
        """Return the largest value; raise ValueError if the tree is empty."""
        if self.root is None:
            raise ValueError("empty tree")
        node = self.root
        while node.right is not None:
            node = node.right
        return node.value

    def find_min(self):
        """Return the smallest value; raise ValueError if the tree is empty."""
        if self.root is None:
            raise ValueError("empty tree")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.value

    def in_order(self) -> Iterator[Any]:
        """Yield values left subtree, node, right subtree."""
        stack: list[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def pre_order(self) -> Iterator[Any]:
        """Yield values node, left subtree, right subtree."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def post_order(self) -> Iterator[Any]:
        """Yield values left subtree, right subtree, node."""
        stack: list[tuple[Node, bool]] = []
        if self.root is not None:
            stack.append((self.root, False))
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node.value
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def __iter__(self) -> Iterator[Any]:
        return self.in_order()

    def __len__(self) -> int:
        return self._size


def format_traversal(values: Iterable[Any]) -> str:
    """Render values each followed by a space, or 'empty tree' if none."""
    return "".join(f"{value} " for value in values) or "empty tree"