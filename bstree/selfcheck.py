"""Built-in checks that exercise every tree operation and report results."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, TextIO

from bstree.tree import BinarySearchTree, format_traversal


def _verdict(out: TextIO, name: str, passed: bool, fail_word: str = "FAIL") -> bool:
    out.write(f"{name}...{'PASS' if passed else fail_word}\n")
    return passed


def _check_create(out: TextIO) -> bool:
    tree = BinarySearchTree(17)
    return _verdict(out, "testCreateTree", tree.root is not None and tree.root.value == 17)


def _check_insert(out: TextIO) -> bool:
    tree = BinarySearchTree(10)
    tree.insert(9)
    root = tree.root
    passed = (
        root is not None
        and root.left is not None
        and root.value == 10
        and root.left.value == 9
    )
    return _verdict(out, "testInsert", passed)


def _check_remove(out: TextIO) -> bool:
    tree = BinarySearchTree(15)
    for value in (10, 9, 11, 16, 18):
        tree.insert(value)
    tree.remove(11)
    out.write("Test Remove Expected: 15 10 9 16 18 \n")
    out.write(f"Actual: {format_traversal(tree.pre_order())}\n")
    return True


def _check_find(out: TextIO) -> bool:
    tree = BinarySearchTree(10)
    for value in (6, 12, 15):
        tree.insert(value)
    return _verdict(out, "testFind", tree.find(15), fail_word="Fail")


def _check_find_max(out: TextIO) -> bool:
    tree = BinarySearchTree(10)
    for value in (6, 15, 18):
        tree.insert(value)
    return _verdict(out, "testFindMax", tree.find_max() == 18)


def _check_find_min(out: TextIO) -> bool:
    tree = BinarySearchTree(10)
    for value in (6, 15, 18, 3):
        tree.insert(value)
    return _verdict(out, "testFindMin", tree.find_min() == 3)


def _small_tree() -> BinarySearchTree:
    tree = BinarySearchTree(10)
    tree.insert(8)
    tree.insert(12)
    return tree


def _check_in_order(out: TextIO) -> bool:
    out.write("In-Order Expected: 8 10 12 \n")
    out.write(f"Actual: {format_traversal(_small_tree().in_order())}\n")
    return True


def _check_pre_order(out: TextIO) -> bool:
    out.write("Pre-Order Expected: 10 8 12 \n")
    out.write(f"Actual: {format_traversal(_small_tree().pre_order())}\n")
    return True


def _check_post_order(out: TextIO) -> bool:
    out.write("Post-Order Expected: 8 12 10 \n")
    out.write(f"Actual: {format_traversal(_small_tree().post_order())}\n")
    return True


def _check_size(out: TextIO) -> bool:
    tree = BinarySearchTree(10)
    for value in (11, 9, 8, 12, 3, 20):
        tree.insert(value)
    tree.remove(3)
    out.write("Get Size Expected: 6 \n")
    out.write(f"Actual: {len(tree)}\n")
    return True


_CHECKS: tuple[Callable[[TextIO], bool], ...] = (
    _check_create,
    _check_insert,
    _check_remove,
    _check_find,
    _check_find_max,
    _check_find_min,
    _check_in_order,
    _check_pre_order,
    _check_post_order,
    _check_size,
)


def run_all_checks(out: TextIO) -> int:
    """Run every check, writing reports to out; return the number of failures."""
    return sum(not check(out) for check in _CHECKS)


def main(argv=None) -> int:
    """Print a sample root value, then run all checks on standard output."""
    parser = argparse.ArgumentParser(
        prog="bstree-selfcheck",
        description="Exercise the binary search tree and report results.",
    )
    parser.parse_args(argv)
    tree = BinarySearchTree(17)
    print(tree.root.value)
    run_all_checks(sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())