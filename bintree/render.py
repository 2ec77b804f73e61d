"""Text drawing of a binary tree."""

from __future__ import annotations

import sys
from typing import TextIO

from bintree.tree import Node


def _label(value: int) -> str:
    return f"({value:03d})"


def _height(tree: Node) -> int:
    left = 1 + _height(tree.left) if tree.left is not None else 0
    right = 1 + _height(tree.right) if tree.right is not None else 0
    return max(left, right)


def _put(row: list[str], pos: int, ch: str) -> None:
    if pos >= len(row):
        row.extend(" " * (pos - len(row) + 1))
    row[pos] = ch


def _layout(tree: Node | None, offset: int, depth: int, rows: list[list[str]]) -> int:
    """Place the subtree into rows and return the width it occupies."""
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = _label(tree.value)
    width = len(label)
    left = _layout(tree.left, offset, depth + 1, rows)
    right = _layout(tree.right, offset + left + width, depth + 1, rows)
    for i, ch in enumerate(label):
        _put(rows[depth], offset + left + i, ch)
    if depth:
        above = rows[depth - 1]
        if is_left:
            start = offset + left + width // 2
            span = width + right
        else:
            start = offset - width // 2
            span = left + width
        for i in range(span):
            _put(above, start + i, "-")
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Node | None) -> str:
    """Return the drawing of the tree, one newline-terminated line per level."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(_height(tree) + 1)]
    _layout(tree, 0, 0, rows)
    lines = []
    for row in rows:
        text = "".join(row)
        trimmed = text.rstrip(" ")
        if len(trimmed) < 2:
            trimmed = text[:2].ljust(2)
        lines.append(trimmed + "\n")
    return "".join(lines)


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the drawing of the tree to file, standard output by default."""
    out = sys.stdout if file is None else file
    out.write(render(tree))