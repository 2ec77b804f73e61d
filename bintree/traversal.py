"""Depth-first walks over the values of a binary tree."""

from __future__ import annotations

from collections.abc import Iterator

from bintree.tree import Node


def preorder(tree: Node | None) -> Iterator[int]:
    """Yield values node first, then the left subtree, then the right subtree."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node.value
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def inorder(tree: Node | None) -> Iterator[int]:
    """Yield values of the left subtree, then the node, then the right subtree."""
    stack: list[Node] = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def postorder(tree: Node | None) -> Iterator[int]:
    """Yield values of the left subtree, then the right subtree, then the node."""
    stack: list[tuple[Node, bool]] = [(tree, False)] if tree is not None else []
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