"""Queries on the shape of a binary tree and on the relatives of a node."""

from __future__ import annotations

from collections.abc import Iterator

from bintree.tree import Node


def _nodes(tree: Node | None) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        for child in (node.right, node.left):
            if child is not None:
                stack.append(child)


def _levels(tree: Node | None) -> int:
    """Count the levels of the tree: 0 for an empty tree, 1 for a single node."""
    count = 0
    level = [tree] if tree is not None else []
    while level:
        count += 1
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return count


def is_leaf(node: Node | None) -> bool:
    """Tell whether the node exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Node | None) -> bool:
    """Tell whether the node exists and has no parent."""
    return node is not None and node.parent is None


def height(tree: Node | None) -> int:
    """Return the number of edges on the longest downward path; 0 for no tree or a leaf."""
    return max(_levels(tree) - 1, 0)


def depth(tree: Node | None) -> int:
    """Return the number of edges between the node and the root; 0 for no node."""
    count = 0
    node = tree
    while node is not None and node.parent is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Node | None) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _nodes(tree))


def leaves(tree: Node | None) -> int:
    """Return the number of leaves in the tree."""
    return sum(1 for node in _nodes(tree) if is_leaf(node))


def internal_nodes(tree: Node | None) -> int:
    """Return the number of nodes that have at least one child."""
    return sum(1 for node in _nodes(tree) if not is_leaf(node))


def balance(tree: Node | None) -> int:
    """Return the height of the left subtree minus that of the right, counted in levels."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Node | None) -> bool:
    """Tell whether every node of a non-empty tree has either zero or two children."""
    if tree is None:
        return False
    return all(
        (node.left is None) == (node.right is None) for node in _nodes(tree)
    )


def is_perfect(tree: Node | None) -> bool:
    """Tell whether every inner node has two children and all leaves share one level."""
    if tree is None:
        return False
    expected = 0
    node: Node | None = tree
    while node is not None:
        expected += 1
        node = node.left
    stack = [(tree, 1)]
    while stack:
        current, level = stack.pop()
        if current.left is None and current.right is None:
            if level != expected:
                return False
            continue
        if current.left is None or current.right is None:
            return False
        stack.append((current.left, level + 1))
        stack.append((current.right, level + 1))
    return True


def sibling(node: Node | None) -> Node | None:
    """Return the other child of the node's parent, or None if there is none."""
    if node is None or node.parent is None:
        return None
    parent = node.parent
    if parent.right is node and parent.left is not None:
        return parent.left
    if parent.left is node and parent.right is not None:
        return parent.right
    return None


def uncle(node: Node | None) -> Node | None:
    """Return the sibling of the node's parent, or None if there is none."""
    if node is None:
        return None
    return sibling(node.parent)