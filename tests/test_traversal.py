from bintree.traversal import inorder, postorder, preorder
from bintree.tree import Node


def _sample():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(56, root.left)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


VALUES = {98, 12, 402, 6, 56, 256, 512}


def test_preorder():
    assert list(preorder(_sample())) == [98, 12, 6, 56, 402, 256, 512]


def test_inorder_of_search_tree_is_sorted():
    assert list(inorder(_sample())) == sorted(VALUES)


def test_postorder():
    assert list(postorder(_sample())) == [6, 56, 12, 256, 512, 402, 98]


def test_empty_tree_yields_nothing():
    assert list(preorder(None)) == []
    assert list(inorder(None)) == []
    assert list(postorder(None)) == []


def test_every_value_visited_once():
    root = _sample()
    for walk in (preorder, inorder, postorder):
        result = list(walk(root))
        assert len(result) == len(VALUES)
        assert set(result) == VALUES


def test_root_position():
    root = _sample()
    assert next(preorder(root)) == root.value
    assert list(postorder(root))[-1] == root.value


def test_single_node():
    node = Node(7)
    assert list(preorder(node)) == [7]
    assert list(inorder(node)) == [7]
    assert list(postorder(node)) == [7]


def test_subtree_walk_is_contiguous():
    root = _sample()
    whole = list(preorder(root))
    part = list(preorder(root.right))
    start = whole.index(part[0])
    assert whole[start:start + len(part)] == part


def test_deep_chain_does_not_overflow():
    root = Node(0)
    node = root
    for value in range(1, 5000):
        node = node.insert_right(value)
    assert list(inorder(root)) == list(range(5000))
    assert list(postorder(root)) == list(range(4999, -1, -1))


def test_insert_left_keeps_order():
    root = Node(10)
    root.insert_left(5)
    root.insert_left(7)
    assert list(inorder(root)) == [5, 7, 10]