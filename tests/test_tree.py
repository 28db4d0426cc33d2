import pytest

from huffcode.coding.frequency import build_frequency_table
from huffcode.coding.tree import Internal, Leaf, build_tree
from huffcode.errors import EmptyAlphabetError


def _check_weights(tree):
    for node in tree.nodes:
        if isinstance(node, Internal):
            assert node.weight == tree.nodes[node.left].weight + tree.nodes[node.right].weight


def test_empty_table_rejected():
    with pytest.raises(EmptyAlphabetError):
        build_tree({})


def test_non_positive_frequency_rejected():
    with pytest.raises(ValueError):
        build_tree({"a": 3, "b": 0})


def test_single_symbol_is_lone_leaf():
    tree = build_tree(build_frequency_table("aaaa"))
    assert tree.is_single_leaf
    assert tree.root_node == Leaf(symbol="a", weight=4)
    assert len(tree) == 1


def test_root_weight_is_message_length():
    message = "abracadabra"
    tree = build_tree(build_frequency_table(message))
    assert tree.root_node.weight == len(message)
    assert len(tree) == 2 * 5 - 1
    _check_weights(tree)


def test_every_internal_node_has_two_children():
    tree = build_tree(build_frequency_table("mississippi river"))
    seen = set()
    for node in tree.nodes:
        if isinstance(node, Internal):
            assert node.left != node.right
            seen.update((node.left, node.right))
    # every node except the root is somebody's child exactly once
    assert seen == set(range(len(tree))) - {tree.root}


def test_skewed_tree_shape():
    tree = build_tree({"a": 10, "b": 1, "c": 17, "d": 7})
    root = tree.root_node
    # c is merged last with the (a, (b, d)) subtree and sits on the left
    assert tree.nodes[root.left] == Leaf(symbol="c", weight=17)
    right = tree.nodes[root.right]
    assert right.weight == 18
    assert tree.nodes[right.right] == Leaf(symbol="a", weight=10)
    bd = tree.nodes[right.left]
    assert tree.nodes[bd.left].symbol == "b"
    assert tree.nodes[bd.right].symbol == "d"


def test_equal_weights_break_ties_by_symbol():
    tree = build_tree({"c": 1, "b": 1, "a": 1})
    root = tree.root_node
    assert tree.nodes[root.left] == Leaf(symbol="c", weight=1)
    pair = tree.nodes[root.right]
    assert (tree.nodes[pair.left].symbol, tree.nodes[pair.right].symbol) == ("a", "b")


def test_leaf_extracted_before_internal_node_of_same_weight():
    tree = build_tree({"a": 1, "b": 1, "c": 2})
    root = tree.root_node
    assert tree.nodes[root.left] == Leaf(symbol="c", weight=2)
    assert isinstance(tree.nodes[root.right], Internal)


def test_build_is_reproducible():
    freq = {chr(ord("a") + i): 1 for i in range(13)}
    assert build_tree(freq) == build_tree(dict(reversed(list(freq.items()))))
