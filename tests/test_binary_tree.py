import io

import pytest

from dsakit.binary_tree import BinaryTree, main


@pytest.fixture
def tree():
    result = BinaryTree()
    result.insert(1)
    result.insert(2, "l")
    result.insert(3, "r")
    result.insert(4, "ll")
    return result


def test_preorder(tree):
    assert tree.preorder() == [1, 2, 4, 3]


def test_len_counts_inserted(tree):
    assert len(tree) == 4


def test_leaves(tree):
    assert tree.leaves() == [4, 3]


def test_height_of_chain_equals_node_count():
    tree = BinaryTree()
    tree.insert(0)
    for depth in range(1, 6):
        tree.insert(depth, "l" * depth)
    assert tree.height() == len(tree)
    assert tree.leaves() == [5]


def test_empty_tree():
    tree = BinaryTree()
    assert tree.preorder() == []
    assert tree.leaves() == []
    assert tree.height() == len(tree)


def test_uppercase_and_words_accepted():
    tree = BinaryTree()
    tree.insert(10)
    tree.insert(20, ["Right"])
    tree.insert(30, ["R", "L"])
    assert tree.preorder() == [10, 20, 30]


def test_extra_steps_are_not_consumed():
    tree = BinaryTree()
    tree.insert(1)
    steps = iter(["l", "r", "r"])
    tree.insert(2, steps)
    assert list(steps) == ["r", "r"]


def test_invalid_direction_raises(tree):
    with pytest.raises(ValueError):
        tree.insert(9, "x")
    assert len(tree) == 4


def test_short_path_raises(tree):
    with pytest.raises(ValueError):
        tree.insert(9, "l")


def test_main_builds_and_prints(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 7\n1 8 l\n2\n6\n"))
    assert main() == 0
    out = capsys.readouterr().out
    assert "7 8 " in out