import pytest

from grafuri.binary_transform import BinaryTreeNode, main, pre_order, transform
from grafuri.child_sibling import ChildSiblingTree


def _sample_tree():
    tree = ChildSiblingTree()
    tree.insert(2, 0, 10)
    tree.insert(4, 3, 20)
    tree.insert(0, 0, 30)
    tree.insert(0, 0, 40)
    return tree


def test_transform_of_zero_is_none():
    assert transform(_sample_tree(), 0) is None


def test_transform_links_child_and_sibling():
    tree = _sample_tree()
    root = transform(tree, 1)
    assert root.key == 10
    assert root.right is None
    assert root.left.key == 20
    assert root.left.left.key == 40
    assert root.left.right.key == 30


def test_binary_pre_order_matches_general_pre_order():
    tree = _sample_tree()
    assert pre_order(transform(tree, tree.root())) == tree.pre_order()


def test_pre_order_of_handmade_tree():
    root = BinaryTreeNode(1, BinaryTreeNode(2), BinaryTreeNode(3))
    assert pre_order(root) == [1, 2, 3]
    assert pre_order(None) == []


def test_main_prints_binary_pre_order(tmp_path, capsys):
    path = tmp_path / "tree.txt"
    path.write_text("10 2 0\n20 4 3\n30 0 0\n40 0 0\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    keys = _sample_tree().pre_order()
    expected_bin = "".join(f"{key} " for key in keys)
    assert out.endswith("\nPreorderBin: \n" + expected_bin)


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == 1


def test_transform_rejects_bad_reference():
    with pytest.raises(IndexError):
        transform(_sample_tree(), 500)