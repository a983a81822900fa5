import pytest

from grafuri.bst import (
    BinaryNode,
    build_tree,
    format_tree,
    in_order,
    insert,
    main,
    post_order,
    pre_order,
    read_values,
)

VALUES = [50, 30, 70, 20, 40, 60, 80]


def test_in_order_is_sorted():
    assert in_order(build_tree(VALUES)) == sorted(VALUES)


def test_pre_and_post_order():
    root = build_tree(VALUES)
    assert pre_order(root) == [50, 30, 20, 40, 70, 60, 80]
    assert post_order(root) == [20, 40, 30, 60, 80, 70, 50]


def test_root_is_first_value():
    root = build_tree(VALUES)
    assert root.data == VALUES[0]
    assert pre_order(root)[0] == VALUES[0]
    assert post_order(root)[-1] == VALUES[0]


def test_duplicates_ignored():
    root = build_tree(VALUES + VALUES[::-1])
    assert in_order(root) == sorted(set(VALUES))
    assert pre_order(root) == pre_order(build_tree(VALUES))


def test_insert_into_empty():
    root = insert(None, 5)
    assert root == BinaryNode(5)


def test_insert_returns_same_root():
    root = build_tree(VALUES)
    assert insert(root, 10) is root
    assert in_order(root) == sorted(VALUES + [10])


def test_empty_traversals():
    assert pre_order(None) == []
    assert in_order(None) == []
    assert post_order(None) == []
    assert build_tree([]) is None


def test_deep_tree_does_not_overflow():
    values = list(range(5000))
    root = build_tree(values)
    assert in_order(root) == values
    assert post_order(root) == values[::-1]


def test_format_empty_tree():
    assert format_tree(None) == "Arbore gol\n"


def test_format_tree_lines():
    root = build_tree(VALUES)
    lines = format_tree(root).split("\n")
    assert len(lines) == 4
    assert lines[-1] == ""
    assert lines[0].startswith("Parcurgere inOrdine: ")
    assert lines[1].startswith("Parcurgere preOrdine: ")
    assert lines[2].startswith("Parcurgere postOrdine: ")
    numbers = [int(token) for token in lines[0].split(":", 1)[1].split()]
    assert numbers == in_order(root)


def test_read_values(tmp_path):
    path = tmp_path / "values.txt"
    path.write_text("5 3\n-8 7x 9\n", encoding="utf-8")
    assert read_values(path) == [5, 3, -8, 7]


def test_read_values_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_values(tmp_path / "absent.txt")


def test_main(tmp_path, capsys):
    path = tmp_path / "values.txt"
    path.write_text(" ".join(map(str, VALUES)), encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == format_tree(build_tree(VALUES))


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Eroare deschidere fisier" in capsys.readouterr().err