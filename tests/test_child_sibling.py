import pytest

from grafuri.child_sibling import MAX_NODES, ChildSiblingTree, main, read_tree

# key, first_child, right_sibling
ROWS = [(10, 2, 0), (20, 5, 3), (30, 0, 4), (40, 0, 0), (50, 0, 6), (60, 0, 0)]


@pytest.fixture
def tree():
    result = ChildSiblingTree()
    for key, child, sibling in ROWS:
        result.insert(child, sibling, key)
    return result


def _write_rows(path, rows, trailer=""):
    path.write_text("\n".join(f"{k} {c} {s}" for k, c, s in rows) + trailer, encoding="utf-8")
    return path


def test_traversals(tree):
    assert tree.pre_order() == [10, 20, 50, 60, 30, 40]
    assert tree.in_order() == [50, 20, 60, 10, 30, 40]
    assert tree.post_order() == [50, 60, 20, 30, 40, 10]


def test_traversals_visit_every_node_once(tree):
    keys = sorted(key for key, _, _ in ROWS)
    assert sorted(tree.pre_order()) == keys
    assert sorted(tree.in_order()) == keys
    assert sorted(tree.post_order()) == keys


def test_root_first_and_last(tree):
    root_key = tree.node_key(tree.root())
    assert tree.pre_order()[0] == root_key
    assert tree.post_order()[-1] == root_key


def test_len_and_root(tree):
    assert len(tree) == len(ROWS)
    assert tree.root() == 1
    assert ChildSiblingTree().root() == 0


def test_links_match_rows(tree):
    for ref, (key, child, sibling) in enumerate(ROWS, start=1):
        assert tree.node_key(ref) == key
        assert tree.first_child(ref) == child
        assert tree.right_sibling(ref) == sibling


def test_node_key_past_end_is_zero(tree):
    assert tree.node_key(len(tree) + 1) == 0
    assert tree.first_child(len(tree) + 1) == 0


def test_reference_out_of_capacity(tree):
    with pytest.raises(IndexError):
        tree.first_child(MAX_NODES)


def test_find_index(tree):
    for ref, (key, child, _) in enumerate(ROWS, start=1):
        assert tree.find_index(key, child) == ref
    assert tree.find_index(99, 0) == 0


def test_empty_tree_traversals():
    empty = ChildSiblingTree()
    assert empty.pre_order() == []
    assert empty.in_order() == []
    assert empty.post_order() == []


def test_insert_returns_reference():
    empty = ChildSiblingTree()
    assert empty.insert(0, 0, 7) == 1
    assert empty.insert(0, 0, 8) == 2
    assert len(empty) == 2


def test_insert_rejects_out_of_range_values():
    with pytest.raises(ValueError):
        ChildSiblingTree().insert(0, 0, 256)
    with pytest.raises(ValueError):
        ChildSiblingTree().insert(-1, 0, 1)


def test_insert_capacity():
    full = ChildSiblingTree()
    for _ in range(MAX_NODES - 1):
        full.insert(0, 0, 1)
    assert len(full) == MAX_NODES - 1
    with pytest.raises(ValueError):
        full.insert(0, 0, 1)


def test_format_table_layout(tree):
    lines = tree.format_table().split("\n")
    assert len(lines) == 5
    assert lines[0].startswith("Index:")
    assert lines[2].startswith("Prim_fiu:")
    assert lines[-1] == "-" * 36
    for line in lines[:4]:
        assert len(line) == 14 + 11 * (len(tree) + 1)


def test_read_tree_round_trip(tmp_path, tree):
    loaded = read_tree(_write_rows(tmp_path / "tree.txt", ROWS))
    assert len(loaded) == len(tree)
    assert loaded.pre_order() == tree.pre_order()
    assert loaded.format_table() == tree.format_table()


def test_read_tree_stops_at_junk(tmp_path):
    loaded = read_tree(_write_rows(tmp_path / "tree.txt", ROWS[:2], "\nx 1 2\n7 0 0"))
    assert len(loaded) == 2


def test_read_tree_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_tree(tmp_path / "absent.txt")


def test_main_prints_table_and_traversals(tmp_path, capsys, tree):
    path = _write_rows(tmp_path / "tree.txt", ROWS)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("\n" + tree.format_table())
    pre = "".join(f"{key}, " for key in tree.pre_order())
    assert f"\nPreorder: \n{pre}\nInorder: \n" in out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Eroare deschidere fisier" in capsys.readouterr().err