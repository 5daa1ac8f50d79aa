import pytest

from dsbox.bst import DuplicateKeyError, IntBST, KeyedBST


def _sample_keyed():
    tree = KeyedBST()
    for element, key in enumerate("abcd"):
        tree.insert(key, element)
    return tree


def test_keyed_find_matches_source_example():
    tree = _sample_keyed()
    assert [tree.find(k) for k in "abcd"] == [0, 1, 2, 3]
    assert len(tree) == 4


def test_keyed_clear_empties_tree():
    tree = _sample_keyed()
    tree.clear()
    assert len(tree) == 0
    for key in "abcd":
        with pytest.raises(KeyError):
            tree.find(key)


def test_keyed_remove_returns_element_and_keeps_others():
    tree = KeyedBST()
    for element, key in enumerate("mfsadpt"):
        tree.insert(key, element)
    assert tree.remove("f") == 1
    assert len(tree) == 6
    with pytest.raises(KeyError):
        tree.find("f")
    for element, key in enumerate("mfsadpt"):
        if key != "f":
            assert tree.find(key) == element


def test_keyed_remove_missing_raises():
    tree = _sample_keyed()
    with pytest.raises(KeyError):
        tree.remove("z")
    assert len(tree) == 4


def test_keyed_remove_any_drains_tree():
    tree = KeyedBST()
    keys = "mfsadpt"
    for element, key in enumerate(keys):
        tree.insert(key, element)
    removed = [tree.remove_any() for _ in keys]
    assert sorted(removed) == list(range(len(keys)))
    assert removed[0] == 0
    assert len(tree) == 0
    with pytest.raises(KeyError):
        tree.remove_any()


def test_keyed_duplicates_are_kept():
    tree = KeyedBST()
    tree.insert("k", 1)
    tree.insert("k", 2)
    assert len(tree) == 2
    assert tree.find("k") == 1
    assert tree.remove("k") == 1
    assert tree.find("k") == 2


def _sample_int():
    tree = IntBST()
    for value in [50, 30, 70, 20, 40, 60, 80]:
        tree.insert(value)
    return tree


def test_int_traversals():
    tree = _sample_int()
    assert tree.inorder() == [20, 30, 40, 50, 60, 70, 80]
    assert tree.preorder() == [50, 30, 20, 40, 70, 60, 80]
    assert tree.postorder() == [20, 40, 30, 60, 80, 70, 50]


def test_int_duplicate_raises():
    tree = _sample_int()
    with pytest.raises(DuplicateKeyError):
        tree.insert(40)
    assert tree.inorder().count(40) == 1


def test_int_delete_two_children_uses_predecessor():
    tree = _sample_int()
    tree.delete(50)
    assert tree.preorder()[0] == 40
    assert 50 not in tree
    assert tree.inorder() == [20, 30, 40, 60, 70, 80]


@pytest.mark.parametrize("value", [20, 30, 40, 50, 60, 70, 80])
def test_int_delete_each_keeps_order(value):
    tree = _sample_int()
    tree.delete(value)
    expected = [v for v in [20, 30, 40, 50, 60, 70, 80] if v != value]
    assert tree.inorder() == expected
    assert value not in tree


def test_int_delete_missing_raises():
    tree = _sample_int()
    with pytest.raises(KeyError):
        tree.delete(99)


def test_int_maximum():
    tree = _sample_int()
    assert tree.maximum() == 80
    with pytest.raises(ValueError):
        IntBST().maximum()


def test_int_degenerate_tree_handles_many_values():
    tree = IntBST()
    for value in range(3000):
        tree.insert(value)
    assert tree.inorder() == list(range(3000))
    assert tree.postorder()[-1] == 0
    assert 2999 in tree