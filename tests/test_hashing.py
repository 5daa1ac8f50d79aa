import pytest

from dsbox.hashing import OpenAddressingTable

SOURCE_ENTRIES = [
    (1, 20), (2, 70), (42, 80), (4, 25), (12, 44),
    (14, 32), (17, 11), (13, 78), (37, 97),
]


@pytest.fixture
def table():
    t = OpenAddressingTable()
    for key, data in SOURCE_ENTRIES:
        t.insert(key, data)
    return t


def test_source_search_then_delete(table):
    assert table.search(37) == 97
    assert table.delete(37) == 97
    with pytest.raises(KeyError):
        table.search(37)


def test_all_source_entries_found(table):
    for key, data in SOURCE_ENTRIES:
        assert table.search(key) == data


def test_display_shows_every_entry(table):
    rendered = table.display()
    for key, data in SOURCE_ENTRIES:
        assert f"({key},{data})" in rendered
    assert rendered.count("~~") == 20 - len(SOURCE_ENTRIES)


def test_display_format_small_table():
    t = OpenAddressingTable(3)
    t.insert(1, 5)
    assert t.display() == " ~~  (1,5) ~~ "


def test_probing_past_tombstone(table):
    # 42 collides with 2 and lands after it; deleting 2 must not hide 42
    table.delete(2)
    assert table.search(42) == 80
    assert "(-1,-1)" in table.display()


def test_tombstone_slot_is_reused():
    t = OpenAddressingTable(4)
    t.insert(1, "a")
    t.delete(1)
    t.insert(5, "b")
    assert t.search(5) == "b"
    assert "(-1,-1)" not in t.display()


def test_full_table_raises_overflow():
    t = OpenAddressingTable(2)
    t.insert(0, 1)
    t.insert(1, 2)
    with pytest.raises(OverflowError):
        t.insert(2, 3)
    with pytest.raises(KeyError):
        t.search(4)


def test_delete_missing_raises(table):
    with pytest.raises(KeyError):
        table.delete(99)


def test_invalid_size():
    with pytest.raises(ValueError):
        OpenAddressingTable(0)