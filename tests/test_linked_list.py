from collections import Counter

import pytest

from dsbox.linked_list import SinglyLinkedList, Student


def _pushed(*values):
    ll = SinglyLinkedList()
    for value in values:
        ll.push_front(value)
    return ll


def test_values_keep_order():
    ll = SinglyLinkedList([3, 1, 2])
    assert list(ll) == [3, 1, 2]
    assert len(ll) == 3


def test_push_front_builds_in_reverse():
    ll = _pushed(7, 6, 5, 4, 3, 2, 1)
    assert list(ll) == [1, 2, 3, 4, 5, 6, 7]


def test_swap_nodes_example():
    ll = _pushed(7, 6, 5, 4, 3, 2, 1)
    ll.swap(4, 3)
    assert list(ll) == [1, 2, 4, 3, 5, 6, 7]
    assert len(ll) == 7


def test_swap_head_and_tail():
    values = [1, 2, 3, 4, 5]
    ll = SinglyLinkedList(values)
    ll.swap(1, 5)
    result = list(ll)
    assert result[0] == 5
    assert result[-1] == 1
    assert result[1:-1] == values[1:-1]


def test_swap_missing_or_same_is_noop():
    values = [1, 2, 3]
    ll = SinglyLinkedList(values)
    ll.swap(1, 9)
    assert list(ll) == values
    ll.swap(2, 2)
    assert list(ll) == values


def test_reverse():
    ll = _pushed(1, 2, 3, 5)
    before = list(ll)
    ll.reverse()
    assert list(ll) == before[::-1]
    ll.reverse()
    assert list(ll) == before


def test_reverse_empty():
    ll = SinglyLinkedList()
    ll.reverse()
    assert list(ll) == []


def test_insert_at_positions():
    ll = SinglyLinkedList([10, 20, 30])
    ll.insert_at(0, 5)
    assert list(ll)[0] == 5
    ll.insert_at(2, 15)
    assert list(ll)[2] == 15
    ll.insert_at(len(ll), 99)
    assert list(ll)[-1] == 99
    assert len(ll) == 6


def test_insert_at_out_of_range():
    ll = SinglyLinkedList([1, 2])
    with pytest.raises(IndexError):
        ll.insert_at(3, 0)
    with pytest.raises(IndexError):
        ll.insert_at(-1, 0)


def test_insert_after():
    ll = SinglyLinkedList([10, 2, 5])
    ll.insert_after(10, 8)
    result = list(ll)
    assert result[result.index(10) + 1] == 8
    assert len(ll) == 4
    with pytest.raises(ValueError):
        ll.insert_after(16, 8)


def test_pop_front_and_back():
    ll = SinglyLinkedList([1, 2, 3])
    assert ll.pop_front() == 1
    assert ll.pop_back() == 3
    assert list(ll) == [2]
    assert ll.pop_back() == 2
    assert len(ll) == 0
    with pytest.raises(IndexError):
        ll.pop_front()
    with pytest.raises(IndexError):
        ll.pop_back()


def test_remove_first_occurrence():
    ll = SinglyLinkedList([4, 1, 4, 2])
    ll.remove(4)
    assert list(ll) == [1, 4, 2]
    with pytest.raises(ValueError):
        ll.remove(7)


def test_remove_where_student():
    students = [
        Student(1, "scott"),
        Student(2, "klaus"),
        Student(3, "damon"),
        Student(4, "oliver"),
        Student(5, "rebekah"),
    ]
    ll = SinglyLinkedList(students)
    ll.insert_at(4, Student(55, "varun"))
    assert list(ll)[4] == Student(55, "varun")
    removed = ll.remove_where(lambda s: s.rollno == 4)
    assert removed == Student(4, "oliver")
    assert all(s.rollno != 4 for s in ll)
    assert len(ll) == 5
    with pytest.raises(ValueError):
        ll.remove_where(lambda s: s.rollno == 4)


def test_sort():
    values = [5, 3, 9, 1, 3]
    ll = SinglyLinkedList(values)
    ll.sort()
    assert list(ll) == sorted(values)


def test_max():
    values = [3, 17, -2, 8]
    assert SinglyLinkedList(values).max() == max(values)
    with pytest.raises(ValueError):
        SinglyLinkedList().max()


def test_union_concatenates():
    a = [1, 2, 3]
    b = [3, 4]
    assert list(SinglyLinkedList(a).union(SinglyLinkedList(b))) == a + b


def test_intersection():
    a = SinglyLinkedList([1, 2, 2, 3])
    b = SinglyLinkedList([2, 3, 3, 4])
    common = a.intersection(b)
    assert list(common) == [2, 3]
    assert not Counter(common) - Counter(a)
    assert not Counter(common) - Counter(b)


def test_contains_includes_last():
    ll = SinglyLinkedList([1, 2, 3])
    assert 3 in ll
    assert 1 in ll
    assert 4 not in ll