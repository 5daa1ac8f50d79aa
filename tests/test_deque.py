import pytest

from dsbox.deque import BoundedDeque, DequeEmptyError, DequeFullError, LinkedDeque


def test_bounded_rejects_non_positive_capacity():
    with pytest.raises(ValueError):
        BoundedDeque(0)


def test_bounded_push_both_ends_order():
    d = BoundedDeque(5)
    d.push_back(2)
    d.push_front(1)
    d.push_back(3)
    assert list(d) == [1, 2, 3]
    assert len(d) == 3


def test_bounded_full_from_either_end():
    d = BoundedDeque(2)
    d.push_front(1)
    d.push_back(2)
    with pytest.raises(DequeFullError):
        d.push_front(0)
    with pytest.raises(DequeFullError):
        d.push_back(3)
    assert list(d) == [1, 2]


def test_bounded_reuses_freed_slots():
    d = BoundedDeque(3)
    for value in (1, 2, 3):
        d.push_back(value)
    assert d.pop_front() == 1
    d.push_back(4)
    assert list(d) == [2, 3, 4]
    assert d.pop_back() == 4
    d.push_front(0)
    assert list(d) == [0, 2, 3]


def test_bounded_pop_empty_raises():
    d = BoundedDeque(3)
    with pytest.raises(DequeEmptyError):
        d.pop_front()
    with pytest.raises(DequeEmptyError):
        d.pop_back()


def test_bounded_single_element_both_pops():
    d = BoundedDeque(1)
    d.push_front(7)
    assert d.pop_back() == 7
    assert len(d) == 0
    d.push_back(8)
    assert d.pop_front() == 8
    assert list(d) == []


def test_linked_push_back_then_pop_back_reverses():
    d = LinkedDeque()
    for i in range(10):
        d.push_back(i)
    out = []
    while len(d):
        out.append(d.back())
        d.pop_back()
    assert out == list(range(9, -1, -1))


def test_linked_push_front_then_pop_front_reverses():
    d = LinkedDeque()
    for i in range(10):
        d.push_front(i)
    out = []
    while len(d):
        out.append(d.front())
        d.pop_front()
    assert out == list(range(9, -1, -1))


def test_linked_mixed_operations():
    d = LinkedDeque()
    d.push_back(2)
    d.push_front(1)
    d.push_back(3)
    assert list(d) == [1, 2, 3]
    assert d.pop_front() == 1
    assert d.pop_back() == 3
    assert d.front() == d.back() == 2


def test_linked_empty_errors():
    d = LinkedDeque()
    for op in (d.front, d.back, d.pop_front, d.pop_back):
        with pytest.raises(DequeEmptyError):
            op()


def test_linked_reusable_after_emptying():
    d = LinkedDeque()
    d.push_back(1)
    d.pop_front()
    d.push_front(5)
    assert list(d) == [5]
    assert len(d) == 1