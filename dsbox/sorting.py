"""Classic comparison and distribution sorts returning new ascending lists."""

from __future__ import annotations

from collections.abc import Iterable


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    n = len(items)
    for done in range(n):
        for j in range(n - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Sort by shifting each element left until it is in place."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i
        while j > 0 and items[j - 1] > key:
            items[j] = items[j - 1]
            j -= 1
        items[j] = key
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Sort by moving the smallest remaining element to the front."""
    items = list(values)
    n = len(items)
    for i in range(n):
        location = min(range(i, n), key=items.__getitem__)
        items[i], items[location] = items[location], items[i]
    return items


def shell_sort(values: Iterable[int]) -> list[int]:
    """Shell sort with the 3h+1 gap sequence."""
    items = list(values)
    size = len(items)
    gap = 1
    while gap < size:
        gap = 3 * gap + 1
    while gap > 1:
        gap //= 3
        for i in range(gap, size):
            value = items[i]
            j = i - gap
            while j >= 0 and value < items[j]:
                items[j + gap] = items[j]
                j -= gap
            items[j + gap] = value
    return items


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Top-down stable merge sort."""
    items = list(values)
    if len(items) < 2:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _sift_down(items: list[int], root: int, size: int) -> None:
    while True:
        left = 2 * root + 1
        right = left + 1
        largest = root
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[int]) -> list[int]:
    """Sort with a max-heap built in place."""
    items = list(values)
    size = len(items)
    for i in range(size // 2 - 1, -1, -1):
        _sift_down(items, i, size)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)
    return items


def _counting_pass(items: list[int], exp: int) -> list[int]:
    buckets: list[list[int]] = [[] for _ in range(10)]
    for value in items:
        buckets[(value // exp) % 10].append(value)
    return [value for bucket in buckets for value in bucket]


def radix_sort(values: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort of non-negative integers."""
    items = list(values)
    if not items:
        return items
    if any(value < 0 for value in items):
        raise ValueError("radix sort needs non-negative integers")
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        items = _counting_pass(items, exp)
        exp *= 10
    return items