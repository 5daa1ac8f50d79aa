"""Quicksort variants differing in pivot choice and partition scheme."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable


def median(x: int, y: int, z: int) -> int:
    """Return the median of three values."""
    if x <= y:
        if z <= x:
            return x
        if z <= y:
            return z
        return y
    if z <= y:
        return y
    if z <= x:
        return z
    return x


def _run(items: list[int], partition: Callable[[list[int], int, int], tuple]) -> list[int]:
    """Drive a partition function over index ranges with an explicit stack."""
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pending.extend(partition(items, low, high))
    return items


def _median_partition(items: list[int], low: int, high: int):
    n = high - low + 1
    middle = low + (n - 1) // 2
    mid = median(items[low], items[middle], items[high])
    if items[low] == mid:
        pivot = low
    elif items[middle] == mid:
        pivot = middle
    else:
        pivot = high
    items[low], items[pivot] = items[pivot], items[low]
    m = low + 1
    for i in range(low + 1, high + 1):
        if items[i] < items[low]:
            items[m], items[i] = items[i], items[m]
            m += 1
    items[low], items[m - 1] = items[m - 1], items[low]
    return (low, m - 2), (m, high)


def median_quick_sort(values: Iterable[int]) -> list[int]:
    """Quicksort with a median-of-three pivot and a linear partition."""
    return _run(list(values), _median_partition)


def _hoare_partition(items: list[int], low: int, high: int):
    pivot = items[low]
    i, j = low, high + 1
    while True:
        i += 1
        while items[i] < pivot and i < high:
            i += 1
        j -= 1
        while items[j] > pivot:
            j -= 1
        if i >= j:
            break
        items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return (low, j - 1), (j + 1, high)


def hoare_quick_sort(values: Iterable[int]) -> list[int]:
    """Quicksort with the first element as pivot and converging scans."""
    return _run(list(values), _hoare_partition)


def _first_greater(items: list[int], start: int, right: int, pivot: int) -> int:
    return next((k for k in range(start, right + 1) if items[k] > pivot), right + 1)


def _last_smaller(items: list[int], start: int, left: int, pivot: int) -> int:
    return next((k for k in range(start, left - 1, -1) if items[k] < pivot), -1)


def random_quick_sort(values: Iterable[int], rng: random.Random | None = None) -> list[int]:
    """Quicksort with a pivot drawn at random from each range."""
    chooser = rng if rng is not None else random.Random()

    def partition(items: list[int], left: int, right: int):
        pivot_index = left + chooser.randrange(right - left)
        pivot = items[pivot_index]
        i = _first_greater(items, left, right, pivot)
        j = _last_smaller(items, right, left, pivot)
        while i <= j:
            items[i], items[j] = items[j], items[i]
            i = _first_greater(items, i, right, pivot)
            j = _last_smaller(items, j, left, pivot)
        if pivot_index > j and pivot_index > i:
            items[i], items[pivot_index] = items[pivot_index], items[i]
            return (left, i - 1), (i + 1, right)
        if pivot_index < j and pivot_index < i:
            items[j], items[pivot_index] = items[pivot_index], items[j]
            return (left, j - 1), (j + 1, right)
        return (left, pivot_index - 1), (pivot_index + 1, right)

    return _run(list(values), partition)


def _first_pivot_partition(items: list[int], low: int, high: int):
    i, j = low, high
    while i < j:
        while i <= high and items[i] <= items[low]:
            i += 1
        while j >= low and items[j] > items[low]:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return (low, j - 1), (j + 1, high)


def first_pivot_quick_sort(values: Iterable[int]) -> list[int]:
    """Quicksort with the first element as pivot, swapping misplaced pairs."""
    return _run(list(values), _first_pivot_partition)