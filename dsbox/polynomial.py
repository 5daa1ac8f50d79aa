"""Polynomial addition and multiplication in sparse and dense forms."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import zip_longest


def add_sparse_terms(
    a: Iterable[tuple[int, int]], b: Iterable[tuple[int, int]]
) -> list[tuple[int, int]]:
    """Add two polynomials given as (exponent, coefficient) pairs.

    Both inputs list exponents in ascending order; the result does too.
    Terms with equal exponents are combined, even when they cancel.
    """
    left = [tuple(term) for term in a]
    right = [tuple(term) for term in b]
    result: list[tuple[int, int]] = []
    i = j = 0
    while i < len(left) and j < len(right):
        exp_a, coeff_a = left[i]
        exp_b, coeff_b = right[j]
        if exp_a < exp_b:
            result.append((exp_a, coeff_a))
            i += 1
        elif exp_a > exp_b:
            result.append((exp_b, coeff_b))
            j += 1
        else:
            result.append((exp_a, coeff_a + coeff_b))
            i += 1
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def add_term_lists(
    p1: Iterable[tuple[int, int]], p2: Iterable[tuple[int, int]]
) -> list[tuple[int, int]]:
    """Add two polynomials given as (coefficient, exponent) pairs.

    Both inputs list exponents in descending order. Each combined term is
    pushed onto the front of the result, so the result lists exponents in
    ascending order.
    """
    first = [tuple(term) for term in p1]
    second = [tuple(term) for term in p2]
    merged: list[tuple[int, int]] = []
    i = j = 0
    while i < len(first) and j < len(second):
        coeff_1, exp_1 = first[i]
        coeff_2, exp_2 = second[j]
        if exp_1 > exp_2:
            merged.append((coeff_1, exp_1))
            i += 1
        elif exp_2 > exp_1:
            merged.append((coeff_2, exp_2))
            j += 1
        else:
            merged.append((coeff_1 + coeff_2, exp_1))
            i += 1
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    merged.reverse()
    return merged


def add_dense(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Add coefficient lists indexed by power."""
    return [x + y for x, y in zip_longest(a, b, fillvalue=0)]


def multiply_dense(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Multiply coefficient lists indexed by power."""
    if not a or not b:
        return []
    product = [0] * (len(a) + len(b) - 1)
    for i, x in enumerate(a):
        for j, y in enumerate(b):
            product[i + j] += x * y
    return product