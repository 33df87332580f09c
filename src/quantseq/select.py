"""Partial selection (Floyd & Rivest, 1975).

Finds the k-th smallest element of a list in expected linear time without a
full sort. The list is reordered in place: afterwards ``seq[k]`` holds the
k-th order statistic, every element before it compares <= and every element
after it compares >=.
"""

from __future__ import annotations

import math
from typing import Any, Callable, MutableSequence, Optional

Compare = Callable[[Any, Any], int]


def _default_compare(a: Any, b: Any) -> int:
    if a > b:
        return 1
    if a < b:
        return -1
    return 0


def partition_select(
    seq: MutableSequence[Any],
    k: int,
    compare: Optional[Compare] = None,
    sample_cutoff: int = 600,
) -> Any:
    """Return the element at sorted position ``k``, partitioning ``seq`` around it."""
    if not 0 <= k < len(seq):
        raise IndexError(f"Rank {k} out of range for sequence of length {len(seq)}")
    cmp = compare or _default_compare
    _floyd_rivest(seq, 0, len(seq) - 1, k, cmp, max(1, sample_cutoff))
    return seq[k]


def _floyd_rivest(arr: MutableSequence[Any], left: int, right: int, k: int, cmp: Compare, cutoff: int) -> None:
    while right > left:
        if right - left > cutoff:
            # Recurse on a sample to pull good pivots towards k
            n = right - left + 1
            i = k - left + 1
            z = math.log(n)
            s = 0.5 * math.exp(2 * z / 3)
            sd = 0.5 * math.sqrt(z * s * (n - s) / n) * (-1 if i - n / 2 < 0 else 1)
            new_left = max(left, math.floor(k - i * s / n + sd))
            new_right = min(right, math.floor(k + (n - i) * s / n + sd))
            _floyd_rivest(arr, new_left, new_right, k, cmp, cutoff)

        t = arr[k]
        i = left
        j = right

        _swap(arr, left, k)
        if cmp(arr[right], t) > 0:
            _swap(arr, left, right)

        while i < j:
            _swap(arr, i, j)
            i += 1
            j -= 1
            while cmp(arr[i], t) < 0:
                i += 1
            while cmp(arr[j], t) > 0:
                j -= 1

        if cmp(arr[left], t) == 0:
            _swap(arr, left, j)
        else:
            j += 1
            _swap(arr, j, right)

        if j <= k:
            left = j + 1
        if k <= j:
            right = j - 1


def _swap(arr: MutableSequence[Any], i: int, j: int) -> None:
    arr[i], arr[j] = arr[j], arr[i]


__all__ = ["partition_select"]
