"""In-place string sorting algorithms that report work through a counter."""

from __future__ import annotations

from collections import Counter
from itertools import accumulate

from .counter import CharCompareCounter

QUICK_RADIX_CUTOFF = 74
"""Ranges smaller than this are handed from radix sort to three-way quicksort."""


def merge_sort(items: list[str], counter: CharCompareCounter) -> None:
    """Sort ``items`` in place with top-down merge sort, copying both halves."""
    _merge_sort_range(items, 0, len(items) - 1, counter)


def _merge_sort_range(items: list[str], left: int, right: int, counter: CharCompareCounter) -> None:
    if left >= right:
        return
    mid = (left + right) // 2
    _merge_sort_range(items, left, mid, counter)
    _merge_sort_range(items, mid + 1, right, counter)

    left_part = items[left : mid + 1]
    right_part = items[mid + 1 : right + 1]
    merged: list[str] = []
    i = j = 0
    while i < len(left_part) and j < len(right_part):
        if counter.compare(left_part[i], right_part[j]) <= 0:
            merged.append(left_part[i])
            i += 1
        else:
            merged.append(right_part[j])
            j += 1
    merged.extend(left_part[i:])
    merged.extend(right_part[j:])
    items[left : right + 1] = merged


def str_merge_sort(items: list[str], counter: CharCompareCounter) -> None:
    """Sort ``items`` in place with merge sort driven by a strict less-than test."""
    _str_merge_sort_range(items, 0, len(items) - 1, counter)


def _str_merge_sort_range(items: list[str], left: int, right: int, counter: CharCompareCounter) -> None:
    if left >= right:
        return
    mid = left + (right - left) // 2
    _str_merge_sort_range(items, left, mid, counter)
    _str_merge_sort_range(items, mid + 1, right, counter)

    merged: list[str] = []
    i, j = left, mid + 1
    while i <= mid and j <= right:
        if counter.less(items[i], items[j]):
            merged.append(items[i])
            i += 1
        else:
            merged.append(items[j])
            j += 1
    merged.extend(items[i : mid + 1])
    merged.extend(items[j : right + 1])
    items[left : right + 1] = merged


def quick_sort(items: list[str], counter: CharCompareCounter) -> None:
    """Sort ``items`` in place with quicksort using the last element as pivot."""
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = items[high]
        boundary = low
        for j in range(low, high):
            if counter.compare(items[j], pivot) <= 0:
                items[boundary], items[j] = items[j], items[boundary]
                boundary += 1
        items[boundary], items[high] = items[high], items[boundary]
        pending.append((low, boundary - 1))
        pending.append((boundary + 1, high))


def str_quick_sort(items: list[str], counter: CharCompareCounter) -> None:
    """Sort ``items`` in place with three-way string quicksort."""
    _three_way_quick_sort(items, 0, len(items) - 1, 0, counter)


def _three_way_quick_sort(
    items: list[str], low: int, high: int, depth: int, counter: CharCompareCounter
) -> None:
    pending = [(low, high, depth)]
    while pending:
        l, r, d = pending.pop()
        if l >= r:
            continue
        less, greater = l, r
        pivot = counter.char_at(items[l], d)
        i = l + 1
        while i <= greater:
            current = counter.char_at(items[i], d)
            if current < pivot:
                items[less], items[i] = items[i], items[less]
                less += 1
                i += 1
            elif current > pivot:
                items[i], items[greater] = items[greater], items[i]
                greater -= 1
            else:
                i += 1
        pending.append((greater + 1, r, d))
        if pivot >= 0:
            pending.append((less, greater, d + 1))
        pending.append((l, less - 1, d))


def radix_sort(items: list[str], counter: CharCompareCounter) -> None:
    """Sort ``items`` in place with most-significant-digit radix sort."""
    _msd_radix_sort(items, counter, cutoff=0)


def quick_radix_sort(items: list[str], counter: CharCompareCounter) -> None:
    """Sort ``items`` in place with MSD radix sort, using three-way quicksort on small ranges."""
    _msd_radix_sort(items, counter, cutoff=QUICK_RADIX_CUTOFF)


def _msd_radix_sort(items: list[str], counter: CharCompareCounter, cutoff: int) -> None:
    pending = [(0, len(items) - 1, 0)]
    while pending:
        low, high, d = pending.pop()
        if high <= low:
            continue
        if high - low + 1 < cutoff:
            _three_way_quick_sort(items, low, high, d, counter)
            continue

        segment = items[low : high + 1]
        sizes = Counter(counter.char_at(s, d) for s in segment)
        codes = sorted(sizes)
        starts = dict(zip(codes, accumulate((sizes[c] for c in codes), initial=0)))

        next_free = dict(starts)
        distributed: list[str] = [""] * len(segment)
        for s in segment:
            code = counter.char_at(s, d)
            distributed[next_free[code]] = s
            next_free[code] += 1
        items[low : high + 1] = distributed

        for code in codes:
            if code >= 0:
                start = low + starts[code]
                pending.append((start, start + sizes[code] - 1, d + 1))