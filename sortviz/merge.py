"""Merge sort as a sequence of visualisation frames."""

from __future__ import annotations

from collections.abc import Iterator

from sortviz.canvas import Frame

TONE_MS = 5


def merge(array: list[int], left: int, mid: int, right: int) -> Iterator[Frame]:
    """Merge the sorted runs ``array[left:mid+1]`` and ``array[mid+1:right+1]``.

    Works in place and yields a frame, with the written slot in red, for
    every element placed into the merged run.
    """
    left_run = array[left:mid + 1]
    right_run = array[mid + 1:right + 1]
    i = j = 0
    k = left

    while i < len(left_run) and j < len(right_run):
        tone = min(left_run[i], right_run[j])
        if left_run[i] <= right_run[j]:
            array[k] = left_run[i]
            i += 1
        else:
            array[k] = right_run[j]
            j += 1
        yield Frame(tuple(array), k, None, None, tone, TONE_MS)
        k += 1

    for value in (*left_run[i:], *right_run[j:]):
        array[k] = value
        yield Frame(tuple(array), k, None, None, value, TONE_MS)
        k += 1


def _merge_sort_range(array: list[int], left: int, right: int) -> Iterator[Frame]:
    if left < right:
        mid = left + (right - left) // 2
        yield from _merge_sort_range(array, left, mid)
        yield from _merge_sort_range(array, mid + 1, right)
        yield from merge(array, left, mid, right)


def merge_sort_steps(array: list[int]) -> Iterator[Frame]:
    """Sort ``array`` in place, yielding a frame per placed element.

    The last frame shows the whole sorted array in green. Raises
    ValueError for an empty array.
    """
    if not array:
        raise ValueError("cannot merge-sort an empty array")
    yield from _merge_sort_range(array, 0, len(array) - 1)
    yield Frame(tuple(array), None, None, 0)