"""Selection sort as a sequence of visualisation frames."""

from __future__ import annotations

from collections.abc import Iterator

from sortviz.canvas import Frame

TONE_MS = 15


def selection_sort_steps(array: list[int]) -> Iterator[Frame]:
    """Sort ``array`` in place, yielding a frame per comparison and placement.

    Raises ValueError for an empty array.
    """
    n = len(array)
    if n == 0:
        raise ValueError("cannot selection-sort an empty array")
    for i in range(n - 1):
        min_idx = i
        for j in range(i + 1, n):
            yield Frame(tuple(array), j, min_idx, i, array[j], TONE_MS)
            if array[j] < array[min_idx]:
                min_idx = j
        if min_idx != i:
            array[i], array[min_idx] = array[min_idx], array[i]
            yield Frame(tuple(array), i, min_idx, i + 1, array[i], TONE_MS)
        else:
            yield Frame(tuple(array), None, None, i + 1)