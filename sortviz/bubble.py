"""Bubble sort as a sequence of visualisation frames."""

from __future__ import annotations

from collections.abc import Iterator

from sortviz.canvas import Frame

TONE_MS = 15


def bubble_sort_steps(array: list[int]) -> Iterator[Frame]:
    """Sort ``array`` in place, yielding a frame for every comparison.

    Each frame shows the pair about to be compared in red and the settled
    tail in green, as it was before the comparison's swap.
    """
    n = len(array)
    for i in range(n):
        for j in range(n - 1 - i):
            yield Frame(tuple(array), j, j + 1, n - i, array[j], TONE_MS)
            if array[j] > array[j + 1]:
                array[j], array[j + 1] = array[j + 1], array[j]