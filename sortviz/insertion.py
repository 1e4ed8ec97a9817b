"""Insertion sort as a sequence of visualisation frames."""

from __future__ import annotations

from collections.abc import Iterator

from sortviz.canvas import Frame

TONE_MS = 15


def insertion_sort_steps(array: list[int]) -> Iterator[Frame]:
    """Sort ``array`` in place, yielding a frame for each shift and placement."""
    for i in range(1, len(array)):
        key = array[i]
        j = i
        while j > 0 and array[j - 1] > key:
            tone = array[j - 1]
            array[j] = array[j - 1]
            j -= 1
            yield Frame(tuple(array), j, j + 1, i, tone, TONE_MS)
        if array[j] != key:
            array[j] = key
            yield Frame(tuple(array), j, None, i + 1, array[j], TONE_MS)
        else:
            yield Frame(tuple(array), None, None, i + 1)