"""Quick sort as a sequence of visualisation frames."""

from __future__ import annotations

from collections.abc import Generator, Iterator

from sortviz.canvas import Frame

TONE_MS = 5


def partition(array: list[int], low: int, high: int) -> Generator[Frame, None, int]:
    """Partition ``array[low:high+1]`` around its last element.

    Yields a frame for every comparison with the pivot, every swap and the
    final pivot placement; the generator's return value is the pivot's
    final index.
    """
    pivot = array[high]
    i = low
    for j in range(low, high):
        yield Frame(tuple(array), j, high, None, array[j], TONE_MS)
        if array[j] <= pivot:
            array[i], array[j] = array[j], array[i]
            yield Frame(tuple(array), i, j, None, array[i], TONE_MS)
            i += 1
    array[i], array[high] = array[high], array[i]
    yield Frame(tuple(array), i, high, None, array[i], TONE_MS)
    return i


def quick_sort_steps(array: list[int]) -> Iterator[Frame]:
    """Sort ``array`` in place, yielding the frames of a Lomuto quick sort.

    Once a sub-range is finished a frame marks everything from its start
    onwards in green; the last frame shows the whole array in green. An
    empty array yields nothing.
    """
    if not array:
        return
    # An explicit stack keeps deep partitions (sorted input) off the call stack
    # while producing frames in the same order as the recursive formulation.
    stack: list[tuple[bool, int, int]] = [(False, 0, len(array) - 1)]
    while stack:
        mark_only, low, high = stack.pop()
        if mark_only:
            yield Frame(tuple(array), None, None, low)
            continue
        if low < high:
            pivot_index = yield from partition(array, low, high)
            stack.append((True, low, high))
            stack.append((False, pivot_index + 1, high))
            stack.append((False, low, pivot_index - 1))
        elif low <= high:
            yield Frame(tuple(array), None, None, low)
    yield Frame(tuple(array), None, None, 0)