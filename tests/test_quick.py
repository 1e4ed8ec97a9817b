import pytest
from hypothesis import given
from hypothesis import strategies as st

from sortviz.quick import TONE_MS, partition, quick_sort_steps


def _drive(gen):
    frames = []
    while True:
        try:
            frames.append(next(gen))
        except StopIteration as stop:
            return frames, stop.value


def test_partition_worked_example():
    array = [3, 1, 2]
    frames, pivot_index = _drive(partition(array, 0, 2))
    assert pivot_index == 1
    assert array == [1, 2, 3]
    assert [(f.highlight1, f.highlight2) for f in frames] == [(0, 2), (1, 2), (0, 1), (1, 2)]
    assert [f.tone for f in frames] == [3, 1, 1, 2]
    assert all(f.tone_ms == TONE_MS == 5 for f in frames)


def test_partition_leaves_outside_range_alone():
    array = [9, 4, 1, 3, 0]
    _, pivot_index = _drive(partition(array, 1, 3))
    assert array[0] == 9 and array[4] == 0
    assert array[pivot_index] == 3


@given(st.lists(st.integers(min_value=1, max_value=30), min_size=1, max_size=30))
def test_partition_invariant(values):
    array = list(values)
    pivot = array[-1]
    frames, pivot_index = _drive(partition(array, 0, len(array) - 1))
    assert sorted(array) == sorted(values)
    assert array[pivot_index] == pivot
    assert all(v <= pivot for v in array[:pivot_index])
    assert all(v > pivot for v in array[pivot_index + 1:])
    swaps = sum(1 for v in values[:-1] if v <= pivot)
    assert len(frames) == (len(values) - 1) + swaps + 1


def test_empty_array_yields_nothing():
    array = []
    assert list(quick_sort_steps(array)) == []
    assert array == []


def test_single_element():
    frames = list(quick_sort_steps([1]))
    assert len(frames) == 2
    assert all(f.sorted_until == 0 for f in frames)


def test_sorted_input_does_not_exhaust_stack():
    array = list(range(1, 1501))
    frames = list(quick_sort_steps(array))
    assert array == list(range(1, 1501))
    assert frames[-1].sorted_until == 0


@given(st.lists(st.integers(min_value=1, max_value=50), min_size=1, max_size=40))
def test_sorts_and_reports(values):
    array = list(values)
    frames = list(quick_sort_steps(array))
    assert array == sorted(values)
    final = frames[-1]
    assert final.values == tuple(sorted(values))
    assert final.sorted_until == 0
    assert final.tone is None
    for frame in frames:
        assert sorted(frame.values) == sorted(values)
        if frame.tone is not None:
            assert frame.sorted_until is None
            assert 0 <= frame.highlight1 < len(values)
        else:
            assert 0 <= frame.sorted_until < len(values)


def test_partition_rejects_empty_list():
    with pytest.raises(IndexError):
        _drive(partition([], 0, 0))