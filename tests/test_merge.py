from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sortviz.merge import TONE_MS, merge, merge_sort_steps


def test_merge_combines_two_sorted_runs():
    array = [1, 3, 2, 4]
    frames = list(merge(array, 0, 1, 3))
    assert array == [1, 2, 3, 4]
    assert [f.highlight1 for f in frames] == [0, 1, 2, 3]
    assert [f.tone for f in frames] == [1, 2, 3, 4]
    assert all(f.tone_ms == TONE_MS == 5 for f in frames)
    assert all(f.highlight2 is None and f.sorted_until is None for f in frames)


def test_merge_touches_only_its_range():
    array = [9, 5, 6, 1, 2, 0]
    frames = list(merge(array, 1, 2, 4))
    assert array == [9, 1, 2, 5, 6, 0]
    assert len(frames) == 4
    assert frames[-1].values == tuple(array)


def test_merge_frames_snapshot_array():
    array = [2, 1]
    frames = list(merge(array, 0, 0, 1))
    assert frames[0].values == (1, 1)
    assert frames[1].values == (1, 2)


def test_empty_array_raises():
    with pytest.raises(ValueError):
        list(merge_sort_steps([]))


def test_single_element_yields_only_final_frame():
    array = [1]
    frames = list(merge_sort_steps(array))
    assert len(frames) == 1
    assert frames[0].values == (1,)
    assert frames[0].sorted_until == 0
    assert frames[0].tone is None


def test_is_lazy_until_consumed():
    array = [3, 2, 1]
    gen = merge_sort_steps(array)
    assert array == [3, 2, 1]
    list(gen)
    assert array == [1, 2, 3]


@given(st.lists(st.integers(min_value=1, max_value=50), min_size=1, max_size=40))
def test_sorts_and_reports(values):
    array = list(values)
    frames = list(merge_sort_steps(array))
    assert array == sorted(values)
    final = frames[-1]
    assert final.values == tuple(sorted(values))
    assert final.sorted_until == 0
    assert final.highlight1 is None
    for frame in frames[:-1]:
        assert len(frame.values) == len(values)
        assert 0 <= frame.highlight1 < len(values)
        assert frame.tone in values


@given(st.lists(st.integers(min_value=1, max_value=20), min_size=1, max_size=30))
def test_merge_result_is_permutation(values):
    array = sorted(values[: len(values) // 2 + 1]) + sorted(values[len(values) // 2 + 1:])
    mid = len(values) // 2
    original = Counter(array)
    list(merge(array, 0, mid, len(array) - 1))
    assert array == sorted(values)
    assert Counter(array) == original