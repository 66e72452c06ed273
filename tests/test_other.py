import random

import pytest

from sortviz.base import Color, RecordingWindow
from sortviz.other import (
    BogoSort,
    CombSort,
    FancyCycleSort,
    PigeonholeSort,
    RadixSort,
    StoogeSort,
)


def _shuffled(n, seed):
    values = list(range(1, n + 1))
    random.Random(seed).shuffle(values)
    return values


GENERAL = [CombSort, PigeonholeSort, RadixSort, StoogeSort]


@pytest.mark.parametrize("algorithm", GENERAL)
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_sorts_permutation(algorithm, seed):
    arr = _shuffled(40, seed)
    algorithm().sort(RecordingWindow(), arr)
    assert arr == sorted(arr) and sorted(arr) == list(range(1, 41))


@pytest.mark.parametrize("algorithm", GENERAL)
def test_sorts_with_duplicates(algorithm):
    rng = random.Random(7)
    arr = [rng.randrange(0, 10) for _ in range(30)]
    expected = sorted(arr)
    algorithm().sort(RecordingWindow(), arr)
    assert arr == expected


@pytest.mark.parametrize("algorithm", GENERAL + [FancyCycleSort])
def test_empty_and_single(algorithm):
    empty = []
    algorithm().sort(RecordingWindow(), empty)
    assert empty == []
    single = [1]
    algorithm().sort(RecordingWindow(), single)
    assert single == [1]


@pytest.mark.parametrize("algorithm", GENERAL + [FancyCycleSort])
def test_every_frame_has_one_bar_per_element(algorithm):
    arr = _shuffled(12, 3)
    window = RecordingWindow()
    algorithm().sort(window, arr)
    assert window.frames
    assert all(len(frame) == 12 for frame in window.frames)


def test_fancy_cycle_sort_permutation():
    arr = _shuffled(50, 5)
    FancyCycleSort().sort(RecordingWindow(), arr)
    assert arr == list(range(1, 51))


def test_fancy_cycle_sort_highlights_swapped_pair():
    window = RecordingWindow()
    arr = [2, 1]
    FancyCycleSort().sort(window, arr)
    assert arr == [1, 2]
    assert len(window.frames) == 1
    assert [bar.color for bar in window.frames[0]] == [Color.RED, Color.RED]


@pytest.mark.parametrize("bad", [[0, 1, 2], [1, 2, 4]])
def test_fancy_cycle_sort_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        FancyCycleSort().sort(RecordingWindow(), bad)


def test_radix_sort_rejects_negative():
    with pytest.raises(ValueError):
        RadixSort().sort(RecordingWindow(), [3, -1, 2])


def test_radix_sort_multi_digit():
    arr = [170, 45, 75, 90, 802, 24, 2, 66]
    RadixSort().sort(RecordingWindow(), arr)
    assert arr == [2, 24, 45, 66, 75, 90, 170, 802]


def test_radix_sort_all_zero_untouched():
    window = RecordingWindow()
    arr = [0, 0, 0]
    RadixSort().sort(window, arr)
    assert arr == [0, 0, 0]
    assert window.frames == []


def test_pigeonhole_sort_negative_values():
    arr = [3, -5, 0, -5, 2, -1]
    PigeonholeSort().sort(RecordingWindow(), arr)
    assert arr == sorted([3, -5, 0, -5, 2, -1])


def test_stooge_sort_sorted_input_draws_nothing():
    window = RecordingWindow()
    arr = list(range(1, 10))
    StoogeSort().sort(window, arr)
    assert arr == list(range(1, 10))
    assert window.frames == []


def test_comb_sort_reverse_order():
    arr = list(range(30, 0, -1))
    CombSort().sort(RecordingWindow(), arr)
    assert arr == list(range(1, 31))


def test_bogo_sort_sorts_small_array():
    window = RecordingWindow()
    arr = [3, 1, 2, 4]
    BogoSort(delay=0, rng=random.Random(11)).sort(window, arr)
    assert arr == [1, 2, 3, 4]
    assert window.frames
    assert all(bar.color is Color.WHITE for frame in window.frames for bar in frame)


def test_bogo_sort_already_sorted_draws_nothing():
    window = RecordingWindow()
    arr = [1, 2, 3]
    BogoSort(delay=0, rng=random.Random(0)).sort(window, arr)
    assert arr == [1, 2, 3]
    assert window.frames == []


def test_bogo_sort_keeps_elements():
    arr = [5, 5, 1, 3]
    BogoSort(delay=0, rng=random.Random(4)).sort(RecordingWindow(), arr)
    assert arr == [1, 3, 5, 5]