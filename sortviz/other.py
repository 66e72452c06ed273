"""Sorting algorithms whose running time is neither quadratic nor n log n."""

from __future__ import annotations

import random
import time
from typing import MutableSequence, Sequence

from .base import Sort, Window

# An index that matches no bar: the frame is displayed with no highlight.
_NO_BAR = -1


class BogoSort(Sort):
    """Shuffle the array at random until it happens to be sorted."""

    def __init__(self, delay: float = 0.05, rng: random.Random | None = None) -> None:
        self.delay = delay
        self.rng = rng if rng is not None else random.Random()

    def sort(self, window: Window, arr: MutableSequence[int]) -> None:
        while not self._is_sorted(arr):
            self._shuffle(window, arr)

    @staticmethod
    def _is_sorted(arr: Sequence[int]) -> bool:
        return all(a <= b for a, b in zip(arr, arr[1:]))

    def _shuffle(self, window: Window, arr: MutableSequence[int]) -> None:
        size = len(arr)
        for i in range(size):
            j = self.rng.randrange(size)
            arr[i], arr[j] = arr[j], arr[i]
        self.draw(window, arr, pivot=_NO_BAR)
        if self.delay > 0:
            time.sleep(self.delay)


class CombSort(Sort):
    """Bubble sort over a gap that shrinks by a factor of 1.3 each pass."""

    @staticmethod
    def _next_gap(gap: int) -> int:
        return max(gap * 10 // 13, 1)

    def sort(self, window: Window, arr: MutableSequence[int]) -> None:
        size = len(arr)
        gap = size
        swapped = True
        while gap != 1 or swapped:
            gap = self._next_gap(gap)
            swapped = False
            for i in range(size - gap):
                if arr[i] > arr[i + gap]:
                    arr[i], arr[i + gap] = arr[i + gap], arr[i]
                    swapped = True
                self.draw(window, arr, i, i + gap)


class FancyCycleSort(Sort):
    """Cycle sort for arrays holding values from 1 to n: each value goes to index value - 1."""

    def sort(self, window: Window, arr: MutableSequence[int]) -> None:
        size = len(arr)
        for value in arr:
            if not 1 <= value <= size:
                raise ValueError(f"value {value} is outside the range 1..{size}")
        i = 0
        while i < size:
            correct = arr[i] - 1
            if arr[i] != arr[correct]:
                self.draw(window, arr, i, correct)
                arr[i], arr[correct] = arr[correct], arr[i]
            else:
                i += 1


class PigeonholeSort(Sort):
    """Count every value into a hole between the minimum and the maximum."""

    def sort(self, window: Window, arr: MutableSequence[int]) -> None:
        if not arr:
            return
        low = high = arr[0]
        low_index = high_index = 0
        for i in range(1, len(arr)):
            if arr[i] < low:
                low, low_index = arr[i], i
            if arr[i] > high:
                high, high_index = arr[i], i
            self.draw(window, arr, low_index, high_index, i)
        holes = [0] * (high - low + 1)
        for value in arr:
            holes[value - low] += 1
        index = 0
        for offset, count in enumerate(holes):
            for _ in range(count):
                arr[index] = offset + low
                index += 1
            self.draw(window, arr, pivot=index)


class RadixSort(Sort):
    """Least-significant-digit radix sort in base 10 for non-negative integers."""

    def sort(self, window: Window, arr: MutableSequence[int]) -> None:
        if not arr:
            return
        if min(arr) < 0:
            raise ValueError("radix sort needs non-negative values")
        largest = max(arr)
        exp = 1
        while largest // exp > 0:
            self._count_sort(window, arr, exp)
            exp *= 10

    def _count_sort(self, window: Window, arr: MutableSequence[int], exp: int) -> None:
        size = len(arr)
        output = [0] * size
        count = [0] * 10
        for value in arr:
            count[(value // exp) % 10] += 1
        for digit in range(1, 10):
            count[digit] += count[digit - 1]
        for value in reversed(list(arr)):
            digit = (value // exp) % 10
            output[count[digit] - 1] = value
            count[digit] -= 1
        for i, value in enumerate(output):
            arr[i] = value
            self.draw(window, arr, pivot=i)


class StoogeSort(Sort):
    """Stooge sort: sort the first two thirds, the last two thirds, then the first again."""

    def sort(self, window: Window, arr: MutableSequence[int]) -> None:
        self._stooge(window, arr, 0, len(arr) - 1)

    def _stooge(self, window: Window, arr: MutableSequence[int], low: int, high: int) -> None:
        if low >= high:
            return
        if arr[low] > arr[high]:
            self.draw(window, arr, low, high)
            arr[low], arr[high] = arr[high], arr[low]
        if high - low + 1 > 2:
            third = (high - low + 1) // 3
            self._stooge(window, arr, low, high - third)
            self._stooge(window, arr, low + third, high)
            self._stooge(window, arr, low, high - third)