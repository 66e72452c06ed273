"""Sorting algorithms that take n log n time, on average or at worst."""

from __future__ import annotations

import abc
import math
import random
from dataclasses import dataclass
from typing import Iterator, MutableSequence

from .base import Sort, Window


class HeapSort(Sort):
    """Heap sort over a binary max-heap."""

    def sort(self, window: Window, arr: MutableSequence[int]) -> None:
        size = len(arr)
        for root in range(size // 2 - 1, -1, -1):
            self._heapify(window, arr, size, root)
        for last in range(size - 1, 0, -1):
            arr[0], arr[last] = arr[last], arr[0]
            self.draw(window, arr, 0, last)
            self._heapify(window, arr, last, 0)

    def _heapify(self, window: Window, arr: MutableSequence[int], size: int, root: int) -> None:
        while True:
            largest = root
            left = 2 * root + 1
            right = left + 1
            if left < size and arr[left] > arr[largest]:
                largest = left
            if right < size and arr[right] > arr[largest]:
                largest = right
            if largest == root:
                return
            arr[root], arr[largest] = arr[largest], arr[root]
            self.draw(window, arr, root, largest)
            root = largest


class IntroSort(Sort):
    """Quick sort on a median-of-three pivot that falls back to heap sort when too deep.

    Ranges shorter than sixteen elements are finished by insertion sort.
    """

    _THRESHOLD = 16

    def sort(self, window: Window, arr: MutableSequence[int]) -> None:
        size = len(arr)
        if size == 0:
            return
        depth_limit = int(2 * math.log(size))
        self._intro(window, arr, 0, size - 1, depth_limit)

    def _intro(self, window: Window, arr: MutableSequence[int], begin: int, end: int, depth: int) -> None:
        span = end - begin
        if span < self._THRESHOLD:
            self._insertion(window, arr, begin, end)
            return
        if depth == 0:
            arr[begin:end + 1] = sorted(arr[begin:end + 1])
            return
        median = self._median_of_three(arr, begin, begin + span // 2, end)
        arr[median], arr[end] = arr[end], arr[median]
        pivot = self._partition(window, arr, begin, end)
        self._intro(window, arr, begin, pivot - 1, depth - 1)
        self._intro(window, arr, pivot + 1, end, depth - 1)

    def _insertion(self, window: Window, arr: MutableSequence[int], left: int, right: int) -> None:
        for i in range(left + 1, right + 1):
            key = arr[i]
            j = i - 1
            while j >= left and arr[j] > key:
                self.draw(window, arr, i, j)
                arr[j + 1] = arr[j]
                j -= 1
            arr[j + 1] = key

    def _partition(self, window: Window, arr: MutableSequence[int], low: int, high: int) -> int:
        pivot = arr[high]
        i = low - 1
        for j in range(low, high):
            if arr[j] < pivot:
                self.draw(window, arr, i, j, high)
                i += 1
                arr[i], arr[j] = arr[j], arr[i]
        arr[i + 1], arr[high] = arr[high], arr[i + 1]
        return i + 1

    @staticmethod
    def _median_of_three(arr: MutableSequence[int], a: int, b: int, c: int) -> int:
        va, vb, vc = arr[a], arr[b], arr[c]
        if va < vb < vc:
            return b
        if va < vc <= vb:
            return c
        if vb <= va < vc:
            return a
        if vb < vc <= va:
            return c
        if vc <= va < vb:
            return a
        return b


class MergeSort(Sort):
    """Top-down merge sort."""

    def sort(self, window: Window, arr: MutableSequence[int]) -> None:
        self._merge_sort(window, arr, 0, len(arr) - 1)

    def _merge_sort(self, window: Window, arr: MutableSequence[int], left: int, right: int) -> None:
        if left >= right:
            return
        mid = left + (right - left) // 2
        self._merge_sort(window, arr, left, mid)
        self._merge_sort(window, arr, mid + 1, right)
        self._merge(window, arr, left, mid, right)

    def _merge(self, window: Window, arr: MutableSequence[int], left: int, mid: int, right: int) -> None:
        first = list(arr[left:mid + 1])
        second = list(arr[mid + 1:right + 1])
        i = j = 0
        k = left
        while i < len(first) and j < len(second):
            if first[i] <= second[j]:
                arr[k] = first[i]
                i += 1
            else:
                arr[k] = second[j]
                j += 1
            self.draw(window, arr, pivot=k)
            k += 1
        for value in first[i:] + second[j:]:
            arr[k] = value
            k += 1


class QuickSort(Sort):
    """Quick sort on a randomly chosen pivot; subclasses choose the partition scheme."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def sort(self, window: Window, arr: MutableSequence[int]) -> None:
        self._quick_sort(window, arr, 0, len(arr) - 1)

    def _random_index(self, low: int, high: int) -> int:
        return low + self.rng.randrange(high - low)

    @abc.abstractmethod
    def _partition(self, window: Window, arr: MutableSequence[int], low: int, high: int) -> int:
        """Partition ``arr[low..high]`` and return the split index."""

    @abc.abstractmethod
    def _partition_random(self, window: Window, arr: MutableSequence[int], low: int, high: int) -> int:
        """Move a random pivot into place, then partition."""

    @abc.abstractmethod
    def _quick_sort(self, window: Window, arr: MutableSequence[int], low: int, high: int) -> None:
        """Sort ``arr[low..high]`` in place."""


class QuickSortHoare(QuickSort):
    """Quick sort with Hoare's partition scheme."""

    def _partition(self, window: Window, arr: MutableSequence[int], low: int, high: int) -> int:
        pivot = arr[low]
        i = low - 1
        j = high + 1
        while True:
            while True:
                self.draw(window, arr, i, j, low)
                i += 1
                if arr[i] >= pivot:
                    break
            while True:
                self.draw(window, arr, i, j, low)
                j -= 1
                if arr[j] <= pivot:
                    break
            if i >= j:
                return j
            self.draw(window, arr, i, j, low)
            arr[i], arr[j] = arr[j], arr[i]

    def _partition_random(self, window: Window, arr: MutableSequence[int], low: int, high: int) -> int:
        chosen = self._random_index(low, high)
        arr[chosen], arr[low] = arr[low], arr[chosen]
        return self._partition(window, arr, low, high)

    def _quick_sort(self, window: Window, arr: MutableSequence[int], low: int, high: int) -> None:
        if low < high:
            pivot = self._partition_random(window, arr, low, high)
            self.draw(window, arr, low, high, pivot)
            self._quick_sort(window, arr, low, pivot)
            self._quick_sort(window, arr, pivot + 1, high)


class QuickSortLomuto(QuickSort):
    """Quick sort with Lomuto's partition scheme."""

    def _partition(self, window: Window, arr: MutableSequence[int], low: int, high: int) -> int:
        pivot = arr[high]
        i = low - 1
        for j in range(low, high):
            if arr[j] < pivot:
                self.draw(window, arr, i, j, high)
                i += 1
                arr[i], arr[j] = arr[j], arr[i]
        self.draw(window, arr, i + 1, high, high)
        arr[i + 1], arr[high] = arr[high], arr[i + 1]
        return i + 1

    def _partition_random(self, window: Window, arr: MutableSequence[int], low: int, high: int) -> int:
        chosen = self._random_index(low, high)
        self.draw(window, arr, low, high, chosen)
        arr[chosen], arr[high] = arr[high], arr[chosen]
        return self._partition(window, arr, low, high)

    def _quick_sort(self, window: Window, arr: MutableSequence[int], low: int, high: int) -> None:
        if low < high:
            pivot = self._partition_random(window, arr, low, high)
            self.draw(window, arr, low, high, pivot)
            self._quick_sort(window, arr, low, pivot - 1)
            self._quick_sort(window, arr, pivot + 1, high)


class ShellSort(Sort):
    """Shell sort with gaps halving from n / 2."""

    def sort(self, window: Window, arr: MutableSequence[int]) -> None:
        size = len(arr)
        gap = size // 2
        while gap > 0:
            for i in range(gap, size):
                temp = arr[i]
                j = i
                while j >= gap and arr[j - gap] > temp:
                    arr[j] = arr[j - gap]
                    j -= gap
                arr[j] = temp
                self.draw(window, arr, j, i)
            gap //= 2


def _leonardo(k: int) -> int:
    previous, current = 1, 1
    for _ in range(2, k + 1):
        previous, current = current, previous + current + 1
    return current


class SmoothSort(Sort):
    """A Leonardo-heap pass followed by an insertion pass that finishes the order."""

    _ODD_BITS = 0xAAAAAAAA

    def sort(self, window: Window, arr: MutableSequence[int]) -> None:
        size = len(arr)
        if size == 0:
            return
        p = size - 1
        q = p
        r = 0
        self.draw(window, arr, pivot=p)
        while p > 0:
            if (r & 0x03) == 0:
                self._heapify(window, arr, r, q)
            if _leonardo(r) == p:
                r += 1
            else:
                r -= 1
                q -= _leonardo(r)
                self._heapify(window, arr, r, q)
                q = r - 1
                r += 1
            arr[0], arr[p] = arr[p], arr[0]
            p -= 1
        for i in range(size - 1):
            j = i + 1
            self.draw(window, arr, pivot=i)
            while j > 0 and arr[j] < arr[j - 1]:
                arr[j], arr[j - 1] = arr[j - 1], arr[j]
                j -= 1
            self.draw(window, arr, pivot=i)

    def _heapify(self, window: Window, arr: MutableSequence[int], start: int, end: int) -> None:
        i = start
        j = 0
        for k in range(end - start + 1):
            if k & self._ODD_BITS:
                j += i
                i >>= 1
            else:
                i += j
                j >>= 1
        while i > 0:
            j >>= 1
            k = i + j
            while k < end:
                if arr[k] > arr[k - i]:
                    break
                self.draw(window, arr, k, k - i)
                arr[k], arr[k - i] = arr[k - i], arr[k]
                k += i
            i = j


class TimSort(Sort):
    """Insertion sort on runs of 32, then bottom-up merges of doubling width."""

    RUN = 32

    def sort(self, window: Window, arr: MutableSequence[int]) -> None:
        size = len(arr)
        for start in range(0, size, self.RUN):
            self._insertion(window, arr, start, min(start + self.RUN - 1, size - 1))
        width = self.RUN
        while width < size:
            for left in range(0, size, 2 * width):
                mid = left + width - 1
                right = min(left + 2 * width - 1, size - 1)
                if mid < right:
                    self._merge(window, arr, left, mid, right)
            width *= 2

    def _insertion(self, window: Window, arr: MutableSequence[int], left: int, right: int) -> None:
        for i in range(left + 1, right + 1):
            key = arr[i]
            j = i - 1
            while j >= left and arr[j] > key:
                self.draw(window, arr, i, j + 1)
                arr[j + 1] = arr[j]
                j -= 1
            arr[j + 1] = key

    def _merge(self, window: Window, arr: MutableSequence[int], left: int, mid: int, right: int) -> None:
        first = list(arr[left:mid + 1])
        second = list(arr[mid + 1:right + 1])
        i = j = 0
        k = left
        while i < len(first) and j < len(second):
            if first[i] <= second[j]:
                arr[k] = first[i]
                i += 1
            else:
                arr[k] = second[j]
                j += 1
            k += 1
            self.draw(window, arr, pivot=k)
        for value in first[i:] + second[j:]:
            arr[k] = value
            k += 1


@dataclass
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


class TreeSort(Sort):
    """Insert every value into a binary search tree and read it back in order.

    The tree keeps each distinct value once, so with duplicates only the
    leading positions are rewritten and the tail of the array is left as it was.
    """

    def sort(self, window: Window, arr: MutableSequence[int]) -> None:
        root: _Node | None = None
        for value in list(arr):
            root = self._insert(root, value)
        for index, value in enumerate(self._in_order(root)):
            arr[index] = value
            self.draw(window, arr, pivot=index)

    @staticmethod
    def _insert(root: _Node | None, value: int) -> _Node:
        if root is None:
            return _Node(value)
        node = root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = _Node(value)
                    break
                node = node.right
            else:
                break
        return root

    @staticmethod
    def _in_order(root: _Node | None) -> Iterator[int]:
        stack: list[_Node] = []
        node = root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right