"""Sorting algorithms that take quadratic time."""

from __future__ import annotations

from typing import MutableSequence

from .base import Sort, Window


class BubbleSort(Sort):
    """Bubble sort that stops early once a pass makes no swap."""

    def sort(self, window: Window, arr: MutableSequence[int]) -> None:
        size = len(arr)
        for i in range(size - 1):
            swapped = False
            for j in range(size - i - 1):
                if arr[j] > arr[j + 1]:
                    self.draw(window, arr, i, j)
                    arr[j], arr[j + 1] = arr[j + 1], arr[j]
                    swapped = True
            if not swapped:
                break


class CocktailSort(Sort):
    """Bubble sort that alternates its direction on every pass."""

    def sort(self, window: Window, arr: MutableSequence[int]) -> None:
        start = 0
        end = len(arr) - 1
        swapped = True
        while swapped:
            swapped = False
            for i in range(start, end):
                if arr[i] > arr[i + 1]:
                    arr[i], arr[i + 1] = arr[i + 1], arr[i]
                    swapped = True
                self.draw(window, arr, i, i + 1)
            if not swapped:
                break
            swapped = False
            end -= 1
            for i in range(end - 1, start - 1, -1):
                if arr[i] > arr[i + 1]:
                    arr[i], arr[i + 1] = arr[i + 1], arr[i]
                    swapped = True
                self.draw(window, arr, i, i + 1)
            start += 1


class CycleSort(Sort):
    """Cycle sort, which writes every element at most once into place."""

    def sort(self, window: Window, arr: MutableSequence[int]) -> None:
        size = len(arr)
        for cycle_start in range(size - 1):
            item = arr[cycle_start]
            pos = self._position(window, arr, cycle_start, item)
            if pos == cycle_start:
                continue
            while item == arr[pos]:
                pos += 1
            item, arr[pos] = arr[pos], item
            while pos != cycle_start:
                pos = self._position(window, arr, cycle_start, item)
                while item == arr[pos]:
                    pos += 1
                self.draw(window, arr, pivot=pos)
                item, arr[pos] = arr[pos], item

    def _position(self, window: Window, arr: MutableSequence[int], cycle_start: int, item: int) -> int:
        pos = cycle_start
        for value in arr[cycle_start + 1:]:
            if value < item:
                pos += 1
                self.draw(window, arr, pivot=pos)
        return pos


class GnomeSort(Sort):
    """Gnome sort: step forward while ordered, swap and step back otherwise."""

    def sort(self, window: Window, arr: MutableSequence[int]) -> None:
        size = len(arr)
        index = 0
        while index < size:
            if index == 0:
                index += 1
                if index >= size:
                    break
            if arr[index] >= arr[index - 1]:
                index += 1
            else:
                arr[index], arr[index - 1] = arr[index - 1], arr[index]
                index -= 1
            self.draw(window, arr, pivot=index)


class InsertionSort(Sort):
    """Straight insertion sort."""

    def sort(self, window: Window, arr: MutableSequence[int]) -> None:
        for i in range(1, len(arr)):
            key = arr[i]
            j = i - 1
            while j >= 0 and arr[j] > key:
                self.draw(window, arr, i, j + 1)
                arr[j + 1] = arr[j]
                j -= 1
            arr[j + 1] = key


class OddEvenSort(Sort):
    """Odd-even transposition sort."""

    def sort(self, window: Window, arr: MutableSequence[int]) -> None:
        size = len(arr)
        done = False
        while not done:
            done = True
            for first in (1, 0):
                for i in range(first, size - 1, 2):
                    if arr[i] > arr[i + 1]:
                        self.draw(window, arr, pivot=i)
                        done = False
                        arr[i], arr[i + 1] = arr[i + 1], arr[i]


class PancakeSort(Sort):
    """Pancake sort: bring the maximum to the front, then flip it to the end."""

    def sort(self, window: Window, arr: MutableSequence[int]) -> None:
        for current in range(len(arr), 1, -1):
            max_index = max(range(current), key=arr.__getitem__)
            if max_index != current - 1:
                self._flip(window, arr, max_index)
                self._flip(window, arr, current - 1)

    def _flip(self, window: Window, arr: MutableSequence[int], last: int) -> None:
        start = 0
        while start < last:
            self.draw(window, arr, last, start)
            arr[start], arr[last] = arr[last], arr[start]
            start += 1
            last -= 1


class SelectionSort(Sort):
    """Selection sort with one swap per position."""

    def sort(self, window: Window, arr: MutableSequence[int]) -> None:
        size = len(arr)
        for i in range(size - 1):
            min_index = i
            for j in range(i + 1, size):
                if arr[j] < arr[min_index]:
                    min_index = j
                self.draw(window, arr, i, j, min_index)
            arr[min_index], arr[i] = arr[i], arr[min_index]


class SelectionSortExchange(Sort):
    """Selection sort that swaps every larger element into the last place."""

    def sort(self, window: Window, arr: MutableSequence[int]) -> None:
        for i in range(len(arr) - 1, -1, -1):
            for j in range(i):
                if arr[j] > arr[i]:
                    arr[i], arr[j] = arr[j], arr[i]
                self.draw(window, arr, i, j)