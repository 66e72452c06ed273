"""The console menus that choose an algorithm, an array size and an order."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass, field
from typing import Callable

from .base import Sort
from .nlogn import (
    HeapSort,
    IntroSort,
    MergeSort,
    QuickSortHoare,
    QuickSortLomuto,
    ShellSort,
    SmoothSort,
    TimSort,
    TreeSort,
)
from .other import BogoSort, CombSort, FancyCycleSort, PigeonholeSort, RadixSort, StoogeSort
from .quadratic import (
    BubbleSort,
    CocktailSort,
    CycleSort,
    GnomeSort,
    InsertionSort,
    OddEvenSort,
    PancakeSort,
    SelectionSort,
    SelectionSortExchange,
)
from .visualizer import ArrayOrder, Visualizer

_CLEAR_SCREEN = "\033[2J\033[3J\033[H"
_HIDE_CURSOR = "\033[?25l"
_SHOW_CURSOR = "\033[?25h"
_WRONG_INPUT = "Wrong input. Try again.\n"
_WRONG_INPUT_PAUSE = 0.75

_MAIN_MENU = (
    "< Select complexity >\n\n"
    "[1] O(n^2) (Default Array Size = 100)\n"
    "[2] O(n * log_n) (Default Array Size = 300)\n"
    "[3] Other complexities\n"
    "[4] Change array size\n"
    "[5] Change array initial order (Default = Random Shuffle)\n"
    "[0] Exit\n"
)

_ORDER_MENU = (
    "< Select initial order >\n\n"
    "[1] Random Shuffle\n"
    "[2] Partially Sorted\n"
    "[3] Nearly Sorted\n"
    "[4] Decreasing Order\n"
    "[5] Increasing Order\n"
    "[0] Go Back\n"
)

_SIZE_PROMPT = "Enter array size (0 to go back): "


@dataclass(frozen=True)
class AlgorithmChoice:
    """One entry of an algorithm menu."""

    label: str
    title: str
    factory: Callable[[], Sort]
    default_size: int | None = None


@dataclass(frozen=True)
class _Complexity:
    default_size: int
    choices: dict[str, AlgorithmChoice] = field(default_factory=dict)

    @property
    def options(self) -> str:
        return "0" + "".join(self.choices)

    @property
    def menu(self) -> str:
        lines = [f"[{key}] {choice.label}\n" for key, choice in self.choices.items()]
        return "< Select algorithm >\n\n" + "".join(lines) + "[0] Go Back\n"


_COMPLEXITIES: dict[str, _Complexity] = {
    "1": _Complexity(
        100,
        {
            "1": AlgorithmChoice("Bubble Sort", "Bubble Sort", BubbleSort),
            "2": AlgorithmChoice("Cocktail Sort", "Cocktail Sort", CocktailSort),
            "3": AlgorithmChoice("Cycle Sort", "Cycle Sort", CycleSort),
            "4": AlgorithmChoice("Gnome Sort", "Gnome Sort", GnomeSort),
            "5": AlgorithmChoice("Insertion Sort", "Insertion Sort", InsertionSort),
            "6": AlgorithmChoice("OddEven Sort", "Odd-Even Sort", OddEvenSort),
            "7": AlgorithmChoice("Pancake Sort", "Pancake Sort", PancakeSort),
            "8": AlgorithmChoice("Selection Sort", "Selection Sort", SelectionSort),
            "9": AlgorithmChoice(
                "Selection Sort (Exchange Variation)",
                "Selection Sort (Exchange Variation)",
                SelectionSortExchange,
            ),
        },
    ),
    "2": _Complexity(
        300,
        {
            "1": AlgorithmChoice("Heap Sort", "Heap Sort", HeapSort),
            "2": AlgorithmChoice("Intro Sort", "Intro Sort", IntroSort),
            "3": AlgorithmChoice("Merge Sort", "Merge Sort", MergeSort),
            "4": AlgorithmChoice(
                "Quick Sort (Lomuto partition scheme)",
                "Quick Sort (Lomuto partition scheme)",
                QuickSortLomuto,
            ),
            "5": AlgorithmChoice(
                "Quick Sort (Hoare partition scheme)",
                "Quick Sort (Hoare partition scheme)",
                QuickSortHoare,
            ),
            "6": AlgorithmChoice("Shell Sort", "Shell Sort", ShellSort),
            "7": AlgorithmChoice("Smooth Sort", "Smooth Sort", SmoothSort),
            "8": AlgorithmChoice("Tim Sort", "Tim Sort", TimSort),
            "9": AlgorithmChoice("Tree Sort", "Tree Sort", TreeSort),
        },
    ),
    "3": _Complexity(
        200,
        {
            "1": AlgorithmChoice(
                "Bogo Sort - O((n + 1)!) (Default Array Size = 5)", "Bogo Sort", BogoSort, 5
            ),
            "2": AlgorithmChoice(
                "Comb Sort - O(n^2 / 2^p) (Default Array Size = 150)", "Comb Sort", CombSort, 150
            ),
            "3": AlgorithmChoice(
                "Cycle Sort on [1..n] array - O(n) (Default Array Size = 750)",
                "Cycle Sort on [1..n] array",
                FancyCycleSort,
                750,
            ),
            "4": AlgorithmChoice(
                "Pigeonhole Sort - O(n + Range) (Default Array Size = 300)",
                "Pigeonhole Sort",
                PigeonholeSort,
                300,
            ),
            "5": AlgorithmChoice(
                "Radix Sort - O(d * (n + b)) (Default Array Size = 750)", "Radix Sort", RadixSort, 750
            ),
            "6": AlgorithmChoice(
                "Stooge Sort - O(n^2.7) (Default Array Size = 150)", "Stooge Sort", StoogeSort, 150
            ),
        },
    ),
}


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _clear_screen() -> None:
    _write(_CLEAR_SCREEN)


def _read_token() -> str:
    """Read the next whitespace-separated word from standard input."""
    while True:
        line = sys.stdin.readline()
        if not line:
            raise EOFError("standard input ended")
        words = line.split()
        if words:
            return words[0]


def handle_wrong_input(message: str) -> None:
    """Show ``message`` on a cleared screen for a moment."""
    _write(_HIDE_CURSOR)
    _clear_screen()
    sys.stderr.write(message)
    sys.stderr.flush()
    time.sleep(_WRONG_INPUT_PAUSE)
    _clear_screen()


def make_decision(message: str, options: str) -> str:
    """Ask until the answer is a single character from ``options`` and return it."""
    while True:
        _clear_screen()
        _write(_SHOW_CURSOR)
        _write(f"{message}\n-> ")
        answer = _read_token()
        if len(answer) != 1 or answer not in options:
            handle_wrong_input(_WRONG_INPUT)
            continue
        return answer


def _ask_size() -> int:
    _clear_screen()
    _write(_SIZE_PROMPT)
    try:
        return int(_read_token())
    except ValueError:
        return 0


def _choose_algorithms(visualizer: Visualizer, group: _Complexity, changed_size: bool, order: ArrayOrder) -> None:
    while True:
        if not changed_size:
            visualizer.resize(group.default_size)
        key = make_decision(group.menu, group.options)
        if key == "0":
            return
        choice = group.choices[key]
        if not changed_size and choice.default_size is not None:
            visualizer.resize(choice.default_size)
        visualizer.open_window(choice.title)
        visualizer.algorithm = choice.factory()
        visualizer.run(order)


def _session(visualizer: Visualizer) -> None:
    changed_size = False
    order = ArrayOrder.RANDOM
    while True:
        complexity = make_decision(_MAIN_MENU, "012345")
        if complexity == "0":
            _clear_screen()
            return
        if complexity == "4":
            size = _ask_size()
            if size < 0:
                handle_wrong_input(_WRONG_INPUT)
            elif size != 0:
                visualizer.resize(size)
                changed_size = True
        elif complexity == "5":
            _clear_screen()
            answer = make_decision(_ORDER_MENU, "012345")
            order = ArrayOrder.RANDOM if answer == "0" else ArrayOrder(answer)
        else:
            _choose_algorithms(visualizer, _COMPLEXITIES[complexity], changed_size, order)


def start() -> None:
    """Run the menus until the user chooses to exit."""
    _session(Visualizer())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sortviz",
        description="Watch sorting algorithms work on an array of bars.",
    )
    parser.parse_args(argv)
    try:
        start()
    except (EOFError, KeyboardInterrupt):
        _write(_SHOW_CURSOR)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())