"""Drawing primitives and the base class shared by every sorting algorithm."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from enum import Enum
from typing import MutableSequence, Protocol, Sequence


class Color(Enum):
    """Colours used to paint the bars."""

    BLACK = (0, 0, 0)
    WHITE = (255, 255, 255)
    RED = (255, 0, 0)
    GREEN = (0, 255, 0)
    BLUE = (0, 0, 255)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return self.value


@dataclass(frozen=True)
class Bar:
    """One rectangle of the chart, in window coordinates."""

    x: float
    y: float
    width: float
    height: float
    color: Color


class Window(Protocol):
    """Anything an algorithm can draw its progress on."""

    width: int
    height: int

    def clear(self, color: Color) -> None: ...

    def draw_bar(self, bar: Bar) -> None: ...

    def display(self) -> None: ...


@dataclass
class RecordingWindow:
    """A window that keeps every displayed frame in memory instead of showing it."""

    width: int = 1200
    height: int = 800
    background: Color | None = None
    canvas: list[Bar] = field(default_factory=list)
    frames: list[tuple[Bar, ...]] = field(default_factory=list)

    def clear(self, color: Color) -> None:
        self.background = color
        self.canvas.clear()

    def draw_bar(self, bar: Bar) -> None:
        self.canvas.append(bar)

    def display(self) -> None:
        self.frames.append(tuple(self.canvas))


def _is_finished(active1: int | None, active2: int | None, pivot: int | None) -> bool:
    return active1 is None and active2 is None and pivot is None


def layout_bars(
    width: float,
    height: float,
    arr: Sequence[int],
    active1: int | None = None,
    active2: int | None = None,
    pivot: int | None = None,
) -> list[Bar]:
    """Lay out one bar per element of ``arr`` in a window of the given size.

    With no highlighted index at all every bar is green (the finished chart).
    Otherwise the pivot bar is blue, the two active bars red and the rest white.
    """
    count = len(arr)
    if count == 0:
        return []
    step = width / count
    ratio = height / count
    finished = _is_finished(active1, active2, pivot)
    bars = []
    for index, value in enumerate(arr):
        if finished:
            color = Color.GREEN
        elif index == pivot:
            color = Color.BLUE
        elif index == active1 or index == active2:
            color = Color.RED
        else:
            color = Color.WHITE
        bar_height = value * ratio
        bars.append(Bar(index * step, height - bar_height, step - 1, bar_height, color))
    return bars


class Sort(abc.ABC):
    """A sorting algorithm that draws each step of its work on a window."""

    @abc.abstractmethod
    def sort(self, window: Window, arr: MutableSequence[int]) -> None:
        """Sort ``arr`` in place, drawing progress on ``window``."""

    def draw(
        self,
        window: Window,
        arr: Sequence[int],
        active1: int | None = None,
        active2: int | None = None,
        pivot: int | None = None,
    ) -> None:
        """Paint the array; a frame with highlights is displayed at once.

        The finished chart (no highlights) is painted but left for the caller
        to display, so that it can add text on top of it first.
        """
        window.clear(Color.BLACK)
        for bar in layout_bars(window.width, window.height, arr, active1, active2, pivot):
            window.draw_bar(bar)
        if not _is_finished(active1, active2, pivot):
            window.display()