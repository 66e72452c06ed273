"""Builds the starting array, runs a sorting algorithm on it and shows the result."""

from __future__ import annotations

import os
import random
import time
from enum import Enum
from typing import Callable

from .base import Bar, Color, Sort, Window

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 800
FRAME_RATE = 144
DEFAULT_SIZE = 100


class ArrayOrder(str, Enum):
    """How the array is arranged before it is sorted."""

    RANDOM = "1"
    PARTIALLY_SORTED = "2"
    NEARLY_SORTED = "3"
    DECREASING = "4"
    INCREASING = "5"


def initial_array(size: int, order: ArrayOrder | str, rng: random.Random | None = None) -> list[int]:
    """Return the values 1..size arranged in the given order."""
    if size < 0:
        raise ValueError(f"array size must not be negative, got {size}")
    order = ArrayOrder(order)
    rng = rng if rng is not None else random.Random()
    arr = list(range(1, size + 1))
    if order is ArrayOrder.RANDOM:
        rng.shuffle(arr)
    elif order is ArrayOrder.PARTIALLY_SORTED:
        rng.shuffle(arr)
        prefix = rng.randint(size // 4, size // 2)
        # The values are 1..size, so the smallest `prefix` of them are 1..prefix.
        arr = list(range(1, prefix + 1)) + [value for value in arr if value > prefix]
    elif order is ArrayOrder.NEARLY_SORTED:
        start = rng.randint(size // 2, 3 * size // 4)
        tail = arr[start:]
        rng.shuffle(tail)
        arr[start:] = tail
    elif order is ArrayOrder.DECREASING:
        arr.reverse()
    return arr


class PygameWindow:
    """A pygame window that shows the chart of bars."""

    def __init__(
        self,
        title: str,
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
        frame_rate: int = FRAME_RATE,
    ) -> None:
        pygame.init()
        self.width = width
        self.height = height
        self._surface = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self._clock = pygame.time.Clock()
        self._frame_rate = frame_rate
        self._font: pygame.font.Font | None = None
        self.is_open = True

    def clear(self, color: Color) -> None:
        self._surface.fill(color.rgb)

    def draw_bar(self, bar: Bar) -> None:
        rect = pygame.Rect(
            round(bar.x),
            round(bar.y),
            max(1, round(bar.width)),
            max(0, round(bar.height)),
        )
        pygame.draw.rect(self._surface, bar.color.rgb, rect)

    def draw_text(self, text: str) -> None:
        """Write ``text`` in white at the top left corner."""
        if self._font is None:
            self._font = pygame.font.SysFont("arial", 24)
        self._surface.blit(self._font.render(text, True, Color.WHITE.rgb), (0, 0))

    def display(self) -> None:
        pygame.event.pump()
        pygame.display.flip()
        self._clock.tick(self._frame_rate)

    def wait_closed(self) -> None:
        """Block until the window is closed or Escape is pressed."""
        while self.is_open:
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    self.close()
                    break
            else:
                self._clock.tick(self._frame_rate)

    def close(self) -> None:
        if self.is_open:
            pygame.display.quit()
            self.is_open = False


WindowFactory = Callable[[str], Window]


class Visualizer:
    """Owns the array, the chosen algorithm and the window it is drawn on."""

    def __init__(
        self,
        window_factory: WindowFactory = PygameWindow,
        rng: random.Random | None = None,
        pause: float = 1.0,
    ) -> None:
        self.arr: list[int] = [0] * DEFAULT_SIZE
        self.algorithm: Sort | None = None
        self.window: Window | None = None
        self.rng = rng if rng is not None else random.Random()
        self.pause = pause
        self._window_factory = window_factory

    def open_window(self, title: str) -> Window:
        """Replace the current window with a new one carrying ``title``."""
        self._close_window()
        self.window = self._window_factory(title)
        return self.window

    def resize(self, size: int) -> None:
        """Change the number of elements that will be sorted."""
        if size < 0:
            raise ValueError(f"array size must not be negative, got {size}")
        current = len(self.arr)
        if size <= current:
            del self.arr[size:]
        else:
            self.arr.extend([0] * (size - current))

    def perform_sorting(self, order: ArrayOrder | str) -> float:
        """Fill the array in ``order``, sort it while drawing, and return the seconds taken."""
        if self.algorithm is None:
            raise RuntimeError("no sorting algorithm has been chosen")
        if self.window is None:
            raise RuntimeError("no window has been opened")
        self.arr[:] = initial_array(len(self.arr), order, self.rng)
        started = time.perf_counter()
        self.algorithm.sort(self.window, self.arr)
        elapsed = time.perf_counter() - started
        self.algorithm.draw(self.window, self.arr)
        draw_text = getattr(self.window, "draw_text", None)
        if draw_text is not None:
            draw_text(f"Elapsed Time: {elapsed:f}")
        self.window.display()
        if self.pause > 0:
            time.sleep(self.pause)
        return elapsed

    def run(self, order: ArrayOrder | str) -> float:
        """Sort once, then keep the result on screen until the window is closed."""
        elapsed = self.perform_sorting(order)
        wait_closed = getattr(self.window, "wait_closed", None)
        if wait_closed is not None:
            wait_closed()
        return elapsed

    def _close_window(self) -> None:
        close = getattr(self.window, "close", None)
        if close is not None:
            close()
        self.window = None