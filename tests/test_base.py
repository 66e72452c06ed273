import pytest

from sortviz.base import Bar, Color, RecordingWindow, Sort, layout_bars


class _NoOpSort(Sort):
    def sort(self, window, arr):
        self.draw(window, arr, 0, 1, 2)


def test_sort_is_abstract():
    with pytest.raises(TypeError):
        Sort()


def test_layout_empty_array_has_no_bars():
    assert layout_bars(1200, 800, []) == []


def test_layout_finished_is_all_green():
    bars = layout_bars(1200, 800, [3, 1, 2])
    assert len(bars) == 3
    assert all(bar.color is Color.GREEN for bar in bars)


def test_layout_highlight_colours():
    bars = layout_bars(1200, 800, [4, 3, 2, 1], active1=0, active2=1, pivot=3)
    assert [bar.color for bar in bars] == [Color.RED, Color.RED, Color.WHITE, Color.BLUE]


def test_pivot_wins_over_active():
    bars = layout_bars(1200, 800, [1, 2], active1=0, active2=1, pivot=0)
    assert bars[0].color is Color.BLUE
    assert bars[1].color is Color.RED


def test_bars_stand_on_the_bottom_edge():
    arr = [5, 2, 4, 1, 3]
    for bar in layout_bars(1000, 500, arr, pivot=0):
        assert bar.y + bar.height == pytest.approx(500)


def test_largest_value_fills_the_height():
    arr = [2, 5, 1, 4, 3]
    bars = layout_bars(1000, 500, arr, pivot=1)
    assert bars[1].height == pytest.approx(500)
    assert bars[1].y == pytest.approx(0)


def test_bars_are_evenly_spaced_with_a_gap():
    arr = [1, 2, 3, 4]
    bars = layout_bars(1200, 800, arr, active1=0)
    steps = [b.x - a.x for a, b in zip(bars, bars[1:])]
    assert steps == pytest.approx([steps[0]] * 3)
    assert bars[0].x == 0
    assert all(bar.width + 1 == pytest.approx(steps[0]) for bar in bars)


def test_heights_grow_with_values():
    arr = [3, 1, 2]
    bars = layout_bars(900, 600, arr, pivot=0)
    order = sorted(range(3), key=lambda i: bars[i].height)
    assert [arr[i] for i in order] == [1, 2, 3]


def test_draw_with_highlights_displays_one_frame():
    window = RecordingWindow()
    _NoOpSort().sort(window, [3, 1, 2])
    assert window.background is Color.BLACK
    assert len(window.frames) == 1
    assert [bar.color for bar in window.frames[0]] == [Color.RED, Color.RED, Color.BLUE]


def test_finished_draw_is_not_displayed():
    window = RecordingWindow(width=300, height=300)
    _NoOpSort().draw(window, [2, 1, 3])
    assert window.frames == []
    assert len(window.canvas) == 3
    assert all(bar.color is Color.GREEN for bar in window.canvas)


def test_clear_resets_canvas():
    window = RecordingWindow()
    window.draw_bar(Bar(0, 0, 1, 1, Color.WHITE))
    window.clear(Color.BLACK)
    assert window.canvas == []
    window.display()
    assert window.frames == [()]


def test_color_rgb_matches_value():
    window = RecordingWindow()
    _NoOpSort().sort(window, [3, 1, 2])
    assert window.background.rgb == (0, 0, 0)
    first = window.frames[0][0]
    assert first.color.rgb == first.color.value