import io
import random
from unittest.mock import patch

import pytest

from sortviz.base import RecordingWindow, Sort
from sortviz.interface import (
    _COMPLEXITIES,
    AlgorithmChoice,
    handle_wrong_input,
    main,
    make_decision,
    start,
)
from sortviz.visualizer import ArrayOrder, Visualizer


@pytest.fixture
def feed(monkeypatch):
    def _feed(text):
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

    return _feed


@patch("time.sleep")
def test_make_decision_accepts_valid_option(sleep, feed):
    feed("3\n")
    assert make_decision("pick", "0123") == "3"
    sleep.assert_not_called()


@patch("time.sleep")
def test_make_decision_retries_after_wrong_input(sleep, feed, capsys):
    feed("x\n12\n\n2\n")
    assert make_decision("pick", "012") == "2"
    captured = capsys.readouterr()
    assert captured.err.count("Wrong input. Try again.\n") == 2
    assert "pick\n-> " in captured.out
    assert sleep.call_count == 2


@patch("time.sleep")
def test_make_decision_takes_first_word(sleep, feed):
    feed("  1 extra words\n")
    assert make_decision("pick", "01") == "1"


def test_make_decision_raises_at_end_of_input(feed):
    feed("")
    with pytest.raises(EOFError):
        make_decision("pick", "01")


@patch("time.sleep")
def test_handle_wrong_input_writes_message(sleep, capsys):
    handle_wrong_input("bad choice\n")
    assert capsys.readouterr().err == "bad choice\n"
    sleep.assert_called_once_with(0.75)


def test_start_exits_on_zero(feed, capsys):
    feed("0\n")
    start()
    assert "< Select complexity >" in capsys.readouterr().out


def test_start_changes_size_then_exits(feed, capsys):
    feed("4\n50\n0\n")
    start()
    out = capsys.readouterr().out
    assert "Enter array size (0 to go back): " in out
    assert out.count("< Select complexity >") == 2


def test_start_order_menu_then_exits(feed, capsys):
    feed("5\n3\n0\n")
    start()
    out = capsys.readouterr().out
    assert "< Select initial order >" in out


def test_start_algorithm_menu_go_back(feed, capsys):
    feed("2\n0\n0\n")
    start()
    out = capsys.readouterr().out
    assert "Tim Sort" in out
    assert out.count("< Select complexity >") == 2


def test_main_returns_zero_on_exit(feed):
    feed("0\n")
    assert main([]) == 0


def test_main_returns_one_when_input_ends(feed):
    feed("")
    assert main([]) == 1


def test_menu_options_match_choices():
    for group in _COMPLEXITIES.values():
        assert group.options == "0" + "".join(group.choices)
        for key, choice in group.choices.items():
            assert f"[{key}] {choice.label}\n" in group.menu


def test_algorithm_choice_builds_sort():
    choice = AlgorithmChoice("Bubble Sort", "Bubble Sort", _COMPLEXITIES["1"].choices["1"].factory)
    assert isinstance(choice.factory(), Sort)
    assert choice.default_size is None


@patch("time.sleep")
def test_every_menu_algorithm_sorts(sleep):
    for group in _COMPLEXITIES.values():
        for choice in group.choices.values():
            visualizer = Visualizer(
                window_factory=lambda title: RecordingWindow(), rng=random.Random(5), pause=0
            )
            visualizer.resize(5)
            visualizer.open_window(choice.title)
            visualizer.algorithm = choice.factory()
            visualizer.run(ArrayOrder.RANDOM)
            assert visualizer.arr == [1, 2, 3, 4, 5], choice.title