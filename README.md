# sortviz

sortviz shows how sorting algorithms work. It draws the array as a row of
vertical bars in a pygame window. While a sort runs, the bars it is comparing
are red and its pivot or cursor is blue. When the sort finishes, every bar
turns green and the window shows the elapsed time in seconds.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Usage

```
sortviz
```

This opens a text menu in the terminal. Type the number of an entry and press
Enter. Any other answer shows "Wrong input. Try again." for a moment and asks
again.

- `[1]` O(n²) algorithms, with 100 elements by default: Bubble, Cocktail,
  Cycle, Gnome, Insertion, Odd-Even, Pancake, Selection and Selection
  (exchange variation).
- `[2]` O(n log n) algorithms, with 300 elements by default: Heap, Intro,
  Merge, Quick (Lomuto and Hoare partition schemes), Shell, Smooth, Tim and
  Tree sort.
- `[3]` Other complexities: Bogo (5 elements), Comb (150), Cycle sort on a
  `[1..n]` array (750), Pigeonhole (300), Radix (750) and Stooge sort (150).
- `[4]` Sets the array size. `0` goes back without changing it. Once you set a
  size, it replaces all of the defaults above.
- `[5]` Sets the initial order of the array: random shuffle (the default),
  partially sorted, nearly sorted, decreasing or increasing.
- `[0]` Exits.

The array always holds the values 1 to n, arranged in the chosen order.
To close a finished sort and return to the algorithm menu, close the window or
press Escape.

The command exits with status 1 if standard input ends or you press Ctrl-C,
and with status 0 when you choose `[0]`.

## Using the algorithms as a library

Each algorithm is a subclass of `sortviz.base.Sort`. Its `sort(window, arr)`
method sorts a list in place and draws each step on the window you pass in.
The algorithms live in three modules:

- `sortviz.quadratic`: `BubbleSort`, `CocktailSort`, `CycleSort`, `GnomeSort`,
  `InsertionSort`, `OddEvenSort`, `PancakeSort`, `SelectionSort`,
  `SelectionSortExchange`.
- `sortviz.nlogn`: `HeapSort`, `IntroSort`, `MergeSort`, `QuickSortLomuto`,
  `QuickSortHoare`, `ShellSort`, `SmoothSort`, `TimSort`, `TreeSort`.
- `sortviz.other`: `BogoSort`, `CombSort`, `FancyCycleSort`, `PigeonholeSort`,
  `RadixSort`, `StoogeSort`.

`RecordingWindow` does not open anything on screen. It keeps every displayed
frame in its `frames` list, so you can run a sort without a display:

```python
from sortviz.base import RecordingWindow
from sortviz.nlogn import MergeSort

data = [5, 3, 1, 4, 2]
window = RecordingWindow()
MergeSort().sort(window, data)
assert data == [1, 2, 3, 4, 5]
print(len(window.frames), "frames")
```

Some algorithms have limits:

- `FancyCycleSort` raises `ValueError` unless every value lies between 1 and
  the length of the list.
- `RadixSort` raises `ValueError` for negative values.
- `TreeSort` keeps each distinct value once. With duplicates, only the leading
  positions are rewritten and the rest of the list is left as it was.
- `BogoSort` and the quick sorts take an optional `random.Random` through
  `rng`, and `BogoSort` pauses `delay` seconds (0.05 by default) after each
  shuffle.

`sortviz.base.layout_bars(width, height, arr, ...)` returns the `Bar`
rectangles for one frame without drawing them, and
`sortviz.visualizer.initial_array(size, order, rng)` builds a starting array
for any `ArrayOrder`.