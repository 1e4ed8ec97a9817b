# sortviz

sortviz draws a list of random numbers as coloured bars. It then shows a
sorting algorithm at work on them, one step at a time. If you turn sound on,
most steps also play a short tone. The pitch rises with the value being
touched, from 400 Hz for the smallest value to 1600 Hz for the largest.

Five algorithms are available:

1. Bubble sort
2. Selection sort
3. Insertion sort
4. Merge sort
5. Quick sort (last element as pivot)

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
sortviz
```

The program asks you three questions on the terminal. It asks again until each answer is valid:

- whether you want sound (`y` turns it on; any other answer turns it off)
- how many bars to draw, from 1 up to the window width of 1920
- which algorithm to run (1–5)

If the input ends before the bar count and the algorithm have been given, the
program stops with an error message and exit status 1.

The program fills the bars with random values from 1 up to the number of bars.
It then opens a 1920×1080 window and sorts them:

- **red** bars are being compared or moved
- **green** bars are marked as sorted
- **blue** bars are all the others

When the sort is done, every bar turns green. Press **Esc** or close the window to quit.

## Using it from Python

Each algorithm is a generator. It sorts a list in place and yields one
`sortviz.canvas.Frame` for each step it would draw:

```python
from sortviz.bubble import bubble_sort_steps

data = [3, 1, 2]
for frame in bubble_sort_steps(data):
    print(frame.values, frame.highlight1, frame.highlight2, frame.sorted_until)
print(data)  # [1, 2, 3]
```

The generators are `sortviz.bubble.bubble_sort_steps`,
`sortviz.selection.selection_sort_steps`,
`sortviz.insertion.insertion_sort_steps`, `sortviz.merge.merge_sort_steps` and
`sortviz.quick.quick_sort_steps`. Selection sort and merge sort raise
`ValueError` for an empty list. Quick sort yields nothing for an empty list.

The building blocks are exposed too:

- `sortviz.merge.merge(array, left, mid, right)` merges two sorted runs in place and yields frames.
- `sortviz.quick.partition(array, low, high)` yields frames. The generator's
  return value is the pivot's final index.

A `Frame` holds the following:

- `values`: a snapshot of the array
- `highlight1` and `highlight2`: up to two highlighted indices
- `sorted_until`: the index from which bars are drawn green
- `tone` and `tone_ms`: the value to sound and the tone's length; `tone` is `None` for a silent step

`sortviz.canvas` has the drawing and sound helpers:

- `draw_bars(array, bar_width, highlight1, highlight2, sorted_until)` returns a
  1080×1920 `numpy` array of `0xRRGGBB` pixels. `Frame.render(bar_width)` does
  the same for a frame.
- `tone_frequency(value, num_bars)` maps a value onto 400–1600 Hz.
- `sine_wave(frequency, duration_ms, sample_rate, amplitude)` returns float32 samples.

`sortviz.app` has the interactive front end:

- `read_settings(stdin, stdout)` asks the questions and returns a `Settings`.
- `random_array(num_bars, rng)` builds the random input.
- `run(settings, array)` opens the window and animates the sort.
- The available algorithms are listed in the `Algorithm` enum.