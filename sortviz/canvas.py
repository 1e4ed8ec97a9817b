"""Frame rendering and tone synthesis shared by the sorting visualisations."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

WIDTH = 1920
HEIGHT = 1080

BLACK = 0x000000
RED = 0xFF0000
GREEN = 0x00FF00
BLUE = 0x0000FF

MIN_FREQUENCY = 400.0
MAX_FREQUENCY = 1600.0
DEFAULT_SAMPLE_RATE = 48_000
DEFAULT_AMPLITUDE = 0.15


@dataclass(frozen=True)
class Frame:
    """One step of a sort: a snapshot of the array and how to show it.

    ``tone`` is the bar value whose pitch accompanies this step, or None
    when the step is silent; ``tone_ms`` is that tone's length.
    """

    values: tuple[int, ...]
    highlight1: int | None = None
    highlight2: int | None = None
    sorted_until: int | None = None
    tone: int | None = None
    tone_ms: int = 0

    def render(self, bar_width: int) -> np.ndarray:
        """Draw this frame into a fresh pixel buffer."""
        return draw_bars(
            self.values,
            bar_width,
            self.highlight1,
            self.highlight2,
            self.sorted_until,
        )


def _bar_color(
    index: int,
    highlight1: int | None,
    highlight2: int | None,
    sorted_until: int | None,
) -> int:
    if index == highlight1 or index == highlight2:
        return RED
    if sorted_until is not None and index >= sorted_until:
        return GREEN
    return BLUE


def draw_bars(
    array: Sequence[int],
    bar_width: int,
    highlight1: int | None = None,
    highlight2: int | None = None,
    sorted_until: int | None = None,
) -> np.ndarray:
    """Render ``array`` as vertical bars on a black HEIGHT x WIDTH buffer.

    Bar heights are scaled so that a value equal to the array length fills
    the whole height. Highlighted bars are red, bars at or past
    ``sorted_until`` are green and all others blue. Bars reaching past the
    right edge are clipped.
    """
    buffer = np.zeros((HEIGHT, WIDTH), dtype=np.uint32)
    if len(array) == 0:
        return buffer
    if bar_width < 0:
        raise ValueError("bar width must not be negative")

    values = np.asarray(array, dtype=np.float32)
    scaled = values / np.float32(len(array)) * np.float32(HEIGHT)
    if np.any(scaled < 0):
        raise ValueError("bar values must not be negative")
    heights = scaled.astype(np.int64)
    if np.any(heights > HEIGHT):
        raise ValueError("bar value exceeds the number of bars")

    for index, height in enumerate(heights):
        x_start = index * bar_width
        if x_start >= WIDTH or height == 0:
            continue
        x_end = min(x_start + bar_width, WIDTH)
        color = _bar_color(index, highlight1, highlight2, sorted_until)
        buffer[HEIGHT - int(height):, x_start:x_end] = color
    return buffer


def tone_frequency(value: int, num_bars: int) -> float:
    """Map a bar value in 1..num_bars linearly onto 400..1600 Hz."""
    if value < 1:
        raise ValueError("bar values start at 1")
    if num_bars < 2:
        raise ValueError("at least two bars are needed to spread the pitch")
    normalized = (value - 1) / (num_bars - 1)
    return MIN_FREQUENCY + normalized * (MAX_FREQUENCY - MIN_FREQUENCY)


def sine_wave(
    frequency: float,
    duration_ms: int,
    sample_rate: int = DEFAULT_SAMPLE_RATE,
    amplitude: float = DEFAULT_AMPLITUDE,
) -> np.ndarray:
    """Return mono float32 samples of a sine tone of the given length."""
    if duration_ms < 0:
        raise ValueError("duration must not be negative")
    if sample_rate <= 0:
        raise ValueError("sample rate must be positive")
    count = sample_rate * duration_ms // 1000
    t = np.arange(count, dtype=np.float64) / sample_rate
    return (amplitude * np.sin(2.0 * math.pi * frequency * t)).astype(np.float32)