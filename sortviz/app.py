"""Interactive front end: ask for settings, then animate the chosen sort."""

from __future__ import annotations

import argparse
import os
import random
import re
import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO

import numpy as np

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from sortviz.bubble import bubble_sort_steps  # noqa: E402
from sortviz.canvas import (  # noqa: E402
    DEFAULT_SAMPLE_RATE,
    HEIGHT,
    WIDTH,
    Frame,
    sine_wave,
    tone_frequency,
)
from sortviz.insertion import insertion_sort_steps  # noqa: E402
from sortviz.merge import merge_sort_steps  # noqa: E402
from sortviz.quick import quick_sort_steps  # noqa: E402
from sortviz.selection import selection_sort_steps  # noqa: E402

WINDOW_TITLE = "Sorting Algorithm Visualizer - Press ESC to exit"
_NUMBER = re.compile(r"\+?[0-9]+")


class Algorithm(Enum):
    """The sorting algorithms on offer, valued by their menu number."""

    BUBBLE = 1
    SELECTION = 2
    INSERTION = 3
    MERGE = 4
    QUICK = 5


_LABELS: dict[Algorithm, str] = {
    Algorithm.BUBBLE: "Bubble Sort",
    Algorithm.SELECTION: "Selection Sort",
    Algorithm.INSERTION: "Insertion Sort",
    Algorithm.MERGE: "Merge Sort",
    Algorithm.QUICK: "Quick Sort",
}

_STEPS: dict[Algorithm, Callable[[list[int]], Iterator[Frame]]] = {
    Algorithm.BUBBLE: bubble_sort_steps,
    Algorithm.SELECTION: selection_sort_steps,
    Algorithm.INSERTION: insertion_sort_steps,
    Algorithm.MERGE: merge_sort_steps,
    Algorithm.QUICK: quick_sort_steps,
}


@dataclass(frozen=True)
class Settings:
    """The user's choices for one visualisation run."""

    use_sound: bool
    num_bars: int
    algorithm: Algorithm
    bar_width: int = field(init=False)

    def __post_init__(self) -> None:
        if not 0 < self.num_bars <= WIDTH:
            raise ValueError(f"number of bars must be between 1 and {WIDTH}")
        if not isinstance(self.algorithm, Algorithm):
            raise TypeError("algorithm must be an Algorithm")
        object.__setattr__(self, "bar_width", WIDTH // self.num_bars)


def _ask(stdin: TextIO, stdout: TextIO) -> str:
    line = stdin.readline()
    if not line:
        raise EOFError("input ended before all settings were given")
    return line.strip()


def _parse_number(text: str) -> int | None:
    return int(text) if _NUMBER.fullmatch(text) else None


def read_settings(stdin: TextIO, stdout: TextIO) -> Settings:
    """Prompt for sound, bar count and algorithm until each answer is valid.

    Raises EOFError if the input runs out before a valid bar count and
    algorithm have been read.
    """
    print("Do you want sound? (y/n)", file=stdout)
    use_sound = stdin.readline().strip().lower() == "y"

    while True:
        print(f"How many bars do you want? (e.g., 50-400, max {WIDTH})", file=stdout)
        num_bars = _parse_number(_ask(stdin, stdout))
        if num_bars is not None and 0 < num_bars <= WIDTH:
            break
        print(
            "Invalid input. Please enter a positive integer less than or "
            f"equal to {WIDTH}.",
            file=stdout,
        )

    valid = {algorithm.value: algorithm for algorithm in Algorithm}
    while True:
        print("Which sorting algorithm?", file=stdout)
        for algorithm in Algorithm:
            print(f"  {algorithm.value}: {_LABELS[algorithm]}", file=stdout)
        choice = _parse_number(_ask(stdin, stdout))
        if choice in valid:
            break
        print("Invalid choice. Please enter 1, 2, 3, 4, or 5.", file=stdout)

    return Settings(use_sound, num_bars, valid[choice])


def random_array(num_bars: int, rng: random.Random | None = None) -> list[int]:
    """Return ``num_bars`` random values, each between 1 and ``num_bars``."""
    if num_bars < 1:
        raise ValueError("number of bars must be positive")
    rng = rng if rng is not None else random.Random()
    return [rng.randint(1, num_bars) for _ in range(num_bars)]


def _frames(settings: Settings, array: list[int]) -> Iterator[Frame]:
    """Yield the initial frame, the sort's frames and the all-green final one."""
    yield Frame(tuple(array))
    yield from _STEPS[settings.algorithm](array)
    yield Frame(tuple(array), None, None, 0)


def _show(screen: pygame.Surface, frame: Frame, bar_width: int) -> None:
    buffer = frame.render(bar_width)
    rgb = np.empty((HEIGHT, WIDTH, 3), dtype=np.uint8)
    rgb[..., 0] = (buffer >> 16) & 0xFF
    rgb[..., 1] = (buffer >> 8) & 0xFF
    rgb[..., 2] = buffer & 0xFF
    image = pygame.image.frombuffer(rgb.tobytes(), (WIDTH, HEIGHT), "RGB")
    screen.blit(image, (0, 0))
    pygame.display.flip()
    pygame.event.pump()


def _play_tone(value: int, duration_ms: int, num_bars: int) -> None:
    """Play a tone for ``value`` and block until it has finished."""
    mixer_rate, _, channels = pygame.mixer.get_init()
    samples = sine_wave(tone_frequency(value, num_bars), duration_ms, mixer_rate)
    pcm = (samples * 32767).astype(np.int16)
    if channels > 1:
        pcm = np.repeat(pcm[:, None], channels, axis=1)
    if pcm.size == 0:
        return
    channel = pygame.mixer.Sound(buffer=pcm.tobytes()).play()
    while channel is not None and channel.get_busy():
        pygame.time.wait(1)


def _wait_for_exit(screen: pygame.Surface) -> None:
    clock = pygame.time.Clock()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return
        if pygame.key.get_pressed()[pygame.K_ESCAPE]:
            return
        pygame.display.flip()
        clock.tick(60)


def run(settings: Settings, array: list[int]) -> None:
    """Open a window, animate sorting ``array`` in place and wait for ESC."""
    pygame.display.init()
    try:
        if settings.use_sound:
            pygame.mixer.init(frequency=DEFAULT_SAMPLE_RATE, size=-16, channels=1)
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)

        frames = _frames(settings, array)
        _show(screen, next(frames), settings.bar_width)
        print(f"Starting {_LABELS[settings.algorithm]} visualization...")
        final: Frame | None = None
        for frame in frames:
            if final is not None:
                if settings.use_sound and final.tone is not None:
                    _play_tone(final.tone, final.tone_ms, settings.num_bars)
                _show(screen, final, settings.bar_width)
            final = frame
        print("Sorting visualization finished.")
        if final is not None:
            _show(screen, final, settings.bar_width)
        _wait_for_exit(screen)
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Run the interactive visualiser."""
    parser = argparse.ArgumentParser(
        prog="sortviz",
        description="Visualise a sorting algorithm as animated bars.",
    )
    parser.parse_args(argv)
    try:
        settings = read_settings(sys.stdin, sys.stdout)
    except EOFError as error:
        print(f"sortviz: {error}", file=sys.stderr)
        return 1
    array = random_array(settings.num_bars)
    run(settings, array)
    return 0


if __name__ == "__main__":
    sys.exit(main())