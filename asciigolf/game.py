"""The interactive game loop: start screen, aiming, swing animation and ball flight."""

from __future__ import annotations

import argparse
import random
import sys
import time
from dataclasses import dataclass
from typing import Callable

from asciigolf.frames import FRAMES, MISS_TEXT, QUIT_SCREEN_TEXT, START_SCREEN_TEXT
from asciigolf.graphics import (
    PowerAngleBar,
    frame_index,
    put_border,
    put_flag,
    replace_first,
)
from asciigolf.terminal import clear_console, get_char_nonblocking
from asciigolf.trajectory import HOLE_MARKER, calculate_trajectory

FLAG_RANGE = (0, 80)
"""Inclusive range the flag position is drawn from."""

WIN_TEXT = "WON !!!"

AIM_FRAME = 10
"""Animation frame at which the shot is computed."""

HIT_FRAME = 13
"""Animation frame at which the ball is struck and flies."""

BALL_OFFSET = (11, 2)
"""Screen offset of the ball's launch point."""

POLL_DELAY = 0.01
BALL_DELAY = 0.05
OFFSCREEN_DELAY = 0.03
FRAME_DELAY = 0.1


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


@dataclass
class _Console:
    """The terminal operations the game needs."""

    read_key: Callable[[], str] = get_char_nonblocking
    clear: Callable[[], None] = clear_console
    write: Callable[[str], None] = _write_stdout
    sleep: Callable[[float], None] = time.sleep


_BAR_KEYS = {
    "d": PowerAngleBar.increase_power,
    "a": PowerAngleBar.decrease_power,
    "w": PowerAngleBar.increase_angle,
    "s": PowerAngleBar.decrease_angle,
}


def _draw(console: _Console, frame: str, bar: PowerAngleBar) -> None:
    console.write(put_border(frame))
    console.write(bar.render())


def _wait_for_start(console: _Console) -> bool:
    """Show the welcome screen; return True to play, False to quit."""
    console.clear()
    console.write(START_SCREEN_TEXT + "\n")
    while True:
        key = console.read_key()
        if key in ("s", "S"):
            return True
        if key in ("q", "Q"):
            return False
        console.sleep(POLL_DELAY)


def _aim(console: _Console, bar: PowerAngleBar, flag_x: int) -> bool:
    """Let the player set power and angle; return False if they quit."""
    redraw = True
    while True:
        if redraw:
            console.clear()
            _draw(console, put_flag(FRAMES[0], flag_x), bar)
            redraw = False
        key = console.read_key()
        if key in ("n", "N"):
            return True
        if key in ("q", "Q"):
            return False
        action = _BAR_KEYS.get(key)
        if action is not None:
            action(bar)
            redraw = True
        console.sleep(POLL_DELAY)


def _play(rng: random.Random, console: _Console) -> None:
    bar = PowerAngleBar()
    flag_x = rng.randint(*FLAG_RANGE)

    playing = _wait_for_start(console)

    while playing:
        won = False
        trajectory: list[tuple[int, int]] = []

        playing = _aim(console, bar, flag_x)
        if not playing:
            break

        for frame_no, frame in enumerate(FRAMES):
            key = console.read_key()
            if key in ("n", "N"):
                break
            if key in ("q", "Q"):
                playing = False
                break

            if frame_no == AIM_FRAME:
                trajectory = calculate_trajectory(bar.power, bar.angle, flag_x)

            if frame_no == HIT_FRAME:
                cells = list(put_flag(frame, flag_x))
                for point in trajectory:
                    console.clear()
                    if point == HOLE_MARKER:
                        won = True
                        flag_x = rng.randint(*FLAG_RANGE)
                        break

                    index = frame_index(point[0] + BALL_OFFSET[0], point[1] + BALL_OFFSET[1])
                    if 0 < index < len(frame):
                        cells[index] = "o"
                        _draw(console, "".join(cells), bar)
                        cells[index] = "."
                        console.sleep(BALL_DELAY)
                    else:
                        _draw(console, "".join(cells), bar)
                        console.sleep(OFFSCREEN_DELAY)

                    key = console.read_key()
                    if key in ("n", "N"):
                        break
                    if key in ("q", "Q"):
                        playing = False
                        break

            console.clear()
            shown = replace_first(frame, MISS_TEXT, WIN_TEXT) if won else frame
            _draw(console, put_flag(shown, flag_x), bar)
            console.sleep(FRAME_DELAY)

    console.clear()
    console.write(QUIT_SCREEN_TEXT + "\n")


def run(rng: random.Random) -> None:
    """Play the game on the real terminal, drawing flag positions from ``rng``."""
    _play(rng, _Console())


def main(argv: list[str] | None = None) -> int:
    """Command entry point."""
    parser = argparse.ArgumentParser(
        prog="asciigolf",
        description="Play golf in the terminal: a/d set power, w/s set angle, n swings, q quits.",
    )
    parser.parse_args(argv)
    run(random.Random())
    return 0


if __name__ == "__main__":
    sys.exit(main())