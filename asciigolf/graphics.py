"""Frame composition: borders, the flag, the power/angle bar and static screens."""

from __future__ import annotations

from asciigolf.frames import (
    LINE_WIDTH,
    QUIT_SCREEN_TEXT,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    START_SCREEN_TEXT,
)
from asciigolf.terminal import clear_console

FLAG_OFFSET = 24
"""Column of the flag pole when the flag position is zero."""

FLAG_HEIGHT = 6
"""Rows covered by the flag pole, counted up from the ground."""

FLAG_BANNER = "<<18"
"""Pennant drawn to the left of the top of the pole."""

BAR_SIZE = 20
"""Number of steps in each of the power and angle bars."""


def replace_first(text: str, old: str, new: str) -> str:
    """Replace the first occurrence of ``old`` in ``text`` with ``new``."""
    return text.replace(old, new, 1)


def put_border(text: str) -> str:
    """Frame ``text`` with side walls, a blank top row and a bottom edge."""
    result = ["|" + " " * (SCREEN_WIDTH - 2) + " |\n"]
    result.extend(f"|{line}|\n" for line in text.split("\n"))
    result.append("+" + "-" * (SCREEN_WIDTH - 2) + "-+\n")
    return "".join(result)


def put_flag(frame: str, flag_x: int) -> str:
    """Draw the flag with its pennant and the hole at column ``flag_x``."""
    column = FLAG_OFFSET + flag_x
    if column - len(FLAG_BANNER) < 0 or column >= LINE_WIDTH:
        raise ValueError(f"flag position {flag_x} does not fit on the screen")

    cells = list(frame)
    top_row = SCREEN_HEIGHT - FLAG_HEIGHT
    banner_start = top_row * SCREEN_WIDTH + column - len(FLAG_BANNER)
    cells[banner_start : banner_start + len(FLAG_BANNER)] = FLAG_BANNER

    for row in range(top_row, SCREEN_HEIGHT):
        cells[row * SCREEN_WIDTH + column] = "|"
    cells[(SCREEN_HEIGHT - 1) * SCREEN_WIDTH + column] = " "

    return "".join(cells)


def frame_index(x: int, y: int) -> int:
    """Map field coordinates, with ``y`` counted up from the bottom, to a frame index."""
    return (SCREEN_HEIGHT - y) * SCREEN_WIDTH + x


def quit_screen() -> None:
    """Clear the console and show the farewell screen."""
    clear_console()
    print(QUIT_SCREEN_TEXT)


def start_screen() -> None:
    """Clear the console and show the welcome screen."""
    clear_console()
    print(START_SCREEN_TEXT)


class PowerAngleBar:
    """The player's choice of shot power and launch angle, shown as two bars."""

    MIN_POWER = 10.0
    MAX_POWER = 25.0
    MIN_ANGLE = 15.0
    MAX_ANGLE = 80.0

    def __init__(self) -> None:
        self.power = self.MIN_POWER
        self.angle = self.MIN_ANGLE
        self.power_level = 0
        self.angle_level = 0

    @property
    def _power_step(self) -> float:
        return (self.MAX_POWER - self.MIN_POWER) / BAR_SIZE

    @property
    def _angle_step(self) -> float:
        return (self.MAX_ANGLE - self.MIN_ANGLE) / BAR_SIZE

    def increase_power(self) -> None:
        """Raise the power by one step, stopping at the maximum."""
        if self.power_level + 1 > BAR_SIZE:
            self.power_level = BAR_SIZE
            self.power = self.MAX_POWER
        else:
            self.power_level += 1
            self.power += self._power_step

    def increase_angle(self) -> None:
        """Raise the angle by one step, stopping at the maximum."""
        if self.angle_level + 1 > BAR_SIZE:
            self.angle_level = BAR_SIZE
            self.angle = self.MAX_ANGLE
        else:
            self.angle_level += 1
            self.angle += self._angle_step

    def decrease_power(self) -> None:
        """Lower the power by one step, stopping at the minimum."""
        if self.power_level - 1 < 0:
            self.power_level = 0
            self.power = self.MIN_POWER
        else:
            self.power_level -= 1
            self.power -= self._power_step

    def decrease_angle(self) -> None:
        """Lower the angle by one step, stopping at the minimum."""
        if self.angle_level - 1 < 0:
            self.angle_level = 0
            self.angle = self.MIN_ANGLE
        else:
            self.angle_level -= 1
            self.angle -= self._angle_step

    def render(self) -> str:
        """Return the two-line status bar with both gauges and the key help."""
        power_gauge = "#" * self.power_level + "~" * (BAR_SIZE - self.power_level)
        angle_gauge = "#" * self.angle_level + "~" * (BAR_SIZE - self.angle_level)
        status = (
            f"| power: [{power_gauge}] |"
            f" angle: [{angle_gauge}]"
            " a/d to change power w/s to change angle  n to start |\n"
        )
        edge = "+" + "-" * (BAR_SIZE + 75 + BAR_SIZE) + "+\n"
        return status + edge