"""Step-by-step ball flight simulation over the golf field."""

from __future__ import annotations

import math

FIELD_WIDTH = 102
FIELD_HEIGHT = 6

HOLE_OFFSET = 13
"""Distance from the flag position to the hole along the field."""

HOLE_MARKER = (-32768, -32768)
"""Appended to a trajectory when the ball drops into the hole."""


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def calculate_trajectory(
    v0: float,
    angle_deg: float,
    flag_x: int,
    r: float = 0.7,
    g: float = 9.8,
    dt: float = 0.1,
    threshold: float = 0.5,
    friction: float = 0.98,
    max_steps: int = 1500,
) -> list[tuple[int, int]]:
    """Simulate a shot and return the ball's rounded (x, y) positions.

    The ball flies, bounces off the ground and the far wall, then rolls.
    If it reaches the hole, the list ends with the hole position followed
    by HOLE_MARKER.
    """
    result: list[tuple[int, int]] = []

    theta = math.radians(angle_deg)
    vx = v0 * math.cos(theta)
    vy = v0 * math.sin(theta)
    x = 0.0
    y = 0.0
    rolling = False

    for _ in range(max_steps):
        result.append((_round(x), _round(y)))

        if rolling:
            x += vx * dt
            y = 0.0
            vx *= friction * 0.8
            if abs(vx) < 0.1:
                break
            if x >= FIELD_WIDTH:
                x = FIELD_WIDTH - 1e-6
                vx = -vx * r
        else:
            x += vx * dt
            y += vy * dt
            vy -= g * dt

            if y < 0.0:
                y = 0.0
                vy = -vy * r
                vx *= r

            if x < 0.0:
                x = 0.0
                vx = -vx * r
            elif x >= FIELD_WIDTH:
                x = FIELD_WIDTH - 1e-6
                vx = -vx * r

            if abs(vy) < threshold:
                vy = 0.0
            if abs(vy) < 3.8 and y <= 0.5:
                vy = 0.0
                rolling = True

        if _round(x) == flag_x + HOLE_OFFSET and y <= 0.0:
            result.append((_round(x), _round(y)))
            result.append(HOLE_MARKER)
            break

        if y <= 0.0 and abs(vx) <= 1 and abs(vy) <= 1:
            break

    return result