# asciigolf

A tiny golf game that runs in your terminal. A stick figure lines up a shot and
swings, and the ball flies across an ASCII course toward a flag. You choose how
hard and how steeply to hit it. The ball follows a simple physics model: it
falls under gravity, bounces off the ground and the far wall, rolls and slows
down until it stops or drops into the hole.

## Installing

```
pip install .
```

## Playing

```
asciigolf
```

The command takes no options apart from `--help`.

The start screen waits for a key:

- `s` starts the game
- `q` quits

While you are aiming:

- `d` / `a` raise or lower the power (10 to 25, in 20 steps)
- `w` / `s` raise or lower the angle (15 to 80 degrees, in 20 steps)
- `n` takes the shot
- `q` quits

During the swing animation `n` skips the rest of it and `q` quits. While the
ball is in the air, `n` stops drawing its flight and the animation carries on,
and `q` quits.

If the ball drops into the hole, the closing frames show "WON !!!" and the flag
moves to a new random spot. If it misses, the flag stays where it is. Either
way you are back at the aiming screen with the power and angle you last chose.

The flag position is drawn at random when the game starts. The game keeps no
score and saves nothing between runs.

## Using it as a library

The trajectory model can be used without the game:

```python
from asciigolf.trajectory import HOLE_MARKER, calculate_trajectory

path = calculate_trajectory(20.0, 45.0, 40)
holed = bool(path) and path[-1] == HOLE_MARKER
```

`calculate_trajectory(v0, angle_deg, flag_x, ...)` returns the ball's rounded
`(x, y)` positions, one per simulation step. The optional arguments set the
bounce factor `r`, gravity `g`, time step `dt`, the `threshold` below which
small vertical speeds are dropped, rolling `friction` and `max_steps`. If the
ball drops into the hole, the list ends with the hole position followed by
`HOLE_MARKER`, which is not a position.

`asciigolf.graphics` holds the drawing helpers:

- `PowerAngleBar` keeps the power and angle settings (`power`, `angle`),
  changes them with `increase_power`, `decrease_power`, `increase_angle` and
  `decrease_angle`, and draws both gauges with `render()`.
- `put_flag(frame, flag_x)` draws the flag and hole on a frame; it raises
  `ValueError` if the flag would not fit on the screen.
- `put_border(text)` wraps a frame in the course border.
- `frame_index(x, y)` maps course coordinates, with `y` counted up from the
  ground, to a position in a frame string.
- `replace_first(text, old, new)` replaces the first occurrence of `old`.
- `start_screen()` and `quit_screen()` clear the terminal and print the
  welcome and farewell screens.

`asciigolf.frames` holds the swing animation (`FRAMES`) and the screen texts,
and `asciigolf.terminal` has `clear_console()` and `get_char_nonblocking()`,
which returns a pending key press or an empty string.

## Running the tests

```
pip install .[test]
pytest
```