from __future__ import annotations

import pytest

from asciigolf import game
from asciigolf.frames import FRAMES, QUIT_SCREEN_TEXT, START_SCREEN_TEXT
from asciigolf.graphics import BAR_SIZE, PowerAngleBar, put_border, put_flag
from asciigolf.trajectory import HOLE_MARKER, calculate_trajectory


class StubRng:
    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.values[len(self.calls) - 1]


class FakeTerminal:
    def __init__(self, keys, default="q"):
        self.keys = list(keys)
        self.default = default
        self.writes = []
        self.sleeps = []
        self.clears = 0

    def read_key(self):
        return self.keys.pop(0) if self.keys else self.default

    def clear(self):
        self.clears += 1

    def write(self, text):
        self.writes.append(text)

    def sleep(self, seconds):
        self.sleeps.append(seconds)

    def console(self):
        return game._Console(
            read_key=self.read_key, clear=self.clear, write=self.write, sleep=self.sleep
        )


def play(keys, rng_values):
    terminal = FakeTerminal(keys)
    rng = StubRng(rng_values)
    game._play(rng, terminal.console())
    return terminal, rng


def test_quit_on_start_screen():
    terminal, rng = play(["q"], [5])
    assert terminal.writes == [START_SCREEN_TEXT + "\n", QUIT_SCREEN_TEXT + "\n"]
    assert rng.calls == [(0, 80)]


def test_start_screen_waits_and_polls():
    terminal, _ = play(["", "x", "Q"], [5])
    assert terminal.sleeps == [game.POLL_DELAY, game.POLL_DELAY]
    assert terminal.writes[-1] == QUIT_SCREEN_TEXT + "\n"


def test_aiming_screen_shows_flag_and_bar():
    terminal, _ = play(["S", "Q"], [7])
    assert terminal.writes[1] == put_border(put_flag(FRAMES[0], 7))
    assert terminal.writes[2] == PowerAngleBar().render()
    assert terminal.writes[-1] == QUIT_SCREEN_TEXT + "\n"


def test_keys_adjust_bar():
    terminal, _ = play(["s", "d", "d", "w", "w", "s", "a", "d", "q"], [3])
    expected = PowerAngleBar()
    expected.increase_power()
    expected.increase_power()
    expected.increase_angle()
    assert terminal.writes[-2] == expected.render()


def test_bar_keys_clamp_at_maximum():
    terminal, _ = play(["s"] + ["d"] * (BAR_SIZE + 5) + ["q"], [3])
    bar_line = terminal.writes[-2]
    assert "[" + "#" * BAR_SIZE + "]" in bar_line


def test_default_shot_misses_and_animates_every_frame():
    flag = 40
    trajectory = calculate_trajectory(10.0, 15.0, flag)
    assert HOLE_MARKER not in trajectory

    terminal, rng = play(["s", "n"] + [""] * 3000, [flag])
    output = "".join(terminal.writes)
    assert game.WIN_TEXT not in output
    assert "miss :(" in output
    assert rng.calls == [(0, 80)]
    assert terminal.sleeps.count(game.FRAME_DELAY) == len(FRAMES)
    flight = [s for s in terminal.sleeps if s in (game.BALL_DELAY, game.OFFSCREEN_DELAY)]
    assert len(flight) == len(trajectory)


def test_ball_leaves_shadow_trail():
    terminal, _ = play(["s", "n"] + [""] * 3000, [40])
    ball_frames = [w for w in terminal.writes if "o" in w and "." in w]
    assert ball_frames


def test_next_key_skips_animation():
    terminal, _ = play(["s", "n", "n", "q"], [12])
    assert game.FRAME_DELAY not in terminal.sleeps
    aiming = put_border(put_flag(FRAMES[0], 12))
    assert terminal.writes.count(aiming) == 2


def test_quit_during_animation_ends_game():
    terminal, _ = play(["s", "n", "", "q"], [12])
    assert terminal.sleeps.count(game.FRAME_DELAY) == 1
    assert terminal.writes[-1] == QUIT_SCREEN_TEXT + "\n"


def _find_winning_shot():
    for power_level in range(BAR_SIZE, -1, -1):
        for angle_level in range(BAR_SIZE + 1):
            bar = PowerAngleBar()
            for _ in range(power_level):
                bar.increase_power()
            for _ in range(angle_level):
                bar.increase_angle()
            for flag in range(81):
                if calculate_trajectory(bar.power, bar.angle, flag)[-1] == HOLE_MARKER:
                    return power_level, angle_level, flag
    raise AssertionError("no winning shot exists")


def test_hole_in_one_shows_win_and_moves_flag():
    power_level, angle_level, flag = _find_winning_shot()
    new_flag = 0 if flag != 0 else 1
    keys = ["s"] + ["d"] * power_level + ["w"] * angle_level + ["n"] + [""] * 3000
    terminal, rng = play(keys, [flag, new_flag])
    output = "".join(terminal.writes)
    assert game.WIN_TEXT in output
    assert rng.calls == [(0, 80), (0, 80)]
    assert put_border(put_flag(FRAMES[0], new_flag)) in terminal.writes


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as excinfo:
        game.main(["--bogus"])
    assert excinfo.value.code == 2