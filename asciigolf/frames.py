"""Animation frames and static screens for the golf game.

Every animation frame is SCREEN_HEIGHT rows of SCREEN_WIDTH - 1 characters.
Rows are joined by newlines, and the last row, the ground, has no trailing
newline. A cell at row ``row`` and column ``col`` therefore sits at index
``row * SCREEN_WIDTH + col``.
"""

from __future__ import annotations

SCREEN_WIDTH = 116
SCREEN_HEIGHT = 7

LINE_WIDTH = SCREEN_WIDTH - 1
"""Visible characters in one row of a frame."""

MISS_TEXT = "miss :("
"""Caption shown in the closing frames of a swing that missed."""

GROUND = " golf^^^^^^`" + "^" * 102 + " "


def _frame(*art: str) -> str:
    """Pad the figure rows to full width and add the ground row."""
    if len(art) != SCREEN_HEIGHT - 1:
        raise ValueError(f"a frame needs {SCREEN_HEIGHT - 1} art rows, got {len(art)}")
    rows = [line.ljust(LINE_WIDTH) for line in art]
    rows.append(GROUND)
    return "\n".join(rows)


def _boxed(lines: list[str], inner_width: int) -> str:
    edge = "+" + "-" * inner_width + "+"
    body = [f"|{line.ljust(inner_width)}|" for line in lines]
    return "\n".join([edge, *body, edge]) + "\n"


START_SCREEN_TEXT = _boxed(
    [
        " " * 42 + "Welcome to ASCII Golf Game!",
        "",
        "",
        "",
        "Take a swing at victory! Line up your shot, adjust the angle and power, and go for it!",
        "Goal: Hit the ball into the hole!",
        "",
        "Press s to play...",
        "",
    ],
    LINE_WIDTH,
)

QUIT_SCREEN_TEXT = _boxed(
    [
        "     Thanks for playing ASCII Golf ^_^",
        "",
        "     Hope you enjoyed the game :3",
    ],
    56,
)

_STANCE = _frame(
    "",
    "",
    "         O",
    "        /|\\o",
    "       | |",
    "      ,|/|",
)

_BACKSWING = _frame(
    "",
    "",
    "        O",
    "   ,___/|",
    "        /\\",
    "       / / o",
)

_ADDRESS = _frame(
    "",
    "",
    "        O",
    "        |\\",
    "        |\\|",
    "       / ||o",
)

_TOP = _frame(
    "   `\\",
    "     \\",
    "      <<O",
    "        |",
    "        |\\",
    "       / | o",
)

FRAMES: tuple[str, ...] = (
    _STANCE,
    _frame(
        "",
        "",
        "         __O",
        "        / /\\o",
        "      ,/ |",
        "         |",
    ),
    _frame(
        "",
        "",
        "",
        "         __O",
        "         \\ \\",
        "         / o",
    ),
    _frame(
        "",
        "",
        "       __O",
        "      / /\\",
        "    ,/  |\\",
        "        |/ o",
    ),
    _frame(
        "",
        "",
        "         O",
        "         |\\",
        "        /\\|",
        "       / ||o",
    ),
    _ADDRESS,
    _frame(
        "",
        "",
        "        O",
        "        />",
        "       //\\",
        "     ,// / o",
    ),
    _BACKSWING,
    _TOP,
    _frame(
        "         /`",
        "        /",
        "      <<O",
        "        \\",
        "        /\\",
        "       / / o",
    ),
    _TOP,
    _BACKSWING,
    _ADDRESS,
    _frame(
        "",
        "          `/",
        "       O__/",
        "        \\-`",
        "        /\\",
        "       / /",
    ),
    _frame(
        "      '\\",
        "        \\",
        "       O>>",
        "        \\",
        "        /\\",
        "       / /",
    ),
    _frame(
        "          `/",
        "          /",
        "       \\O/",
        "        |",
        "        /\\",
        "       / |",
    ),
    _frame(
        "          `/",
        "          /",
        "      __O/",
        "        |",
        "       /\\",
        "       | \\",
    ),
    _frame(
        "",
        "           `/",
        "        O__/",
        "       /|",
        "        /\\",
        "       / /",
    ),
    _frame(
        "",
        "",
        "       \\O",
        "        |\\",
        "        /\\\\",
        "       / | \\,",
    ),
    _frame(
        "",
        "",
        "        O",
        "       /|\\",
        "        |\\\\",
        "       / | \\,",
    ),
    _frame(
        "   " + MISS_TEXT,
        "",
        "       \\O",
        "        |\\",
        "        /\\\\",
        "       / | \\,",
    ),
    _frame(
        "   " + MISS_TEXT,
        "",
        "        O",
        "       /|\\",
        "        |\\\\",
        "       / | \\,",
    ),
    _frame(
        "   " + MISS_TEXT,
        "",
        "        O",
        "       /|\\",
        "      / |\\",
        "     /,/ |",
    ),
    _STANCE,
)
"""The full swing animation, from stance through the hit and back."""