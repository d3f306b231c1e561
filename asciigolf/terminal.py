"""Console helpers: clearing the screen and polling the keyboard without blocking."""

from __future__ import annotations

import os
import subprocess
import sys

_IS_WINDOWS = os.name == "nt"

if _IS_WINDOWS:
    import msvcrt
else:
    import fcntl
    import termios


def clear_console() -> None:
    """Clear the terminal using the platform's clear command."""
    if _IS_WINDOWS:
        subprocess.run("cls", shell=True, check=False)
    else:
        subprocess.run(["clear"], check=False)


def get_char_nonblocking() -> str:
    """Return one pending key press, or an empty string if none is waiting."""
    if _IS_WINDOWS:
        return msvcrt.getwch() if msvcrt.kbhit() else ""
    return _read_posix_char(sys.stdin.fileno())


def _read_posix_char(fd: int) -> str:
    try:
        old_attrs = termios.tcgetattr(fd)
    except termios.error:
        old_attrs = None

    if old_attrs is not None:
        new_attrs = list(old_attrs)
        new_attrs[3] &= ~(termios.ICANON | termios.ECHO)
        termios.tcsetattr(fd, termios.TCSANOW, new_attrs)

    old_flags = fcntl.fcntl(fd, fcntl.F_GETFL)
    fcntl.fcntl(fd, fcntl.F_SETFL, old_flags | os.O_NONBLOCK)
    try:
        data = os.read(fd, 1)
    except (BlockingIOError, InterruptedError):
        data = b""
    finally:
        if old_attrs is not None:
            termios.tcsetattr(fd, termios.TCSANOW, old_attrs)
        fcntl.fcntl(fd, fcntl.F_SETFL, old_flags)

    return data.decode("latin-1")