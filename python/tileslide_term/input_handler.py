"""Single-keypress reader for the terminal frontend.

Arrow keys move the cursor, WASD slide a tile into the blank, Space/Enter
"click" the tile under the cursor. Works on macOS / Linux (tty+termios)
and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
import time

# -- key mapping ---------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "slide_up",
    "s": "slide_down",
    "a": "slide_left",
    "d": "slide_right",
    " ": "click",
    "\r": "click",
    "\n": "click",
    "r": "reset",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
}

# Final byte of the ESC [ x sequences on Unix, second byte after 0xe0 on Windows.
_ARROW_MAP: dict[str, str] = {
    "A": "cursor_up",
    "B": "cursor_down",
    "C": "cursor_right",
    "D": "cursor_left",
    "H": "cursor_up",
    "P": "cursor_down",
    "M": "cursor_right",
    "K": "cursor_left",
}


def _resolve(ch: str) -> str:
    return _KEY_MAP.get(ch.lower(), "") if ch else ""


# -- platform readers ----------------------------------------------------------


def _read_unix(timeout: float | None) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)

    def _next(wait: float | None) -> str | None:
        ready, _, _ = select.select([fd], [], [], wait)
        if not ready:
            return None
        # os.read is unbuffered, so select() still sees the rest of an
        # escape sequence.
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    try:
        tty.setraw(fd)
        ch = _next(timeout)
        if ch is None:
            return None
        if ch != "\x1b":
            return _resolve(ch)
        if _next(0.1) != "[":
            return "quit"  # bare Escape
        return _ARROW_MAP.get(_next(0.1) or "", "")
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def _read_windows(timeout: float | None) -> str | None:
    import msvcrt  # type: ignore[import-not-found]

    if timeout is not None:
        end = time.monotonic() + timeout
        while not msvcrt.kbhit():
            if time.monotonic() >= end:
                return None
            time.sleep(0.02)

    ch = msvcrt.getwch()
    if ch in ("\x00", "\xe0"):
        return _ARROW_MAP.get(msvcrt.getwch(), "")
    if ch == "\x1b":
        return "quit"
    return _resolve(ch)


_read = _read_windows if os.name == "nt" else _read_unix


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Block until a key is pressed and return its action string.

    Possible return values:
        "cursor_up", "cursor_down", "cursor_left", "cursor_right"
        "slide_up", "slide_down", "slide_left", "slide_right"
        "click"   (Space / Enter)
        "reset"   (r)
        "quit"    (q / Esc / Ctrl-C)
        ""        (unrecognised key)
    """
    key = _read(None)
    return key or ""


def get_key_timeout(timeout: float) -> str | None:
    """Like ``get_key`` but returns ``None`` if nothing arrives in *timeout* seconds."""
    return _read(timeout)
