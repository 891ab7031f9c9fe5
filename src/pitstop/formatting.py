"""ANSI escape sequences for terminal status output."""

from __future__ import annotations

import re
from enum import IntEnum


class Style(IntEnum):
    NONE = 0
    BOLD = 1
    RED = 31
    GREEN = 32
    YELLOW = 33


_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")


def ansi(*codes: Style) -> str:
    """Return the escape sequence selecting ``codes``, in the given order.

    ``ansi(Style.RED)`` and ``ansi(Style.RED, Style.BOLD)`` are the two
    supported call shapes. Calling with no codes is a programming error.
    """
    assert codes, "ansi() needs at least one style code"
    return "\x1b[" + ";".join(str(int(code)) for code in codes) + "m"


def paint(text: str, *codes: Style) -> str:
    """Wrap text in the given styles followed by a reset."""
    return f"{ansi(*codes)}{text}{ansi(Style.NONE)}"


def strip_ansi(text: str) -> str:
    return _ESCAPE_RE.sub("", text)
