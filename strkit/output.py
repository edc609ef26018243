"""Writing characters, text and lines to a stream."""

import sys
from collections.abc import Iterable
from typing import TextIO

__all__ = ["write_char", "write_text", "write_arr"]


def write_char(char: str, stream: TextIO | None = None) -> None:
    """Write a single non-NUL character to ``stream`` (standard output by default)."""
    if char is None or len(char) != 1 or char == "\0":
        raise ValueError("expected a single non-NUL character")
    (stream or sys.stdout).write(char)


def write_text(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` to ``stream`` (standard output by default)."""
    if text is None:
        raise TypeError("text must be a string, not None")
    (stream or sys.stdout).write(text)


def write_arr(lines: Iterable[str], stream: TextIO | None = None) -> None:
    """Write each element of ``lines`` followed by a newline."""
    if lines is None:
        raise TypeError("lines must be iterable, not None")
    out = stream or sys.stdout
    for line in lines:
        write_text(line, out)
        write_text("\n", out)