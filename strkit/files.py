"""Reading whole files."""

import os

__all__ = ["read_file"]


def read_file(filepath: str | os.PathLike) -> str:
    """Return the whole content of ``filepath`` as text, line endings untouched.

    Raises ``OSError`` when the file cannot be opened.
    """
    with open(filepath, encoding="utf-8", newline="") as handle:
        return handle.read()