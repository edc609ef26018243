"""Length helpers for strings, sequences and numbers."""

from collections.abc import Iterable

__all__ = ["str_len", "arr_len", "nb_len"]


def str_len(text: str) -> int:
    """Return the number of characters in ``text``."""
    if text is None:
        raise TypeError("text must be a string, not None")
    return len(text)


def arr_len(items: Iterable) -> int:
    """Return the number of elements in ``items``."""
    if items is None:
        raise TypeError("items must be iterable, not None")
    return sum(1 for _ in items)


def nb_len(nb: int) -> int:
    """Return the number of decimal digits of ``nb``, ignoring its sign."""
    return len(str(abs(nb)))