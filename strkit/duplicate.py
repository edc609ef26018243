"""Copies of strings and sequences, whole or truncated."""

from collections.abc import Iterable
from itertools import islice

__all__ = ["dup_str", "dup_n_str", "dup_arr", "dup_n_arr"]


def _check_limit(limit: int) -> None:
    if limit < 0:
        raise ValueError("limit must not be negative")


def dup_str(text: str) -> str:
    """Return a copy of ``text``."""
    if text is None:
        raise TypeError("text must be a string, not None")
    return str(text)


def dup_n_str(text: str, limit: int) -> str:
    """Return at most the first ``limit`` characters of ``text``."""
    if text is None:
        raise TypeError("text must be a string, not None")
    _check_limit(limit)
    return text[:limit]


def dup_arr(items: Iterable) -> list:
    """Return a new list holding the elements of ``items``."""
    if items is None:
        raise TypeError("items must be iterable, not None")
    return list(items)


def dup_n_arr(items: Iterable, limit: int) -> list:
    """Return a new list holding at most the first ``limit`` elements of ``items``."""
    if items is None:
        raise TypeError("items must be iterable, not None")
    _check_limit(limit)
    return list(islice(items, limit))