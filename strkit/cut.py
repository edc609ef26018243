"""Splitting a string on a set of separator characters."""

from collections.abc import Iterator

__all__ = ["cut"]


def _words(text: str, separators: frozenset) -> Iterator[str]:
    word: list[str] = []
    for char in text:
        if char in separators:
            if word:
                yield "".join(word)
                word = []
        else:
            word.append(char)
    if word:
        yield "".join(word)


def cut(text: str, sep: str) -> list[str]:
    """Split ``text`` on any character of ``sep``, dropping empty pieces."""
    if text is None or sep is None:
        raise TypeError("text and sep must be strings, not None")
    return list(_words(text, frozenset(sep)))