"""Conversions between decimal strings and integers."""

__all__ = ["str_to_int", "int_to_str"]

_DIGITS = frozenset("0123456789")


def str_to_int(text: str) -> int:
    """Parse an unsigned decimal string.

    An empty string gives 0; any character that is not an ASCII digit
    makes the whole string invalid and gives -1.
    """
    if not text:
        return 0
    if not _DIGITS.issuperset(text):
        return -1
    return int(text)


def int_to_str(nb: int) -> str:
    """Return the decimal representation of ``nb``, with a leading '-' if negative."""
    sign = "-" if nb < 0 else ""
    return f"{sign}{abs(nb)}"