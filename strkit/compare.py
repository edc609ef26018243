"""Character-wise string comparison."""

from itertools import islice

__all__ = ["cmp_str", "cmp_n_str"]


def _first_difference(pairs) -> int:
    for a, b in pairs:
        if a != b:
            return ord(a) - ord(b)
    return 0


def cmp_str(s1: str, s2: str) -> int:
    """Return the code-point difference at the first mismatch, else 0.

    Only the common prefix is compared, so a string compares equal to any
    of its prefixes.
    """
    return _first_difference(zip(s1, s2))


def cmp_n_str(s1: str, s2: str, limit: int) -> int:
    """Like :func:`cmp_str`, looking at no more than ``limit`` characters."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    return _first_difference(islice(zip(s1, s2), limit))