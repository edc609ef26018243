import pytest

from strkit.compare import cmp_n_str, cmp_str


@pytest.mark.parametrize(
    "s1, s2, expected",
    [
        ("a", "a", 0),
        ("a", "", 0),
        ("abcdefg", "abcdefg", 0),
        ("a", "b", -1),
        ("b", "a", 1),
    ],
)
def test_cmp_str(s1, s2, expected):
    assert cmp_str(s1, s2) == expected


@pytest.mark.parametrize(
    "s1, s2, limit, expected",
    [
        ("a", "a", 1, 0),
        ("a", "", 1, 0),
        ("abcdefg", "abcdefg", 7, 0),
    ],
)
def test_cmp_n_str(s1, s2, limit, expected):
    assert cmp_n_str(s1, s2, limit) == expected


def test_cmp_n_str_stops_at_limit():
    assert cmp_n_str("abc", "abd", 2) == 0
    assert cmp_n_str("abc", "abd", 3) == cmp_str("abc", "abd")


def test_cmp_str_is_antisymmetric():
    assert cmp_str("hello", "help") == -cmp_str("help", "hello")


def test_cmp_n_str_rejects_negative_limit():
    with pytest.raises(ValueError):
        cmp_n_str("a", "b", -1)