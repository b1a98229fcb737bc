import pytest

from sortzip import EQUAL, GREATER, LESS, Ord


def test_members():
    assert len(Ord) == 3
    assert LESS is Ord.LESS and EQUAL is Ord.EQUAL and GREATER is Ord.GREATER
    assert LESS != EQUAL != GREATER


def test_not_an_int():
    assert Ord.EQUAL != 0
    assert Ord.LESS != -1


def test_display():
    assert str(Ord.LESS) == "Less"
    assert str(Ord.GREATER) == "Greater"
    assert repr(Ord.EQUAL) == "Ord.EQUAL"


@pytest.mark.parametrize(
    "a, b, expected",
    [(1, 2, LESS), (2, 2, EQUAL), (3, 2, GREATER), ("a", "b", LESS), ((1, 2), (1, 1), GREATER)],
)
def test_of(a, b, expected):
    assert Ord.of(a, b) is expected


def test_from_sign():
    assert Ord.from_sign(-7) is LESS
    assert Ord.from_sign(0) is EQUAL
    assert Ord.from_sign(42) is GREATER


def test_reversed():
    assert LESS.reversed() is GREATER
    assert GREATER.reversed() is LESS
    assert EQUAL.reversed() is EQUAL


@pytest.mark.parametrize(
    "a, b",
    [(float("nan"), 1.0), (1.0, float("nan")), (float("nan"), float("nan")), ({1}, {2})],
)
def test_of_unordered(a, b):
    with pytest.raises(ValueError):
        Ord.of(a, b)


def test_of_subsets():
    assert Ord.of({1}, {1, 2}) is LESS
    assert Ord.of({1, 2}, {1, 2}) is EQUAL
