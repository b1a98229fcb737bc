import pytest

from sortzip import (
    difference,
    intersection,
    merge_join,
    symmetric_difference,
    union,
)

A = [1, 2, 4, 6, 9]
B = [2, 3, 6, 7]


def test_against_builtin_sets():
    assert union(A, B) == sorted(set(A) | set(B))
    assert intersection(A, B) == sorted(set(A) & set(B))
    assert difference(A, B) == sorted(set(A) - set(B))
    assert difference(B, A) == sorted(set(B) - set(A))
    assert symmetric_difference(A, B) == sorted(set(A) ^ set(B))


def test_empty_sides():
    assert union([], B) == B
    assert intersection(A, []) == []
    assert difference(A, []) == A
    assert symmetric_difference([], []) == []


def test_duplicates_pair_in_order():
    assert intersection([1, 1, 1], [1, 1]) == [1, 1]
    assert difference([1, 1, 1], [1, 1]) == [1]
    assert union([1, 1], [1, 1, 1]) == [1, 1, 1]


def test_union_keeps_left_on_match():
    left = [("a", "left"), ("b", "left")]
    right = [("b", "right"), ("c", "right")]
    assert union(left, right, key=lambda kv: kv[0]) == [
        ("a", "left"),
        ("b", "left"),
        ("c", "right"),
    ]


PEOPLE = [(1, "ann"), (2, "bob"), (4, "dee")]
ORDERS = [(2, "tea"), (3, "jam"), (4, "pie")]


def key(row):
    return row[0]


@pytest.mark.parametrize(
    "how, expected",
    [
        ("inner", [((2, "bob"), (2, "tea")), ((4, "dee"), (4, "pie"))]),
        (
            "left",
            [
                ((1, "ann"), None),
                ((2, "bob"), (2, "tea")),
                ((4, "dee"), (4, "pie")),
            ],
        ),
        (
            "right",
            [
                ((2, "bob"), (2, "tea")),
                (None, (3, "jam")),
                ((4, "dee"), (4, "pie")),
            ],
        ),
        (
            "outer",
            [
                ((1, "ann"), None),
                ((2, "bob"), (2, "tea")),
                (None, (3, "jam")),
                ((4, "dee"), (4, "pie")),
            ],
        ),
    ],
)
def test_merge_join(how, expected):
    assert merge_join(PEOPLE, ORDERS, key=key, how=how) == expected


def test_merge_join_unknown():
    with pytest.raises(ValueError):
        merge_join(PEOPLE, ORDERS, key=key, how="cross")  # pyright: ignore[reportArgumentType]


def test_merge_join_duplicates_not_crossed():
    left = [(1, "a"), (1, "b")]
    right = [(1, "x"), (1, "y"), (1, "z")]
    assert merge_join(left, right, key=key, how="outer") == [
        ((1, "a"), (1, "x")),
        ((1, "b"), (1, "y")),
        (None, (1, "z")),
    ]


def test_unordered_elements_raise():
    with pytest.raises(ValueError):
        union([{1}], [{2}])
    with pytest.raises(ValueError):
        intersection([float("nan")], [1.0])
