"""
Set operations and joins over sorted sequences, driven by zip_with_gaps.

Inputs must be sorted by `key` (identity by default). Duplicates are not
collapsed: the n-th copy on the left pairs with the n-th copy on the right,
exactly as the merge walks them.
"""

from collections.abc import Callable, Sequence
from typing import Any, Literal

from sortzip.adapters import CallbackZipper, KeyFn
from sortzip.ord import Ord
from sortzip.zipper import zip_with_gaps

type JoinHow = Literal["inner", "left", "right", "outer"]


def _zip_sorted[T, U](
    a: Sequence[T],
    b: Sequence[U],
    key: KeyFn | None,
    on_left: Callable[[int], None] | None = None,
    on_right: Callable[[int], None] | None = None,
    on_both: Callable[[int, int], None] | None = None,
) -> None:
    if key is None:
        a_keys: Sequence[Any] = a
        b_keys: Sequence[Any] = b
    else:
        a_keys = [key(x) for x in a]
        b_keys = [key(x) for x in b]

    zipper = CallbackZipper(
        len(a),
        len(b),
        lambda i, j: Ord.of(a_keys[i], b_keys[j]),
        on_left,
        on_right,
        on_both,
    )
    zip_with_gaps(zipper)


def union[T](a: Sequence[T], b: Sequence[T], key: KeyFn | None = None) -> list[T]:
    """sorted merge; the left element wins when both sides match"""
    out: list[T] = []
    _zip_sorted(
        a,
        b,
        key,
        on_left=lambda i: out.append(a[i]),
        on_right=lambda j: out.append(b[j]),
        on_both=lambda i, _: out.append(a[i]),
    )
    return out


def intersection[T](
    a: Sequence[T], b: Sequence[Any], key: KeyFn | None = None
) -> list[T]:
    out: list[T] = []
    _zip_sorted(a, b, key, on_both=lambda i, _: out.append(a[i]))
    return out


def difference[T](
    a: Sequence[T], b: Sequence[Any], key: KeyFn | None = None
) -> list[T]:
    """elements of a without a match in b"""
    out: list[T] = []
    _zip_sorted(a, b, key, on_left=lambda i: out.append(a[i]))
    return out


def symmetric_difference[T](
    a: Sequence[T], b: Sequence[T], key: KeyFn | None = None
) -> list[T]:
    out: list[T] = []
    _zip_sorted(
        a,
        b,
        key,
        on_left=lambda i: out.append(a[i]),
        on_right=lambda j: out.append(b[j]),
    )
    return out


def merge_join[T, U](
    a: Sequence[T],
    b: Sequence[U],
    key: KeyFn | None = None,
    how: JoinHow = "inner",
) -> list[tuple[T | None, U | None]]:
    """
    Sorted-merge join of a and b on key.

    Duplicate keys are paired one-to-one in order, not crossed: left rows
    [k, k] against right rows [k, k, k] give two matched pairs and one
    unmatched right row, never six pairs as a database join would.

    Args:
        how: "inner" keeps matched pairs only, "left"/"right" also keep the
            unmatched rows of that side, "outer" keeps everything. The missing
            side of an unmatched row is None.
    """
    if how not in ("inner", "left", "right", "outer"):
        raise ValueError(f"unknown join type: {how!r}")

    out: list[tuple[T | None, U | None]] = []
    keep_left = how in ("left", "outer")
    keep_right = how in ("right", "outer")

    _zip_sorted(
        a,
        b,
        key,
        on_left=(lambda i: out.append((a[i], None))) if keep_left else None,
        on_right=(lambda j: out.append((None, b[j]))) if keep_right else None,
        on_both=lambda i, j: out.append((a[i], b[j])),
    )
    return out
