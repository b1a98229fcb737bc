from collections.abc import Callable, Sequence
from enum import Enum
from logging import warning
from typing import Any, NamedTuple, final, override

import numpy as np
from numpy.typing import NDArray

from sortzip.config import ZipConfig
from sortzip.errors import UnsortedInputError
from sortzip.ord import Ord
from sortzip.zipper import Zipper, zip_positional, zip_with_gaps

type CompareFn = Callable[[Any, Any], Ord]
type KeyFn = Callable[[Any], Any]


class Side(Enum):
    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"


class ZipEntry[T, U](NamedTuple):
    """One output step of a zip. The side that did not contribute is None."""

    side: Side
    left: T | None
    right: U | None


def _identity(x: Any) -> Any:
    return x


def first_unsorted(items: Sequence[Any], compare: CompareFn = Ord.of) -> int | None:
    """
    Index of the first element that sorts strictly before its predecessor, or
    None if the sequence is non-decreasing.
    """
    for k in range(1, len(items)):
        if compare(items[k], items[k - 1]) is Ord.LESS:
            return k
    return None


def check_sorted(
    side: str, items: Sequence[Any], config: ZipConfig, compare: CompareFn = Ord.of
) -> None:
    if config.check_sorted:
        report_unsorted(side, first_unsorted(items, compare), config)


def report_unsorted(side: str, bad: int | None, config: ZipConfig) -> None:
    if bad is None:
        return
    if config.strict:
        raise UnsortedInputError(side, bad)

    warning(
        f"{side} input is not sorted at index {bad}; zip output will not be meaningful"
    )


@final
class SequenceZipper[T, U](Zipper):
    """
    Zipper over two in-memory sequences that collects ZipEntry values.

    `compare` receives keys (see `key`) of a left and a right element.
    `left_order` and `right_order` order two keys of the same side; they are
    only used by sortedness checks and default to natural ordering.
    """

    def __init__(
        self,
        left: Sequence[T],
        right: Sequence[U],
        compare: CompareFn | None = None,
        key: KeyFn | None = None,
        config: ZipConfig | None = None,
        left_order: CompareFn | None = None,
        right_order: CompareFn | None = None,
    ):
        self.left = left
        self.right = right
        self.compare_fn: CompareFn = compare or Ord.of
        self.key: KeyFn = key or _identity
        self.config = config or ZipConfig.default()
        self.entries: list[ZipEntry[T, U]] = []

        self._left_keys = [self.key(x) for x in left]
        self._right_keys = [self.key(x) for x in right]

        check_sorted("left", self._left_keys, self.config, left_order or Ord.of)
        check_sorted("right", self._right_keys, self.config, right_order or Ord.of)

    @override
    def len_left(self) -> int:
        return len(self.left)

    @override
    def len_right(self) -> int:
        return len(self.right)

    @override
    def compare(self, i: int, j: int) -> Ord:
        return self.compare_fn(self._left_keys[i], self._right_keys[j])

    @override
    def add_left(self, i: int) -> None:
        self.entries.append(ZipEntry(Side.LEFT, self.left[i], None))

    @override
    def add_right(self, j: int) -> None:
        self.entries.append(ZipEntry(Side.RIGHT, None, self.right[j]))

    @override
    def add_both(self, i: int, j: int) -> None:
        self.entries.append(ZipEntry(Side.BOTH, self.left[i], self.right[j]))

    def run(self) -> list[ZipEntry[T, U]]:
        """zip_with_gaps into a fresh entry list"""
        self.entries = []
        zip_with_gaps(self)
        return self.entries

    def run_positional(self) -> list[ZipEntry[T, U]]:
        """zip_positional into a fresh entry list"""
        self.entries = []
        zip_positional(self)
        return self.entries


def _skip(*_: int) -> None:
    pass


@final
class CallbackZipper(Zipper):
    """
    Zipper assembled from plain callables; the callbacks receive indices and
    write wherever they like. Missing callbacks do nothing.
    """

    def __init__(
        self,
        len_left: int,
        len_right: int,
        compare: Callable[[int, int], Ord],
        on_left: Callable[[int], None] | None = None,
        on_right: Callable[[int], None] | None = None,
        on_both: Callable[[int, int], None] | None = None,
    ):
        self._len_left = len_left
        self._len_right = len_right
        self._compare = compare
        self._on_left = on_left or _skip
        self._on_right = on_right or _skip
        self._on_both = on_both or _skip

    @override
    def len_left(self) -> int:
        return self._len_left

    @override
    def len_right(self) -> int:
        return self._len_right

    @override
    def compare(self, i: int, j: int) -> Ord:
        return self._compare(i, j)

    @override
    def add_left(self, i: int) -> None:
        self._on_left(i)

    @override
    def add_right(self, j: int) -> None:
        self._on_right(j)

    @override
    def add_both(self, i: int, j: int) -> None:
        self._on_both(i, j)


@final
class ArrayZipper(Zipper):
    """
    Aligns two sorted 1-D numpy arrays.

    run() -> (left_idx, right_idx): int64 arrays of equal length, one row per
    zip step, with -1 where a side has no element.
    """

    def __init__(
        self, left: NDArray[Any], right: NDArray[Any], config: ZipConfig | None = None
    ):
        if left.ndim != 1 or right.ndim != 1:
            raise ValueError(
                f"ArrayZipper expects 1-D arrays, got {left.ndim}-D and {right.ndim}-D"
            )

        self.left = left
        self.right = right
        self.config = config or ZipConfig.default()
        self._rows: list[tuple[int, int]] = []

        if self.config.check_sorted:
            for side, arr in (("left", left), ("right", right)):
                drops = np.flatnonzero(arr[1:] < arr[:-1])
                bad = int(drops[0]) + 1 if drops.size else None
                report_unsorted(side, bad, self.config)

    @override
    def len_left(self) -> int:
        return int(self.left.shape[0])

    @override
    def len_right(self) -> int:
        return int(self.right.shape[0])

    @override
    def compare(self, i: int, j: int) -> Ord:
        return Ord.of(self.left[i], self.right[j])

    @override
    def add_left(self, i: int) -> None:
        self._rows.append((i, -1))

    @override
    def add_right(self, j: int) -> None:
        self._rows.append((-1, j))

    @override
    def add_both(self, i: int, j: int) -> None:
        self._rows.append((i, j))

    def run(self) -> tuple[NDArray[np.int64], NDArray[np.int64]]:
        self._rows = []
        zip_with_gaps(self)

        if not self._rows:
            empty = np.empty(0, dtype=np.int64)
            return empty, empty.copy()

        rows = np.asarray(self._rows, dtype=np.int64)
        return rows[:, 0].copy(), rows[:, 1].copy()
