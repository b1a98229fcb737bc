from logging import debug
from typing import Protocol, final, override, runtime_checkable

from sortzip.errors import InvalidOrdError, NegativeLengthError
from sortzip.ord import Ord


@runtime_checkable
class Zipper(Protocol):
    """
    A pair of ordered collections that can be zipped together, plus the output
    they are zipped into. Both collections are assumed sorted in ascending
    order under `compare`.
    """

    def len_left(self) -> int: ...

    def len_right(self) -> int: ...

    def compare(self, i: int, j: int) -> Ord:
        """
        Compare left element i with right element j, from the left element's
        perspective. Anything other than an Ord member makes the zip fail.
        """
        ...

    def add_left(self, i: int) -> None:
        """Add only left element i to the output."""
        ...

    def add_right(self, j: int) -> None:
        """Add only right element j to the output."""
        ...

    def add_both(self, i: int, j: int) -> None:
        """Add left element i and right element j together to the output."""
        ...


def zip_with_gaps(z: Zipper) -> None:
    """
    Walk both collections once, comparing the two leading elements at most once
    per step. Equal elements are zipped together by add_both, otherwise the
    lesser element is added on its own by add_left or add_right. Once a side
    runs out, the rest of the other side is added without comparisons.

    Raises:
        NegativeLengthError: either length is negative (nothing is added)
        InvalidOrdError: compare returned something other than an Ord member
            (appends made before that point stand)
    """
    max_left, max_right = z.len_left(), z.len_right()

    if max_left < 0 or max_right < 0:
        raise NegativeLengthError(max_left, max_right)

    debug(f"zip_with_gaps: {max_left} left, {max_right} right")
    i, j = 0, 0

    while i < max_left or j < max_right:
        if i >= max_left:
            z.add_right(j)
            j += 1
        elif j >= max_right:
            z.add_left(i)
            i += 1
        else:
            c = z.compare(i, j)

            # identity checks: an int or bool that happens to equal a member's
            # value is still a malformed result
            if c is Ord.LESS:
                z.add_left(i)
                i += 1
            elif c is Ord.GREATER:
                z.add_right(j)
                j += 1
            elif c is Ord.EQUAL:
                z.add_both(i, j)
                i += 1
                j += 1
            else:
                raise InvalidOrdError(i, j, c)


@final
class AlwaysEqualZipper(Zipper):
    """
    Wraps a Zipper so every comparison is EQUAL; everything else is delegated.
    """

    def __init__(self, inner: Zipper):
        self.inner = inner

    @override
    def len_left(self) -> int:
        return self.inner.len_left()

    @override
    def len_right(self) -> int:
        return self.inner.len_right()

    @override
    def compare(self, i: int, j: int) -> Ord:
        return Ord.EQUAL

    @override
    def add_left(self, i: int) -> None:
        self.inner.add_left(i)

    @override
    def add_right(self, j: int) -> None:
        self.inner.add_right(j)

    @override
    def add_both(self, i: int, j: int) -> None:
        self.inner.add_both(i, j)


def zip_positional(z: Zipper) -> None:
    """
    Zip both collections assuming elements are always equal: pairs by position,
    then adds the tail of the longer one. Equivalent to zip_with_gaps where
    compare always returns EQUAL.
    """
    zip_with_gaps(AlwaysEqualZipper(z))
