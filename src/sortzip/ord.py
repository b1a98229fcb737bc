from enum import Enum
from typing import Any, override


class Ord(Enum):
    """
    Result of comparing a left element to a right element, from the left
    element's perspective.

    Not an IntEnum: -1/0/1 are not comparison results and never equal a member.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, a: Any, b: Any) -> "Ord":
        """
        Natural ordering of a relative to b.

        Raises:
            ValueError: a and b are unordered (NaN, disjoint sets, ...)
        """
        if a < b:
            return cls.LESS
        if b < a:
            return cls.GREATER
        if a == b:
            return cls.EQUAL
        raise ValueError(f"{a!r} and {b!r} are neither less, greater, nor equal")

    @classmethod
    def from_sign(cls, n: int) -> "Ord":
        """Convert a cmp-style integer (negative, zero, positive)."""
        if n < 0:
            return cls.LESS
        if n > 0:
            return cls.GREATER
        return cls.EQUAL

    def reversed(self) -> "Ord":
        """The same comparison seen from the right element's side."""
        return Ord(-self.value)

    @override
    def __str__(self) -> str:
        return self.name.capitalize()

    @override
    def __repr__(self) -> str:
        return f"Ord.{self.name}"


LESS = Ord.LESS
EQUAL = Ord.EQUAL
GREATER = Ord.GREATER
