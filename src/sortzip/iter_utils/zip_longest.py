from collections.abc import Iterable, Iterator
from typing import final, override

from sortzip.adapters import Side, ZipEntry


@final
class ZipLongest[T, U](Iterable[ZipEntry[T, U]]):
    """
    streaming [...T], [...U] -> [... (T,U) ..., tail]

    Positional pairing that keeps going past the shorter input, the lazy
    counterpart of zip_positional.
    """

    def __init__(self, iter1: Iterable[T], iter2: Iterable[U]):
        self.iterables = (iter1, iter2)

    @override
    def __iter__(self) -> Iterator[ZipEntry[T, U]]:
        left = iter(self.iterables[0])
        right = iter(self.iterables[1])

        while True:
            try:
                x = next(left)
            except StopIteration:
                for y in right:
                    yield ZipEntry(Side.RIGHT, None, y)
                return

            try:
                y = next(right)
            except StopIteration:
                yield ZipEntry(Side.LEFT, x, None)
                for x in left:
                    yield ZipEntry(Side.LEFT, x, None)
                return

            yield ZipEntry(Side.BOTH, x, y)
