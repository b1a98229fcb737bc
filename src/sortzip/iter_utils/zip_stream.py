from collections.abc import Callable, Iterable, Iterator
from typing import Any

from sortzip.adapters import KeyFn, Side, ZipEntry
from sortzip.errors import InvalidOrdError
from sortzip.ord import Ord

_END = object()


def iter_zip_with_gaps[T, U](
    left: Iterable[T],
    right: Iterable[U],
    compare: Callable[[Any, Any], Ord] | None = None,
    key: KeyFn | None = None,
) -> Iterator[ZipEntry[T, U]]:
    """
    Lazily merge two sorted iterables, yielding the same steps zip_with_gaps
    would make on the materialized inputs. At most one element per side is
    held at a time, so unbounded streams are fine.

    `compare` receives keys; the indices carried by InvalidOrdError count
    elements consumed on each side.
    """
    compare = compare or Ord.of
    key = key or (lambda x: x)

    left_it = iter(left)
    right_it = iter(right)
    x: Any = next(left_it, _END)
    y: Any = next(right_it, _END)
    i, j = 0, 0

    while x is not _END or y is not _END:
        if x is _END:
            yield ZipEntry(Side.RIGHT, None, y)
            y = next(right_it, _END)
            j += 1
        elif y is _END:
            yield ZipEntry(Side.LEFT, x, None)
            x = next(left_it, _END)
            i += 1
        else:
            c = compare(key(x), key(y))

            if c is Ord.LESS:
                yield ZipEntry(Side.LEFT, x, None)
                x = next(left_it, _END)
                i += 1
            elif c is Ord.GREATER:
                yield ZipEntry(Side.RIGHT, None, y)
                y = next(right_it, _END)
                j += 1
            elif c is Ord.EQUAL:
                yield ZipEntry(Side.BOTH, x, y)
                x = next(left_it, _END)
                y = next(right_it, _END)
                i += 1
                j += 1
            else:
                raise InvalidOrdError(i, j, c)
