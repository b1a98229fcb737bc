from collections.abc import Sequence

from sortzip.adapters import SequenceZipper, Side, ZipEntry
from sortzip.config import ZipConfig
from sortzip.ord import Ord
from sortzip.utils.types import GenomicInterval


def intersect(x: GenomicInterval, y: GenomicInterval) -> GenomicInterval | None:
    """the shared part of x and y, or None if they don't overlap"""
    if x[0] != y[0]:
        return None

    start, end = max(x[1], y[1]), min(x[2], y[2])
    return (x[0], start, end) if start < end else None


def interval_order(x: GenomicInterval, y: GenomicInterval) -> Ord:
    """by chrom, then start, then end, as a sorted BED file is laid out"""
    ch1, start1, end1 = x
    ch2, start2, end2 = y

    if ch1 != ch2:
        return Ord.of(ch1, ch2)
    if start1 != start2:
        return Ord.of(start1, start2)
    return Ord.of(end1, end2)


def overlap_order(x: GenomicInterval, y: GenomicInterval) -> Ord:
    """EQUAL when x and y overlap, otherwise which of them lies first"""
    if intersect(x, y) is not None:
        return Ord.EQUAL
    return interval_order(x, y)


def align_intervals(
    a: Sequence[GenomicInterval],
    b: Sequence[GenomicInterval],
    config: ZipConfig | None = None,
) -> list[ZipEntry[GenomicInterval, GenomicInterval]]:
    """
    Exact-match alignment of two sorted interval lists. Intervals that merely
    overlap are reported on their own sides; see `align_overlaps`.
    """
    zipper = SequenceZipper(a, b, compare=interval_order, config=config)
    return zipper.run()


def shared_intervals(
    a: Sequence[GenomicInterval], b: Sequence[GenomicInterval]
) -> list[GenomicInterval]:
    return [
        entry.left
        for entry in align_intervals(a, b)
        if entry.side is Side.BOTH and entry.left is not None
    ]


def align_overlaps(
    a: Sequence[GenomicInterval],
    b: Sequence[GenomicInterval],
    config: ZipConfig | None = None,
) -> list[ZipEntry[GenomicInterval, GenomicInterval]]:
    """
    Pair overlapping intervals of two sorted lists in a single merge pass.

    Each interval is paired with at most one partner: the first overlapping
    interval the merge meets on the other side. An interval that overlaps
    several on the other side is not repeated, so the remaining ones come out
    on their own sides.
    """
    zipper = SequenceZipper(a, b, compare=overlap_order, config=config)
    return zipper.run()


def overlap_pairs(
    a: Sequence[GenomicInterval], b: Sequence[GenomicInterval]
) -> list[tuple[GenomicInterval, GenomicInterval, int]]:
    """(x, y, overlapping bases) for each pair found by `align_overlaps`"""
    pairs = []

    for entry in align_overlaps(a, b):
        if entry.side is not Side.BOTH or entry.left is None or entry.right is None:
            continue

        overlap = intersect(entry.left, entry.right)
        assert overlap is not None
        pairs.append((entry.left, entry.right, overlap[2] - overlap[1]))

    return pairs
