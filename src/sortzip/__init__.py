from .adapters import ArrayZipper, CallbackZipper, SequenceZipper, Side, ZipEntry
from .config import ZipConfig
from .errors import (
    InvalidOrdError,
    NegativeLengthError,
    UnsortedInputError,
    ZipperContractError,
)
from .iter_utils import ZipLongest, iter_zip_with_gaps
from .ord import EQUAL, GREATER, LESS, Ord
from .set_ops import (
    difference,
    intersection,
    merge_join,
    symmetric_difference,
    union,
)
from .zipper import AlwaysEqualZipper, Zipper, zip_positional, zip_with_gaps

__all__ = [
    "EQUAL",
    "GREATER",
    "LESS",
    "AlwaysEqualZipper",
    "ArrayZipper",
    "CallbackZipper",
    "InvalidOrdError",
    "NegativeLengthError",
    "Ord",
    "SequenceZipper",
    "Side",
    "UnsortedInputError",
    "ZipConfig",
    "ZipEntry",
    "ZipLongest",
    "Zipper",
    "ZipperContractError",
    "difference",
    "intersection",
    "iter_zip_with_gaps",
    "merge_join",
    "symmetric_difference",
    "union",
    "zip_positional",
    "zip_with_gaps",
]
