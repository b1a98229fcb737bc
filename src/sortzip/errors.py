from typing import Any


class ZipperContractError(RuntimeError):
    """
    A Zipper implementation broke its contract. This is a programming error:
    fix the Zipper, don't catch and retry.
    """


class NegativeLengthError(ZipperContractError):
    def __init__(self, len_left: int, len_right: int):
        self.len_left = len_left
        self.len_right = len_right
        super().__init__(f"zip_with_gaps: negative lengths {len_left} {len_right}")


class InvalidOrdError(ZipperContractError):
    def __init__(self, i: int, j: int, result: Any):
        self.i = i
        self.j = j
        self.result = result
        super().__init__(
            f"zip: compare({i}, {j}) returned {result!r}: expected Less, Equal, or Greater"
        )


class UnsortedInputError(ValueError):
    """Input handed to an adapter is not in non-decreasing order."""

    def __init__(self, side: str, index: int):
        self.side = side
        self.index = index
        super().__init__(
            f"{side} input is not sorted: element {index} sorts before element {index - 1}"
        )
