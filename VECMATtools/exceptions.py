"""
    VECMATtools Exceptions

    Errors raised by the Vector and Matrix types and the free functions that
    combine them. Each error also derives from the matching builtin, so
    ``except IndexError`` / ``except ValueError`` keep working for callers
    that do not know about this library.

"""

from typing import Tuple


class VECMATtoolsError(Exception):
    """Base class for every error raised by VECMATtools."""


class DimensionMismatchError(VECMATtoolsError, ValueError):
    """
    Two operands of an element-wise operation do not have the same shape.

    Attributes:
        sizes (tuple): the two offending sizes, left operand first
    """

    def __init__(
        self,
        message: str,
        sizes: Tuple[int, int]) -> None:
        super().__init__(message)
        self.sizes = sizes


class IndexOutOfBoundsError(VECMATtoolsError, IndexError):
    """
    An index fell outside [0, length) of a vector or matrix.

    Attributes:
        index (int)  : the offending index
        length (int) : the length of the container that was indexed
    """

    def __init__(
        self,
        index: int,
        length: int) -> None:
        super().__init__(f"Index {index} out of bounds for length {length}")
        self.index = index
        self.length = length
