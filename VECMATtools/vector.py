"""
Title:          Vector
Description:    Fixed-length numeric vector with bounds-checked element access,
                summation and Euclidean norm. One numpy dtype per instance.

"""

## ###############################################################
## IMPORTS
## ###############################################################

# python dependencies
import numpy as np
from typing import Iterable, Iterator, Union

from .exceptions import IndexOutOfBoundsError
from .funcs.vector.constants import DEFAULT_DTYPE, DEFAULT_LENGTH
from .funcs.vector.operations import VectorOperations
from .funcs.strings.operations import StringOperations


def check_dtype(
    dtype) -> np.dtype:
    """
    Normalise a dtype-like to np.dtype, accepting integer and floating
    types only.
    """
    dtype = np.dtype(dtype)
    if not (np.issubdtype(dtype, np.integer) or np.issubdtype(dtype, np.floating)):
        raise TypeError(f"dtype must be an integer or floating type. Got {dtype}")
    return dtype


def check_index(
    index,
    length: int) -> int:
    """
    Validate an element/row index against [0, length). Negative indices do
    not wrap around.
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
        raise TypeError(f"index must be an integer. Got {type(index).__name__}")
    if not 0 <= index < length:
        raise IndexOutOfBoundsError(int(index), length)
    return int(index)


## ###############################################################
## Vector
## ###############################################################

class Vector:
    """
    Ordered, fixed-length, mutable sequence of numeric elements.

    The length is set at construction and never changes; elements change only
    through indexed assignment. Every constructor copies its input, so two
    vectors never share storage.
    """

    def __init__(
        self,
        length      : int  = DEFAULT_LENGTH,
        dtype              = DEFAULT_DTYPE,
        use_numba   : bool = True,
        debug       : bool = False) -> None:
        """
        Initialize a zero vector.

        Args:
            length (int)        : number of elements. May be 0. Default is 3.
            dtype (np.dtype)    : integer or floating element type. Default is int64.
            use_numba (bool)    : use Numba kernels for sum, norm and addition. Default is True.
            debug (bool)        : print diagnostics. Default is False.
        """
        if isinstance(length, (bool, np.bool_)) or not isinstance(length, (int, np.integer)):
            raise TypeError(f"length must be an integer. Got {type(length).__name__}")
        if length < 0:
            raise ValueError(f"length must be non-negative. Got {length}")

        self._v = np.zeros(int(length), dtype=check_dtype(dtype))
        self._ops = VectorOperations(use_numba=use_numba, debug=debug)

        if debug:
            print(f"Vector: length={length}, dtype={self._v.dtype}, use_numba={use_numba}")


    @classmethod
    def _from_array(
        cls,
        arr: np.ndarray,
        ops: VectorOperations) -> "Vector":
        """Wrap an array this module already owns, without copying"""
        vec = cls.__new__(cls)
        vec._v = arr
        vec._ops = ops
        return vec


    @classmethod
    def from_sequence(
        cls,
        seq: Union[Iterable, "Vector", np.ndarray],
        dtype=None,
        use_numba: bool = True,
        debug: bool = False) -> "Vector":
        """
        Copy an ordered sequence into a new vector.

        Args:
            seq (sequence)      : one-dimensional sequence of numbers, a numpy array or a Vector
            dtype (np.dtype)    : element type. Inferred from seq when None
                                  (int64 for an empty sequence).

        Returns:
            Vector with len(seq) elements
        """
        if isinstance(seq, Vector):
            seq = seq._v
        if dtype is None:
            arr = np.array(seq)
            if arr.size == 0:
                arr = arr.astype(DEFAULT_DTYPE)
        else:
            arr = np.array(seq, dtype=check_dtype(dtype))
        if arr.ndim != 1:
            raise ValueError(f"sequence must be one-dimensional. Got {arr.ndim} dimensions")
        check_dtype(arr.dtype)

        if debug:
            print(f"Vector: copied {arr.shape[0]} elements, dtype={arr.dtype}")
        return cls._from_array(arr, VectorOperations(use_numba=use_numba, debug=debug))


    @classmethod
    def from_string(
        cls,
        text: str,
        dtype=DEFAULT_DTYPE,
        use_numba: bool = True,
        debug: bool = False) -> "Vector":
        """
        Best-effort parse: every run of ASCII digits in text becomes one
        element, in order; everything else (signs included) is skipped.
        Never fails on content; text without digits gives an empty vector.
        """
        arr = StringOperations(debug=debug).parse_vector(text, check_dtype(dtype))
        return cls._from_array(arr, VectorOperations(use_numba=use_numba, debug=debug))


    ## ###############################################################
    ## Element access
    ## ###############################################################

    def __getitem__(
        self,
        index: int):
        return self._v[check_index(index, self._v.shape[0])].item()


    def __setitem__(
        self,
        index: int,
        value) -> None:
        self._v[check_index(index, self._v.shape[0])] = value


    def get(
        self,
        index: int):
        """Element at index; IndexOutOfBoundsError outside [0, length)"""
        return self[index]


    def set(
        self,
        index: int,
        value) -> None:
        """Overwrite the element at index; IndexOutOfBoundsError outside [0, length)"""
        self[index] = value


    def __len__(self) -> int:
        return self._v.shape[0]


    def length(self) -> int:
        return self._v.shape[0]


    size = length


    @property
    def dtype(self) -> np.dtype:
        return self._v.dtype


    def __iter__(self) -> Iterator:
        # index based so that assignments made while iterating are seen
        for i in range(self._v.shape[0]):
            yield self._v[i].item()


    def to_array(self) -> np.ndarray:
        """Copy of the elements as a numpy array"""
        return self._v.copy()


    def copy(self) -> "Vector":
        return Vector._from_array(self._v.copy(), self._ops)


    ## ###############################################################
    ## Reductions
    ## ###############################################################

    def sum(self):
        """
        Sum of the elements with the dtype's own arithmetic, so integer
        overflow wraps instead of growing.
        """
        return self._v.dtype.type(self._ops.vector_sum(self._v)).item()


    def norm(self) -> float:
        """
        Euclidean norm sqrt(sum(e*e)) as a float; 0.0 for an empty vector.
        """
        return self._ops.vector_norm(self._v)


    ## ###############################################################
    ## Operators
    ## ###############################################################

    def __add__(
        self,
        other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        from .arithmetic import add_vectors
        return add_vectors(self, other)


    def __eq__(
        self,
        other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))


    __hash__ = None


    def __str__(self) -> str:
        from .formatting import to_string
        return to_string(self)


    def __repr__(self) -> str:
        return f"Vector({self._v.tolist()}, dtype={self._v.dtype})"
