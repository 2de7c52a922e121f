"""
Title:          Matrix
Description:    Ordered, fixed-length sequence of Vector rows with bounds-checked
                row access and summation.

                Rows are not required to share a length: a ragged matrix is a
                valid value. is_rectangular() reports whether it is one, and
                add_matrices fails on the first row pair of unequal length.

"""

## ###############################################################
## IMPORTS
## ###############################################################

# python dependencies
import numpy as np
from typing import Iterable, Iterator, List, Union

from .funcs.vector.constants import DEFAULT_DTYPE
from .funcs.matrix.operations import MatrixOperations
from .vector import Vector, check_dtype, check_index


## ###############################################################
## Matrix
## ###############################################################

class Matrix:
    """
    Class for a matrix stored as a list of Vector rows sharing one dtype.
    """

    def __init__(
        self,
        n_rows      : int,
        n_cols      : int,
        dtype              = DEFAULT_DTYPE,
        use_numba   : bool = True,
        debug       : bool = False) -> None:
        """
        Initialize a zero matrix.

        Args:
            n_rows (int)        : number of rows. May be 0.
            n_cols (int)        : length of every row. May be 0.
            dtype (np.dtype)    : integer or floating element type. Default is int64.
            use_numba (bool)    : use Numba kernels for the per-row work. Default is True.
            debug (bool)        : print diagnostics. Default is False.
        """
        for name, value in (("n_rows", n_rows), ("n_cols", n_cols)):
            if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
                raise TypeError(f"{name} must be an integer. Got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{name} must be non-negative. Got {value}")

        self._dtype = check_dtype(dtype)
        self._ops = MatrixOperations(use_numba=use_numba, debug=debug)
        self._rows = [Vector._from_array(np.zeros(int(n_cols), dtype=self._dtype), self._ops)
                      for _ in range(int(n_rows))]

        if debug:
            print(f"Matrix: n_rows={n_rows}, n_cols={n_cols}, dtype={self._dtype}, use_numba={use_numba}")


    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Union[Vector, Iterable]],
        dtype=None,
        use_numba: bool = True,
        debug: bool = False) -> "Matrix":
        """
        Copy a sequence of rows into a new matrix, keeping their order and
        their individual lengths.

        Args:
            rows (iterable)     : Vectors, one-dimensional sequences or a 2D numpy array
            dtype (np.dtype)    : element type. When None, the common type of the
                                  rows (int64 when no row carries a type).

        Returns:
            Matrix with one row per input row
        """
        arrays = []
        candidates = []
        for row in rows:
            if isinstance(row, Vector):
                arr = row.to_array()
                candidates.append(arr.dtype)
            else:
                arr = np.array(row) if dtype is None else np.array(row, dtype=check_dtype(dtype))
                if arr.size > 0:
                    candidates.append(arr.dtype)
            if arr.ndim != 1:
                raise ValueError(f"every row must be one-dimensional. Got {arr.ndim} dimensions")
            arrays.append(arr)

        if dtype is None:
            dtype = np.result_type(*candidates) if candidates else DEFAULT_DTYPE

        mat = cls(0, 0, dtype=dtype, use_numba=use_numba, debug=False)
        mat._rows = [Vector._from_array(arr.astype(mat._dtype), mat._ops) for arr in arrays]
        mat._ops.debug = debug

        if debug:
            print(f"Matrix: copied {len(arrays)} rows, dtype={mat._dtype}, rectangular={mat.is_rectangular()}")
        return mat


    ## ###############################################################
    ## Row access
    ## ###############################################################

    def __getitem__(
        self,
        index: int) -> Vector:
        # the owned row, so m[i][j] = x writes into the matrix
        return self._rows[check_index(index, len(self._rows))]


    def __setitem__(
        self,
        index: int,
        row: Union[Vector, Iterable]) -> None:
        index = check_index(index, len(self._rows))
        arr = np.array(row.to_array() if isinstance(row, Vector) else row, dtype=self._dtype)
        if arr.ndim != 1:
            raise ValueError(f"row must be one-dimensional. Got {arr.ndim} dimensions")
        self._rows[index] = Vector._from_array(arr, self._ops)


    def get_row(
        self,
        index: int) -> Vector:
        """Row at index; IndexOutOfBoundsError outside [0, row_count)"""
        return self[index]


    def set_row(
        self,
        index: int,
        row: Union[Vector, Iterable]) -> None:
        """
        Replace the row at index with a copy of row, cast to the matrix dtype.

        Unlike add_vectors, no dtype check is made: floats stored into an
        integer matrix are truncated toward zero ([1.9, 2.1] -> [1, 2]).
        """
        self[index] = row


    def __len__(self) -> int:
        return len(self._rows)


    def row_count(self) -> int:
        return len(self._rows)


    size = row_count


    @property
    def dtype(self) -> np.dtype:
        return self._dtype


    def __iter__(self) -> Iterator[Vector]:
        for i in range(len(self._rows)):
            yield self._rows[i]


    def is_rectangular(self) -> bool:
        return self._ops.matrix_is_rectangular([row._v for row in self._rows])


    def copy(self) -> "Matrix":
        return Matrix.from_rows(self._rows, dtype=self._dtype,
                                use_numba=self._ops.use_numba, debug=self._ops.debug)


    def tolist(self) -> List[list]:
        return [row.to_array().tolist() for row in self._rows]


    ## ###############################################################
    ## Reductions
    ## ###############################################################

    def sum(self):
        """Sum of all elements, i.e. the sum of every row's sum()"""
        return self._ops.matrix_sum([row._v for row in self._rows], self._dtype).item()


    ## ###############################################################
    ## Operators
    ## ###############################################################

    def __add__(
        self,
        other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        from .arithmetic import add_matrices
        return add_matrices(self, other)


    def __eq__(
        self,
        other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (len(self._rows) == len(other._rows)
                and all(a == b for a, b in zip(self._rows, other._rows)))


    __hash__ = None


    def __str__(self) -> str:
        from .formatting import to_string
        return to_string(self)


    def __repr__(self) -> str:
        return f"Matrix({self.tolist()}, dtype={self._dtype})"
