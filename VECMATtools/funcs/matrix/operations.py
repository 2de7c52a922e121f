"""
    VECMATtools Matrix Operations Module

    Row-wise operations over a list of one-dimensional row arrays. Rows may
    have different lengths; every per-row step is delegated to the vector
    kernels inherited from VectorOperations.

"""

import numpy as np
from typing import List
from ...exceptions import DimensionMismatchError
from ..vector.operations import VectorOperations
from .core_functions import *


class MatrixOperations(VectorOperations):
    """
    A class to perform operations on matrices stored as lists of rows.
    No data objects. Only methods.

    """

    def __init__(
        self,
        use_numba: bool = True,
        debug: bool = False) -> None:
        """
        Initialize the MatrixOperations class.

        Args:
            use_numba (bool, optional): use Numba core functions for each row. Defaults to True.
            debug (bool, optional): print diagnostics. Defaults to False.
        """
        VectorOperations.__init__(
            self,
            use_numba=use_numba,
            debug=debug)


    def matrix_sum(
        self,
        rows: List[np.ndarray],
        dtype: np.dtype):
        """
        Sum of every element across all rows, i.e. the sum of the row sums
        """
        return matrix_sum_np_core(
            [self.vector_sum(row) for row in rows],
            dtype)


    def matrix_add(
        self,
        rows_1: List[np.ndarray],
        rows_2: List[np.ndarray]) -> List[np.ndarray]:
        """
        Row-wise sum of two matrices. The row counts are checked first; each
        row pair then goes through vector_add, whose length check raises for
        ragged pairs.
        """
        if len(rows_1) != len(rows_2):
            raise DimensionMismatchError(
                f"Matrices of unequal size ({len(rows_1)} and {len(rows_2)})",
                (len(rows_1), len(rows_2)))

        if self.debug:
            print(f"MatrixOperations: adding {len(rows_1)} row pairs")
        return [self.vector_add(row_1, row_2)
                for row_1, row_2 in zip(rows_1, rows_2)]


    def matrix_is_rectangular(
        self,
        rows: List[np.ndarray]) -> bool:
        """True when all rows share one length"""
        return matrix_is_rectangular_np_core([row.shape[0] for row in rows])
