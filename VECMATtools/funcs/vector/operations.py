"""
    VECMATtools Vector Operations Module

    This module provides the numeric operations behind the Vector type: sum,
    Euclidean norm and element-wise addition, using Numba kernels for the
    int64 and float64 dtypes. It falls back to NumPy implementations for
    every other dtype, or when Numba is not used.

"""

import numpy as np
from ...exceptions import DimensionMismatchError
from .constants import *
from .core_functions import *


class VectorOperations():
    """
    Vector Operations using Numba kernels
    """

    def __init__(
        self,
        use_numba: bool = True,
        debug: bool = False) -> None:
        """
        Initialize the VectorOperations class.

        Args:
            use_numba (bool, optional): use Numba core functions. Defaults to True.
            debug (bool, optional): print which kernel handles each call. Defaults to False.
        """
        self.use_numba = use_numba
        self.debug = debug


    def _numba_ready(
        self,
        vec: np.ndarray) -> bool:
        """
        True when a compiled kernel exists for this array
        """
        if not self.use_numba:
            return False
        if vec.dtype in NUMBA_DTYPES:
            return True
        if self.debug:
            print(f"Warning: no Numba kernel for dtype {vec.dtype}, falling back to numpy implementation")
        return False


    def vector_sum(
        self,
        vec: np.ndarray):
        """
        Sum of the elements in the element dtype (integer overflow wraps)
        """
        if self._numba_ready(vec):
            return vector_sum_1D_nb_core(vec)
        return vector_sum_np_core(vec)


    def vector_norm(
        self,
        vec: np.ndarray) -> float:
        """
        Euclidean norm, sqrt(sum(e*e)), as a float. 0.0 for an empty vector.
        """
        if self._numba_ready(vec):
            sq = vector_squared_norm_1D_nb_core(vec)
        else:
            sq = vector_squared_norm_np_core(vec)
        return float(np.sqrt(sq))


    def vector_add(
        self,
        vec1: np.ndarray,
        vec2: np.ndarray) -> np.ndarray:
        """
        Element-wise sum of two vectors of equal length and dtype
        """
        if vec1.shape[0] != vec2.shape[0]:
            raise DimensionMismatchError(
                f"Vectors of unequal size ({vec1.shape[0]} and {vec2.shape[0]})",
                (vec1.shape[0], vec2.shape[0]))
        if vec1.dtype != vec2.dtype:
            raise TypeError(f"Vectors of different dtypes ({vec1.dtype} and {vec2.dtype})")

        if self._numba_ready(vec1):
            return vector_add_1D_nb_core(vec1, vec2)
        return vector_add_np_core(vec1, vec2)
