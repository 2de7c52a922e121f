import numpy as np
from typing import List

##########################################################################################
# Core numpy functions for matrix operations
##########################################################################################


def matrix_sum_np_core(
    row_sums: List,
    dtype: np.dtype):
    """
    Combine per-row sums into the matrix sum.

    Args:
        row_sums (list): the sum of each row, in row order
        dtype (np.dtype): element dtype of the matrix. The reduction keeps it,
                          so integer overflow wraps like the row sums do.

    Returns:
        scalar of the given dtype
    """
    return np.sum(np.asarray(row_sums, dtype=dtype), dtype=dtype)


def matrix_is_rectangular_np_core(
    row_lengths: List[int]) -> bool:
    """
    True when every row has the same length (or there are no rows).
    """
    return len(set(row_lengths)) <= 1
