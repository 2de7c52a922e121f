from numba import njit
import numpy as np
from .constants import *

##########################################################################################
# Core numba JIT functions for vector operations
##########################################################################################

@njit([sig_sum_1d_i64, sig_sum_1d_f64], cache=True)
def vector_sum_1D_nb_core(
    vec):
    """
    Sum of the elements of a 1D vector, in the element dtype
    vec: shape (N,)
    returns: scalar
    """
    acc = 0
    for i in range(vec.shape[0]):
        acc += vec[i]

    return acc


@njit([sig_sqnorm_1d_i64, sig_sqnorm_1d_f64], cache=True)
def vector_squared_norm_1D_nb_core(
    vec):
    """
    Sum of the squared elements of a 1D vector, accumulated in float64
    vec: shape (N,)
    returns: float64 scalar
    """
    acc = 0.0
    for i in range(vec.shape[0]):
        e = float(vec[i])
        acc += e * e

    return acc


@njit([sig_add_1d_i64, sig_add_1d_f64], cache=True)
def vector_add_1D_nb_core(
    vec1,
    vec2):
    """
    Element-wise sum of two 1D vectors of equal length
    vec1, vec2: shape (N,)
    returns: shape (N,)
    """
    N = vec1.shape[0]
    out = np.empty_like(vec1)

    for i in range(N):
        out[i] = vec1[i] + vec2[i]

    return out


##########################################################################################
# Core numpy functions for vector operations
##########################################################################################


def vector_sum_np_core(
    vec: np.ndarray):
    """
    Sum of the elements of a 1D vector, keeping the element dtype so that
    integer overflow wraps the same way the numba kernel does.
    """
    return np.sum(vec, dtype=vec.dtype)


def vector_squared_norm_np_core(
    vec: np.ndarray) -> float:
    """
    Sum of the squared elements of a 1D vector, accumulated in float64.
    """
    vec = vec.astype(np.float64)
    return np.sum(vec * vec)


def vector_add_np_core(
    vec1: np.ndarray,
    vec2: np.ndarray) -> np.ndarray:
    """
    Element-wise sum of two 1D vectors of equal length and dtype.
    """
    return np.add(vec1, vec2, dtype=vec1.dtype)
