"""
Title:          Arithmetic
Description:    Element-wise addition of vectors and matrices. Both operands must
                have the same shape and dtype; the result is a new value and the
                operands are left untouched.

"""

from .exceptions import DimensionMismatchError
from .matrix import Matrix
from .vector import Vector


def add_vectors(
    v1: Vector,
    v2: Vector) -> Vector:
    """
    Element-wise sum, result[i] = v1[i] + v2[i].

    Args:
        v1 (Vector): left operand
        v2 (Vector): right operand, same length and dtype as v1

    Returns:
        Vector of the same length and dtype

    Raises:
        DimensionMismatchError: "Vectors of unequal size (L1 and L2)"
        TypeError: operands are not Vectors or have different dtypes
    """
    if not isinstance(v1, Vector) or not isinstance(v2, Vector):
        raise TypeError(f"add_vectors expects two Vectors. Got {type(v1).__name__} and {type(v2).__name__}")
    return Vector._from_array(v1._ops.vector_add(v1._v, v2._v), v1._ops)


def vector_addition_error(
    v1: Vector,
    v2: Vector) -> str:
    """
    The DimensionMismatchError message add_vectors(v1, v2) would raise,
    or "" when the two vectors can be added.
    """
    try:
        add_vectors(v1, v2)
    except DimensionMismatchError as e:
        return str(e)
    return ""


def add_matrices(
    m1: Matrix,
    m2: Matrix) -> Matrix:
    """
    Row-wise sum, result[i] = add_vectors(m1[i], m2[i]).

    The row counts are compared before any row is added. A row pair of
    unequal length (ragged operands) raises the add_vectors error.

    Raises:
        DimensionMismatchError: "Matrices of unequal size (R1 and R2)", or the
                                per-row "Vectors of unequal size (L1 and L2)"
        TypeError: operands are not Matrices or have different dtypes
    """
    if not isinstance(m1, Matrix) or not isinstance(m2, Matrix):
        raise TypeError(f"add_matrices expects two Matrices. Got {type(m1).__name__} and {type(m2).__name__}")
    if m1.dtype != m2.dtype:
        raise TypeError(f"Matrices of different dtypes ({m1.dtype} and {m2.dtype})")

    rows = m1._ops.matrix_add([row._v for row in m1], [row._v for row in m2])
    return Matrix.from_rows(rows, dtype=m1.dtype,
                            use_numba=m1._ops.use_numba, debug=m1._ops.debug)
