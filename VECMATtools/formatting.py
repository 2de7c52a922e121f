"""
Title:          Formatting
Description:    Human-readable rendering of vectors and matrices, for display
                and debugging. The output does not parse back through
                Vector.from_string.

"""

from typing import Union

from .funcs.strings.operations import StringOperations
from .matrix import Matrix
from .vector import Vector

_string_ops = StringOperations()


def to_string(
    value: Union[Vector, Matrix]) -> str:
    """
    Render a Vector as "[ 1, 2, 3 ]" ("[]" when empty), or a Matrix as

        [
          [ 1, 2 ],
          [ 3, 4 ]
        ]

    Args:
        value (Vector or Matrix): the value to render

    Returns:
        the rendered string
    """
    if isinstance(value, Vector):
        return _string_ops.vector_to_string(value)
    if isinstance(value, Matrix):
        return _string_ops.matrix_to_string(value)
    raise TypeError(f"to_string expects a Vector or Matrix. Got {type(value).__name__}")
