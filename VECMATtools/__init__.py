"""
VECMATtools

Fixed-dimension numeric Vector and Matrix value types with element access,
summation, Euclidean norm, element-wise addition, best-effort parsing from
free-form text and human-readable formatting.
"""

# Import main classes
from .vector import Vector
from .matrix import Matrix

# Import free functions
from .arithmetic import add_vectors, add_matrices, vector_addition_error
from .formatting import to_string

# Import errors
from .exceptions import VECMATtoolsError, DimensionMismatchError, IndexOutOfBoundsError

# Version info
__version__ = "0.1.0"

# Define public API
__all__ = [
    'Vector',
    'Matrix',
    'add_vectors',
    'add_matrices',
    'vector_addition_error',
    'to_string',
    'VECMATtoolsError',
    'DimensionMismatchError',
    'IndexOutOfBoundsError'
]
