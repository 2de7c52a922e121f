"""
VECMATtools Matrix Operations Module

Provides row-wise operations for matrices stored as lists of vector rows,
including the matrix sum, row-wise addition and a rectangularity check.
"""

# Import main classes
from .operations import MatrixOperations

# Import core functions for advanced users
from .core_functions import (
    matrix_sum_np_core,
    matrix_is_rectangular_np_core
)

# Define public API
__all__ = [
    'MatrixOperations',
    # Core functions for advanced use
    'matrix_sum_np_core',
    'matrix_is_rectangular_np_core'
]
