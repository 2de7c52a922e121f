"""
VECMATtools String Operations Module

Provides the text conversions for vectors and matrices: best-effort parsing
of digit runs and the bracketed display format.
"""

# Import main classes
from .operations import StringOperations

# Import core functions for advanced users
from .core_functions import (
    digit_runs_core,
    vector_from_string_core,
    format_element_core,
    vector_to_string_core,
    matrix_to_string_core
)

# Define public API
__all__ = [
    'StringOperations',
    # Core functions for advanced use
    'digit_runs_core',
    'vector_from_string_core',
    'format_element_core',
    'vector_to_string_core',
    'matrix_to_string_core'
]
