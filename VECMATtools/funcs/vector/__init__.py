"""
VECMATtools Vector Operations Module

Provides the numeric kernels behind the Vector type: element sum, Euclidean
norm and element-wise addition of one-dimensional numeric arrays.
"""

# Import main classes
from .operations import VectorOperations


# Import core functions for advanced users
from .core_functions import (
    vector_sum_1D_nb_core,
    vector_squared_norm_1D_nb_core,
    vector_add_1D_nb_core,
    vector_sum_np_core,
    vector_squared_norm_np_core,
    vector_add_np_core
)

# Define public API
__all__ = [
    'VectorOperations',
    # Core functions for advanced use
    'vector_sum_1D_nb_core',
    'vector_squared_norm_1D_nb_core',
    'vector_add_1D_nb_core',
    'vector_sum_np_core',
    'vector_squared_norm_np_core',
    'vector_add_np_core'
]
