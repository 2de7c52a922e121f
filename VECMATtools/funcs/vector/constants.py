import numpy as np
from numba import types

##############################################################################
# Global constants
##############################################################################

# Constants
DEFAULT_LENGTH = 3
DEFAULT_DTYPE = np.dtype(np.int64)

# dtypes with compiled numba kernels, everything else uses numpy
NUMBA_DTYPES = (np.dtype(np.int64), np.dtype(np.float64))


##############################################################################
# Type signatures for Numba functions
##############################################################################

# Vector sum signatures
sig_sum_1d_i64 = types.int64(
    types.int64[:]
    )
sig_sum_1d_f64 = types.float64(
    types.float64[:]
    )

# Vector squared norm signatures (always accumulated in float64)
sig_sqnorm_1d_i64 = types.float64(
    types.int64[:]
    )
sig_sqnorm_1d_f64 = types.float64(
    types.float64[:]
    )

# Vector element-wise addition signatures
sig_add_1d_i64 = types.int64[:](
    types.int64[:],
    types.int64[:]
    )
sig_add_1d_f64 = types.float64[:](
    types.float64[:],
    types.float64[:]
    )
