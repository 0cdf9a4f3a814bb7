"""Scattered-data interpolation with radial basis functions.

Engine
------
RBFInterpolation
    Stores samples, solves weights and evaluates the fitted function.
rbf_interpolate
    Fit an interpolation and return it as a callable.

Building Blocks
---------------
gram_matrix
    Symmetric kernel matrix of a point set.
solve_weights
    Cholesky-first solve with LU fallback and residual check.

Data Types
----------
RBFSampleSet
    Sample points and values.
"""

from ._gram_matrix import gram_matrix
from ._rbf_interpolate import rbf_interpolate
from ._rbf_interpolation import RBFInterpolation
from ._rbf_sample_set import RBFSampleSet
from ._solve_weights import solve_weights

__all__ = [
    "RBFInterpolation",
    "RBFSampleSet",
    "gram_matrix",
    "rbf_interpolate",
    "solve_weights",
]
