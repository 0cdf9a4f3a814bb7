"""torchrbf: radial basis function interpolation for PyTorch tensors."""

from . import interpolation, kernel
from ._dimension_mismatch_error import DimensionMismatchError
from ._rbf_accuracy_warning import RBFAccuracyWarning
from ._rbf_error import RBFError
from ._singular_system_error import SingularSystemError
from ._unfitted_error import UnfittedError
from .interpolation import (
    RBFInterpolation,
    RBFSampleSet,
    gram_matrix,
    rbf_interpolate,
    solve_weights,
)
from .kernel import (
    KERNELS,
    CubicKernel,
    GaussianKernel,
    InverseMultiquadricKernel,
    InverseQuadraticKernel,
    LinearKernel,
    MultiquadricKernel,
    RBFKernel,
    ThinPlateSplineKernel,
    rbf_kernel,
)

__all__ = [
    "KERNELS",
    "CubicKernel",
    "DimensionMismatchError",
    "GaussianKernel",
    "InverseMultiquadricKernel",
    "InverseQuadraticKernel",
    "LinearKernel",
    "MultiquadricKernel",
    "RBFAccuracyWarning",
    "RBFError",
    "RBFInterpolation",
    "RBFKernel",
    "RBFSampleSet",
    "SingularSystemError",
    "ThinPlateSplineKernel",
    "UnfittedError",
    "gram_matrix",
    "interpolation",
    "kernel",
    "rbf_interpolate",
    "rbf_kernel",
    "solve_weights",
]

__version__ = "0.1.0"
