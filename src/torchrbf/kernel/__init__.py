"""Radial basis function kernels.

Kernel Contract
---------------
RBFKernel
    Abstract kernel mapping non-negative distances to values.

Kernels
-------
GaussianKernel
    exp(-ε²r²), positive definite.
InverseQuadraticKernel
    1/(1 + ε²r²), positive definite.
InverseMultiquadricKernel
    1/sqrt(1 + ε²r²), positive definite.
MultiquadricKernel
    sqrt(1 + ε²r²), indefinite.
ThinPlateSplineKernel
    r² log(r).
CubicKernel
    r³.
LinearKernel
    r.

Factory
-------
rbf_kernel
    Construct a kernel from its name.
"""

from ._rbf_kernel import RBFKernel, ShapeParameterRBFKernel
from ._rbf_kernels import (
    KERNELS,
    CubicKernel,
    GaussianKernel,
    InverseMultiquadricKernel,
    InverseQuadraticKernel,
    LinearKernel,
    MultiquadricKernel,
    ThinPlateSplineKernel,
    rbf_kernel,
)

__all__ = [
    "KERNELS",
    "CubicKernel",
    "GaussianKernel",
    "InverseMultiquadricKernel",
    "InverseQuadraticKernel",
    "LinearKernel",
    "MultiquadricKernel",
    "RBFKernel",
    "ShapeParameterRBFKernel",
    "ThinPlateSplineKernel",
    "rbf_kernel",
]
