"""RBF kernel shapes."""

from __future__ import annotations

import torch
from torch import Tensor

from ._rbf_kernel import RBFKernel, ShapeParameterRBFKernel


class GaussianKernel(ShapeParameterRBFKernel):
    """Gaussian kernel: exp(-ε²r²).

    Strictly positive definite, φ(0) = 1.

    Parameters
    ----------
    epsilon : float
        Shape parameter. Larger values give more localized influence.
    """

    positive_definite = True

    def evaluate(self, r: Tensor) -> Tensor:
        return torch.exp(-(self.epsilon**2) * r**2)


class InverseQuadraticKernel(ShapeParameterRBFKernel):
    """Inverse quadratic kernel: 1/(1 + ε²r²).

    Strictly positive definite, φ(0) = 1.
    """

    positive_definite = True

    def evaluate(self, r: Tensor) -> Tensor:
        return 1 / (1 + self.epsilon**2 * r**2)


class InverseMultiquadricKernel(ShapeParameterRBFKernel):
    """Inverse multiquadric kernel: 1/sqrt(1 + ε²r²).

    Strictly positive definite, φ(0) = 1.
    """

    positive_definite = True

    def evaluate(self, r: Tensor) -> Tensor:
        return 1 / torch.sqrt(1 + self.epsilon**2 * r**2)


class MultiquadricKernel(ShapeParameterRBFKernel):
    """Multiquadric kernel: sqrt(1 + ε²r²).

    The Gram matrix of distinct points is nonsingular but indefinite,
    φ(0) = 1.
    """

    def evaluate(self, r: Tensor) -> Tensor:
        return torch.sqrt(1 + self.epsilon**2 * r**2)


class ThinPlateSplineKernel(RBFKernel):
    """Thin plate spline kernel: r² log(r), with φ(0) = 0."""

    def evaluate(self, r: Tensor) -> Tensor:
        # r² log(r) -> 0 as r -> 0
        safe_r = torch.where(r > 0, r, torch.ones_like(r))
        return torch.where(
            r > 0,
            r**2 * torch.log(safe_r),
            torch.zeros_like(r),
        )

    def __repr__(self) -> str:
        return "ThinPlateSplineKernel()"


class CubicKernel(RBFKernel):
    """Cubic kernel: r³."""

    def evaluate(self, r: Tensor) -> Tensor:
        return r**3

    def __repr__(self) -> str:
        return "CubicKernel()"


class LinearKernel(RBFKernel):
    """Linear kernel: r.

    The Gram matrix is the Euclidean distance matrix, which is nonsingular
    for distinct points.
    """

    def evaluate(self, r: Tensor) -> Tensor:
        return r.clone()

    def __repr__(self) -> str:
        return "LinearKernel()"


KERNELS = {
    "gaussian": GaussianKernel,
    "inverse_quadratic": InverseQuadraticKernel,
    "inverse_multiquadric": InverseMultiquadricKernel,
    "multiquadric": MultiquadricKernel,
    "thin_plate": ThinPlateSplineKernel,
    "cubic": CubicKernel,
    "linear": LinearKernel,
}

# Kernels that take an epsilon shape parameter
KERNELS_WITH_EPSILON = {
    name
    for name, cls in KERNELS.items()
    if issubclass(cls, ShapeParameterRBFKernel)
}


def rbf_kernel(name: str, **parameters) -> RBFKernel:
    """Construct a kernel by name.

    Parameters
    ----------
    name : str
        Kernel name. One of:

        - ``"gaussian"``: exp(-ε²r²)
        - ``"inverse_quadratic"``: 1/(1 + ε²r²)
        - ``"inverse_multiquadric"``: 1/sqrt(1 + ε²r²)
        - ``"multiquadric"``: sqrt(1 + ε²r²)
        - ``"thin_plate"``: r² log(r)
        - ``"cubic"``: r³
        - ``"linear"``: r

    **parameters
        Shape parameters forwarded to the kernel (``epsilon``).

    Returns
    -------
    RBFKernel
        The kernel instance.

    Examples
    --------
    >>> kernel = rbf_kernel("gaussian", epsilon=2.0)
    >>> kernel.evaluate_value(0.0)
    1.0
    """
    if name not in KERNELS:
        raise ValueError(
            f"Unknown kernel '{name}'. Available: {list(KERNELS.keys())}"
        )

    if parameters and name not in KERNELS_WITH_EPSILON:
        raise ValueError(
            f"Kernel '{name}' takes no parameters, got {sorted(parameters)}"
        )

    return KERNELS[name](**parameters)
