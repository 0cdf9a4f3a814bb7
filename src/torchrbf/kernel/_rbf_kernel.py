"""Abstract radial basis function kernel."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

import torch
from torch import Tensor


class RBFKernel(ABC):
    """Radially symmetric kernel φ(r) of a Euclidean distance.

    Subclasses implement :meth:`evaluate`, which maps a tensor of
    non-negative distances to kernel values elementwise. Kernels hold no
    mutable state, so one instance can be shared by any number of
    interpolators.

    Attributes
    ----------
    positive_definite : bool
        Whether the Gram matrix of distinct points is guaranteed to be
        positive definite.
    """

    positive_definite: bool = False

    @abstractmethod
    def evaluate(self, r: Tensor) -> Tensor:
        """Evaluate the kernel at distances.

        Parameters
        ----------
        r : Tensor
            Non-negative distances, shape (*).

        Returns
        -------
        Tensor
            Kernel values, same shape as r.
        """
        ...

    def evaluate_value(self, distance: float) -> float:
        """Evaluate the kernel at a single distance."""
        r = torch.tensor(float(distance), dtype=torch.float64)
        return self.evaluate(r).item()

    def __call__(self, r: Tensor) -> Tensor:
        return self.evaluate(r)


class ShapeParameterRBFKernel(RBFKernel):
    """Kernel scaled by a positive shape parameter ε."""

    def __init__(self, epsilon: float = 1.0):
        epsilon = float(epsilon)
        if not math.isfinite(epsilon) or epsilon <= 0:
            raise ValueError(
                f"epsilon must be finite and positive, got {epsilon}"
            )
        self._epsilon = epsilon

    @property
    def epsilon(self) -> float:
        return self._epsilon

    def __repr__(self) -> str:
        return f"{type(self).__name__}(epsilon={self._epsilon})"
