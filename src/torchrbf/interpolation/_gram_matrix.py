"""Gram matrix assembly."""

from __future__ import annotations

from typing import TYPE_CHECKING

import torch
from torch import Tensor

if TYPE_CHECKING:
    from torchrbf.kernel import RBFKernel


def gram_matrix(points: Tensor, kernel: RBFKernel) -> Tensor:
    """Build the symmetric kernel matrix of a point set.

    Parameters
    ----------
    points : Tensor
        Points, shape (n, dim).
    kernel : RBFKernel
        Kernel applied to pairwise Euclidean distances.

    Returns
    -------
    Phi : Tensor
        Gram matrix, shape (n, n), with Phi[i, j] = φ(||x_i - x_j||).

    Notes
    -----
    The kernel is evaluated on the n(n+1)/2 pairs of the upper triangle
    only and the result is mirrored, so Phi is exactly symmetric and its
    diagonal is φ(0).
    """
    n = points.shape[0]

    i, j = torch.triu_indices(n, n, device=points.device)
    distances = torch.linalg.vector_norm(points[j] - points[i], dim=-1)
    values = kernel.evaluate(distances)

    phi = torch.zeros(n, n, dtype=values.dtype, device=values.device)
    phi[i, j] = values
    phi[j, i] = values
    return phi
