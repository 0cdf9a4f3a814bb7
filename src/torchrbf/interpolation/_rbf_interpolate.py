"""RBF interpolation convenience function."""

from typing import Callable

import torch
from torch import Tensor

from torchrbf.kernel import RBFKernel

from ._rbf_interpolation import RBFInterpolation


def rbf_interpolate(
    points: Tensor,
    values: Tensor,
    kernel: RBFKernel,
    *,
    use_regularization: bool = False,
    lambda_: float = 1e-3,
) -> Callable[[Tensor], Tensor]:
    """Create an RBF interpolant for scattered data.

    This is a convenience function that fits an :class:`RBFInterpolation`
    and returns a callable that evaluates it.

    Parameters
    ----------
    points : Tensor
        Data point locations, shape (dim, n).
    values : Tensor
        Data values, shape (n,).
    kernel : RBFKernel
        Kernel to interpolate with.
    use_regularization : bool, optional
        Fit the ridge-regularized system instead of exact interpolation.
    lambda_ : float, optional
        Ridge parameter. Default is 1e-3.

    Returns
    -------
    interpolant : Callable[[Tensor], Tensor]
        Function of a query of shape (dim,), returning a 0-dim tensor, or
        of queries of shape (dim, m), returning shape (m,).

    Examples
    --------
    >>> import torch
    >>> from torchrbf import ThinPlateSplineKernel
    >>> points = torch.rand(2, 20)
    >>> values = torch.sin(points[0]) * torch.cos(points[1])
    >>> f = rbf_interpolate(points, values, ThinPlateSplineKernel())
    >>> f(torch.tensor([0.5, 0.5]))
    """
    rbf = RBFInterpolation(kernel)
    rbf.set_data(points, values)
    rbf.compute_weights(use_regularization, lambda_)

    def interpolant(query: Tensor) -> Tensor:
        query = torch.as_tensor(query)
        if query.dim() == 1:
            return rbf.get_value(query)
        return rbf.get_values(query)

    return interpolant
