"""Stateful RBF interpolation engine."""

from __future__ import annotations

import math
from typing import Optional

import torch
from torch import Tensor

from torchrbf._dimension_mismatch_error import DimensionMismatchError
from torchrbf._unfitted_error import UnfittedError
from torchrbf.kernel import RBFKernel

from ._gram_matrix import gram_matrix
from ._rbf_sample_set import RBFSampleSet
from ._solve_weights import solve_weights


class RBFInterpolation:
    """Radial Basis Function interpolation of scattered scalar data.

    The fitted function has the form:
    f(x) = Σ w_i φ(||x - x_i||)

    where φ is the kernel, x_i are the sample points and w_i are weights
    solved so that f reproduces the sample values (or approximates them
    when regularized).

    Usage follows three steps: :meth:`set_data`, :meth:`compute_weights`,
    then any number of :meth:`get_value` / :meth:`get_values` calls.
    Loading new data discards the weights.

    Parameters
    ----------
    kernel : RBFKernel
        Kernel shared with the caller. It is referenced, never copied.

    Examples
    --------
    >>> import torch
    >>> from torchrbf import GaussianKernel, RBFInterpolation
    >>> points = torch.tensor([[0.0, 1.0, 0.0], [0.0, 0.0, 1.0]])
    >>> values = torch.tensor([0.0, 1.0, 1.0])
    >>> rbf = RBFInterpolation(GaussianKernel(epsilon=1.0))
    >>> rbf.set_data(points, values)
    >>> rbf.compute_weights()
    >>> rbf.get_value(torch.tensor([1.0, 0.0]))
    """

    def __init__(self, kernel: RBFKernel):
        if not isinstance(kernel, RBFKernel):
            raise TypeError(
                f"kernel must be an RBFKernel, got {type(kernel).__name__}"
            )

        self._kernel = kernel
        self._samples: Optional[RBFSampleSet] = None
        self._weights: Optional[Tensor] = None
        self._solver: Optional[str] = None

    @property
    def kernel(self) -> RBFKernel:
        return self._kernel

    @property
    def samples(self) -> Optional[RBFSampleSet]:
        """Stored samples, or None before :meth:`set_data`."""
        return self._samples

    @property
    def weights(self) -> Optional[Tensor]:
        """Solved weights, shape (n,), or None when not fitted."""
        return self._weights

    @property
    def solver(self) -> Optional[str]:
        """Factorization used by the last fit, ``"cholesky"`` or ``"lu"``."""
        return self._solver

    @property
    def num_samples(self) -> int:
        return 0 if self._samples is None else self._samples.points.shape[0]

    @property
    def dimension(self) -> Optional[int]:
        return None if self._samples is None else self._samples.points.shape[1]

    @property
    def is_fitted(self) -> bool:
        return self._weights is not None

    def set_data(self, points: Tensor, values: Tensor) -> None:
        """Replace the sample set.

        Parameters
        ----------
        points : Tensor
            Sample locations, shape (dim, n). Column i is the point x_i.
        values : Tensor
            Sample values, shape (n,). A (n, 1) column is accepted.

        Raises
        ------
        DimensionMismatchError
            If the shapes are not (dim, n) and (n,).
        ValueError
            If there are no samples or the data is not finite.
        """
        # Stale samples and weights must not survive a failed load
        self._samples = None
        self._weights = None
        self._solver = None

        points = torch.as_tensor(points)
        if not points.is_floating_point():
            points = points.to(torch.get_default_dtype())
        values = torch.as_tensor(values).to(
            dtype=points.dtype, device=points.device
        )

        if values.dim() == 2 and values.shape[1] == 1:
            values = values.squeeze(-1)

        if points.dim() != 2:
            raise DimensionMismatchError(
                "(dim, n) points",
                tuple(points.shape),
                "Points must be a matrix with one column per sample.",
            )
        if values.dim() != 1:
            raise DimensionMismatchError(
                "(n,) values",
                tuple(values.shape),
                "Values must be a vector.",
            )
        if points.shape[1] != values.shape[0]:
            raise DimensionMismatchError(
                points.shape[1],
                values.shape[0],
                "Values must have one entry per point column.",
            )

        n = values.shape[0]
        if n < 1:
            raise ValueError("Need at least 1 data point")
        if points.shape[0] < 1:
            raise ValueError("Points must have at least 1 dimension")
        if not torch.isfinite(points).all():
            raise ValueError("Points must be finite")
        if not torch.isfinite(values).all():
            raise ValueError("Values must be finite")

        self._samples = RBFSampleSet(
            points=points.mT.clone(memory_format=torch.contiguous_format),
            targets=values.clone(),
            batch_size=[n],
        )

    def compute_weights(
        self,
        use_regularization: bool = False,
        lambda_: float = 1e-3,
        *,
        residual_tolerance: Optional[float] = None,
    ) -> None:
        """Solve for the interpolation weights.

        Parameters
        ----------
        use_regularization : bool, optional
            If False (default), solve Phi w = y so that the fitted function
            passes through every sample. If True, solve the ridge system
            (Phiᵀ Phi + λI) w = Phiᵀ y, trading exact reproduction for
            robustness against an ill-conditioned Phi.
        lambda_ : float, optional
            Ridge parameter λ >= 0, used only when regularizing. Larger
            values shrink the weights toward zero. Default is 1e-3.
        residual_tolerance : float, optional
            Relative residual above which an :class:`RBFAccuracyWarning`
            is issued. Defaults to sqrt(eps) of the sample dtype.

        Raises
        ------
        UnfittedError
            If no sample data has been set.
        ValueError
            If lambda_ is negative or not finite.
        SingularSystemError
            If the weight system is singular.
        """
        if self._samples is None:
            raise UnfittedError("No sample data. Call set_data() first.")

        lambda_ = float(lambda_)
        if not math.isfinite(lambda_) or lambda_ < 0:
            raise ValueError(
                f"lambda_ must be finite and non-negative, got {lambda_}"
            )

        self._weights = None
        self._solver = None

        points = self._samples.points
        values = self._samples.targets
        n = points.shape[0]

        phi = gram_matrix(points, self._kernel)

        if use_regularization:
            A = phi.mT @ phi
            # Symmetric up to rounding of the product
            A = (A + A.mT) / 2 + lambda_ * torch.eye(
                n, dtype=A.dtype, device=A.device
            )
            b = phi.mT @ values
        else:
            A = phi
            b = values

        self._weights, self._solver = solve_weights(
            A, b, residual_tolerance=residual_tolerance
        )

    def get_value(self, query: Tensor) -> Tensor:
        """Evaluate the fitted function at one point.

        Parameters
        ----------
        query : Tensor
            Query point, shape (dim,).

        Returns
        -------
        Tensor
            Interpolated value, a 0-dim tensor. Differentiable with respect
            to ``query``.

        Raises
        ------
        UnfittedError
            If :meth:`compute_weights` has not succeeded for the current data.
        DimensionMismatchError
            If the query dimension differs from the sample dimension.
        """
        points = self._fitted_points()
        query = torch.as_tensor(query, dtype=points.dtype, device=points.device)

        if query.dim() != 1 or query.shape[0] != points.shape[1]:
            raise DimensionMismatchError(
                (points.shape[1],),
                tuple(query.shape),
                "Query must be a single point.",
            )

        distances = torch.linalg.vector_norm(points - query, dim=-1)
        return torch.dot(self._weights, self._kernel.evaluate(distances))

    def get_values(self, queries: Tensor) -> Tensor:
        """Evaluate the fitted function at several points.

        Parameters
        ----------
        queries : Tensor
            Query points, shape (dim, m). Column k is one query point.

        Returns
        -------
        Tensor
            Interpolated values, shape (m,).
        """
        points = self._fitted_points()
        queries = torch.as_tensor(
            queries, dtype=points.dtype, device=points.device
        )

        if queries.dim() != 2 or queries.shape[0] != points.shape[1]:
            raise DimensionMismatchError(
                (points.shape[1], "m"),
                tuple(queries.shape),
                "Queries must have one column per point.",
            )

        diff = queries.mT.unsqueeze(1) - points.unsqueeze(0)  # (m, n, dim)
        distances = torch.linalg.vector_norm(diff, dim=-1)  # (m, n)
        return self._kernel.evaluate(distances) @ self._weights

    def _fitted_points(self) -> Tensor:
        if self._weights is None:
            raise UnfittedError(
                "Weights are not computed. Call compute_weights() first."
            )
        return self._samples.points

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kernel={self._kernel!r}, "
            f"num_samples={self.num_samples}, fitted={self.is_fitted})"
        )
