"""Linear solve for RBF weights."""

import warnings
from typing import Optional, Tuple

import torch
from torch import Tensor

from torchrbf._rbf_accuracy_warning import RBFAccuracyWarning
from torchrbf._singular_system_error import SingularSystemError


def solve_weights(
    A: Tensor,
    b: Tensor,
    *,
    residual_tolerance: Optional[float] = None,
) -> Tuple[Tensor, str]:
    """Solve the symmetric system A w = b for RBF weights.

    Parameters
    ----------
    A : Tensor
        Symmetric system matrix, shape (n, n).
    b : Tensor
        Right-hand side, shape (n,).
    residual_tolerance : float, optional
        Largest accepted relative residual ||A w - b|| / ||b|| before an
        :class:`RBFAccuracyWarning` is issued. Defaults to sqrt(eps) of
        the dtype of A.

    Returns
    -------
    w : Tensor
        Solution, shape (n,).
    solver : str
        ``"cholesky"`` or ``"lu"``, the factorization that produced w.

    Raises
    ------
    SingularSystemError
        If A is singular or the solution is not finite.

    Notes
    -----
    Cholesky is tried first. It succeeds when A is numerically positive
    definite, which covers positive definite kernels on distinct points
    and every ridge-regularized system. Indefinite systems (multiquadric,
    thin plate, linear and cubic kernels) make it fail, and the solve falls
    back to LU with partial pivoting.
    """
    n = A.shape[0]

    L, info = torch.linalg.cholesky_ex(A)
    if info.item() == 0:
        w = torch.cholesky_solve(b.unsqueeze(-1), L).squeeze(-1)
        solver = "cholesky"
    else:
        w, info = torch.linalg.solve_ex(A, b)
        if info.item() != 0:
            raise SingularSystemError(
                n,
                int(info.item()),
                "Consider use_regularization=True or removing duplicate points.",
            )
        solver = "lu"

    if not torch.isfinite(w).all():
        raise SingularSystemError(n, message="Solution is not finite.")

    if residual_tolerance is None:
        residual_tolerance = torch.finfo(A.dtype).eps ** 0.5

    residual = torch.linalg.vector_norm(A @ w - b).item()
    scale = torch.linalg.vector_norm(b).item()
    relative_residual = residual / scale if scale > 0 else residual

    if relative_residual > residual_tolerance:
        warnings.warn(
            f"RBF weight system is ill-conditioned. Relative residual: "
            f"{relative_residual:.2e} ({solver})",
            RBFAccuracyWarning,
        )

    return w, solver
