"""Benchmark RBF interpolation.

Times the O(n^2 d) Gram assembly plus O(n^3) solve of compute_weights and
the O(n d) per-point evaluation of get_values for positive definite
(Cholesky) and indefinite (LU) kernels.
"""

import time

import torch

from torchrbf import (
    GaussianKernel,
    MultiquadricKernel,
    RBFInterpolation,
)


def benchmark_fit(
    n: int,
    kernel,
    n_iterations: int = 10,
    use_regularization: bool = False,
) -> float:
    """Benchmark compute_weights for n samples.

    Parameters
    ----------
    n : int
        Number of samples.
    kernel : RBFKernel
        Kernel to fit with.
    n_iterations : int
        Number of iterations for timing.
    use_regularization : bool
        Solve the ridge system instead of the exact one.

    Returns
    -------
    float
        Average time per fit in milliseconds.
    """
    points = torch.rand(2, n, dtype=torch.float64)
    values = torch.sin(points[0]) * torch.cos(points[1])

    rbf = RBFInterpolation(kernel)
    rbf.set_data(points, values)

    # Warmup
    for _ in range(3):
        rbf.compute_weights(use_regularization)

    start = time.perf_counter()
    for _ in range(n_iterations):
        rbf.compute_weights(use_regularization)

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def benchmark_evaluate(n: int, m: int = 1000, n_iterations: int = 10) -> float:
    """Benchmark get_values for m queries against n samples.

    Returns
    -------
    float
        Average time per batch in milliseconds.
    """
    points = torch.rand(2, n, dtype=torch.float64)
    values = torch.sin(points[0]) * torch.cos(points[1])
    queries = torch.rand(2, m, dtype=torch.float64)

    rbf = RBFInterpolation(GaussianKernel(epsilon=10.0))
    rbf.set_data(points, values)
    rbf.compute_weights(True)

    for _ in range(3):
        _ = rbf.get_values(queries)

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = rbf.get_values(queries)

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run RBF benchmarks across sample counts."""
    sizes = [16, 64, 256, 1024]

    print("RBF Interpolation Benchmark")
    print("=" * 70)
    print(
        f"{'Samples':>8} {'Cholesky (ms)':>15} {'LU (ms)':>15} "
        f"{'Ridge (ms)':>15} {'Eval (ms)':>12}"
    )
    print("-" * 70)

    for n in sizes:
        ms_cholesky = benchmark_fit(n, GaussianKernel(epsilon=10.0), 5, True)
        ms_lu = benchmark_fit(n, MultiquadricKernel(epsilon=1.0), 5)
        ms_ridge = benchmark_fit(n, MultiquadricKernel(epsilon=1.0), 5, True)
        ms_eval = benchmark_evaluate(n)

        print(
            f"{n:>8} {ms_cholesky:>15.4f} {ms_lu:>15.4f} "
            f"{ms_ridge:>15.4f} {ms_eval:>12.4f}"
        )

    print()
    print("Notes:")
    print("- Cholesky: positive definite Gaussian, regularized")
    print("- LU: indefinite multiquadric, exact")
    print("- Ridge: normal equations, adds an O(n^3) matrix product")


if __name__ == "__main__":
    main()
