"""Tests for the rbf_interpolate convenience function."""

import torch

from torchrbf.interpolation import RBFInterpolation, rbf_interpolate
from torchrbf.kernel import GaussianKernel, ThinPlateSplineKernel


class TestRBFInterpolate:
    """Tests for rbf_interpolate function."""

    def test_returns_callable(self):
        """Should return callable."""
        points = torch.rand(2, 10, dtype=torch.float64)
        values = torch.rand(10, dtype=torch.float64)

        f = rbf_interpolate(points, values, GaussianKernel(epsilon=2.0))

        assert callable(f)
        assert f(torch.rand(2, dtype=torch.float64)).dim() == 0
        assert f(torch.rand(2, 3, dtype=torch.float64)).shape == (3,)

    def test_matches_engine(self):
        """Should match set_data + compute_weights + get_values."""
        torch.manual_seed(42)
        points = torch.rand(2, 10, dtype=torch.float64)
        values = torch.rand(10, dtype=torch.float64)
        kernel = ThinPlateSplineKernel()

        f = rbf_interpolate(points, values, kernel)
        rbf = RBFInterpolation(kernel)
        rbf.set_data(points, values)
        rbf.compute_weights()

        query = torch.rand(2, 5, dtype=torch.float64)
        torch.testing.assert_close(f(query), rbf.get_values(query))

    def test_regularized(self):
        """Regularized interpolants no longer pass through samples exactly."""
        torch.manual_seed(0)
        points = torch.rand(2, 12, dtype=torch.float64)
        values = torch.rand(12, dtype=torch.float64)
        kernel = GaussianKernel(epsilon=2.0)

        exact = rbf_interpolate(points, values, kernel)
        smooth = rbf_interpolate(
            points, values, kernel, use_regularization=True, lambda_=1.0
        )

        torch.testing.assert_close(exact(points), values)
        assert not torch.allclose(smooth(points), values)

    def test_accepts_sequence(self):
        """Plain sequences are converted like in get_value."""
        torch.manual_seed(1)
        points = torch.rand(2, 8, dtype=torch.float64)
        values = torch.rand(8, dtype=torch.float64)

        f = rbf_interpolate(points, values, GaussianKernel(epsilon=2.0))

        result = f([0.1, 0.2])
        expected = f(torch.tensor([0.1, 0.2], dtype=torch.float64))

        assert result.dim() == 0
        torch.testing.assert_close(result, expected)
