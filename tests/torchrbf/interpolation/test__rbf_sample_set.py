"""Tests for the RBF sample set."""

import torch

from torchrbf.interpolation import RBFSampleSet


class TestRBFSampleSet:
    """Tests for RBFSampleSet tensorclass."""

    def test_construct(self):
        """Should hold points and targets along the sample dimension."""
        points = torch.rand(6, 2, dtype=torch.float64)
        targets = torch.rand(6, dtype=torch.float64)

        samples = RBFSampleSet(points=points, targets=targets, batch_size=[6])

        assert samples.batch_size == torch.Size([6])
        torch.testing.assert_close(samples.points, points)
        torch.testing.assert_close(samples.targets, targets)

    def test_keeps_tensordict_methods(self):
        """Field names must not hide the TensorDict mapping methods."""
        samples = RBFSampleSet(
            points=torch.zeros(3, 2),
            targets=torch.ones(3),
            batch_size=[3],
        )

        assert callable(samples.values)
        assert sorted(samples.keys()) == ["points", "targets"]

    def test_indexing(self):
        """Indexing selects samples from both fields."""
        samples = RBFSampleSet(
            points=torch.arange(8.0).reshape(4, 2),
            targets=torch.arange(4.0),
            batch_size=[4],
        )

        subset = samples[1:3]

        assert subset.points.shape == (2, 2)
        torch.testing.assert_close(subset.targets, torch.tensor([1.0, 2.0]))
