"""Sample set owned by an RBF interpolation."""

from tensordict.tensorclass import tensorclass
from torch import Tensor


@tensorclass
class RBFSampleSet:
    """Scattered samples of a scalar function.

    The batch dimension is the sample index, so ``points`` and ``targets``
    are guaranteed to describe the same number of samples.

    Attributes
    ----------
    points : Tensor
        Sample locations, shape (n, dim). Row i is the point x_i.
    targets : Tensor
        Sample values, shape (n,).
    """

    points: Tensor
    targets: Tensor
