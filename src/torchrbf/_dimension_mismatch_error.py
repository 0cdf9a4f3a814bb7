from ._rbf_error import RBFError


class DimensionMismatchError(RBFError, ValueError):
    """Raised when tensor shapes disagree with the stored sample set.

    Covers a value vector whose length differs from the number of sample
    points, and query points whose dimension differs from the samples'.
    """

    def __init__(self, expected, actual, message: str = ""):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Dimension mismatch: expected {expected}, got {actual}. {message}".rstrip()
        )
