class RBFError(Exception):
    """Base exception for RBF interpolation errors."""

    pass
