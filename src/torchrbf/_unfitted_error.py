from ._rbf_error import RBFError


class UnfittedError(RBFError, RuntimeError):
    """Raised when an operation needs data or weights that are not there yet."""

    pass
