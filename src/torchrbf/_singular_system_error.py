from ._rbf_error import RBFError


class SingularSystemError(RBFError, RuntimeError):
    """Raised when the weight system is singular or numerically degenerate."""

    def __init__(self, size: int, info: int = 0, message: str = ""):
        self.size = size
        self.info = info
        super().__init__(
            f"Singular {size}x{size} weight system (info={info}). {message}".rstrip()
        )
