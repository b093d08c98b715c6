"""Base exception class for all call-eval-specific errors."""


class CallEvalError(Exception):
    """Base class for all call-eval errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
