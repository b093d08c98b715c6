"""Error types raised by judge infrastructure."""

from call_eval.core.errors import CallEvalError


class JudgeInvocationError(CallEvalError):
    """Raised when the judge cannot be invoked or returns an empty response."""

    def __init__(self, reason: str, retriable: bool = False) -> None:
        super().__init__(f"Failed to invoke judge: {reason}", retriable=retriable)
