"""Error types raised by the call evaluator."""

from call_eval.core.errors import CallEvalError


class MissingTranscriptError(CallEvalError):
    """Raised when a call has no transcript to evaluate."""

    def __init__(self) -> None:
        super().__init__("Failed to evaluate call: no transcript available")


class EvaluationError(CallEvalError):
    """Raised when the evaluation judge cannot be called or its response is unusable.

    No partial result accompanies this error.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to evaluate call: {reason}")
