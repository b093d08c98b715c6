"""Error types raised by the tone analyzer."""

from call_eval.core.errors import CallEvalError


class ToneAnalysisError(CallEvalError):
    """Raised when the tone judge's response cannot be decoded into a tone analysis."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to analyse tone: {reason}")
