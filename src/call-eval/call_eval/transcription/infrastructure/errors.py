"""Error types raised by transcription infrastructure."""

from call_eval.core.errors import CallEvalError


class TranscriptionError(CallEvalError):
    """Raised when the speech-to-text call fails or yields no text."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to transcribe audio: {reason}")
