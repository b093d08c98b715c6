"""Error types raised by the CLI."""

from pathlib import Path

from call_eval.core.errors import CallEvalError


class TranscriptFileError(CallEvalError):
    """Raised when a transcript file given on the command line cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to read transcript file {path}: {reason}")
