"""Error types raised by audio infrastructure."""

from call_eval.core.errors import CallEvalError


class DownloadError(CallEvalError):
    """Raised when a recording cannot be fetched from the remote audio store."""

    def __init__(
        self, url: str, reason: str, status_code: int | None = None
    ) -> None:
        self.url = url
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Failed to download audio from {url}: {reason}")
