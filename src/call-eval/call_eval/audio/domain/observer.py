"""AudioObserver port — domain events emitted while retrieving recordings."""

from typing import Protocol


class AudioObserver(Protocol):
    """Observer port for audio retrieval events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def audio_download_started(self, url: str) -> None: ...

    def audio_download_completed(
        self, url: str, path: str, size_bytes: int, duration_ms: int
    ) -> None: ...

    def audio_download_failed(self, url: str, reason: str) -> None: ...

    def audio_file_removed(self, path: str) -> None: ...

    def audio_file_removal_failed(self, path: str, reason: str) -> None: ...
