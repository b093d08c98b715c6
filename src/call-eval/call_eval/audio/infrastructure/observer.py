"""Structlog implementation of the AudioObserver port."""

import structlog


class StructlogAudioObserver:
    """Delegates audio retrieval events to structlog.

    Satisfies the AudioObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def audio_download_started(self, url: str) -> None:
        self._log.info("audio.download_started", url=url)

    def audio_download_completed(
        self, url: str, path: str, size_bytes: int, duration_ms: int
    ) -> None:
        self._log.info(
            "audio.download_completed",
            url=url,
            path=path,
            size_bytes=size_bytes,
            duration_ms=duration_ms,
        )

    def audio_download_failed(self, url: str, reason: str) -> None:
        self._log.warning("audio.download_failed", url=url, reason=reason)

    def audio_file_removed(self, path: str) -> None:
        self._log.debug("audio.file_removed", path=path)

    def audio_file_removal_failed(self, path: str, reason: str) -> None:
        self._log.warning("audio.file_removal_failed", path=path, reason=reason)
