"""Structlog implementation of the TranscriptionObserver port."""

import structlog


class StructlogTranscriptionObserver:
    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def transcription_started(self, path: str, model: str, language: str) -> None:
        self._log.info(
            "transcription.started", path=path, model=model, language=language
        )

    def transcription_completed(
        self, path: str, characters: int, duration_ms: int
    ) -> None:
        self._log.info(
            "transcription.completed",
            path=path,
            characters=characters,
            duration_ms=duration_ms,
        )

    def transcription_failed(self, path: str, reason: str) -> None:
        self._log.warning("transcription.failed", path=path, reason=reason)
