"""TranscriptionObserver port — domain events emitted during speech-to-text calls."""

from typing import Protocol


class TranscriptionObserver(Protocol):
    def transcription_started(self, path: str, model: str, language: str) -> None: ...

    def transcription_completed(
        self, path: str, characters: int, duration_ms: int
    ) -> None: ...

    def transcription_failed(self, path: str, reason: str) -> None: ...
