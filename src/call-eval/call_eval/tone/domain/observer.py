"""ToneObserver port — domain events emitted during tone analysis."""

from typing import Protocol


class ToneObserver(Protocol):
    def tone_analysis_started(self, audio_url: str) -> None: ...

    def tone_analysis_completed(self, audio_url: str, tone_score: int) -> None: ...

    def tone_analysis_unavailable(self, audio_url: str, reason: str) -> None: ...
