"""Structlog implementation of the ToneObserver port."""

import structlog


class StructlogToneObserver:
    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def tone_analysis_started(self, audio_url: str) -> None:
        self._log.info("tone.analysis_started", audio_url=audio_url)

    def tone_analysis_completed(self, audio_url: str, tone_score: int) -> None:
        self._log.info(
            "tone.analysis_completed", audio_url=audio_url, tone_score=tone_score
        )

    def tone_analysis_unavailable(self, audio_url: str, reason: str) -> None:
        self._log.warning("tone.unavailable", audio_url=audio_url, reason=reason)
