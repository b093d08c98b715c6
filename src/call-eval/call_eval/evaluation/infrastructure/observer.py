"""StructlogEvaluationObserver — production observer that delegates to structlog."""

import structlog


class StructlogEvaluationObserver:
    """Logs evaluation domain events to structlog.

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def evaluation_started(
        self, participant_name: str, has_audio: bool, transcript_characters: int
    ) -> None:
        self._log.info(
            "evaluation.started",
            participant_name=participant_name,
            has_audio=has_audio,
            transcript_characters=transcript_characters,
        )

    def evaluation_tone_skipped(self, participant_name: str, reason: str) -> None:
        self._log.warning(
            "evaluation.tone_skipped",
            participant_name=participant_name,
            reason=reason,
        )

    def evaluation_completed(
        self,
        participant_name: str,
        overall_score: int,
        tone_informed: bool,
        elapsed_ms: int,
    ) -> None:
        self._log.info(
            "evaluation.completed",
            participant_name=participant_name,
            overall_score=overall_score,
            tone_informed=tone_informed,
            elapsed_ms=elapsed_ms,
        )

    def evaluation_failed(self, participant_name: str, reason: str) -> None:
        self._log.error(
            "evaluation.failed", participant_name=participant_name, reason=reason
        )

    def evaluation_overall_score_drift(
        self, participant_name: str, overall_score: float, criterion_mean: float
    ) -> None:
        self._log.warning(
            "evaluation.overall_score_drift",
            participant_name=participant_name,
            overall_score=overall_score,
            criterion_mean=round(criterion_mean, 2),
        )
