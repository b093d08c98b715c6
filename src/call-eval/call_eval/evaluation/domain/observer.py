"""Observer port for the evaluation domain — defines events in domain language."""

from typing import Protocol


class EvaluationObserver(Protocol):
    """Observer port emitting structured events during one call evaluation.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def evaluation_started(
        self, participant_name: str, has_audio: bool, transcript_characters: int
    ) -> None: ...

    def evaluation_tone_skipped(self, participant_name: str, reason: str) -> None: ...

    def evaluation_completed(
        self,
        participant_name: str,
        overall_score: int,
        tone_informed: bool,
        elapsed_ms: int,
    ) -> None: ...

    def evaluation_failed(self, participant_name: str, reason: str) -> None: ...

    def evaluation_overall_score_drift(
        self, participant_name: str, overall_score: float, criterion_mean: float
    ) -> None: ...
