"""CompositeEvaluationObserver — fans out all events to a list of observers."""

from call_eval.evaluation.domain.observer import EvaluationObserver


class CompositeEvaluationObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[EvaluationObserver]) -> None:
        self._observers = observers

    def evaluation_started(
        self, participant_name: str, has_audio: bool, transcript_characters: int
    ) -> None:
        for obs in self._observers:
            obs.evaluation_started(
                participant_name=participant_name,
                has_audio=has_audio,
                transcript_characters=transcript_characters,
            )

    def evaluation_tone_skipped(self, participant_name: str, reason: str) -> None:
        for obs in self._observers:
            obs.evaluation_tone_skipped(participant_name=participant_name, reason=reason)

    def evaluation_completed(
        self,
        participant_name: str,
        overall_score: int,
        tone_informed: bool,
        elapsed_ms: int,
    ) -> None:
        for obs in self._observers:
            obs.evaluation_completed(
                participant_name=participant_name,
                overall_score=overall_score,
                tone_informed=tone_informed,
                elapsed_ms=elapsed_ms,
            )

    def evaluation_failed(self, participant_name: str, reason: str) -> None:
        for obs in self._observers:
            obs.evaluation_failed(participant_name=participant_name, reason=reason)

    def evaluation_overall_score_drift(
        self, participant_name: str, overall_score: float, criterion_mean: float
    ) -> None:
        for obs in self._observers:
            obs.evaluation_overall_score_drift(
                participant_name=participant_name,
                overall_score=overall_score,
                criterion_mean=criterion_mean,
            )
