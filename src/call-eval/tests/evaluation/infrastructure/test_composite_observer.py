"""Tests for CompositeEvaluationObserver."""

from call_eval.evaluation.infrastructure.composite_observer import (
    CompositeEvaluationObserver,
)
from tests.evaluation.fake_observer import FakeEvaluationObserver


def _make_composite(
    *observers: FakeEvaluationObserver,
) -> CompositeEvaluationObserver:
    return CompositeEvaluationObserver(observers=list(observers))


class TestCompositeEvaluationObserverFanOut:
    """Every event is forwarded to all observers in order."""

    def test_evaluation_started_forwarded_to_all(self) -> None:
        obs_a = FakeEvaluationObserver()
        obs_b = FakeEvaluationObserver()
        composite = _make_composite(obs_a, obs_b)

        composite.evaluation_started(
            participant_name="Sara", has_audio=True, transcript_characters=512
        )

        assert obs_a.started == obs_b.started
        assert obs_a.started[0].participant_name == "Sara"
        assert obs_a.started[0].has_audio is True
        assert obs_a.started[0].transcript_characters == 512

    def test_evaluation_completed_preserves_all_fields(self) -> None:
        obs = FakeEvaluationObserver()
        composite = _make_composite(obs)

        composite.evaluation_completed(
            participant_name="Sara", overall_score=81, tone_informed=False, elapsed_ms=2300
        )

        event = obs.completed[0]
        assert event.overall_score == 81
        assert event.tone_informed is False
        assert event.elapsed_ms == 2300

    def test_tone_skipped_and_failed_forwarded(self) -> None:
        obs_a = FakeEvaluationObserver()
        obs_b = FakeEvaluationObserver()
        composite = _make_composite(obs_a, obs_b)

        composite.evaluation_tone_skipped(participant_name="Sara", reason="404 Not Found")
        composite.evaluation_failed(participant_name="Sara", reason="rate limited")

        for obs in (obs_a, obs_b):
            assert obs.tone_skipped[0].reason == "404 Not Found"
            assert obs.failed[0].reason == "rate limited"

    def test_drift_forwarded(self) -> None:
        obs = FakeEvaluationObserver()
        composite = _make_composite(obs)

        composite.evaluation_overall_score_drift(
            participant_name="Sara", overall_score=55.0, criterion_mean=80.0
        )

        assert obs.drifts[0].criterion_mean == 80.0

    def test_empty_composite_is_a_no_op(self) -> None:
        composite = _make_composite()

        composite.evaluation_failed(participant_name="Sara", reason="x")
