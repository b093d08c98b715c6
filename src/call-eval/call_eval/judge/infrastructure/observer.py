"""Structlog implementation of the JudgeObserver port."""

import structlog


class StructlogJudgeObserver:
    """Delegates judge domain events to structlog.

    Satisfies the JudgeObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def judge_call_started(self, judge: str, model: str) -> None:
        self._log.info("judge.call_started", judge=judge, model=model)

    def judge_call_completed(
        self, judge: str, duration_ms: int, characters: int
    ) -> None:
        self._log.info(
            "judge.call_completed",
            judge=judge,
            duration_ms=duration_ms,
            characters=characters,
        )

    def judge_call_failed(self, judge: str, reason: str) -> None:
        self._log.error("judge.call_failed", judge=judge, reason=reason)
