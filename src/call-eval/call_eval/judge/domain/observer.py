"""JudgeObserver port — domain events emitted during judge invocations."""

from typing import Protocol


class JudgeObserver(Protocol):
    """Observer port for judge domain events.

    `judge` names the client instance (e.g. "tone", "evaluation").
    """

    def judge_call_started(self, judge: str, model: str) -> None: ...

    def judge_call_completed(
        self, judge: str, duration_ms: int, characters: int
    ) -> None: ...

    def judge_call_failed(self, judge: str, reason: str) -> None: ...
