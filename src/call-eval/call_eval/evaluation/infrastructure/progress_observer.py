"""ProgressEvaluationObserver — renders a Rich spinner to stderr while a call is scored."""

from __future__ import annotations

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TaskID, TextColumn, TimeElapsedColumn


class ProgressEvaluationObserver:
    """Shows one transient status row for the evaluation in flight.

    The row names the participant and whether the score is audio-informed,
    and is cleared once the evaluation completes or fails. Drift events
    produce no output.

    Pass ``disabled=True`` to suppress all terminal output (useful in tests).

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self, disabled: bool = False) -> None:
        self._disabled = disabled
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None

    @property
    def active(self) -> bool:
        return self._progress is not None

    def _describe(self, participant_name: str, mode: str) -> str:
        return f"Scoring call for [bold]{participant_name}[/bold] [dim]({mode})[/dim]"

    def _stop(self) -> None:
        if self._progress is not None:
            self._progress.stop()
        self._progress = None
        self._task_id = None

    def evaluation_started(
        self, participant_name: str, has_audio: bool, transcript_characters: int
    ) -> None:
        self._stop()
        if self._disabled:
            return

        mode = "audio + transcript" if has_audio else "transcript only"
        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("{task.description}"),
            TimeElapsedColumn(),
            console=Console(stderr=True),
            transient=True,
        )
        self._task_id = self._progress.add_task(
            description=self._describe(participant_name=participant_name, mode=mode),
            total=None,
        )
        self._progress.start()

    def evaluation_tone_skipped(self, participant_name: str, reason: str) -> None:
        if self._progress is None or self._task_id is None:
            return
        self._progress.update(
            self._task_id,
            description=self._describe(
                participant_name=participant_name, mode="audio unavailable, transcript only"
            ),
        )

    def evaluation_completed(
        self,
        participant_name: str,
        overall_score: int,
        tone_informed: bool,
        elapsed_ms: int,
    ) -> None:
        self._stop()

    def evaluation_failed(self, participant_name: str, reason: str) -> None:
        self._stop()

    def evaluation_overall_score_drift(
        self, participant_name: str, overall_score: float, criterion_mean: float
    ) -> None:
        pass
