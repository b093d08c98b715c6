"""CallEvaluator — orchestrates tone analysis and the main judge call for one practice call."""

import time

from pydantic import ValidationError

from call_eval.evaluation.application.errors import EvaluationError, MissingTranscriptError
from call_eval.evaluation.domain.context import CallContext
from call_eval.evaluation.domain.observer import EvaluationObserver
from call_eval.evaluation.domain.prompt import SYSTEM_PROMPT, build_evaluation_prompt
from call_eval.evaluation.domain.result import CallEvaluationResult, RawCallEvaluation
from call_eval.judge.domain.client import JudgeClient
from call_eval.judge.domain.payload import strip_code_fences
from call_eval.judge.infrastructure.errors import JudgeInvocationError
from call_eval.tone.domain.analyzer import ToneAnalysis
from call_eval.tone.domain.analysis import AudioAnalysisResult, ToneAvailable

# Points the judge's overallScore may stray from its own criterion mean before
# a drift event is emitted. The score itself is never rewritten.
OVERALL_DRIFT_TOLERANCE = 10.0


class CallEvaluator:
    """Scores a completed practice call on five equally weighted criteria.

    Tone analysis is best-effort: when an audio URL is given and the audio
    path fails for any reason, the evaluation continues transcript-only and
    returns the same result shape. Only a missing transcript or a failed main
    judge call aborts the evaluation.
    """

    def __init__(
        self,
        judge: JudgeClient,
        tone_analyzer: ToneAnalysis,
        observer: EvaluationObserver,
    ) -> None:
        self._judge = judge
        self._tone_analyzer = tone_analyzer
        self._observer = observer

    async def evaluate(self, context: CallContext) -> CallEvaluationResult:
        return await self.evaluate_call_with_audio(
            transcript=context.transcript,
            participant_name=context.participant_name,
            call_duration_seconds=context.call_duration_seconds,
            audio_url=context.audio_url,
        )

    async def evaluate_call_with_audio(
        self,
        transcript: str,
        participant_name: str,
        call_duration_seconds: str | int | float,
        audio_url: str | None = None,
    ) -> CallEvaluationResult:
        """Evaluate one call, folding in audio-derived tone data when available.

        Raises:
            MissingTranscriptError: if *transcript* is empty or whitespace;
                raised before any network call.
            EvaluationError: if the judge call fails or its response cannot
                be decoded. No retry is attempted.
        """
        if not transcript or not transcript.strip():
            raise MissingTranscriptError()

        self._observer.evaluation_started(
            participant_name=participant_name,
            has_audio=bool(audio_url),
            transcript_characters=len(transcript),
        )
        start = time.monotonic()

        tone = await self._tone_for(audio_url=audio_url, participant_name=participant_name)

        user_prompt = build_evaluation_prompt(
            transcript=transcript,
            participant_name=participant_name,
            call_duration_seconds=call_duration_seconds,
            tone=tone,
        )
        try:
            raw_content = await self._judge.complete(
                system_prompt=SYSTEM_PROMPT, user_prompt=user_prompt
            )
        except JudgeInvocationError as exc:
            self._observer.evaluation_failed(
                participant_name=participant_name, reason=str(exc)
            )
            raise EvaluationError(reason=str(exc)) from exc

        raw = self._decode(raw_content=raw_content, participant_name=participant_name)
        if raw.overall_score is not None:
            self._check_overall_drift(
                overall_score=raw.overall_score,
                criterion_mean=raw.criterion_mean(),
                participant_name=participant_name,
            )

        result = raw.normalized()
        self._observer.evaluation_completed(
            participant_name=participant_name,
            overall_score=result.overall_score,
            tone_informed=tone is not None,
            elapsed_ms=int((time.monotonic() - start) * 1000),
        )
        return result

    async def _tone_for(
        self, audio_url: str | None, participant_name: str
    ) -> AudioAnalysisResult | None:
        """Run tone analysis when a recording exists; None means transcript-only."""
        if not audio_url:
            return None

        outcome = await self._tone_analyzer.analyze(audio_url=audio_url)
        if isinstance(outcome, ToneAvailable):
            return outcome.analysis

        self._observer.evaluation_tone_skipped(
            participant_name=participant_name, reason=outcome.reason
        )
        return None

    def _decode(self, raw_content: str, participant_name: str) -> RawCallEvaluation:
        try:
            return RawCallEvaluation.model_validate_json(strip_code_fences(raw_content))
        except ValidationError as exc:
            reason = f"invalid judge response: {exc}"
            self._observer.evaluation_failed(
                participant_name=participant_name, reason=reason
            )
            raise EvaluationError(reason=reason) from exc

    def _check_overall_drift(
        self, overall_score: float, criterion_mean: float, participant_name: str
    ) -> None:
        if abs(overall_score - criterion_mean) > OVERALL_DRIFT_TOLERANCE:
            self._observer.evaluation_overall_score_drift(
                participant_name=participant_name,
                overall_score=overall_score,
                criterion_mean=criterion_mean,
            )
