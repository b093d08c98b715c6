"""ToneAnalyzer — download, transcribe, and judge the delivery of a recorded call."""

from pydantic import ValidationError

from call_eval.audio.domain.retriever import AudioRetriever
from call_eval.audio.infrastructure.errors import DownloadError
from call_eval.judge.domain.client import JudgeClient
from call_eval.judge.domain.payload import strip_code_fences
from call_eval.judge.domain.score import normalize_score
from call_eval.judge.infrastructure.errors import JudgeInvocationError
from call_eval.tone.domain.analysis import (
    AudioAnalysisResult,
    RawToneAnalysis,
    ToneAvailable,
    ToneOutcome,
    ToneUnavailable,
)
from call_eval.tone.domain.observer import ToneObserver
from call_eval.tone.domain.prompt import SYSTEM_PROMPT, build_tone_prompt
from call_eval.tone.infrastructure.errors import ToneAnalysisError
from call_eval.transcription.domain.transcriber import Transcriber
from call_eval.transcription.infrastructure.errors import TranscriptionError

# Everything the audio path may raise; all of it means "no tone data".
_TONE_PATH_ERRORS = (
    DownloadError,
    TranscriptionError,
    JudgeInvocationError,
    ToneAnalysisError,
)


class ToneAnalyzer:
    """Approximates acoustic delivery qualities from a recording's transcript.

    The judge only ever sees text, so pace, clarity, confidence and the rest
    are read from transcript-visible proxies such as filler words, sentence
    length and hedging. The three network calls run strictly in sequence.
    """

    def __init__(
        self,
        retriever: AudioRetriever,
        transcriber: Transcriber,
        judge: JudgeClient,
        observer: ToneObserver,
    ) -> None:
        self._retriever = retriever
        self._transcriber = transcriber
        self._judge = judge
        self._observer = observer

    async def analyze_audio_recording(self, audio_url: str) -> AudioAnalysisResult:
        """Run download → transcription → tone judge for *audio_url*.

        The scratch audio file is deleted as soon as the transcription attempt
        finishes, whether it succeeded or not.

        Raises:
            DownloadError: if the recording cannot be fetched.
            TranscriptionError: if speech-to-text fails.
            JudgeInvocationError: if the tone judge cannot be called.
            ToneAnalysisError: if the judge's response is not valid tone JSON.
        """
        self._observer.tone_analysis_started(audio_url=audio_url)

        async with self._retriever.audio_file(audio_url) as path:
            transcript = await self._transcriber.transcribe(path)

        raw_content = await self._judge.complete(
            system_prompt=SYSTEM_PROMPT,
            user_prompt=build_tone_prompt(transcript=transcript),
        )
        raw = _decode(raw_content=raw_content)

        result = AudioAnalysisResult(
            audio_transcript=transcript,
            tone_analysis=raw.tone_analysis,
            tone_score=normalize_score(raw.tone_score),
        )
        self._observer.tone_analysis_completed(
            audio_url=audio_url, tone_score=result.tone_score
        )
        return result

    async def analyze(self, audio_url: str) -> ToneOutcome:
        """Best-effort variant of `analyze_audio_recording`.

        Never raises for audio-path problems; they come back as ToneUnavailable
        so the caller can carry on with a transcript-only evaluation.
        """
        try:
            analysis = await self.analyze_audio_recording(audio_url=audio_url)
        except _TONE_PATH_ERRORS as exc:
            reason = str(exc)
            self._observer.tone_analysis_unavailable(audio_url=audio_url, reason=reason)
            return ToneUnavailable(reason=reason)
        return ToneAvailable(analysis=analysis)


def _decode(raw_content: str) -> RawToneAnalysis:
    try:
        return RawToneAnalysis.model_validate_json(strip_code_fences(raw_content))
    except ValidationError as exc:
        raise ToneAnalysisError(reason=f"invalid tone judge response: {exc}") from exc
