"""Composition root — wires concrete adapters into a ready CallEvaluator."""

from collections.abc import Mapping

from call_eval.audio.infrastructure.httpx_retriever import HttpxAudioRetriever
from call_eval.audio.infrastructure.observer import StructlogAudioObserver
from call_eval.config.domain.config import CallEvalConfig
from call_eval.evaluation.application.availability import (
    CREDENTIAL_ENV_VAR,
    read_credential,
)
from call_eval.evaluation.application.evaluator import CallEvaluator
from call_eval.evaluation.domain.observer import EvaluationObserver
from call_eval.evaluation.infrastructure.errors import CredentialMissingError
from call_eval.evaluation.infrastructure.observer import StructlogEvaluationObserver
from call_eval.judge.infrastructure.litellm import LiteLLMJudgeClient
from call_eval.judge.infrastructure.observer import StructlogJudgeObserver
from call_eval.tone.application.analyzer import ToneAnalyzer
from call_eval.tone.infrastructure.observer import StructlogToneObserver
from call_eval.transcription.infrastructure.litellm import LiteLLMTranscriber
from call_eval.transcription.infrastructure.observer import (
    StructlogTranscriptionObserver,
)


def build_call_evaluator(
    config: CallEvalConfig,
    api_key: str,
    observer: EvaluationObserver | None = None,
) -> CallEvaluator:
    """Construct a CallEvaluator with LiteLLM judges, LiteLLM transcription and httpx download.

    *observer* defaults to structlog logging of evaluation events.
    """
    judge_observer = StructlogJudgeObserver()
    tone_analyzer = ToneAnalyzer(
        retriever=HttpxAudioRetriever(
            config=config.audio, observer=StructlogAudioObserver()
        ),
        transcriber=LiteLLMTranscriber(
            config=config.transcription,
            api_key=api_key,
            observer=StructlogTranscriptionObserver(),
        ),
        judge=LiteLLMJudgeClient(
            config=config.tone_judge,
            api_key=api_key,
            name="tone",
            observer=judge_observer,
        ),
        observer=StructlogToneObserver(),
    )
    return CallEvaluator(
        judge=LiteLLMJudgeClient(
            config=config.evaluation_judge,
            api_key=api_key,
            name="evaluation",
            observer=judge_observer,
        ),
        tone_analyzer=tone_analyzer,
        observer=observer if observer is not None else StructlogEvaluationObserver(),
    )


def build_call_evaluator_from_env(
    config: CallEvalConfig,
    environ: Mapping[str, str] | None = None,
    observer: EvaluationObserver | None = None,
) -> CallEvaluator:
    """Like `build_call_evaluator`, reading the credential from the environment.

    Raises:
        CredentialMissingError: if the credential is unset or blank.
    """
    api_key = read_credential(environ)
    if api_key is None:
        raise CredentialMissingError(env_var=CREDENTIAL_ENV_VAR)
    return build_call_evaluator(config=config, api_key=api_key, observer=observer)
