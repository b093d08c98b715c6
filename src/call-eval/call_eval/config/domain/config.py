"""Top-level CallEvalConfig aggregate — the root configuration object."""

from pydantic import BaseModel, Field

from call_eval.config.domain.audio import AudioConfig
from call_eval.config.domain.judge import JudgeConfig
from call_eval.config.domain.provider import ProviderConfig
from call_eval.config.domain.transcription import TranscriptionConfig

DEFAULT_JUDGE_MODEL = "gpt-4o"


class CallEvalConfig(BaseModel, frozen=True):
    """Root configuration aggregate for the call evaluation pipeline."""

    name: str = Field(min_length=1)
    evaluation_judge: JudgeConfig
    tone_judge: JudgeConfig
    transcription: TranscriptionConfig = TranscriptionConfig()
    audio: AudioConfig = AudioConfig()
    provider: ProviderConfig | None = None


def default_config() -> CallEvalConfig:
    """Built-in configuration used when no YAML file is supplied."""
    return CallEvalConfig(
        name="practice-call-evaluation",
        evaluation_judge=JudgeConfig(
            model=DEFAULT_JUDGE_MODEL, temperature=0.3, max_tokens=2000
        ),
        tone_judge=JudgeConfig(
            model=DEFAULT_JUDGE_MODEL, temperature=0.3, max_tokens=1000
        ),
    )
