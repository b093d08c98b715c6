"""Tone analysis value objects and the raw tone-judge payload they are decoded from."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

NOT_ASSESSED = "Not assessed"


class ToneQualities(BaseModel):
    """Free-text reading of each delivery quality, inferred from the transcript."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    pace: str = NOT_ASSESSED
    clarity: str = NOT_ASSESSED
    confidence: str = NOT_ASSESSED
    professionalism: str = NOT_ASSESSED
    energy: str = NOT_ASSESSED


class AudioAnalysisResult(BaseModel):
    """Tone analysis for one recording, folded into a single evaluation prompt."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    audio_transcript: str | None = None
    tone_analysis: ToneQualities
    tone_score: int = Field(ge=0, le=100)


class RawToneAnalysis(BaseModel):
    """Decode target for the tone judge's JSON body.

    `toneScore` is mandatory and may be fractional or off-scale; qualities the
    judge leaves out are filled with NOT_ASSESSED.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    tone_analysis: ToneQualities = ToneQualities()
    tone_score: float = Field(allow_inf_nan=False)


class ToneAvailable(BaseModel):
    model_config = ConfigDict(frozen=True)

    analysis: AudioAnalysisResult


class ToneUnavailable(BaseModel):
    model_config = ConfigDict(frozen=True)

    reason: str


type ToneOutcome = ToneAvailable | ToneUnavailable
