"""CallEvaluationResult and the raw judge payload it is normalised from."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from call_eval.judge.domain.score import normalize_score

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CallEvaluationResult(BaseModel):
    """Bounded evaluation of one practice call.

    Every score is an integer in [0, 100]. Serialise with ``by_alias=True``
    to get the camelCase field names the call record stores.
    """

    model_config = ConfigDict(frozen=True, **_CAMEL)

    overall_score: int = Field(ge=0, le=100)
    tone_of_voice_score: int = Field(ge=0, le=100)
    building_rapport_score: int = Field(ge=0, le=100)
    showing_empathy_score: int = Field(ge=0, le=100)
    handling_skills_score: int = Field(ge=0, le=100)
    knowledge_score: int = Field(ge=0, le=100)
    feedback: str

    def criterion_scores(self) -> list[int]:
        """The five equally weighted criterion scores, excluding overall."""
        return [
            self.tone_of_voice_score,
            self.building_rapport_score,
            self.showing_empathy_score,
            self.handling_skills_score,
            self.knowledge_score,
        ]


class RawCallEvaluation(BaseModel):
    """Decode target for the evaluation judge's JSON body.

    Numbers may be fractional, off-scale, or numeric strings. Every criterion
    score and the feedback must be present; a missing overallScore is filled
    with the mean of the five criteria.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True, **_CAMEL)

    overall_score: float | None = Field(default=None, allow_inf_nan=False)
    tone_of_voice_score: float = Field(allow_inf_nan=False)
    building_rapport_score: float = Field(allow_inf_nan=False)
    showing_empathy_score: float = Field(allow_inf_nan=False)
    handling_skills_score: float = Field(allow_inf_nan=False)
    knowledge_score: float = Field(allow_inf_nan=False)
    feedback: str = Field(min_length=1)

    @field_validator("feedback", mode="before")
    @classmethod
    def _join_feedback_paragraphs(cls, value: Any) -> Any:
        if isinstance(value, list):
            return "\n\n".join(str(item) for item in value)
        return value

    def criterion_mean(self) -> float:
        criteria = [
            self.tone_of_voice_score,
            self.building_rapport_score,
            self.showing_empathy_score,
            self.handling_skills_score,
            self.knowledge_score,
        ]
        return sum(criteria) / len(criteria)

    def normalized(self) -> CallEvaluationResult:
        """Round-then-clamp every score independently."""
        overall = self.overall_score
        if overall is None:
            overall = self.criterion_mean()
        return CallEvaluationResult(
            overall_score=normalize_score(overall),
            tone_of_voice_score=normalize_score(self.tone_of_voice_score),
            building_rapport_score=normalize_score(self.building_rapport_score),
            showing_empathy_score=normalize_score(self.showing_empathy_score),
            handling_skills_score=normalize_score(self.handling_skills_score),
            knowledge_score=normalize_score(self.knowledge_score),
            feedback=self.feedback,
        )
