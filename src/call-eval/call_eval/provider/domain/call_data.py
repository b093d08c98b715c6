"""CallData value objects — what the call-recording provider knows about one call."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CallMetrics(BaseModel):
    """Provider-side call metrics. Keys the provider adds beyond these are kept."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    speaking_time: float = 0.0
    silence_duration: float = 0.0
    words_per_minute: int = 0
    sentiment_score: float = 0.0
    keyword_matches: list[str] = Field(default_factory=list)


class CallData(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    call_id: str
    duration: float = 0.0
    transcript: str = ""
    audio_url: str = ""
    metrics: CallMetrics = CallMetrics()
