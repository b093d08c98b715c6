"""CallContext — the read-only view of a completed call handed to the evaluator."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CallContext(BaseModel):
    """Owned by the practice-call subsystem; the pipeline never mutates it."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    transcript: str
    participant_name: str
    call_duration_seconds: str | int | float
    audio_url: str | None = None
