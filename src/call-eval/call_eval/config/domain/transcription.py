"""Speech-to-text configuration model."""

from pydantic import BaseModel, Field


class TranscriptionConfig(BaseModel, frozen=True):
    """Transcription is pinned to a single language for every call."""

    model: str = Field(default="whisper-1", min_length=1)
    language: str = Field(default="en", min_length=2)
