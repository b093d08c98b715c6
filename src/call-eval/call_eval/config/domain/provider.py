"""Call-recording provider configuration model."""

from pydantic import BaseModel, Field


class ProviderConfig(BaseModel, frozen=True):
    base_url: str = Field(min_length=1)
    api_key: str = Field(min_length=1)
    timeout_seconds: float = Field(default=30.0, gt=0.0)
