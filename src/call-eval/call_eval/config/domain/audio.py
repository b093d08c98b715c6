"""Audio retrieval configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field


class AudioConfig(BaseModel, frozen=True):
    download_timeout_seconds: float = Field(default=60.0, gt=0.0)
    # None means the platform temp directory.
    scratch_dir: Path | None = None
