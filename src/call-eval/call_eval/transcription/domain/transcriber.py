"""Transcriber Protocol — structural interface for speech-to-text adapters."""

from pathlib import Path
from typing import Protocol


class Transcriber(Protocol):
    """Converts a local audio file into a plain-text transcript."""

    async def transcribe(self, path: Path) -> str: ...
