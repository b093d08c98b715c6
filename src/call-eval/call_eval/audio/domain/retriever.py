"""AudioRetriever Protocol — structural interface for fetching call recordings."""

from contextlib import AbstractAsyncContextManager
from pathlib import Path
from typing import Protocol


class AudioRetriever(Protocol):
    """Fetches a remote recording into local scratch storage.

    Callers should prefer `audio_file`, which deletes the scratch file on
    every exit path.
    """

    async def download_audio(self, url: str) -> Path: ...

    def audio_file(self, url: str) -> AbstractAsyncContextManager[Path]: ...
