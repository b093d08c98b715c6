"""HttpxAudioRetriever — streams a remote recording to a unique scratch file."""

import secrets
import tempfile
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path, PurePosixPath
from urllib.parse import urlparse

import httpx

from call_eval.audio.domain.observer import AudioObserver
from call_eval.audio.infrastructure.errors import DownloadError
from call_eval.config.domain.audio import AudioConfig

_AUDIO_SUFFIXES = frozenset(
    {".mp3", ".wav", ".m4a", ".ogg", ".oga", ".webm", ".flac", ".mp4", ".mpeg", ".mpga"}
)
_CHUNK_SIZE = 64 * 1024


class HttpxAudioRetriever:
    """AudioRetriever implementation backed by httpx.

    The container and codec of the recording are not inspected; the bytes are
    handed to the transcription provider as-is.
    """

    def __init__(
        self,
        config: AudioConfig,
        observer: AudioObserver,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._observer = observer
        self._transport = transport

    async def download_audio(self, url: str) -> Path:
        """Fetch *url* into a new scratch file and return its path.

        The caller owns the returned file. A partially written file is removed
        before the error propagates.

        Raises:
            DownloadError: on a non-success status or any transport failure.
        """
        self._observer.audio_download_started(url=url)
        path: Path | None = None

        start = time.monotonic()
        try:
            path = self._scratch_path(url=url)
            size_bytes = await self._stream_to(url=url, path=path)
        except DownloadError as exc:
            self._discard(path=path)
            self._observer.audio_download_failed(url=url, reason=exc.reason)
            raise
        except (httpx.HTTPError, httpx.InvalidURL, ValueError, OSError) as exc:
            # urlparse raises ValueError and httpx raises InvalidURL for malformed URLs.
            self._discard(path=path)
            reason = str(exc) or type(exc).__name__
            self._observer.audio_download_failed(url=url, reason=reason)
            raise DownloadError(url=url, reason=reason) from exc

        self._observer.audio_download_completed(
            url=url,
            path=str(path),
            size_bytes=size_bytes,
            duration_ms=int((time.monotonic() - start) * 1000),
        )
        return path

    @asynccontextmanager
    async def audio_file(self, url: str) -> AsyncIterator[Path]:
        """Download *url* and yield the local path; the file is always deleted on exit."""
        path = await self.download_audio(url=url)
        try:
            yield path
        finally:
            if self._discard(path=path):
                self._observer.audio_file_removed(path=str(path))

    def _discard(self, path: Path | None) -> bool:
        """Best-effort delete of a scratch file. Returns False if it could not be removed."""
        if path is None:
            return True
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            self._observer.audio_file_removal_failed(path=str(path), reason=str(exc))
            return False
        return True

    async def _stream_to(self, url: str, path: Path) -> int:
        size_bytes = 0
        async with httpx.AsyncClient(
            timeout=self._config.download_timeout_seconds,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            async with client.stream("GET", url) as response:
                if not response.is_success:
                    raise DownloadError(
                        url=url,
                        reason=f"{response.status_code} {response.reason_phrase}",
                        status_code=response.status_code,
                    )
                with open(path, "wb") as fh:
                    async for chunk in response.aiter_bytes(_CHUNK_SIZE):
                        fh.write(chunk)
                        size_bytes += len(chunk)
        return size_bytes

    def _scratch_path(self, url: str) -> Path:
        """Build a collision-free path: nanosecond timestamp plus a random token."""
        directory = self._config.scratch_dir or Path(tempfile.gettempdir())
        suffix = PurePosixPath(urlparse(url).path).suffix.lower()
        if suffix not in _AUDIO_SUFFIXES:
            suffix = ""
        return directory / f"call-audio-{time.time_ns()}-{secrets.token_hex(4)}{suffix}"
