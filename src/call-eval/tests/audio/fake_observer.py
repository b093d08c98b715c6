"""FakeAudioObserver — records audio retrieval events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DownloadCompletedEvent:
    url: str
    path: str
    size_bytes: int
    duration_ms: int


@dataclass(frozen=True)
class DownloadFailedEvent:
    url: str
    reason: str


class FakeAudioObserver:
    def __init__(self) -> None:
        self.started: list[str] = []
        self.completed: list[DownloadCompletedEvent] = []
        self.failed: list[DownloadFailedEvent] = []
        self.removed: list[str] = []
        self.removal_failed: list[tuple[str, str]] = []

    def audio_download_started(self, url: str) -> None:
        self.started.append(url)

    def audio_download_completed(
        self, url: str, path: str, size_bytes: int, duration_ms: int
    ) -> None:
        self.completed.append(
            DownloadCompletedEvent(
                url=url, path=path, size_bytes=size_bytes, duration_ms=duration_ms
            )
        )

    def audio_download_failed(self, url: str, reason: str) -> None:
        self.failed.append(DownloadFailedEvent(url=url, reason=reason))

    def audio_file_removed(self, path: str) -> None:
        self.removed.append(path)

    def audio_file_removal_failed(self, path: str, reason: str) -> None:
        self.removal_failed.append((path, reason))
