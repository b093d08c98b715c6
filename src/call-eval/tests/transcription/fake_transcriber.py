"""FakeTranscriber — in-memory Transcriber for use in tests."""

from pathlib import Path

from call_eval.transcription.infrastructure.errors import TranscriptionError


class FakeTranscriber:
    """Satisfies the Transcriber protocol. Returns canned text or raises *error*.

    Records whether the audio file still existed at transcription time.
    """

    def __init__(
        self,
        text: str = "CM: Um, hello, thanks for calling.",
        error: TranscriptionError | None = None,
    ) -> None:
        self._text = text
        self._error = error
        self.transcribed: list[Path] = []
        self.file_existed: list[bool] = []

    async def transcribe(self, path: Path) -> str:
        self.transcribed.append(path)
        self.file_existed.append(path.exists())
        if self._error is not None:
            raise self._error
        return self._text
