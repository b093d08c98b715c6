"""LiteLLMTranscriber — speech-to-text through LiteLLM's transcription endpoint."""

import time
from pathlib import Path

import litellm

from call_eval.config.domain.transcription import TranscriptionConfig
from call_eval.transcription.domain.observer import TranscriptionObserver
from call_eval.transcription.infrastructure.errors import TranscriptionError


class LiteLLMTranscriber:
    """Transcriber that delegates to a speech-to-text model via LiteLLM.

    The credential is injected at construction time; no process-wide client
    state is read or written.
    """

    def __init__(
        self,
        config: TranscriptionConfig,
        api_key: str,
        observer: TranscriptionObserver,
    ) -> None:
        self._config = config
        self._api_key = api_key
        self._observer = observer

    async def transcribe(self, path: Path) -> str:
        """Transcribe *path* in the configured language and return plain text.

        Raises:
            TranscriptionError: if the file cannot be read, the model call
                fails, or the model returns no text.
        """
        self._observer.transcription_started(
            path=str(path),
            model=self._config.model,
            language=self._config.language,
        )

        start = time.monotonic()
        try:
            with open(path, "rb") as audio:
                response = await litellm.atranscription(
                    model=self._config.model,
                    file=audio,
                    language=self._config.language,
                    response_format="text",
                    api_key=self._api_key,
                )
        except Exception as exc:
            reason = str(exc) or type(exc).__name__
            self._observer.transcription_failed(path=str(path), reason=reason)
            raise TranscriptionError(reason=reason) from exc

        text = (getattr(response, "text", None) or "").strip()
        if not text:
            reason = "model returned an empty transcript"
            self._observer.transcription_failed(path=str(path), reason=reason)
            raise TranscriptionError(reason=reason)

        self._observer.transcription_completed(
            path=str(path),
            characters=len(text),
            duration_ms=int((time.monotonic() - start) * 1000),
        )
        return text
