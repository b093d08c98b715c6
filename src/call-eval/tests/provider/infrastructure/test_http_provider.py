"""Tests for HttpCallRecordingProvider against an in-process httpx transport."""

import httpx
import pytest

from call_eval.config.domain.provider import ProviderConfig
from call_eval.provider.infrastructure.http_provider import HttpCallRecordingProvider
from tests.provider.fake_observer import FakeProviderObserver

_CONFIG = ProviderConfig(base_url="https://provider.example.com/", api_key="ringg-key")


def _make_provider(
    handler,
) -> tuple[HttpCallRecordingProvider, FakeProviderObserver, list[httpx.Request]]:
    requests: list[httpx.Request] = []

    def _recording_handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return handler(request)

    observer = FakeProviderObserver()
    provider = HttpCallRecordingProvider(
        config=_CONFIG,
        observer=observer,
        transport=httpx.MockTransport(_recording_handler),
    )
    return provider, observer, requests


class TestGetCallData:
    async def test_maps_provider_payload(self) -> None:
        payload = {
            "id": "call-9",
            "duration": 184.5,
            "transcript": "CM: Hello.",
            "audio_url": "https://cdn.example.com/call-9.mp3",
            "metrics": {
                "speakingTime": 110,
                "silenceDuration": 74.5,
                "wordsPerMinute": 141,
                "sentimentScore": 0.6,
                "keywordMatches": ["schedule"],
                "interruptions": 3,
            },
        }
        provider, observer, requests = _make_provider(
            lambda request: httpx.Response(200, json=payload)
        )

        call_data = await provider.get_call_data("call-9")

        assert call_data is not None
        assert call_data.call_id == "call-9"
        assert call_data.duration == pytest.approx(184.5)
        assert call_data.transcript == "CM: Hello."
        assert call_data.audio_url == "https://cdn.example.com/call-9.mp3"
        assert call_data.metrics.words_per_minute == 141
        assert call_data.metrics.keyword_matches == ["schedule"]
        assert str(requests[0].url) == "https://provider.example.com/calls/call-9"
        assert observer.started == [("call-9", "call")]
        assert observer.failed == []

    async def test_accepts_camel_case_audio_url(self) -> None:
        provider, _, _ = _make_provider(
            lambda request: httpx.Response(
                200, json={"audioUrl": "https://cdn.example.com/a.wav"}
            )
        )

        call_data = await provider.get_call_data("call-3")

        assert call_data is not None
        assert call_data.call_id == "call-3"
        assert call_data.audio_url == "https://cdn.example.com/a.wav"
        assert call_data.transcript == ""

    async def test_sends_credentials(self) -> None:
        provider, _, requests = _make_provider(lambda request: httpx.Response(200, json={}))

        await provider.get_call_data("call-1")

        headers = requests[0].headers
        assert headers["Authorization"] == "Bearer ringg-key"
        assert headers["X-API-Key"] == "ringg-key"

    async def test_not_found_returns_none(self) -> None:
        provider, observer, _ = _make_provider(lambda request: httpx.Response(404))

        assert await provider.get_call_data("call-404") is None
        assert observer.failed[0].reason == "404 Not Found"

    async def test_transport_error_returns_none(self) -> None:
        def _refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        provider, observer, _ = _make_provider(_refuse)

        assert await provider.get_call_data("call-1") is None
        assert observer.failed[0].reason == "connection refused"

    async def test_invalid_json_returns_none(self) -> None:
        provider, observer, _ = _make_provider(
            lambda request: httpx.Response(200, content=b"<html>oops</html>")
        )

        assert await provider.get_call_data("call-1") is None
        assert observer.failed[0].reason.startswith("invalid JSON")

    async def test_non_object_body_returns_none(self) -> None:
        provider, observer, _ = _make_provider(lambda request: httpx.Response(200, json=[1, 2]))

        assert await provider.get_call_data("call-1") is None
        assert observer.failed[0].reason == "response is not an object"

    async def test_unexpected_payload_returns_none(self) -> None:
        provider, observer, _ = _make_provider(
            lambda request: httpx.Response(200, json={"duration": "a while"})
        )

        assert await provider.get_call_data("call-1") is None
        assert observer.failed[0].reason.startswith("unexpected payload")


class TestGetCallTranscript:
    async def test_reads_transcript_field(self) -> None:
        provider, observer, requests = _make_provider(
            lambda request: httpx.Response(200, json={"transcript": "CM: Hi."})
        )

        assert await provider.get_call_transcript("call-5") == "CM: Hi."
        assert requests[0].url.path == "/calls/call-5/transcript"
        assert observer.started == [("call-5", "transcript")]

    async def test_falls_back_to_text_field(self) -> None:
        provider, _, _ = _make_provider(
            lambda request: httpx.Response(200, json={"text": "Parent: Hello?"})
        )

        assert await provider.get_call_transcript("call-5") == "Parent: Hello?"

    async def test_server_error_returns_none(self) -> None:
        provider, observer, _ = _make_provider(lambda request: httpx.Response(503))

        assert await provider.get_call_transcript("call-5") is None
        assert observer.failed[0].resource == "transcript"
