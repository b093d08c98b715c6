"""HttpCallRecordingProvider — reads call data from the call-recording provider's REST API."""

from typing import Any

import httpx
from pydantic import ValidationError

from call_eval.config.domain.provider import ProviderConfig
from call_eval.provider.domain.call_data import CallData, CallMetrics
from call_eval.provider.domain.observer import ProviderObserver


class HttpCallRecordingProvider:
    """CallRecordingProvider backed by httpx.

    Provider outages are expected in demo and offline setups, so every
    failure is reported to the observer and turned into None.
    """

    def __init__(
        self,
        config: ProviderConfig,
        observer: ProviderObserver,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._observer = observer
        self._transport = transport

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._config.api_key}",
            "X-API-Key": self._config.api_key,
            "Content-Type": "application/json",
        }

    async def get_call_data(self, call_id: str) -> CallData | None:
        data = await self._get_json(call_id=call_id, resource="call", path=f"/calls/{call_id}")
        if data is None:
            return None

        try:
            return CallData(
                call_id=str(data.get("id") or call_id),
                duration=data.get("duration") or 0,
                transcript=data.get("transcript") or "",
                audio_url=data.get("audio_url") or data.get("audioUrl") or "",
                metrics=CallMetrics.model_validate(data.get("metrics") or {}),
            )
        except ValidationError as exc:
            self._observer.provider_fetch_failed(
                call_id=call_id, resource="call", reason=f"unexpected payload: {exc}"
            )
            return None

    async def get_call_transcript(self, call_id: str) -> str | None:
        data = await self._get_json(
            call_id=call_id, resource="transcript", path=f"/calls/{call_id}/transcript"
        )
        if data is None:
            return None
        return str(data.get("transcript") or data.get("text") or "")

    async def _get_json(
        self, call_id: str, resource: str, path: str
    ) -> dict[str, Any] | None:
        self._observer.provider_fetch_started(call_id=call_id, resource=resource)
        url = f"{self._config.base_url.rstrip('/')}{path}"

        try:
            async with httpx.AsyncClient(
                timeout=self._config.timeout_seconds, transport=self._transport
            ) as client:
                response = await client.get(url, headers=self.headers)
        except httpx.HTTPError as exc:
            reason = str(exc) or type(exc).__name__
            self._observer.provider_fetch_failed(
                call_id=call_id, resource=resource, reason=reason
            )
            return None

        if not response.is_success:
            self._observer.provider_fetch_failed(
                call_id=call_id,
                resource=resource,
                reason=f"{response.status_code} {response.reason_phrase}",
            )
            return None

        try:
            data = response.json()
        except ValueError as exc:
            self._observer.provider_fetch_failed(
                call_id=call_id, resource=resource, reason=f"invalid JSON: {exc}"
            )
            return None

        if not isinstance(data, dict):
            self._observer.provider_fetch_failed(
                call_id=call_id, resource=resource, reason="response is not an object"
            )
            return None
        return data
