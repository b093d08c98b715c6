"""ProviderObserver port — events emitted while fetching call data."""

from typing import Protocol


class ProviderObserver(Protocol):
    def provider_fetch_started(self, call_id: str, resource: str) -> None: ...

    def provider_fetch_failed(self, call_id: str, resource: str, reason: str) -> None: ...

    def provider_mock_fallback_used(self, call_id: str, scenario: str) -> None: ...
