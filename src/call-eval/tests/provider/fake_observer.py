"""FakeProviderObserver — records provider events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FetchFailedEvent:
    call_id: str
    resource: str
    reason: str


@dataclass(frozen=True)
class MockFallbackEvent:
    call_id: str
    scenario: str


class FakeProviderObserver:
    def __init__(self) -> None:
        self.started: list[tuple[str, str]] = []
        self.failed: list[FetchFailedEvent] = []
        self.fallbacks: list[MockFallbackEvent] = []

    def provider_fetch_started(self, call_id: str, resource: str) -> None:
        self.started.append((call_id, resource))

    def provider_fetch_failed(self, call_id: str, resource: str, reason: str) -> None:
        self.failed.append(FetchFailedEvent(call_id=call_id, resource=resource, reason=reason))

    def provider_mock_fallback_used(self, call_id: str, scenario: str) -> None:
        self.fallbacks.append(MockFallbackEvent(call_id=call_id, scenario=scenario))
