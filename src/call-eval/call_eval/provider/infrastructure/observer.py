"""Structlog implementation of the ProviderObserver port."""

import structlog


class StructlogProviderObserver:
    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def provider_fetch_started(self, call_id: str, resource: str) -> None:
        self._log.info("provider.fetch_started", call_id=call_id, resource=resource)

    def provider_fetch_failed(self, call_id: str, resource: str, reason: str) -> None:
        self._log.warning(
            "provider.fetch_failed", call_id=call_id, resource=resource, reason=reason
        )

    def provider_mock_fallback_used(self, call_id: str, scenario: str) -> None:
        self._log.warning(
            "provider.mock_fallback_used", call_id=call_id, scenario=scenario
        )
