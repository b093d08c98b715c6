"""CallDataSource — live provider first, canned mock data when it is unreachable."""

from call_eval.provider.domain.call_data import CallData
from call_eval.provider.domain.mock import DEFAULT_SCENARIO, generate_mock_call_data
from call_eval.provider.domain.observer import ProviderObserver
from call_eval.provider.domain.provider import CallRecordingProvider


class CallDataSource:
    """Resolves call data for evaluation, degrading to demo data.

    With no provider configured every lookup is served from the mock table.
    """

    def __init__(
        self,
        provider: CallRecordingProvider | None,
        observer: ProviderObserver,
    ) -> None:
        self._provider = provider
        self._observer = observer

    async def fetch(
        self,
        call_id: str,
        scenario: str = DEFAULT_SCENARIO,
        duration_seconds: float = 120,
    ) -> CallData:
        if self._provider is not None:
            call_data = await self._provider.get_call_data(call_id)
            if call_data is not None:
                return call_data

        self._observer.provider_mock_fallback_used(call_id=call_id, scenario=scenario)
        return generate_mock_call_data(scenario=scenario, duration_seconds=duration_seconds)
