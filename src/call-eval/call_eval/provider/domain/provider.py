"""CallRecordingProvider Protocol — structural interface for live call-data sources."""

from typing import Protocol

from call_eval.provider.domain.call_data import CallData


class CallRecordingProvider(Protocol):
    """Looks up recorded calls. Returns None rather than raising when unreachable."""

    async def get_call_data(self, call_id: str) -> CallData | None: ...

    async def get_call_transcript(self, call_id: str) -> str | None: ...
