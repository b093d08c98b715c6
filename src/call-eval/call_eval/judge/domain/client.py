"""JudgeClient Protocol — structural interface for language-model judge calls."""

from typing import Protocol


class JudgeClient(Protocol):
    """Issues one judge completion and returns the raw response body.

    Implementations request a single JSON object but do not decode it;
    decoding and validation belong to the caller, which owns the contract.
    """

    async def complete(self, system_prompt: str, user_prompt: str) -> str: ...
