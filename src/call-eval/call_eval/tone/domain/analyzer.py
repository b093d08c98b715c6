"""ToneAnalysis Protocol — the best-effort tone port consumed by the call evaluator."""

from typing import Protocol

from call_eval.tone.domain.analysis import ToneOutcome


class ToneAnalysis(Protocol):
    """Produces a ToneOutcome for a recording; never raises for audio-path failures."""

    async def analyze(self, audio_url: str) -> ToneOutcome: ...
