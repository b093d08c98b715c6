"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, name: str, path: str) -> None:
        self._log.info("config.loaded", name=name, path=path)

    def config_judge_temperature_warning(self, judge: str, temperature: float) -> None:
        self._log.warning(
            "config.judge_temperature_warning",
            judge=judge,
            temperature=temperature,
            message="High judge temperature trades scoring consistency for variety",
        )
