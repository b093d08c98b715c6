"""CLI entrypoint for call-eval — typer app with `evaluate`, `mock` and `check` commands."""

import asyncio
import json
import sys
from pathlib import Path

import structlog
import typer

from call_eval.cli.errors import TranscriptFileError
from call_eval.config.domain.config import CallEvalConfig, default_config
from call_eval.config.infrastructure.observer import StructlogConfigObserver
from call_eval.config.infrastructure.yaml_loader import YamlConfigLoader
from call_eval.core.errors import CallEvalError
from call_eval.evaluation.application.availability import (
    CREDENTIAL_ENV_VAR,
    is_call_evaluation_available,
)
from call_eval.evaluation.domain.context import CallContext
from call_eval.evaluation.domain.result import CallEvaluationResult
from call_eval.evaluation.infrastructure.composite_observer import (
    CompositeEvaluationObserver,
)
from call_eval.evaluation.infrastructure.factory import build_call_evaluator_from_env
from call_eval.evaluation.infrastructure.observer import StructlogEvaluationObserver
from call_eval.evaluation.infrastructure.progress_observer import (
    ProgressEvaluationObserver,
)
from call_eval.provider.application.source import CallDataSource
from call_eval.provider.domain.mock import (
    DEFAULT_SCENARIO,
    available_mock_scenarios,
    generate_mock_call_data,
)
from call_eval.provider.infrastructure.http_provider import HttpCallRecordingProvider
from call_eval.provider.infrastructure.observer import StructlogProviderObserver

app = typer.Typer(add_completion=False)

_RETRY_MESSAGE = "Could not evaluate this call, please retry."
_UNAVAILABLE_MESSAGE = f"Call evaluation is unavailable: {CREDENTIAL_ENV_VAR} is not set."


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format. Logs go to stderr."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_config(config_path: Path | None) -> CallEvalConfig:
    if config_path is None:
        return default_config()
    loader = YamlConfigLoader(observer=StructlogConfigObserver())
    return loader.load(path=config_path)


async def _resolve_context(
    config: CallEvalConfig,
    transcript_file: Path | None,
    call_id: str | None,
    scenario: str,
    participant: str,
    duration: float,
    audio_url: str | None,
) -> CallContext:
    """Pick the call to evaluate: a transcript file, a provider call id, or a mock scenario."""
    if transcript_file is not None:
        try:
            transcript = transcript_file.read_text(encoding="utf-8")
        except OSError as exc:
            raise TranscriptFileError(path=transcript_file, reason=str(exc)) from exc
        return CallContext(
            transcript=transcript,
            participant_name=participant,
            call_duration_seconds=duration,
            audio_url=audio_url,
        )

    observer = StructlogProviderObserver()
    provider: HttpCallRecordingProvider | None = None
    if config.provider is not None:
        provider = HttpCallRecordingProvider(config=config.provider, observer=observer)
    source = CallDataSource(provider=provider, observer=observer)
    call_data = await source.fetch(
        call_id=call_id or "offline",
        scenario=scenario,
        duration_seconds=duration,
    )
    return CallContext(
        transcript=call_data.transcript,
        participant_name=participant,
        call_duration_seconds=call_data.duration,
        # Mock recordings do not exist; only a real provider URL is worth downloading.
        audio_url=audio_url or (call_data.audio_url if provider is not None else None),
    )


# ---------------------------------------------------------------------------
# ANSI helpers
# ---------------------------------------------------------------------------
_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"

_BAR_WIDTH = 20


def _score_color(score: int) -> str:
    if score >= 80:
        return _GREEN
    if score >= 60:
        return _YELLOW
    return _RED


def _print_result(result: CallEvaluationResult) -> None:
    rows = [
        ("Tone of Voice", result.tone_of_voice_score),
        ("Building Rapport", result.building_rapport_score),
        ("Showing Empathy", result.showing_empathy_score),
        ("Handling Skills", result.handling_skills_score),
        ("Knowledge", result.knowledge_score),
    ]
    typer.echo("")
    typer.echo(f"{_BOLD}  Practice call evaluation{_RESET}")
    typer.echo(f"{_DIM}{'─' * 48}{_RESET}")
    for label, score in rows:
        color = _score_color(score=score)
        filled = round(score * _BAR_WIDTH / 100)
        bar = f"{color}{'█' * filled}{_DIM}{'░' * (_BAR_WIDTH - filled)}{_RESET}"
        typer.echo(f"  {label:<18} {color}{score:>3}{_RESET}  {bar}")
    typer.echo(f"{_DIM}{'─' * 48}{_RESET}")
    overall_color = _score_color(score=result.overall_score)
    typer.echo(
        f"  {_BOLD}{'Overall':<18}{_RESET} "
        f"{overall_color}{result.overall_score:>3}{_RESET}"
    )
    typer.echo("")
    typer.echo(result.feedback)
    typer.echo("")


@app.command()
def evaluate(
    transcript_file: Path | None = typer.Option(
        None, "--transcript-file", "-t", help="Plain-text transcript to evaluate"
    ),
    call_id: str | None = typer.Option(
        None, "--call-id", help="Fetch the call from the call-recording provider"
    ),
    scenario: str = typer.Option(
        DEFAULT_SCENARIO,
        "--scenario",
        help="Mock scenario used when no transcript or live call data is available",
    ),
    participant: str = typer.Option("Participant", "--participant", "-p"),
    duration: float = typer.Option(120.0, "--duration", help="Call duration in seconds"),
    audio_url: str | None = typer.Option(
        None, "--audio-url", help="Recording URL for audio-informed tone analysis"
    ),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to pipeline config YAML"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
    progress: bool = typer.Option(
        True, "--progress/--no-progress", help="Show a live status line on stderr"
    ),
) -> None:
    """Evaluate one practice call and print its scores."""
    if not is_call_evaluation_available():
        typer.echo(_UNAVAILABLE_MESSAGE)
        raise typer.Exit(code=1)

    try:
        _configure_structlog(log_format=log_format)
        config = _load_config(config_path=config_path)
        observer = CompositeEvaluationObserver(
            observers=[
                StructlogEvaluationObserver(),
                ProgressEvaluationObserver(disabled=not progress),
            ]
        )
        evaluator = build_call_evaluator_from_env(config=config, observer=observer)

        async def _evaluate() -> CallEvaluationResult:
            context = await _resolve_context(
                config=config,
                transcript_file=transcript_file,
                call_id=call_id,
                scenario=scenario,
                participant=participant,
                duration=duration,
                audio_url=audio_url,
            )
            return await evaluator.evaluate(context)

        result = asyncio.run(_evaluate())
    except KeyboardInterrupt:
        typer.echo("Evaluation interrupted.")
        sys.exit(1)
    except CallEvalError as exc:
        typer.echo(f"{_RETRY_MESSAGE} {exc}")
        sys.exit(1)

    if as_json:
        typer.echo(json.dumps(result.model_dump(by_alias=True), indent=2))
    else:
        _print_result(result=result)


@app.command()
def mock(
    scenario: str = typer.Argument(DEFAULT_SCENARIO, help="Scenario name"),
    duration: float = typer.Option(120.0, "--duration", help="Call duration in seconds"),
    list_scenarios: bool = typer.Option(
        False, "--list", help="List the known scenarios and exit"
    ),
) -> None:
    """Print canned call data for a demo scenario as JSON."""
    if list_scenarios:
        for name in available_mock_scenarios():
            typer.echo(name)
        return
    call_data = generate_mock_call_data(scenario=scenario, duration_seconds=duration)
    typer.echo(json.dumps(call_data.model_dump(by_alias=True), indent=2))


@app.command()
def check() -> None:
    """Report whether call evaluation is configured. Exits 1 when it is not."""
    if is_call_evaluation_available():
        typer.echo("Call evaluation is available.")
        return
    typer.echo(_UNAVAILABLE_MESSAGE)
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
