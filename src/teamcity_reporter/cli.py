"""CLI module for the TeamCity reporter."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from contextlib import AbstractContextManager, nullcontext
from pathlib import Path
from typing import Any, TextIO

from rich.console import Console
from rich.markup import escape

from teamcity_reporter.config import ReporterConfig, load_config
from teamcity_reporter.errors import ConfigError, ReplayError
from teamcity_reporter.log import plain_output, setup_logging
from teamcity_reporter.registry import resolve_sink
from teamcity_reporter.replay import EventReplayer
from teamcity_reporter.reporter import TeamCityReporter
from teamcity_reporter.sinks import LoggingSink, Sink

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Entry point for the teamcity-report CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command != "replay":
        parser.print_help()
        raise SystemExit(0)

    try:
        config = load_config(Path(args.config) if args.config else None)
    except ConfigError as exc:
        Console(stderr=True).print(f"[red]{escape(str(exc))}[/red]", highlight=False)
        raise SystemExit(2) from exc

    raise SystemExit(_run_replay(args, config))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="teamcity-report", description="Render test run events as TeamCity service messages"
    )
    parser.add_argument("--config", help="pyproject.toml to read settings from")
    subparsers = parser.add_subparsers(dest="command")

    replay_parser = subparsers.add_parser("replay", help="Replay a JSON-lines event stream")
    replay_parser.add_argument("source", help="Event file, or '-' for stdin")
    replay_parser.add_argument("--sink", help="Sink name or import string (default: ConsoleSink)")
    replay_parser.add_argument(
        "--no-summary", action="store_true", help="Do not print the run summary"
    )
    replay_parser.add_argument(
        "--json-summary", action="store_true", help="Print the run summary as JSON"
    )
    replay_parser.add_argument("--log-level", help="Diagnostic log level (default: WARNING)")
    return parser


def _resolve_sink_options(args: argparse.Namespace, config: ReporterConfig) -> tuple[str, dict[str, Any]]:
    name = args.sink or config.sink
    options = dict(config.sink_options.get(name, {}))
    if args.json_summary:
        options["json_summary"] = True
    return name, options


async def _replay(reporter: TeamCityReporter, stream: TextIO) -> bool:
    summary = await EventReplayer(reporter).replay_lines(stream)
    if summary is None:
        logger.warning("Event stream ended without a complete event")
        return True
    return summary.passed


def _output_scope(sink: Sink) -> AbstractContextManager[object]:
    # A LoggingSink with no handlers of its own would otherwise print through RichHandler.
    if isinstance(sink, LoggingSink) and not sink.logger.handlers:
        return plain_output(sink.logger)
    return nullcontext()


def _run_replay(args: argparse.Namespace, config: ReporterConfig) -> int:
    console = Console(stderr=True)
    try:
        setup_logging(args.log_level or config.log_level)
    except ValueError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]", highlight=False)
        return 2

    name, options = _resolve_sink_options(args, config)
    try:
        sink = resolve_sink(name, **options)
    except (ValueError, TypeError, ImportError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]", highlight=False)
        return 2

    try:
        source = sys.stdin if args.source == "-" else Path(args.source).open(encoding="utf-8")
    except OSError as exc:
        reason = exc.strerror or str(exc)
        console.print(
            f"[red]Cannot read {escape(args.source)}: {escape(reason)}[/red]", highlight=False
        )
        return 2

    reporter = TeamCityReporter(sink, summary=config.summary and not args.no_summary)
    try:
        with _output_scope(sink):
            passed = asyncio.run(_replay(reporter, source))
    except ReplayError as exc:
        console.print(f"[red]Invalid event stream, {escape(str(exc))}[/red]", highlight=False)
        return 2
    finally:
        if source is not sys.stdin:
            source.close()

    return 0 if passed else 1


__all__ = ["main"]
