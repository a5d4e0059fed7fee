"""Destinations for rendered report lines and the run summary."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from teamcity_reporter.summary import RunSummary


@runtime_checkable
class Sink(Protocol):
    """Receives report output in emission order.

    Calls are synchronous; any exception raised here propagates to whoever
    delivered the event that triggered the output.
    """

    def emit_line(self, text: str) -> None:
        """Called once per report line."""
        ...

    def emit_summary(self, summary: RunSummary) -> None:
        """Called once when the run completes."""
        ...


class ConsoleSink:
    """Writes lines to a rich console; the summary is drawn as a table."""

    def __init__(self, console: Console | None = None, json_summary: bool = False) -> None:
        self.console = console or Console()
        self.json_summary = json_summary

    def emit_line(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def emit_summary(self, summary: RunSummary) -> None:
        if self.json_summary:
            self.console.print_json(summary.model_dump_json(by_alias=True))
            return

        table = Table(title="Test run summary")
        table.add_column("")
        table.add_column("Failed", justify="right")
        table.add_column("Total", justify="right")
        table.add_row("Suites", str(summary.failed_suites_count), str(summary.total_suites_count))
        table.add_row("Tests", str(summary.failed_tests_count), str(summary.total_tests_count))
        self.console.print(table)

        for entry in summary.suite_errors:
            self.console.print(
                f"[red]Suite error in {escape(entry.file)}[/red]", highlight=False, emoji=False
            )
            self.console.print(entry.error, markup=False, highlight=False, emoji=False)


class LoggingSink:
    """Forwards lines to a stdlib logger at INFO."""

    def __init__(self, logger_name: str = "teamcity_reporter.output", json_summary: bool = False) -> None:
        self.logger = logging.getLogger(logger_name)
        if self.logger.level == logging.NOTSET:
            self.logger.setLevel(logging.INFO)
        self.json_summary = json_summary

    def emit_line(self, text: str) -> None:
        self.logger.info(text)

    def emit_summary(self, summary: RunSummary) -> None:
        if self.json_summary:
            self.logger.info(summary.model_dump_json(by_alias=True))
            return
        self.logger.info(
            "Suites: %d failed, %d total",
            summary.failed_suites_count,
            summary.total_suites_count,
        )
        self.logger.info(
            "Tests: %d failed, %d total",
            summary.failed_tests_count,
            summary.total_tests_count,
        )
        for entry in summary.suite_errors:
            self.logger.error("Suite error in %s\n%s", entry.file, entry.error)


class RecordingSink:
    """Keeps everything in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.summaries: list[RunSummary] = []

    def emit_line(self, text: str) -> None:
        self.lines.append(text)

    def emit_summary(self, summary: RunSummary) -> None:
        self.summaries.append(summary)
