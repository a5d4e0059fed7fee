"""TeamCity service message reporter."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from teamcity_reporter.base import Reporter
from teamcity_reporter.printer import Printer
from teamcity_reporter.sinks import ConsoleSink, Sink
from teamcity_reporter.summary import RunSummary, summarize
from teamcity_reporter.tasks import ConsoleLogEvent, File, Task, TaskResult

logger = logging.getLogger(__name__)


class TeamCityReporter(Reporter):
    """Renders a test run as TeamCity service messages.

    Lines for a file are written only once the file has finished, in tree
    order, with console output placed inside the test that produced it.

    Args:
        sink: Where lines and the summary go (defaults to a ``ConsoleSink``).
        summary: Whether ``on_run_complete`` emits the run summary.
    """

    def __init__(self, sink: Sink | None = None, *, summary: bool = True) -> None:
        self.sink = sink or ConsoleSink()
        self.summary = summary
        self.printer = Printer(self.sink)

    async def on_collected(self, files: Iterable[File]) -> None:
        for file in files:
            self.printer.add_file(file)

    async def on_file_registered(self, file: File) -> None:
        self.printer.add_file(file)

    async def on_console_log(self, test_id: str, event: ConsoleLogEvent) -> None:
        self.printer.add_test_console_log(test_id, event)

    async def on_task_update(self, task_id: str, result: TaskResult | None) -> None:
        self.printer.handle_update(task_id, result)

    async def on_task_updates(self, packs: Iterable[tuple[str, TaskResult | None]]) -> None:
        """Apply a batch of ``(task_id, result)`` updates in order."""
        for task_id, result in packs:
            self.printer.handle_update(task_id, result)

    async def on_run_complete(self, root_tasks: Iterable[Task]) -> RunSummary:
        pending = self.printer.pending_files()
        if pending:
            logger.warning(
                "%d file(s) never reported completion: %s", len(pending), ", ".join(pending)
            )
        if not self.summary:
            return summarize(root_tasks)
        return self.printer.write_summary(root_tasks)
