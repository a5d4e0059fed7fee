"""Per-file message buffering and the flush gate."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from teamcity_reporter.console_log import ConsoleLogRouter
from teamcity_reporter.sinks import Sink
from teamcity_reporter.summary import RunSummary, summarize
from teamcity_reporter.tasks import ConsoleLogEvent, File, Task, TaskResult, iter_tasks
from teamcity_reporter.templates import MessageTemplate
from teamcity_reporter.types import TaskState
from teamcity_reporter.walker import TreeWalker

logger = logging.getLogger(__name__)


class Printer:
    """Buffers each file's templates until the file's terminal update arrives.

    A file's entry is removed before its lines are emitted, so a file is
    flushed at most once even if the sink fails halfway through.
    """

    def __init__(self, sink: Sink) -> None:
        self.sink = sink
        self.router = ConsoleLogRouter()
        self.walker = TreeWalker(self.router)
        self._file_messages: dict[str, tuple[File, list[MessageTemplate]]] = {}

    def add_file(self, file: File) -> None:
        if file.id in self._file_messages:
            logger.debug("Replacing pending messages for file %s", file.id)
        self._file_messages[file.id] = (file, self.walker.build_file_messages(file))

    def add_test_console_log(self, test_id: str, event: ConsoleLogEvent) -> None:
        self.router.record(test_id, event)

    def handle_update(self, task_id: str, result: TaskResult | None) -> None:
        if result is None or result.state is TaskState.RUN:
            return
        entry = self._file_messages.pop(task_id, None)
        if entry is None:
            logger.debug("No pending messages for task %s", task_id)
            return

        file, templates = entry
        logger.debug("Flushing %d templates for file %s", len(templates), task_id)
        try:
            for template in templates:
                for line in self.walker.render(template):
                    self.sink.emit_line(line)
        finally:
            # Output of skipped tests, custom tasks and suites is never rendered.
            dropped = self.router.discard(task.id for task in iter_tasks(file))
            if dropped:
                logger.debug("Dropped %d unrendered log event(s) for file %s", dropped, file.id)

    def pending_files(self) -> list[str]:
        """Ids of registered files that have not been flushed."""
        return list(self._file_messages)

    def write_summary(self, root_tasks: Iterable[Task]) -> RunSummary:
        summary = summarize(root_tasks)
        self.sink.emit_summary(summary)
        return summary
