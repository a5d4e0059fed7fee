"""Base reporter protocol for test run events."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from teamcity_reporter.summary import RunSummary
    from teamcity_reporter.tasks import ConsoleLogEvent, File, Task, TaskResult


class Reporter(Protocol):
    """Protocol defining the hooks a test runner drives.

    All methods are async so a reporter can be awaited from an asyncio-based
    runner. Reporters that do no I/O of their own implement them without
    awaiting anything.
    """

    async def on_collected(self, files: Iterable[File]) -> None:
        """Called with every file collected for the run."""
        ...

    async def on_file_registered(self, file: File) -> None:
        """Called once per file, before its tests start."""
        ...

    async def on_console_log(self, test_id: str, event: ConsoleLogEvent) -> None:
        """Called for every chunk of console output written by a test."""
        ...

    async def on_task_update(self, task_id: str, result: TaskResult | None) -> None:
        """Called when a task's state changes."""
        ...

    async def on_run_complete(self, root_tasks: Iterable[Task]) -> RunSummary | None:
        """Called after all files have finished."""
        ...
