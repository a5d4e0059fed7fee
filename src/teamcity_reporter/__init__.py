"""TeamCity service message reporter for hierarchical test runs."""

from .reporter import TeamCityReporter
from .sinks import ConsoleSink, LoggingSink, RecordingSink, Sink
from .summary import RunSummary, SuiteError, summarize
from .tasks import ConsoleLogEvent, Custom, ErrorRecord, File, Suite, TaskResult, Test, link
from .types import LogChannel, Outcome, TaskMode, TaskState
from .version import __version__


__all__ = [
    # Reporter
    "TeamCityReporter",
    # Sinks
    "Sink",
    "ConsoleSink",
    "LoggingSink",
    "RecordingSink",
    # Task tree
    "File",
    "Suite",
    "Test",
    "Custom",
    "TaskResult",
    "ErrorRecord",
    "ConsoleLogEvent",
    "link",
    "TaskMode",
    "TaskState",
    "LogChannel",
    "Outcome",
    # Summary
    "RunSummary",
    "SuiteError",
    "summarize",
]
