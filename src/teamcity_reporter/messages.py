"""TeamCity service message builders.

Every message carries a ``flowId`` equal to the owning file's id, so that
output from files reported in parallel can be told apart.
"""

from __future__ import annotations

from teamcity_reporter.escape import escape
from teamcity_reporter.tasks import ErrorRecord, Test
from teamcity_reporter.types import LogChannel


def service_message(message_name: str, /, **attributes: object) -> str:
    """Format ``##teamcity[message_name key='value' ...]``, skipping ``None`` values.

    ``message_name`` is positional-only so ``name`` stays free as an attribute.
    """
    parts = [message_name]
    for key, value in attributes.items():
        if value is None:
            continue
        parts.append(f"{key}='{escape(value)}'")
    return f"##teamcity[{' '.join(parts)}]"


class SuiteMessage:
    """Bracket lines for a file or suite. ``name`` is expected to be escaped already."""

    def __init__(self, flow_id: str, name: str) -> None:
        self.flow_id = flow_id
        self.name = name

    def _line(self, event: str) -> str:
        return f"##teamcity[{event} name='{self.name}' flowId='{escape(self.flow_id)}']"

    def started(self) -> str:
        return self._line("testSuiteStarted")

    def finished(self) -> str:
        return self._line("testSuiteFinished")


class TestMessage:
    __test__ = False

    _LOG_EVENTS = {
        LogChannel.STDOUT: "testStdOut",
        LogChannel.STDERR: "testStdErr",
    }

    def __init__(self, test: Test) -> None:
        self.test = test
        file = test.file
        self.flow_id = file.id if file is not None else test.id

    def started(self) -> str:
        return service_message(
            "testStarted",
            name=self.test.name,
            captureStandardOutput="false",
            flowId=self.flow_id,
        )

    def ignored(self) -> str:
        return service_message("testIgnored", name=self.test.name, flowId=self.flow_id)

    def log(self, channel: LogChannel, content: str) -> str:
        return service_message(
            self._LOG_EVENTS[channel], name=self.test.name, out=content, flowId=self.flow_id
        )

    def fail(self, error: ErrorRecord) -> str:
        if error.is_comparison:
            return service_message(
                "testFailed",
                type="comparisonFailure",
                name=self.test.name,
                message=error.message,
                details=error.details,
                expected=error.expected,
                actual=error.actual,
                flowId=self.flow_id,
            )
        return service_message(
            "testFailed",
            name=self.test.name,
            message=error.message,
            details=error.details,
            flowId=self.flow_id,
        )

    def finished(self, duration: float) -> str:
        return service_message(
            "testFinished",
            name=self.test.name,
            duration=round(duration),
            flowId=self.flow_id,
        )
