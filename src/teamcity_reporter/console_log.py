"""Per-test buffering of console output."""

from __future__ import annotations

from collections.abc import Iterable

from teamcity_reporter.tasks import ConsoleLogEvent


class ConsoleLogRouter:
    """Holds console log events until the owning test is rendered.

    Events are kept in arrival order. ``drain`` hands them over and forgets
    them, since each test is rendered exactly once.
    """

    def __init__(self) -> None:
        self._logs: dict[str, list[ConsoleLogEvent]] = {}

    def record(self, test_id: str, event: ConsoleLogEvent) -> None:
        self._logs.setdefault(test_id, []).append(event)

    def drain(self, test_id: str) -> list[ConsoleLogEvent]:
        return self._logs.pop(test_id, [])

    def discard(self, test_ids: Iterable[str]) -> int:
        """Drop buffered output for tasks that will never be rendered."""
        return sum(len(self._logs.pop(test_id, [])) for test_id in test_ids)

    def pending_count(self) -> int:
        """Number of tests that still have buffered output."""
        return len(self._logs)
