"""Tests for teamcity_reporter.console_log."""

from teamcity_reporter.console_log import ConsoleLogRouter
from teamcity_reporter.tasks import ConsoleLogEvent
from teamcity_reporter.types import LogChannel


def _event(test_id: str, content: str, channel=LogChannel.STDOUT) -> ConsoleLogEvent:
    return ConsoleLogEvent(task_id=test_id, channel=channel, content=content)


def test_drain_returns_events_in_arrival_order():
    router = ConsoleLogRouter()
    router.record("t1", _event("t1", "first"))
    router.record("t2", _event("t2", "other"))
    router.record("t1", _event("t1", "second", LogChannel.STDERR))

    assert [e.content for e in router.drain("t1")] == ["first", "second"]


def test_drain_unknown_test_is_empty():
    assert ConsoleLogRouter().drain("missing") == []


def test_drain_releases_buffer():
    router = ConsoleLogRouter()
    router.record("t1", _event("t1", "x"))
    assert router.pending_count() == 1

    router.drain("t1")

    assert router.pending_count() == 0
    assert router.drain("t1") == []


def test_discard_counts_dropped_events():
    router = ConsoleLogRouter()
    router.record("a", _event("a", "1"))
    router.record("a", _event("a", "2"))
    router.record("b", _event("b", "3"))

    assert router.discard(["a", "missing"]) == 2
    assert router.drain("a") == []
    assert router.pending_count() == 1
