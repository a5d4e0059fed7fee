"""Shared types for the TeamCity reporter."""

from enum import Enum


class TaskMode(Enum):
    """How the runner intends to treat a task."""

    RUN = "run"
    SKIP = "skip"


class TaskState(Enum):
    """State carried by a task result."""

    RUN = "run"  # Still in progress
    PASS = "pass"
    FAIL = "fail"
    SKIP = "skip"


class Outcome(Enum):
    """Reported outcome of a single test."""

    PASS = "pass"
    FAIL = "fail"
    SKIP = "skip"


class LogChannel(Enum):
    """Console stream a log event was written to."""

    STDOUT = "stdout"
    STDERR = "stderr"
