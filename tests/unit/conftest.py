"""Shared fixtures for unit tests."""

import pytest

from teamcity_reporter.reporter import TeamCityReporter
from teamcity_reporter.sinks import RecordingSink
from teamcity_reporter.tasks import ErrorRecord, File, Suite, TaskResult, Test, link
from teamcity_reporter.types import TaskMode, TaskState


@pytest.fixture
def sink() -> RecordingSink:
    """Provide an in-memory sink."""
    return RecordingSink()


@pytest.fixture
def reporter(sink: RecordingSink) -> TeamCityReporter:
    return TeamCityReporter(sink)


@pytest.fixture
def sample_file() -> File:
    """File with a passing test, a failing test inside a suite and a skipped test.

    f
    ├── t-pass
    ├── s
    │   └── t-fail
    └── t-skip
    """
    return link(
        File(
            id="f",
            name="math.test.ts",
            tasks=[
                Test(id="t-pass", name="adds", result=TaskResult(TaskState.PASS, duration=3)),
                Suite(
                    id="s",
                    name="division",
                    result=TaskResult(TaskState.FAIL),
                    tasks=[
                        Test(
                            id="t-fail",
                            name="by zero",
                            result=TaskResult(
                                TaskState.FAIL,
                                duration=7,
                                errors=[ErrorRecord(message="boom", stack="Error: boom")],
                            ),
                        ),
                    ],
                ),
                Test(id="t-skip", name="later", mode=TaskMode.SKIP),
            ],
        )
    )
