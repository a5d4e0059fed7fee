"""Outcome classification and error resolution for finished tests."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from teamcity_reporter.errors import MissingResultError
from teamcity_reporter.tasks import ErrorRecord, Task, TaskResult, Test
from teamcity_reporter.types import Outcome, TaskMode, TaskState


@dataclass(frozen=True, slots=True)
class Classification:
    """Outcome of a test and, for failures, the errors to report."""

    outcome: Outcome
    errors: list[ErrorRecord] = field(default_factory=list)


def _own(test: Test) -> Task | None:
    return test


def _suite(test: Test) -> Task | None:
    return test.suite


def _file(test: Test) -> Task | None:
    return test.file


# Consulted in order; the first source whose result has errors wins.
ERROR_SOURCES: tuple[Callable[[Test], Task | None], ...] = (_own, _suite, _file)


def outcome_of(test: Test) -> Outcome:
    if test.mode is TaskMode.SKIP:
        return Outcome.SKIP
    if test.result is None or test.result.state is TaskState.FAIL:
        return Outcome.FAIL
    return Outcome.PASS


def resolve_errors(test: Test) -> list[ErrorRecord]:
    """Errors to report for ``test``; never empty."""
    for source in ERROR_SOURCES:
        task = source(test)
        result: TaskResult | None = task.result if task is not None else None
        if result is not None and result.errors:
            return list(result.errors)
    return [ErrorRecord.from_exception(MissingResultError(test))]


def classify(test: Test) -> Classification:
    outcome = outcome_of(test)
    if outcome is Outcome.FAIL:
        return Classification(outcome, resolve_errors(test))
    return Classification(outcome)
