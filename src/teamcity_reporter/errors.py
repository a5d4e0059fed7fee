"""Exception types raised by the reporter."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from teamcity_reporter.tasks import Test


class ReporterError(Exception):
    """Base class for reporter errors."""


class MissingResultError(ReporterError):
    """Stands in for the error of a failed test whose result chain has none.

    Never raised; the classifier converts it into an error record attached to
    the test's failure output.
    """

    def __init__(self, test: Test) -> None:
        self.test = test
        super().__init__(f"No result was recorded for test '{test.name}' (id: {test.id})")


class ConfigError(ReporterError):
    """Raised when the ``[tool.teamcity-reporter]`` table is invalid."""


class ReplayError(ReporterError):
    """Raised when a replayed event stream cannot be processed."""

    def __init__(self, line_no: int, cause: Exception | str) -> None:
        self.line_no = line_no
        self.cause = cause
        super().__init__(f"line {line_no}: {cause}")
