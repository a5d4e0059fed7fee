"""End-of-run counts over the whole task tree."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from teamcity_reporter.tasks import Custom, File, Suite, Task, Test
from teamcity_reporter.types import TaskState


class SuiteError(BaseModel):
    """One error recorded on a failed suite."""

    file: str
    error: str


class RunSummary(BaseModel):
    """Totals of a finished run. Dumps with camelCase keys when ``by_alias=True``."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    failed_suites_count: int = 0
    total_suites_count: int = 0
    failed_tests_count: int = 0
    total_tests_count: int = 0
    suite_errors: list[SuiteError] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.failed_suites_count == 0 and self.failed_tests_count == 0


def _children(task: Task) -> Sequence[Task]:
    return task.tasks if isinstance(task, (File, Suite)) else ()


def get_suites(tasks: Iterable[Task]) -> list[Suite]:
    """All suites below ``tasks``, nested ones included. Files are not suites."""
    suites: list[Suite] = []
    for task in tasks:
        if isinstance(task, Suite):
            suites.append(task)
        suites.extend(get_suites(_children(task)))
    return suites


def is_atom_test(task: Task) -> bool:
    return isinstance(task, (Test, Custom))


def get_tests(tasks: Iterable[Task]) -> list[Task]:
    """All leaf tasks below ``tasks`` in tree order."""
    tests: list[Task] = []
    for task in tasks:
        if is_atom_test(task):
            tests.append(task)
        else:
            tests.extend(get_tests(_children(task)))
    return tests


def summarize(root_tasks: Iterable[Task]) -> RunSummary:
    roots = list(root_tasks)
    suites = get_suites(roots)
    tests = get_tests(roots)

    failed_suites = [s for s in suites if s.result is not None and s.result.errors]
    failed_tests = [t for t in tests if t.result is not None and t.result.state is TaskState.FAIL]

    summary = RunSummary(
        failed_suites_count=len(failed_suites),
        total_suites_count=len(suites),
        failed_tests_count=len(failed_tests),
        total_tests_count=len(tests),
    )
    for suite in failed_suites:
        for error in suite.result.errors:
            summary.suite_errors.append(SuiteError(file=suite.name, error=error.details))
    return summary
