"""Task tree model: files own suites and tests, suites own their children.

Parent links are back-references only. ``link()`` fills them in after a tree
has been built bottom-up (as the replay loader does).
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from teamcity_reporter.types import LogChannel, TaskMode, TaskState


@dataclass(slots=True)
class ErrorRecord:
    """Diagnostic payload attached to a failed result."""

    message: str
    name: str | None = None
    stack: str | None = None
    expected: str | None = None
    actual: str | None = None

    @classmethod
    def from_exception(cls, exc: BaseException) -> ErrorRecord:
        return cls(message=str(exc), name=type(exc).__name__)

    @property
    def details(self) -> str:
        """Stack if recorded, otherwise the message."""
        return self.stack or self.message

    @property
    def is_comparison(self) -> bool:
        return self.expected is not None and self.actual is not None


@dataclass(slots=True)
class TaskResult:
    """Result record of a task. ``duration`` is in milliseconds."""

    state: TaskState
    duration: float = 0
    errors: list[ErrorRecord] = field(default_factory=list)


@dataclass(slots=True)
class ConsoleLogEvent:
    """Console output written while a test body was running."""

    task_id: str
    channel: LogChannel
    content: str


@dataclass(eq=False)
class Task:
    """Fields shared by every node of the tree."""

    id: str
    name: str
    mode: TaskMode = TaskMode.RUN
    result: TaskResult | None = None
    parent: Suite | File | None = field(default=None, repr=False)

    @property
    def file(self) -> File | None:
        """The file this task belongs to (a file is its own file)."""
        node: Task | None = self
        while node is not None and not isinstance(node, File):
            node = node.parent
        return node

    @property
    def suite(self) -> Suite | None:
        """Closest enclosing suite, ``None`` for tasks at the top of a file."""
        return self.parent if isinstance(self.parent, Suite) else None


@dataclass(eq=False)
class Suite(Task):
    tasks: list[Task] = field(default_factory=list)


@dataclass(eq=False)
class File(Task):
    """Root of one test file's tree."""

    filepath: str | None = None
    tasks: list[Task] = field(default_factory=list)


@dataclass(eq=False)
class Test(Task):
    __test__ = False


@dataclass(eq=False)
class Custom(Task):
    """Leaf task reported by the runner that is not a regular test."""


def link(parent: File | Suite) -> File | Suite:
    """Point every descendant's ``parent`` at its container. Returns ``parent``."""
    for child in parent.tasks:
        child.parent = parent
        if isinstance(child, Suite):
            link(child)
    return parent


def iter_tasks(root: Task) -> Iterator[Task]:
    """Yield ``root`` and all of its descendants in pre-order."""
    yield root
    if isinstance(root, (File, Suite)):
        for child in root.tasks:
            yield from iter_tasks(child)
