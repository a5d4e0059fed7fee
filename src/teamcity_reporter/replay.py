"""Replay a JSON-lines event stream through a reporter.

Each line is one event object, discriminated on its ``event`` key::

    {"event": "file", "file": {"id": "f1", "name": "a.test.ts", "type": "file", "tasks": [...]}}
    {"event": "log", "task_id": "t1", "type": "stdout", "content": "hello"}
    {"event": "update", "task_id": "t1", "result": {"state": "pass", "duration": 5}}
    {"event": "complete"}
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError, field_validator

from teamcity_reporter.base import Reporter
from teamcity_reporter.errors import ReplayError
from teamcity_reporter.summary import RunSummary
from teamcity_reporter.tasks import (
    ConsoleLogEvent,
    Custom,
    ErrorRecord,
    File,
    Suite,
    Task,
    TaskResult,
    Test,
    iter_tasks,
    link,
)
from teamcity_reporter.types import LogChannel, TaskMode, TaskState


class ErrorPayload(BaseModel):
    message: str = ""
    name: str | None = None
    stack: str | None = None
    expected: str | None = None
    actual: str | None = None

    def to_record(self) -> ErrorRecord:
        return ErrorRecord(**self.model_dump())


class ResultPayload(BaseModel):
    state: TaskState
    duration: float = Field(default=0, ge=0, allow_inf_nan=False)
    errors: list[ErrorPayload] = Field(default_factory=list)

    def to_result(self) -> TaskResult:
        return TaskResult(
            state=self.state,
            duration=self.duration,
            errors=[error.to_record() for error in self.errors],
        )


class TaskPayload(BaseModel):
    id: str
    name: str
    type: Literal["file", "suite", "test", "custom"] = "test"
    mode: TaskMode = TaskMode.RUN
    filepath: str | None = None
    result: ResultPayload | None = None
    tasks: list[TaskPayload] = Field(default_factory=list)

    def _common(self) -> dict[str, object]:
        result = self.result.to_result() if self.result else None
        return {"id": self.id, "name": self.name, "mode": self.mode, "result": result}

    def to_file(self) -> File:
        tasks = [t.to_task() for t in self.tasks]
        return File(**self._common(), filepath=self.filepath, tasks=tasks)

    def to_task(self) -> Task:
        if self.type == "file":
            return self.to_file()
        common = self._common()
        if self.type == "suite":
            return Suite(**common, tasks=[t.to_task() for t in self.tasks])
        if self.type == "custom":
            return Custom(**common)
        return Test(**common)


class FileEvent(BaseModel):
    event: Literal["file"]
    file: TaskPayload

    @field_validator("file")
    @classmethod
    def _must_be_file(cls, value: TaskPayload) -> TaskPayload:
        if value.type != "file":
            msg = f"expected a file task, got type '{value.type}'"
            raise ValueError(msg)
        return value


class LogEvent(BaseModel):
    event: Literal["log"]
    task_id: str
    type: LogChannel = LogChannel.STDOUT
    content: str = ""


class UpdateEvent(BaseModel):
    event: Literal["update"]
    task_id: str
    result: ResultPayload | None = None


class CompleteEvent(BaseModel):
    event: Literal["complete"]


Event = Annotated[
    Union[FileEvent, LogEvent, UpdateEvent, CompleteEvent],
    Field(discriminator="event"),
]

_event_adapter: TypeAdapter[Event] = TypeAdapter(Event)


def parse_event(raw: str) -> Event:
    """Validate one JSON line into an event model."""
    return _event_adapter.validate_json(raw)


class EventReplayer:
    """Feeds parsed events to a reporter, keeping task state like a runner would.

    Results from update events are stored on the matching task before the
    reporter is notified, so deferred rendering sees them.
    """

    def __init__(self, reporter: Reporter) -> None:
        self.reporter = reporter
        self._files: dict[str, File] = {}
        self._tasks: dict[str, Task] = {}

    @property
    def files(self) -> list[File]:
        """Registered files in first-registration order; a re-registered id keeps its place."""
        return list(self._files.values())

    async def feed(self, event: Event) -> RunSummary | None:
        if isinstance(event, FileEvent):
            file = event.file.to_file()
            link(file)
            self._files[file.id] = file
            self._tasks.update((t.id, t) for t in iter_tasks(file))
            await self.reporter.on_file_registered(file)
        elif isinstance(event, LogEvent):
            log = ConsoleLogEvent(task_id=event.task_id, channel=event.type, content=event.content)
            await self.reporter.on_console_log(event.task_id, log)
        elif isinstance(event, UpdateEvent):
            result = event.result.to_result() if event.result else None
            task = self._tasks.get(event.task_id)
            if task is not None and result is not None:
                task.result = result
            await self.reporter.on_task_update(event.task_id, result)
        else:
            return await self.reporter.on_run_complete(self.files)
        return None

    async def replay_lines(self, lines: Iterable[str]) -> RunSummary | None:
        """Replay every non-blank line; returns the summary of the last complete event."""
        summary = None
        for line_no, raw in enumerate(lines, start=1):
            if not raw.strip():
                continue
            try:
                event = parse_event(raw)
            except ValidationError as exc:
                raise ReplayError(line_no, exc) from exc
            result = await self.feed(event)
            if isinstance(event, CompleteEvent):
                summary = result
        return summary
