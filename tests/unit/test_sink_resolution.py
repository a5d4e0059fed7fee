"""Tests for looking up sinks by name."""

import pytest

from teamcity_reporter.registry import BUILTIN_SINKS, load_sink_class, resolve_sink
from teamcity_reporter.sinks import ConsoleSink, LoggingSink, RecordingSink


class ListSink:
    """Structural sink that does not inherit from anything."""

    def __init__(self, prefix: str = "") -> None:
        self.prefix = prefix
        self.lines: list[str] = []

    def emit_line(self, text: str) -> None:
        self.lines.append(self.prefix + text)

    def emit_summary(self, summary) -> None:
        pass


class NotASink:
    def emit_line(self, text: str) -> None:
        pass


def test_builtins_are_listed_by_class_name():
    assert BUILTIN_SINKS == {
        "ConsoleSink": ConsoleSink,
        "LoggingSink": LoggingSink,
        "RecordingSink": RecordingSink,
    }


@pytest.mark.parametrize("name", ["LoggingSink", "RecordingSink"])
def test_resolves_builtin_name(name):
    assert type(resolve_sink(name)) is BUILTIN_SINKS[name]


def test_options_are_passed_to_constructor():
    sink = resolve_sink("LoggingSink", logger_name="ci.report")
    assert sink.logger.name == "ci.report"


@pytest.mark.parametrize(
    "path",
    [f"{__name__}:ListSink", f"{__name__}.ListSink"],
)
def test_import_string_forms(path):
    assert load_sink_class(path) is ListSink


def test_structural_sink_is_accepted():
    sink = resolve_sink(f"{__name__}:ListSink", prefix="> ")
    sink.emit_line("x")
    assert sink.lines == ["> x"]


def test_unknown_plain_name_lists_builtins():
    with pytest.raises(ValueError, match="Unknown sink: Nope. Available: ConsoleSink, LoggingSink"):
        load_sink_class("Nope")


def test_missing_attribute():
    with pytest.raises(ValueError, match="has no attribute Missing"):
        load_sink_class(f"{__name__}:Missing")


def test_missing_module():
    with pytest.raises(ImportError):
        load_sink_class("no_such_package_xyz:Sink")


def test_incomplete_class_is_rejected():
    with pytest.raises(TypeError, match="does not implement emit_line and emit_summary"):
        load_sink_class(f"{__name__}:NotASink")


def test_non_class_attribute_is_rejected():
    with pytest.raises(TypeError):
        load_sink_class("os.path:sep")


def test_bad_options_raise_type_error():
    with pytest.raises(TypeError):
        resolve_sink("RecordingSink", colour="red")
