"""Lookup of sinks by name for the CLI and configuration.

A sink is named either by one of the built-in class names or by an import
string (``package.module:ClassName`` or ``package.module.ClassName``) pointing
at any class with ``emit_line`` and ``emit_summary``.
"""

from __future__ import annotations

import importlib
from typing import Any

from teamcity_reporter.sinks import ConsoleSink, LoggingSink, RecordingSink, Sink

BUILTIN_SINKS: dict[str, type[Sink]] = {
    cls.__name__: cls for cls in (ConsoleSink, LoggingSink, RecordingSink)
}


def _split_import_path(path: str) -> tuple[str, str]:
    module_path, sep, class_name = path.rpartition(":")
    if not sep:
        module_path, _, class_name = path.rpartition(".")
    return module_path, class_name


def load_sink_class(name: str) -> type[Sink]:
    """Return the sink class for a built-in name or import string.

    Raises:
        ValueError: ``name`` is neither a built-in nor an import string, or the
            module has no such attribute.
        ImportError: the module cannot be imported.
        TypeError: the attribute is not a class implementing the sink methods.
    """
    if name in BUILTIN_SINKS:
        return BUILTIN_SINKS[name]

    module_path, class_name = _split_import_path(name)
    if not module_path or not class_name:
        available = ", ".join(sorted(BUILTIN_SINKS))
        msg = f"Unknown sink: {name}. Available: {available}"
        raise ValueError(msg)

    cls = getattr(importlib.import_module(module_path), class_name, None)
    if cls is None:
        msg = f"Module {module_path} has no attribute {class_name}"
        raise ValueError(msg)
    if not isinstance(cls, type) or not issubclass(cls, Sink):
        msg = f"{name} does not implement emit_line and emit_summary"
        raise TypeError(msg)
    return cls


def resolve_sink(name: str, **options: Any) -> Sink:
    """Instantiate the sink called ``name`` with ``options`` as keyword arguments."""
    return load_sink_class(name)(**options)


__all__ = ["BUILTIN_SINKS", "load_sink_class", "resolve_sink"]
