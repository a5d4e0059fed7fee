"""Message templates buffered per file until the file finishes."""

from __future__ import annotations

from dataclasses import dataclass

from teamcity_reporter.tasks import Test


@dataclass(frozen=True, slots=True)
class LiteralLine:
    """A line whose text is known when the tree is walked."""

    text: str


@dataclass(frozen=True, slots=True)
class DeferredTest:
    """Lines for ``test``, rendered from its result and logs at flush time."""

    test: Test


MessageTemplate = LiteralLine | DeferredTest
