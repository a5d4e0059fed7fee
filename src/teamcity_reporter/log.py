import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.logging import RichHandler


def resolve_level(level: str) -> int:
    """Numeric value of a level name such as ``"info"``; raises ValueError if unknown."""
    levels = logging.getLevelNamesMapping()
    try:
        return levels[level.upper()]
    except KeyError:
        msg = f"Unknown log level: {level}. Expected one of: {', '.join(levels)}"
        raise ValueError(msg) from None


def setup_logging(level: str = "WARNING") -> logging.Logger:
    # Report lines own stdout; diagnostics go to stderr.
    handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True)
    logging.basicConfig(
        level=resolve_level(level), format="%(message)s", datefmt="[%X]", handlers=[handler]
    )
    return logging.getLogger("teamcity_reporter")


@contextmanager
def plain_output(logger: logging.Logger) -> Iterator[logging.Handler]:
    """Write ``logger`` records to stdout as bare messages while the block runs.

    Records stop propagating to the diagnostic handler for the duration, so
    report lines are not decorated with timestamps or levels.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    propagate = logger.propagate
    logger.addHandler(handler)
    logger.propagate = False
    try:
        yield handler
    finally:
        logger.removeHandler(handler)
        logger.propagate = propagate
