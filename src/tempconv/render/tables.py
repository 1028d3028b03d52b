from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator

from tempconv.conversion.linear import LinearConversion
from tempconv.conversion.model import ReferencePoint, SweepRange

logger = logging.getLogger(__name__)

FIELD_WIDTH = 6
RANGE_SEPARATOR = "-" * 15
REFERENCE_SEPARATOR = "-" * 25


class Table:
    """Lazy, restartable sequence of text lines.

    Every iteration calls the line factory again, so a table can be printed
    any number of times and yields the same lines each time.
    """

    def __init__(self, lines: Callable[[], Iterator[str]]) -> None:
        self._lines = lines

    def __iter__(self) -> Iterator[str]:
        return self._lines()

    def __str__(self) -> str:
        return "\n".join(self)


def format_value(value: float) -> str:
    return f"{value:{FIELD_WIDTH}.1f}"


def _header(conversion: LinearConversion, *extra: str) -> str:
    cols = [f"{conversion.source.value:<{FIELD_WIDTH}}",
            f"{conversion.target.value:<{FIELD_WIDTH}}", *extra]
    return " | ".join(cols)


def render_range_table(conversion: LinearConversion, sweep: SweepRange) -> Table:
    def lines() -> Iterator[str]:
        logger.debug("Rendering %s table from %s to %s step %s",
                     conversion.title, sweep.lower, sweep.upper, sweep.step)
        yield _header(conversion)
        yield RANGE_SEPARATOR
        for value in sweep.values():
            yield f"{format_value(value)} | {format_value(conversion.convert(value))}"
        yield RANGE_SEPARATOR

    return Table(lines)


def render_reference_table(conversion: LinearConversion,
                           points: Iterable[ReferencePoint]) -> Table:
    points = tuple(points)

    def lines() -> Iterator[str]:
        logger.debug("Rendering %d reference points", len(points))
        yield _header(conversion, "Reference")
        yield REFERENCE_SEPARATOR
        for point in points:
            yield (f"{format_value(point.value)} | "
                   f"{format_value(conversion.convert(point.value))} | {point.label}")
        yield REFERENCE_SEPARATOR

    return Table(lines)
