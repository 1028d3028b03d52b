from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from typing import TYPE_CHECKING, TextIO

from tempconv.render.tables import render_range_table, render_reference_table

if TYPE_CHECKING:
    from tempconv.exercises.base import Exercise

logger = logging.getLogger(__name__)


def render_program(exercise: Exercise) -> Iterator[str]:
    """Yield the full output of one exercise program, line by line."""
    conversion = exercise.conversion
    yield f"{conversion.title} conversion table:"
    yield from render_range_table(conversion, exercise.sweep)
    yield ""
    yield "Reference temperatures:"
    yield from render_reference_table(conversion, exercise.references)


def write_program(exercise: Exercise, out: TextIO | None = None) -> None:
    if out is None:
        out = sys.stdout
    logger.info("Printing exercise %s (%s)", exercise.number, exercise.conversion.title)
    for line in render_program(exercise):
        out.write(line + "\n")
    out.flush()
