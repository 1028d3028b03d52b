"""Text rendering of conversion tables."""

from tempconv.render.program import render_program, write_program
from tempconv.render.tables import Table, render_range_table, render_reference_table

__all__ = [
    "Table",
    "render_program",
    "render_range_table",
    "render_reference_table",
    "write_program",
]
