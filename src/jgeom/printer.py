# src/jgeom/printer.py
from __future__ import annotations
from dataclasses import dataclass
import logging
import sys
from typing import Iterable, TextIO

from .base import CoordinateTable

logger = logging.getLogger(__name__)


@dataclass
class PrintOptions:
    precision: int = 6  # significant digits, same as a default C++ stream
    align_cols: bool = True  # pad every value to the widest in the table


def format_value(x: float, precision: int = 6) -> str:
    return f"{x:.{precision}g}"


def format_table(table: CoordinateTable, options: PrintOptions = PrintOptions()) -> str:
    """
    Render a table row-major, one row per line, values separated by a space.
    No trailing newline. With align_cols, all columns share a single width.
    """
    cells = [[format_value(v, options.precision) for v in row] for row in table.rows()]
    width = max(len(c) for row in cells for c in row) if options.align_cols else 0
    return "\n".join(" ".join(c.rjust(width) for c in row) for row in cells)


def print_geometries(
    tables: Iterable[CoordinateTable],
    stream: TextIO | None = None,
    options: PrintOptions = PrintOptions(),
) -> None:
    """Write label, rows and a blank line for each table, in order."""
    if stream is None:
        stream = sys.stdout

    for table in tables:
        logger.debug("Printing %s (%d atoms)", table.name, table.n_atoms)
        print(table.label, file=stream)
        print(format_table(table, options), end="\n\n", file=stream)
    stream.flush()
