# formatter.py
"""Render cells back to canonical prefix text."""

from typing import Iterable

from webcalc.cells import Cell, Operator, Value, Variable

# Values get eight fixed decimals; text payloads are cut to eight characters.
PRECISION = 8


def format_cell(cell: Cell) -> str:
    if isinstance(cell, Value):
        return f"{cell.number:.{PRECISION}f}"
    if isinstance(cell, Variable):
        return f"{cell.name:.{PRECISION}}"
    if isinstance(cell, Operator):
        return f"{cell.symbol:.{PRECISION}}"
    raise TypeError(f"Cannot format {cell!r}")


def format_cells(cells: Iterable[Cell]) -> str:
    """Render cells as space separated prefix text, e.g. ``+ a 2.00000000``."""
    return ' '.join(format_cell(cell) for cell in cells)
