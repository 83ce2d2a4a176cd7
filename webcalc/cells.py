# cells.py
"""
Typed equation elements.

An equation is a list of cells in prefix order. A cell is exactly one of
``Operator``, ``Variable`` or ``Value``; consumers match on all three and treat
anything else as an error.
"""

from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Union


@dataclass(frozen=True)
class Operator:
    """One of ``+ - * /``. ``=`` never becomes a cell."""
    symbol: str


@dataclass(frozen=True)
class Variable:
    """A name resolved against the binding table at evaluation time."""
    name: str


@dataclass(frozen=True)
class Value:
    number: float


Cell = Union[Operator, Variable, Value]
Equation = List[Cell]
BindingTable = Dict[str, float]


class ParseResult(NamedTuple):
    """
    Outcome of parsing one line of prefix text.

    Either ``equation`` is non-empty and ``bindings`` is empty, or ``equation``
    is empty and ``bindings`` holds the single assignment. Both empty means
    there was nothing to parse.
    """
    equation: Equation
    bindings: BindingTable

    @property
    def is_assignment(self) -> bool:
        return not self.equation and bool(self.bindings)

    @property
    def is_empty(self) -> bool:
        return not self.equation and not self.bindings
