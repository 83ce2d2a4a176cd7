# session.py
"""
Calculator session: the state a front end keeps between requests.

A session holds the current equation and the binding table. Assigning a
variable keeps the current equation and evaluates it again with the new value,
so a page can type ``a * a`` once and then step ``a = 1``, ``a = 2``, ...
"""

import logging
from typing import Dict, List, Literal, Mapping

from pydantic import BaseModel

from webcalc.cells import BindingTable, Cell
from webcalc.errors import EvalError, ParseError
from webcalc.evaluator import evaluate
from webcalc.formatter import format_cells
from webcalc.infix_to_prefix import infix_to_prefix
from webcalc.parser import parse_prefix
from webcalc.prefix_to_infix import prefix_to_infix

logger = logging.getLogger(__name__)


class CalcResult(BaseModel):
    """Status, rendered equation and value (or error message) for one request."""
    state: Literal["success", "error"]
    equation: str = ""
    value: str = ""

    @property
    def ok(self) -> bool:
        return self.state == "success"

    @classmethod
    def error(cls, message: str) -> "CalcResult":
        return cls(state="error", equation="", value=message)


class Calculator:
    """Holds the current equation and variable bindings across calls to ``calc``."""

    def __init__(self):
        self.equation: List[Cell] = []
        self._variables: BindingTable = {}

    @property
    def variables(self) -> Dict[str, float]:
        return dict(self._variables)

    def assign(self, bindings: Mapping[str, float]) -> None:
        """Merge an assignment fragment into the binding table."""
        for name, value in bindings.items():
            logger.debug(f"bind {name} = {value}")
            self._variables[name] = float(value)

    def reset(self) -> None:
        self.equation = []
        self._variables = {}

    def calc(self, infix_notation: str) -> CalcResult:
        """Translate, parse and evaluate one line of infix input."""
        prefix = infix_to_prefix(infix_notation.strip())
        try:
            equation, bindings = parse_prefix(prefix)
        except ParseError as e:
            logger.info(f"Parse error for {infix_notation!r}: {e}")
            return CalcResult.error(str(e))

        if not equation:
            if not bindings:
                return CalcResult.error("Neither equation nor variable set.")
            self.assign(bindings)
        else:
            self.equation = list(equation)

        if not self.equation:
            return CalcResult(state="success")

        rendered = prefix_to_infix(format_cells(self.equation))
        try:
            result = evaluate(self.equation, self._variables)
        except EvalError as e:
            logger.info(f"Evaluation error for {rendered!r}: {e}")
            return CalcResult.error(str(e))
        return CalcResult(state="success", equation=rendered, value=format_cells([result]))
