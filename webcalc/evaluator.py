# evaluator.py
"""
Stack evaluator for prefix equations.

Cells are visited from last to first. Values (and resolved variables) go on a
value stack; an operator takes the two most recent values, so for ``- 7 2`` the
scan sees 2, then 7, then ``-`` and computes ``7 - 2``.
"""

import logging
import math
from typing import Callable, Dict, List, Mapping

from webcalc.cells import Equation, Operator, Value, Variable
from webcalc.errors import (
    EvalError,
    InsufficientOperandsError,
    UnconsumedOperatorsError,
    UndefinedVariableError,
    UnknownOperatorError,
)

logger = logging.getLogger(__name__)


def _divide(left: float, right: float) -> float:
    """IEEE 754 division: x/0 is a signed infinity, 0/0 is NaN."""
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


_OPERATIONS: Dict[str, Callable[[float, float], float]] = {
    '+': lambda left, right: left + right,
    '-': lambda left, right: left - right,
    '*': lambda left, right: left * right,
    '/': _divide,
}


def apply_operator(symbol: str, left: float, right: float) -> float:
    """Compute ``left symbol right`` for one of the four arithmetic operators."""
    operation = _OPERATIONS.get(symbol)
    if operation is None:
        raise UnknownOperatorError(symbol, left, right)
    return operation(left, right)


def evaluate(equation: Equation, bindings: Mapping[str, float]) -> Value:
    """
    Reduce a prefix equation to a single Value.

    ``bindings`` is only read. Raises an EvalError subclass for an unbound
    variable, an operator without two operands, or operators left over at the
    end.
    """
    if not equation:
        raise EvalError("Nothing to evaluate.")

    operators: List[str] = []
    values: List[float] = []

    for cell in reversed(equation):
        if isinstance(cell, Value):
            logger.debug(f"Value: {cell.number}")
            values.append(float(cell.number))
        elif isinstance(cell, Variable):
            logger.debug(f"Variable: {cell.name}")
            if cell.name not in bindings:
                raise UndefinedVariableError(cell.name)
            values.append(float(bindings[cell.name]))
        elif isinstance(cell, Operator):
            logger.debug(f"Operator: {cell.symbol}")
            operators.append(cell.symbol)
            if len(values) < 2:
                raise InsufficientOperandsError(cell.symbol)
            first = values.pop()
            second = values.pop()
            symbol = operators.pop()
            values.append(apply_operator(symbol, first, second))
        else:
            raise EvalError(f"Unsupported cell: {cell!r}")

    if operators:
        raise UnconsumedOperatorsError(operators)

    result = values.pop()
    logger.debug(f"result: {result}")
    return Value(result)
