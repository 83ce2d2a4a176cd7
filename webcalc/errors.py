# errors.py
"""Exceptions raised by the translator, parser and evaluator.

Hosts catch :class:`CalculatorError` and turn it into an error status; the core
never swallows them.
"""


class CalculatorError(Exception):
    """Base class for calculator errors."""
    pass


# ---------------------------
# Parsing
# ---------------------------

class ParseError(CalculatorError):
    """Raised when prefix text cannot be turned into an equation or assignment."""
    pass


class AssignmentError(ParseError):
    """Raised for a malformed ``= name value`` statement."""
    pass


# ---------------------------
# Evaluation
# ---------------------------

class EvalError(CalculatorError):
    """Raised when an equation cannot be reduced to a single value."""
    pass


class UndefinedVariableError(EvalError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Variable {name} does not have a defined value.")


class InsufficientOperandsError(EvalError):
    def __init__(self, operator: str):
        self.operator = operator
        super().__init__(f"Not enough values to apply to Operator {operator}.")


class UnconsumedOperatorsError(EvalError):
    def __init__(self, operators=None):
        self.operators = list(operators or [])
        super().__init__("Did not use all operators!")


class UnknownOperatorError(EvalError):
    def __init__(self, operator: str, left: float, right: float):
        self.operator = operator
        self.left = left
        self.right = right
        super().__init__(f"Cannot process: ({operator}{left}{right})")
