"""Infix/prefix arithmetic translation and evaluation with variable bindings."""

from webcalc.cells import Operator, ParseResult, Value, Variable
from webcalc.errors import (
    AssignmentError,
    CalculatorError,
    EvalError,
    InsufficientOperandsError,
    ParseError,
    UnconsumedOperatorsError,
    UndefinedVariableError,
    UnknownOperatorError,
)
from webcalc.evaluator import evaluate
from webcalc.formatter import format_cells
from webcalc.infix_to_prefix import infix_to_prefix
from webcalc.parser import parse_prefix
from webcalc.prefix_to_infix import prefix_to_infix
from webcalc.session import CalcResult, Calculator
from webcalc.tokenizer import tokenize

__all__ = [
    'tokenize', 'infix_to_prefix', 'prefix_to_infix', 'parse_prefix',
    'evaluate', 'format_cells',
    'Operator', 'Variable', 'Value', 'ParseResult',
    'Calculator', 'CalcResult',
    'CalculatorError', 'ParseError', 'AssignmentError', 'EvalError',
    'UndefinedVariableError', 'InsufficientOperandsError',
    'UnconsumedOperatorsError', 'UnknownOperatorError',
]
