# parser.py
"""Classify prefix tokens into cells, or read a ``= name value`` assignment."""

import logging
from typing import List, Optional

from webcalc.cells import Cell, Operator, ParseResult, Value, Variable
from webcalc.errors import AssignmentError
from webcalc.tokenizer import ARITHMETIC_OPERATORS, PARENTHESES, SIGNS, is_word, tokenize

logger = logging.getLogger(__name__)

_ASSIGNMENT_FORM = "Equals can only take the form of variable = value."


def parse_number(token: str) -> Optional[float]:
    """Return the token as a float, or None if it is not numeric."""
    # float() also takes digit separators ("1_000"); those stay identifiers
    if '_' in token:
        return None
    try:
        return float(token)
    except ValueError:
        return None


def _parse_assignment(tokens: List[str]) -> ParseResult:
    if len(tokens) < 2:
        raise AssignmentError(_ASSIGNMENT_FORM)
    if len(tokens) > 2:
        raise AssignmentError(f"{_ASSIGNMENT_FORM} Cannot solve for value.")

    name, raw_value = tokens
    if not name or not is_word(name) or name[0] in SIGNS or parse_number(name) is not None:
        raise AssignmentError(_ASSIGNMENT_FORM)
    value = parse_number(raw_value)
    if value is None:
        raise AssignmentError(_ASSIGNMENT_FORM)

    logger.debug(f"assignment: {name} = {value}")
    return ParseResult([], {name: value})


def _classify(token: str) -> List[Cell]:
    if token in ARITHMETIC_OPERATORS:
        return [Operator(token)]
    number = parse_number(token)
    if number is not None:
        return [Value(number)]
    if token[0] in ARITHMETIC_OPERATORS and len(token) > 1:
        # signed identifier such as "-i": keep the sign as its own operator
        return [Operator(token[0]), Variable(token[1:])]
    return [Variable(token)]


def parse_prefix(text: str) -> ParseResult:
    """
    Parse prefix text into an equation, or into a one-entry binding fragment.

    Text starting with ``=`` is an assignment and must be exactly
    ``= name number``. Anything else is an equation; parentheses are dropped.
    """
    tokens = tokenize(text, fuse_signs=True)
    logger.debug(f"parse_prefix tokens: {tokens}")
    if not tokens:
        return ParseResult([], {})
    if tokens[0] == '=':
        return _parse_assignment(tokens[1:])

    equation: List[Cell] = []
    for token in tokens:
        if token in PARENTHESES:
            continue
        if token == '=':
            raise AssignmentError("Equals can only appear at the start of an assignment.")
        equation.extend(_classify(token))
    logger.debug(f"equation: {equation}")
    return ParseResult(equation, {})
