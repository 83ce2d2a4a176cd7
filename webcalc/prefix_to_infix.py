# prefix_to_infix.py
"""
Prefix to infix translation, used to show the current equation back to the user.

Each operator is held on a stack until its first operand has been written, then
placed after it. An operand that closes a group (next token is ``)``) leaves the
operator pending until the group itself is closed.

    >>> prefix_to_infix("/ ( + a * b c ) ( - d / f g )")
    '(a + b * c) / (d - f / g)'
"""

import logging
from typing import List

from webcalc.tokenizer import LPAREN, OPERATORS, RPAREN, tokenize

logger = logging.getLogger(__name__)


def prefix_to_infix(text: str) -> str:
    """Translate space separated prefix notation to an infix expression."""
    logger.debug(f"prefix input: {text!r}")
    tokens = tokenize(text, fuse_signs=True)
    pieces: List[str] = []
    operators: List[str] = []

    for index, token in enumerate(tokens):
        following = tokens[index + 1] if index + 1 < len(tokens) else None
        if token == LPAREN:
            pieces.append(token)
        elif token == RPAREN:
            pieces.append(token)
            if following != RPAREN and operators:
                pieces.append(f" {operators.pop()} ")
        elif token in OPERATORS:
            operators.append(token)
        else:
            pieces.append(token)
            if operators and following != RPAREN:
                pieces.append(f" {operators.pop()} ")

    result = ''.join(pieces)
    logger.debug(f"infix output: {result!r}")
    return result
