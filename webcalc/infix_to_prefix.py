# infix_to_prefix.py
"""
Infix to prefix translation.

The tokens are scanned from last to first with an operator stack, which is the
shunting-yard algorithm run backwards. Scanning in reverse swaps the roles of
the parentheses: ``)`` opens a group and is parked on the stack, ``(`` closes
it and drains the stack back to the matching ``)``. Output is collected in
reverse and its token order is flipped once at the end.

    >>> infix_to_prefix("a + b * c / d")
    '+ a * b / c d'
"""

import logging
from typing import Dict, List, Optional

from webcalc.tokenizer import LPAREN, OPERATORS, RPAREN, SIGNS, tokenize

logger = logging.getLogger(__name__)

# Higher number = binds tighter. Anything not listed (e.g. a parked ')') is 0.
PRECEDENCE: Dict[str, int] = {
    '=': 3,
    '*': 2,
    '/': 2,
    '+': 1,
    '-': 1,
}


def get_precedence(token: str) -> int:
    return PRECEDENCE.get(token, 0)


def _leading_sign(reversed_tokens: List[str], position: int) -> Optional[str]:
    """
    Return the unary sign written in front of ``reversed_tokens[position]``.

    A ``+``/``-`` directly before an operand is a sign, not a binary operator,
    when the token before it is itself an operator: ``a = -3``, ``h / -i``.
    """
    if position + 2 >= len(reversed_tokens):
        return None
    candidate = reversed_tokens[position + 1]
    before = reversed_tokens[position + 2]
    if candidate in SIGNS and before in OPERATORS:
        return candidate
    return None


def infix_to_prefix(text: str) -> str:
    """Translate an infix expression to space separated prefix notation."""
    logger.debug(f"infix input: {text!r}")
    reversed_tokens = tokenize(text)[::-1]
    output: List[str] = []
    stack: List[str] = []
    skip = False

    for position, token in enumerate(reversed_tokens):
        if skip:
            # sign already fused onto the operand after it
            skip = False
            continue

        if token == RPAREN:
            output.append(token)
            stack.append(token)
        elif token in OPERATORS:
            if stack:
                stack_top = stack.pop()
                if get_precedence(stack_top) >= get_precedence(token):
                    output.append(stack_top)
                else:
                    stack.append(stack_top)
            stack.append(token)
        elif token == LPAREN:
            while stack:
                stack_top = stack.pop()
                if stack_top == RPAREN:
                    break
                output.append(stack_top)
            output.append(token)
        else:
            sign = _leading_sign(reversed_tokens, position)
            if sign is not None:
                output.append(sign + token)
                skip = True
            else:
                output.append(token)
        logger.debug(f"token {token!r}: output={output} stack={stack}")

    while stack:
        output.append(stack.pop())

    result = ' '.join(reversed(output)).strip()
    logger.debug(f"prefix output: {result!r}")
    return result
