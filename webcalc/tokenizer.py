# tokenizer.py
"""
Word-boundary tokenizer shared by the translators and the prefix parser.

Text is segmented the way Unicode word boundaries split it: runs of word
characters (letters, digits, underscore, in any script) stay together with
any combining marks and joiners that follow them, as do decimal numbers such
as ``3.14``; every other non-space character is a token of its own.
Whitespace separates tokens and is never returned.
"""

import logging
from typing import List

import regex

logger = logging.getLogger(__name__)

OPERATORS = ('+', '-', '*', '/', '=')
ARITHMETIC_OPERATORS = ('+', '-', '*', '/')
SIGNS = ('+', '-')
LPAREN = '('
RPAREN = ')'
PARENTHESES = (LPAREN, RPAREN)

_WORD_CHAR = r"\w[\p{M}\u200c\u200d]*"

_token_specification = [
    ('WORD',  rf"(?:{_WORD_CHAR})+(?:[.'’](?:{_WORD_CHAR})+)*"),  # identifiers, integers, decimals
    ('SKIP',  r'\s+'),                 # whitespace is discarded
    ('OTHER', r'\X'),                  # operators, parentheses, punctuation
]
_tok_regex = regex.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in _token_specification),
    regex.DOTALL,
)


def is_operator(token: str) -> bool:
    return token in OPERATORS


def is_parenthesis(token: str) -> bool:
    return token in PARENTHESES


def is_word(token: str) -> bool:
    """True for anything that is neither an operator nor a parenthesis."""
    return not is_operator(token) and not is_parenthesis(token)


def tokenize(text: str, fuse_signs: bool = False) -> List[str]:
    """
    Split ``text`` into operator, parenthesis and word tokens.

    With ``fuse_signs`` a ``+``/``-`` that starts a whitespace-delimited chunk
    and is directly followed by a word is returned joined to it, so ``-3``
    stays one token while ``- 3`` stays two.
    """
    if fuse_signs:
        tokens: List[str] = []
        for chunk in text.split():
            parts = tokenize(chunk)
            if len(parts) >= 2 and parts[0] in SIGNS and is_word(parts[1]):
                parts[0:2] = [parts[0] + parts[1]]
            tokens.extend(parts)
        return tokens

    tokens = [mo.group() for mo in _tok_regex.finditer(text) if mo.lastgroup != 'SKIP']
    logger.debug(f"tokenize({text!r}) -> {tokens}")
    return tokens
