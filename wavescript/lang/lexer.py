"""WaveScript tokenizer.

Splits on whitespace and classifies each word by exact table lookup.
Words not in the table are NUMBER when they start with a decimal digit
and IDENTIFIER otherwise. Nothing is rejected here.
"""

from __future__ import annotations

from typing import List

from .tokens import LEXEME_TABLE, Token, TokenType

_DIGITS = frozenset("0123456789")


def classify(word: str) -> TokenType:
    """Return the token kind for a single word."""
    kind = LEXEME_TABLE.get(word)
    if kind is not None:
        return kind
    if word[:1] in _DIGITS:
        return TokenType.NUMBER
    return TokenType.IDENTIFIER


def tokenize(source: str) -> List[Token]:
    """Split ``source`` into classified tokens, preserving order."""
    return [Token(classify(word), word) for word in source.split()]
