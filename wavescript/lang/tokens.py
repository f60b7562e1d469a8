"""Token kinds and the fixed lexeme table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class TokenType(Enum):
    # Keywords
    WAVE = "wave"
    AMP = "amp"
    FREQ = "freq"
    PHASE = "phase"
    RANDOM = "random"
    PRINT = "print"
    IF = "if"
    ELSE = "else"
    WHILE = "while"
    INVERSE = "inverse"
    # Operators
    PLUS = "plus"
    MINUS = "minus"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    ASSIGN = "assign"
    EQUAL = "equal"
    LESS = "less"
    GREATER = "greater"
    NOT_EQUAL = "not_equal"
    # Punctuation
    LBRACE = "lbrace"
    RBRACE = "rbrace"
    SEMICOLON = "semicolon"
    # Values
    NUMBER = "number"
    IDENTIFIER = "identifier"


LEXEME_TABLE: Dict[str, TokenType] = {
    'wave': TokenType.WAVE,
    'amplitude': TokenType.AMP,
    'frequency': TokenType.FREQ,
    'phase': TokenType.PHASE,
    'random': TokenType.RANDOM,
    'print': TokenType.PRINT,
    'if': TokenType.IF,
    'else': TokenType.ELSE,
    'while': TokenType.WHILE,
    'inverse': TokenType.INVERSE,
    '+': TokenType.PLUS,
    '-': TokenType.MINUS,
    '*': TokenType.MULTIPLY,
    '/': TokenType.DIVIDE,
    '=': TokenType.ASSIGN,
    '==': TokenType.EQUAL,
    '<': TokenType.LESS,
    '>': TokenType.GREATER,
    '!=': TokenType.NOT_EQUAL,
    '{': TokenType.LBRACE,
    '}': TokenType.RBRACE,
    ';': TokenType.SEMICOLON,
}

COMPARATORS = frozenset({
    TokenType.EQUAL, TokenType.LESS, TokenType.GREATER, TokenType.NOT_EQUAL,
})

MATH_OPERATORS = frozenset({
    TokenType.PLUS, TokenType.MINUS, TokenType.MULTIPLY, TokenType.DIVIDE,
})


@dataclass(frozen=True)
class Token:
    """A classified lexeme.

    Attributes:
        kind: Token kind from the fixed table.
        lexeme: The source word, verbatim.
    """
    kind: TokenType
    lexeme: str
