"""WaveScript translator.

Single left-to-right pass over the token list that emits one instruction
per recognised form. Lookahead never exceeds three tokens. Braces are
emitted as BlockOpen/BlockClose markers without any matching; the engine
decides what they mean.

Unrecognised or incomplete input emits nothing and translation carries
on. There is no failure mode.

BUILD ID: translator_v1.0
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from .instructions import (
    Instruction, Param, Declare, SetParam, MathOp, Inverse, Randomize,
    Print, IfHeader, Else, WhileHeader, BlockOpen, BlockClose,
)
from .lexer import tokenize
from .tokens import COMPARATORS, MATH_OPERATORS, Token, TokenType

logger = logging.getLogger(__name__)

PREDICATE_LOOKAHEAD = 3

_PARAMS: Dict[TokenType, Param] = {
    TokenType.AMP: Param.AMP,
    TokenType.FREQ: Param.FREQ,
    TokenType.PHASE: Param.PHASE,
}

_SIMPLE: Dict[TokenType, Instruction] = {
    TokenType.RANDOM: Randomize(),
    TokenType.PRINT: Print(),
    TokenType.INVERSE: Inverse(),
    TokenType.LBRACE: BlockOpen(),
    TokenType.RBRACE: BlockClose(),
    TokenType.ELSE: Else(),
}


def _scan_predicate(tokens: Sequence[Token], start: int) -> Tuple[Optional[Tuple[str, str]], int]:
    """Read a header predicate starting at ``start``.

    Scans at most PREDICATE_LOOKAHEAD tokens, stopping before ``{``. The
    first comparator and the token after it form the predicate; the
    identifier in front of the comparator is dropped (amplitude is
    always the left operand).

    Returns ``(predicate or None, number of tokens consumed)``.
    """
    window: List[Token] = []
    for tok in tokens[start:start + PREDICATE_LOOKAHEAD]:
        if tok.kind == TokenType.LBRACE:
            break
        window.append(tok)

    for idx, tok in enumerate(window[:-1]):
        if tok.kind in COMPARATORS:
            return (tok.lexeme, window[idx + 1].lexeme), len(window)
    return None, len(window)


def translate(tokens: Sequence[Token]) -> List[Instruction]:
    """Translate a token list into instructions."""
    program: List[Instruction] = []
    i = 0
    n = len(tokens)
    while i < n:
        tok = tokens[i]
        kind = tok.kind

        if kind == TokenType.WAVE:
            if i + 1 < n and tokens[i + 1].kind == TokenType.IDENTIFIER:
                program.append(Declare(tokens[i + 1].lexeme))
                i += 1
            else:
                program.append(Declare())

        elif kind in _PARAMS:
            if i + 2 < n and tokens[i + 1].kind == TokenType.ASSIGN:
                program.append(SetParam(_PARAMS[kind], tokens[i + 2].lexeme))
                i += 2
            else:
                logger.debug("Incomplete assignment to %s ignored", tok.lexeme)

        elif kind in (TokenType.IF, TokenType.WHILE):
            predicate, consumed = _scan_predicate(tokens, i + 1)
            if predicate is not None:
                header = IfHeader if kind == TokenType.IF else WhileHeader
                program.append(header(*predicate))
            else:
                logger.debug("Header '%s' without predicate ignored", tok.lexeme)
            i += consumed

        elif kind in MATH_OPERATORS:
            program.append(MathOp(tok.lexeme))

        elif kind in _SIMPLE:
            program.append(_SIMPLE[kind])

        i += 1
    return program


def compile_source(source: str) -> List[Instruction]:
    """Tokenize and translate program text."""
    return translate(tokenize(source))


def render_program(program: Sequence[Instruction]) -> str:
    """Pseudo-code listing, one line per instruction."""
    return "\n".join(instr.render() for instr in program)
