"""Error types for WaveScript.

Startup failures (bad invocation, unreadable file) are exceptions.
Failures while executing a program are recovered where they happen and
recorded as Diagnostic entries instead.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class WaveScriptError(Exception):
    """Base class for fatal WaveScript errors."""


class UsageError(WaveScriptError):
    """The launcher was invoked with the wrong arguments."""


class FileOpenFailure(WaveScriptError):
    """The program file could not be read."""

    def __init__(self, filename: str, reason: str = "") -> None:
        self.filename = filename
        self.reason = reason
        super().__init__(f"Could not open file {filename}")


class ErrorKind(Enum):
    INVALID_NUMERIC_LITERAL = "InvalidNumericLiteral"
    LOOP_LIMIT_EXCEEDED = "LoopLimitExceeded"


@dataclass(frozen=True)
class Diagnostic:
    """A recovered execution error.

    Attributes:
        kind: What went wrong.
        message: Human-readable description.
        line: Rendered instruction the error occurred on, if any.
    """
    kind: ErrorKind
    message: str
    line: Optional[str] = None

    def __str__(self) -> str:
        if self.line:
            return f"{self.message}: {self.line}"
        return self.message


def parse_literal(text: str) -> Tuple[bool, Union[float, str]]:
    """Parse a numeric literal.

    Returns ``(True, value)`` on success or ``(False, message)`` when the
    text is not a number or overflows a float (``1e999``). Explicit
    ``inf`` literals are accepted.
    """
    try:
        value = float(text)
    except (TypeError, ValueError):
        return False, f"Invalid numeric literal '{text}'"
    if math.isinf(value) and text.lstrip("+-").lower() not in ("inf", "infinity"):
        return False, f"Numeric literal out of range '{text}'"
    return True, value
