"""WaveScript instruction set.

Each instruction is a frozen dataclass; the translator emits them in
source order and nothing mutates them afterwards. ``render()`` gives the
pseudo-code line shown in the compiled listing.

Literals are kept as the raw source lexeme. They are parsed when the
engine executes the instruction, so a bad literal only affects that one
instruction.

BUILD ID: instructions_v1.0
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Param(Enum):
    """Oscillator parameter addressed by SetParam."""
    AMP = "amplitude"
    FREQ = "frequency"
    PHASE = "phase"


_MATH_METHODS = {
    '+': "add_reference",
    '-': "subtract_reference",
    '*': "multiply_reference",
    '/': "divide_reference",
}


@dataclass(frozen=True)
class Instruction:
    """Base class for all instructions."""

    def render(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class Declare(Instruction):
    name: str = "wave"

    def render(self) -> str:
        return f"oscillator {self.name};"


@dataclass(frozen=True)
class SetParam(Instruction):
    param: Param
    literal: str

    def render(self) -> str:
        return f"wave.set_{self.param.value}({self.literal});"


@dataclass(frozen=True)
class MathOp(Instruction):
    op: str

    def render(self) -> str:
        return f"wave.{_MATH_METHODS.get(self.op, 'apply_reference')}();"


@dataclass(frozen=True)
class Inverse(Instruction):

    def render(self) -> str:
        return "wave.inverse();"


@dataclass(frozen=True)
class Randomize(Instruction):

    def render(self) -> str:
        return "wave.random_wave();"


@dataclass(frozen=True)
class Print(Instruction):

    def render(self) -> str:
        return "wave.print_wave();"


@dataclass(frozen=True)
class IfHeader(Instruction):
    op: str
    literal: str

    def render(self) -> str:
        return f'if (wave.compare("{self.op}", {self.literal}))'


@dataclass(frozen=True)
class Else(Instruction):

    def render(self) -> str:
        return "else"


@dataclass(frozen=True)
class WhileHeader(Instruction):
    op: str
    literal: str

    def render(self) -> str:
        return f'while (wave.compare("{self.op}", {self.literal}))'


@dataclass(frozen=True)
class BlockOpen(Instruction):

    def render(self) -> str:
        return "{"


@dataclass(frozen=True)
class BlockClose(Instruction):

    def render(self) -> str:
        return "}"
