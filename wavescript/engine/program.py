"""Compile-and-run helpers.

Glue between the language front end and the engine, used by the
launcher and by tests that want a whole program run in one call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..core.errors import Diagnostic
from ..core.oscillator import Oscillator
from ..core.settings import EngineSettings
from ..lang.instructions import Instruction
from ..lang.translator import compile_source, render_program
from .executor import Engine


@dataclass
class ProgramResult:
    """Everything a program run produced.

    Attributes:
        program: Translated instructions.
        listing: Rendered pseudo-code of ``program``.
        output: Print and random lines, in order.
        diagnostics: Errors recovered during execution.
        oscillator: Final oscillator state.
    """
    program: List[Instruction]
    listing: str
    oscillator: Oscillator
    output: List[str] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def final_state(self) -> List[str]:
        return final_state_lines(self.oscillator)


def final_state_lines(oscillator: Oscillator) -> List[str]:
    """Closing dump printed after every run."""
    return ["Final wave state:"] + oscillator.describe()


def run_source(source: str, settings: Optional[EngineSettings] = None,
               oscillator: Optional[Oscillator] = None,
               emit: Optional[Callable[[str], None]] = None) -> ProgramResult:
    """Compile ``source`` and execute it on a fresh (or given) oscillator."""
    program = compile_source(source)
    engine = Engine(oscillator, settings, emit)
    engine.run(program)
    return ProgramResult(
        program=program,
        listing=render_program(program),
        oscillator=engine.oscillator,
        output=engine.output,
        diagnostics=engine.diagnostics,
    )
