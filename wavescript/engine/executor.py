"""WaveScript execution engine.

Executes a translated instruction list against one Oscillator.

Gating:
    Every instruction except block punctuation only takes effect when the
    top of the ExecutionStack is True. ``if`` pushes ``top and result``,
    ``}`` pops, ``else`` re-opens the frame just closed with its negation.

Loops:
    A ``while`` header buffers the instructions between its ``{`` and the
    matching ``}``. While the predicate holds (checked before every
    iteration) the buffer is replayed through the same dispatch, so
    conditionals and loops nest inside a loop body. Each loop is capped
    at ``EngineSettings.max_loop_iterations`` iterations.

Errors:
    Nothing is fatal. A literal that does not parse as a number produces a
    Diagnostic and the instruction is skipped; mutations applied before it
    stay in place.

BUILD ID: executor_v1.0
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Tuple, Union

import numpy as np

from ..core.errors import Diagnostic, ErrorKind, parse_literal
from ..core.oscillator import Oscillator
from ..core.settings import EngineSettings
from ..lang.instructions import (
    Instruction, Param, Declare, SetParam, MathOp, Inverse, Randomize,
    Print, IfHeader, Else, WhileHeader, BlockOpen, BlockClose,
)
from .exec_stack import ExecutionStack

logger = logging.getLogger(__name__)


def loop_body(program: Sequence[Instruction], start: int) -> Tuple[List[Instruction], int]:
    """Collect the block starting at ``program[start]``.

    Returns the instructions strictly inside the braces and the index just
    past the matching ``}``. A header not followed by ``{`` has an empty
    body; an unterminated block runs to the end of the program.
    """
    if start >= len(program) or not isinstance(program[start], BlockOpen):
        return [], start
    depth = 1
    for k in range(start + 1, len(program)):
        instr = program[k]
        if isinstance(instr, BlockOpen):
            depth += 1
        elif isinstance(instr, BlockClose):
            depth -= 1
            if depth == 0:
                return list(program[start + 1:k]), k + 1
    return list(program[start + 1:]), len(program)


class Engine:
    """Runs instructions against an exclusively owned Oscillator.

    Attributes:
        oscillator: The state being mutated.
        settings: Run settings (iteration cap, seed, buffer size).
        stack: Conditional gating frames.
        output: Lines produced by print and random instructions.
        diagnostics: Errors recovered during the run.
        loop_iterations: Iteration count of every loop run so far, in order.
    """

    def __init__(self, oscillator: Optional[Oscillator] = None,
                 settings: Optional[EngineSettings] = None,
                 emit: Optional[Callable[[str], None]] = None) -> None:
        self.settings = settings or EngineSettings()
        if oscillator is None:
            oscillator = Oscillator(self.settings.size,
                                    np.random.default_rng(self.settings.seed))
        self.oscillator = oscillator
        self.stack = ExecutionStack()
        self.output: List[str] = []
        self.diagnostics: List[Diagnostic] = []
        self.loop_iterations: List[int] = []
        self._emit = emit
        # Frame popped by the immediately preceding '}', for 'else'
        self._closed: Optional[bool] = None

    # ---- Public API -----------------------------------------------------------

    def run(self, program: Sequence[Instruction]) -> List[str]:
        """Execute ``program`` and return the output lines produced."""
        logger.info("Executing %d instructions", len(program))
        self._run(program)
        return self.output

    # ---- Dispatch ---------------------------------------------------------------

    def _run(self, program: Sequence[Instruction]) -> None:
        i = 0
        while i < len(program):
            instr = program[i]
            if isinstance(instr, WhileHeader):
                body, i = loop_body(program, i + 1)
                self._closed = None
                if self.stack.top:
                    self._run_loop(instr, body)
                self._closed = None
                continue
            self.step(instr)
            i += 1

    def step(self, instr: Instruction) -> None:
        """Execute one instruction. Loop headers are handled by ``run()``."""
        if isinstance(instr, BlockClose):
            self._closed = self.stack.pop()
            return
        closed, self._closed = self._closed, None

        if isinstance(instr, (Declare, BlockOpen)):
            return
        if isinstance(instr, Else):
            if closed is not None:
                self.stack.push_gated(not closed)
            else:
                self.stack.negate()
            return
        if isinstance(instr, IfHeader):
            self.stack.push_gated(self._evaluate(instr))
            return
        if not self.stack.top:
            return

        osc = self.oscillator
        if isinstance(instr, SetParam):
            ok, value = parse_literal(instr.literal)
            if not ok:
                self._diagnose(ErrorKind.INVALID_NUMERIC_LITERAL, value, instr)
                return
            if instr.param == Param.AMP:
                osc.set_amplitude(value)
            elif instr.param == Param.FREQ:
                osc.set_frequency(value)
            else:
                osc.set_phase(value)
        elif isinstance(instr, MathOp):
            osc.apply_reference(instr.op)
        elif isinstance(instr, Inverse):
            osc.invert()
        elif isinstance(instr, Randomize):
            self._write(osc.randomize())
        elif isinstance(instr, Print):
            for line in osc.describe():
                self._write(line)

    # ---- Predicates and loops -------------------------------------------------

    def _evaluate(self, header: Union[IfHeader, WhileHeader]) -> bool:
        """Evaluate an if/while predicate; an unparseable literal is False."""
        ok, value = parse_literal(header.literal)
        if not ok:
            if self.stack.top:
                self._diagnose(ErrorKind.INVALID_NUMERIC_LITERAL, value, header)
            return False
        return self.oscillator.compare(header.op, value)

    def _run_loop(self, header: WhileHeader, body: Sequence[Instruction]) -> None:
        cap = self.settings.max_loop_iterations
        iterations = 0
        while self._evaluate(header):
            if iterations >= cap:
                self._diagnose(ErrorKind.LOOP_LIMIT_EXCEEDED,
                               f"Loop stopped after {cap} iterations", header)
                break
            self._run(body)
            iterations += 1
        self.loop_iterations.append(iterations)
        logger.debug("Loop '%s' ran %d iterations", header.render(), iterations)

    # ---- Output -----------------------------------------------------------------

    def _write(self, line: str) -> None:
        self.output.append(line)
        if self._emit is not None:
            self._emit(line)

    def _diagnose(self, kind: ErrorKind, message: str, instr: Instruction) -> None:
        diag = Diagnostic(kind, message, instr.render())
        self.diagnostics.append(diag)
        logger.warning("%s", diag)
