"""WaveScript execution engine.

Runs translated instructions against an Oscillator. Conditional gating
uses a stack of booleans; while-loop bodies are buffered and replayed.
"""

from .exec_stack import ExecutionStack  # noqa: F401
from .executor import Engine  # noqa: F401
from .program import ProgramResult, run_source, final_state_lines  # noqa: F401
