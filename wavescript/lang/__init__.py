"""WaveScript language front end.

Tokenizer and translator. ``compile_source`` turns program text into the
instruction list the engine executes.
"""

from .tokens import TokenType, Token  # noqa: F401
from .lexer import tokenize  # noqa: F401
from .instructions import Instruction, Param  # noqa: F401
from .translator import translate, compile_source, render_program  # noqa: F401
