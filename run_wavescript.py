#!/usr/bin/env python3
"""WaveScript launcher.

Compiles a WaveScript program, prints the compiled listing, runs it and
dumps the final oscillator state.

Usage:
    python run_wavescript.py <program.wave>

Exit status is 0 on success and 1 when the arguments are wrong or the
file cannot be read. Diagnostics from execution go to stderr.

BUILD ID: launcher_v1.0
"""

import sys
import os
import argparse
import logging
from typing import List, Optional

# Ensure the project root is on the path
HERE = os.path.dirname(os.path.abspath(__file__))
if HERE not in sys.path:
    sys.path.insert(0, HERE)

from wavescript.core.errors import FileOpenFailure, UsageError, WaveScriptError
from wavescript.engine.executor import Engine
from wavescript.engine.program import final_state_lines
from wavescript.lang.translator import compile_source, render_program


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with 2."""

    def error(self, message: str) -> None:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="wavescript",
        add_help=False,
        description="Compile and run a WaveScript oscillator program.",
    )
    parser.add_argument("filename", help="program file (UTF-8 text)")
    return parser


def read_program(filename: str) -> str:
    """Read a program file, raising FileOpenFailure when it can't be read."""
    try:
        with open(filename, encoding="utf-8") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileOpenFailure(filename, str(e)) from e


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(stream=sys.stderr, level=logging.WARNING,
                        format="%(message)s")
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        source = read_program(args.filename)
    except UsageError:
        print(f"Usage: {parser.prog} <filename>")
        return 1
    except WaveScriptError as e:
        print(f"Error: {e}")
        return 1

    program = compile_source(source)
    print("Compiled program:")
    print(render_program(program))
    print()

    engine = Engine(emit=print)
    engine.run(program)

    for line in final_state_lines(engine.oscillator):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
