#!/usr/bin/env python
"""Execution engine tests - gating stack, conditionals, loops, recovery.

Run directly or through pytest.
"""

import sys
import os

# Setup path
HERE = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, HERE)

import numpy as np

from wavescript.core.errors import ErrorKind, parse_literal
from wavescript.core.oscillator import Oscillator
from wavescript.core.settings import EngineSettings
from wavescript.engine.exec_stack import ExecutionStack
from wavescript.engine.executor import Engine, loop_body
from wavescript.engine.program import run_source
from wavescript.lang.instructions import BlockOpen, BlockClose, Print
from wavescript.lang.translator import compile_source


def _run(source, **settings):
    settings.setdefault("seed", 99)
    return run_source(source, EngineSettings(**settings))


def _amp_lines(result):
    return [line for line in result.output if line.startswith("Wave parameters:")]


# ============================================================================
# EXECUTION STACK
# ============================================================================

def test_stack_starts_true():
    stack = ExecutionStack()
    assert stack.top is True
    assert stack.frames == [True]


def test_stack_push_gated():
    stack = ExecutionStack()
    stack.push_gated(False)
    stack.push_gated(True)
    assert stack.frames == [True, False, False]


def test_stack_reseeds_when_emptied():
    stack = ExecutionStack()
    assert stack.pop() is True
    assert stack.frames == [True]
    stack.pop()
    stack.pop()
    assert stack.frames == [True]


def test_stack_negate():
    stack = ExecutionStack()
    stack.push(True)
    stack.negate()
    assert stack.frames == [True, False]
    stack.pop()
    stack.negate()
    assert stack.frames == [False]


def test_parse_literal():
    assert parse_literal("0.25") == (True, 0.25)
    assert parse_literal("-3") == (True, -3.0)
    ok, message = parse_literal("xyz")
    assert not ok
    assert "xyz" in message
    ok, message = parse_literal("-1e999")
    assert not ok
    assert "out of range" in message
    assert parse_literal("inf") == (True, float("inf"))
    assert parse_literal("-Infinity") == (True, float("-inf"))


# ============================================================================
# SCENARIOS
# ============================================================================

def test_scenario_a_prints_once():
    result = _run("wave w amplitude = 0.2 if amplitude < 1.0 { print }")
    lines = _amp_lines(result)
    assert len(lines) == 1
    assert "Amp = 0.200000" in lines[0]
    assert result.diagnostics == []


def test_scenario_b_print_suppressed():
    result = _run("wave w amplitude = 0.2 if amplitude > 1.0 { print }")
    assert result.output == []


def test_scenario_c_loop_stops_at_cap():
    result = _run("wave w amplitude = 0.2 while amplitude < 0.5 { amplitude = amplitude }",
                  max_loop_iterations=25)
    kinds = [d.kind for d in result.diagnostics]
    assert kinds.count(ErrorKind.INVALID_NUMERIC_LITERAL) == 25
    assert kinds[-1] == ErrorKind.LOOP_LIMIT_EXCEEDED
    assert kinds.count(ErrorKind.LOOP_LIMIT_EXCEEDED) == 1
    assert result.oscillator.amp == 0.2


def test_scenario_c_cap_is_deterministic():
    source = "amplitude = 0.2 while amplitude < 0.5 { inverse }"
    for _ in range(3):
        engine = Engine(settings=EngineSettings(max_loop_iterations=40, seed=1))
        engine.run(compile_source(source))
        assert engine.loop_iterations == [40]


def test_scenario_d_bad_literal_recovers():
    result = _run("amplitude = 0.7 amplitude = xyz print")
    assert len(result.diagnostics) == 1
    diag = result.diagnostics[0]
    assert diag.kind == ErrorKind.INVALID_NUMERIC_LITERAL
    assert diag.line == "wave.set_amplitude(xyz);"
    assert result.oscillator.amp == 0.7
    assert "Amp = 0.700000" in _amp_lines(result)[0]


def test_overflowing_literal_recovers():
    result = _run("amplitude = 0.5 amplitude = 1e999 print")
    assert len(result.diagnostics) == 1
    diag = result.diagnostics[0]
    assert diag.kind == ErrorKind.INVALID_NUMERIC_LITERAL
    assert "out of range" in diag.message
    assert result.oscillator.amp == 0.5
    assert "ERR" not in result.output[1]


# ============================================================================
# CONDITIONALS
# ============================================================================

def test_if_else_true_branch():
    result = _run("amplitude = 0.2 if amplitude < 1 { frequency = 2 } else { frequency = 3 }")
    assert result.oscillator.freq == 2.0


def test_if_else_false_branch():
    result = _run("amplitude = 1.5 if amplitude < 1 { frequency = 2 } else { frequency = 3 }")
    assert result.oscillator.freq == 3.0


def test_else_inside_false_block_stays_off():
    source = ("amplitude = 0.2 if amplitude > 1.0 { "
              "if amplitude < 0.5 { print } else { print } } print")
    result = _run(source)
    assert len(_amp_lines(result)) == 1


def test_nested_if():
    source = "amplitude = 0.4 if amplitude > 0.1 { if amplitude < 0.5 { print } }"
    assert len(_amp_lines(_run(source))) == 1
    source = "amplitude = 0.9 if amplitude > 0.1 { if amplitude < 0.5 { print } } print"
    assert len(_amp_lines(_run(source))) == 1


def test_gated_instructions_have_no_effect():
    source = ("amplitude = 0.3 if amplitude == 5 { amplitude = 1.7 random + inverse } "
              "frequency = 4")
    result = _run(source)
    osc = result.oscillator
    assert (osc.amp, osc.freq, osc.phase) == (0.3, 4.0, 0.0)
    assert np.allclose(osc.wave, 0.3 * np.sin(4.0 * osc.t))
    assert result.output == []


def test_predicate_always_reads_amplitude():
    result = _run("frequency = 5.0 if frequency > 2.0 { print }")
    assert result.output == []


def test_stray_close_is_tolerated():
    engine = Engine(settings=EngineSettings(seed=3))
    engine.run(compile_source("} } print"))
    assert engine.stack.frames == [True]
    assert len(engine.output) == 3


def test_else_without_block_negates_top():
    engine = Engine(settings=EngineSettings(seed=3))
    engine.run(compile_source("else print"))
    assert engine.stack.frames == [False]
    assert engine.output == []
    engine.run(compile_source("} print"))
    assert len(engine.output) == 3


def test_bad_header_literal_is_false():
    result = _run("if amplitude < big { print } print")
    assert len(_amp_lines(result)) == 1
    assert result.diagnostics[0].kind == ErrorKind.INVALID_NUMERIC_LITERAL


# ============================================================================
# LOOPS
# ============================================================================

def test_loop_body_collection():
    program = [BlockOpen(), Print(), BlockOpen(), BlockClose(), BlockClose(), Print()]
    body, nxt = loop_body(program, 0)
    assert body == [Print(), BlockOpen(), BlockClose()]
    assert nxt == 5
    assert loop_body([Print()], 0) == ([], 0)
    assert loop_body([BlockOpen(), Print()], 0) == ([Print()], 2)


def test_loop_runs_until_predicate_false():
    result = _run("amplitude = 0.2 while amplitude < 0.5 { amplitude = 0.6 print }")
    assert len(_amp_lines(result)) == 1
    assert result.oscillator.amp == 0.6


def test_loop_zero_iterations():
    engine = Engine(settings=EngineSettings(seed=3))
    engine.run(compile_source("amplitude = 0.9 while amplitude < 0.5 { print } print"))
    assert engine.loop_iterations == [0]
    assert len(engine.output) == 3


def test_loop_with_conditional_body():
    source = ("amplitude = 0.1 while amplitude < 1.0 { "
              "if amplitude < 0.3 { amplitude = 0.4 } else { amplitude = 2.0 } }")
    engine = Engine(settings=EngineSettings(seed=3))
    engine.run(compile_source(source))
    assert engine.loop_iterations == [2]
    assert engine.oscillator.amp == 2.0
    assert engine.stack.frames == [True]


def test_nested_loops():
    source = ("amplitude = 0.1 while amplitude < 1.0 { "
              "while amplitude < 0.5 { amplitude = 0.7 } amplitude = 1.2 }")
    engine = Engine(settings=EngineSettings(seed=3))
    engine.run(compile_source(source))
    assert engine.loop_iterations == [1, 1]
    assert engine.oscillator.amp == 1.2


def test_loop_inside_false_block_is_skipped():
    source = "amplitude = 0.1 if amplitude > 1 { while amplitude < 0.5 { print } } print"
    engine = Engine(settings=EngineSettings(seed=3, max_loop_iterations=5))
    engine.run(compile_source(source))
    assert engine.loop_iterations == []
    assert len(engine.output) == 3


def test_random_in_program_is_seeded():
    a = _run("random print", seed=11)
    b = _run("random print", seed=11)
    assert a.output == b.output
    assert a.output[0].startswith("Generated random wave with:")


def test_math_ops_and_inverse_run():
    osc = Oscillator(rng=np.random.default_rng(0))
    engine = Engine(oscillator=osc)
    engine.run(compile_source("* +"))
    assert np.allclose(osc.wave, np.sin(osc.t) ** 2 + np.sin(osc.t))


def test_emit_receives_lines():
    seen = []
    engine = Engine(settings=EngineSettings(seed=5), emit=seen.append)
    engine.run(compile_source("print random"))
    assert seen == engine.output
    assert len(seen) == 4


def test_final_state_dump():
    result = _run("amplitude = 0.5")
    lines = result.final_state()
    assert lines[0] == "Final wave state:"
    assert lines[1].startswith("Wave parameters: Amp = 0.500000")


if __name__ == "__main__":
    passed = failed = 0
    for name, fn in list(globals().items()):
        if name.startswith("test_") and callable(fn):
            try:
                fn()
                passed += 1
                print(f"✓ {name}")
            except AssertionError as e:
                failed += 1
                print(f"✗ {name}")
                print(f"  -> {e}")
    print(f"RESULTS: {passed} passed, {failed} failed")
    sys.exit(0 if failed == 0 else 1)
