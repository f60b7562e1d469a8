"""WaveScript Oscillator.

The single mutable state a WaveScript program operates on: amplitude,
frequency and phase plus three sample buffers.

- ``t``         time axis, one period over ``size`` samples (read-only)
- ``ref_wave``  sin(t), the reference operand of element-wise ops (read-only)
- ``wave``      amp * sin(freq * t + phase), recomputed on every parameter
                change and overwritten by reference ops and inversion

The oscillator also understands the one-character command language of
the flat command-line interpreter through ``interpret()``.

BUILD ID: oscillator_v1.0
"""

from __future__ import annotations

import logging
import operator
from typing import Callable, Dict, List, Optional

import numpy as np

from ..dsp import reference_ops
from . import settings as cfg

logger = logging.getLogger(__name__)

_COMPARATORS: Dict[str, Callable[[float, float], bool]] = {
    '==': operator.eq,
    '<': operator.lt,
    '>': operator.gt,
    '!=': operator.ne,
}


class Oscillator:
    """Amplitude/frequency/phase driven sine with derived sample buffers.

    One instance exists per program run. The random generator is injected
    so runs can be made deterministic; when none is given a generator is
    seeded once from OS entropy.
    """

    def __init__(self, size: int = cfg.SIZE,
                 rng: Optional[np.random.Generator] = None) -> None:
        self.size = size
        self.rng = rng if rng is not None else np.random.default_rng()

        self.amp = cfg.DEFAULT_AMP
        self.freq = cfg.DEFAULT_FREQ
        self.phase = cfg.DEFAULT_PHASE

        self.t = reference_ops.time_axis(size)
        self.t.setflags(write=False)
        self.ref_wave = np.sin(self.t)
        self.ref_wave.setflags(write=False)
        self.wave = np.zeros(size)
        self.update_wave()

    # ---- Wave recomputation -------------------------------------------------

    def update_wave(self) -> None:
        """Recompute ``wave`` from the current parameters."""
        self.wave = reference_ops.sine(self.t, self.amp, self.freq, self.phase)

    # ---- Direct assignment ----------------------------------------------------

    def set_amplitude(self, value: float) -> None:
        self.amp = float(value)
        self.update_wave()

    def set_frequency(self, value: float) -> None:
        self.freq = float(value)
        self.update_wave()

    def set_phase(self, value: float) -> None:
        self.phase = float(value)
        self.update_wave()

    # ---- Bounded steps ----------------------------------------------------------

    def bump_amplitude(self, delta: float) -> None:
        """Step amplitude, clamped to AMP_RANGE."""
        lo, hi = cfg.AMP_RANGE
        self.amp = min(max(self.amp + delta, lo), hi)
        self.update_wave()

    def bump_frequency(self, delta: float) -> None:
        """Step frequency, clamped to FREQ_RANGE."""
        lo, hi = cfg.FREQ_RANGE
        self.freq = min(max(self.freq + delta, lo), hi)
        self.update_wave()

    def bump_phase(self, delta: float) -> None:
        """Step phase, wrapped into [0, 2*pi)."""
        self.phase = (self.phase + delta) % cfg.TWO_PI
        self.update_wave()

    # ---- Element-wise operations ----------------------------------------------

    def apply_reference(self, op: str) -> None:
        """Combine ``wave`` with ``ref_wave`` using + - * or /.

        The result is left in ``wave`` until the next parameter change.
        """
        self.wave = reference_ops.combine(self.wave, self.ref_wave, op)

    def invert(self) -> None:
        """Replace every nonzero sample with its reciprocal."""
        self.wave = reference_ops.invert(self.wave)

    # ---- Whole-state operations -----------------------------------------------

    def reset(self) -> None:
        self.amp = cfg.DEFAULT_AMP
        self.freq = cfg.DEFAULT_FREQ
        self.phase = cfg.DEFAULT_PHASE
        self.update_wave()

    def randomize(self) -> str:
        """Draw new parameters from the owned generator.

        Returns the line reporting the drawn values.
        """
        self.amp = float(self.rng.uniform(*cfg.AMP_RANGE))
        self.freq = float(self.rng.uniform(*cfg.FREQ_RANGE))
        self.phase = float(self.rng.uniform(0.0, cfg.TWO_PI))
        self.update_wave()
        logger.debug("Randomized: amp=%f freq=%f phase=%f",
                     self.amp, self.freq, self.phase)
        return (f"Generated random wave with: Amp = {self.amp:f}, "
                f"Freq = {self.freq:f}, Phase = {self.phase:f}")

    # ---- Queries --------------------------------------------------------------

    def compare(self, op: str, value: float) -> bool:
        """Evaluate ``amp <op> value`` with exact float equality.

        Unknown operators compare False.
        """
        fn = _COMPARATORS.get(op)
        if fn is None:
            return False
        return bool(fn(self.amp, value))

    def matches_reference(self, tolerance: float = cfg.REFERENCE_TOLERANCE) -> bool:
        """True when ``wave`` equals ``ref_wave`` within ``tolerance``."""
        return bool(np.all(np.abs(self.wave - self.ref_wave) <= tolerance))

    def describe(self) -> List[str]:
        """Parameter line followed by sampled wave and reference wave."""
        n = cfg.PRINT_SAMPLES
        return [
            f"Wave parameters: Amp = {self.amp:f}, Freq = {self.freq:f}, "
            f"Phase = {self.phase:f}",
            f"Wave:     {reference_ops.format_samples(self.wave, n)}",
            f"Ref Wave: {reference_ops.format_samples(self.ref_wave, n)}",
        ]

    # ---- One-character command language -----------------------------------------

    def interpret(self, commands: str) -> List[str]:
        """Run a string of one-character commands.

        Commands:
            A / a   amplitude +/- 0.1
            F / f   frequency +/- 0.5
            P / p   phase +/- 0.2
            + - * / combine with the reference wave
            I       invert
            =       describe
            R       reset
            N       randomize
            x       compare with the reference wave

        Unknown characters are ignored. Returns the lines produced.
        """
        out: List[str] = []
        for ch in commands:
            if ch == 'A':
                self.bump_amplitude(cfg.AMP_STEP)
            elif ch == 'a':
                self.bump_amplitude(-cfg.AMP_STEP)
            elif ch == 'F':
                self.bump_frequency(cfg.FREQ_STEP)
            elif ch == 'f':
                self.bump_frequency(-cfg.FREQ_STEP)
            elif ch == 'P':
                self.bump_phase(cfg.PHASE_STEP)
            elif ch == 'p':
                self.bump_phase(-cfg.PHASE_STEP)
            elif ch in reference_ops.REFERENCE_OPS:
                self.apply_reference(ch)
            elif ch == 'I':
                self.invert()
            elif ch == '=':
                out.extend(self.describe())
            elif ch == 'R':
                self.reset()
            elif ch == 'N':
                out.append(self.randomize())
            elif ch == 'x':
                out.append("true" if self.matches_reference() else "false")
        return out
