"""Reference wave operations.

Implements the buffer math behind the oscillator:
- Time axis and sine generation
- Element-wise combination with the reference wave (+ - * /)
- Safe inversion
- Evenly spaced sample picking and formatting for print output

All functions take and return numpy arrays of float64.

BUILD ID: reference_ops_v1.0
"""

from __future__ import annotations

import numpy as np
from typing import List

REFERENCE_OPS = ('+', '-', '*', '/')


# ============================================================================
# GENERATION
# ============================================================================

def time_axis(size: int) -> np.ndarray:
    """One full period sampled at ``size`` points: t[i] = 2*pi*i/size."""
    return 2 * np.pi * np.arange(size) / size


def sine(t: np.ndarray, amp: float, freq: float, phase: float) -> np.ndarray:
    """amp * sin(freq * t + phase)."""
    return amp * np.sin(freq * t + phase)


# ============================================================================
# ELEMENT-WISE OPERATIONS
# ============================================================================

def combine(wave: np.ndarray, ref: np.ndarray, op: str) -> np.ndarray:
    """Combine ``wave`` with ``ref`` element-wise.

    Division yields 0 wherever ``ref`` is exactly zero.

    Raises:
        ValueError: if ``op`` is not one of + - * /.
    """
    if op == '+':
        return wave + ref
    if op == '-':
        return wave - ref
    if op == '*':
        return wave * ref
    if op == '/':
        out = np.zeros_like(wave)
        np.divide(wave, ref, out=out, where=ref != 0)
        return out
    raise ValueError(f"Unknown reference operation: {op!r}")


def invert(wave: np.ndarray) -> np.ndarray:
    """Reciprocal of every nonzero sample; zero samples stay zero."""
    out = np.zeros_like(wave)
    np.divide(1.0, wave, out=out, where=wave != 0)
    return out


# ============================================================================
# DISPLAY HELPERS
# ============================================================================

def sample_points(buf: np.ndarray, count: int) -> np.ndarray:
    """Pick ``count`` evenly spaced samples starting at index 0."""
    step = max(1, len(buf) // count)
    return buf[::step][:count]


def format_samples(buf: np.ndarray, count: int) -> str:
    """Format picked samples as ``%.2f`` values, ``ERR`` for NaN/Inf."""
    parts: List[str] = []
    for value in sample_points(buf, count):
        if np.isfinite(value):
            parts.append(f"{value:.2f}")
        else:
            parts.append("ERR")
    return " ".join(parts)
