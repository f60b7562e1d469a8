"""Sample-buffer operations for WaveScript.

Pure numpy helpers that generate and combine oscillator buffers. The
Oscillator class in core calls into these; nothing here holds state.
"""

from .reference_ops import (  # noqa: F401
    time_axis, sine, combine, invert, sample_points, format_samples,
)
