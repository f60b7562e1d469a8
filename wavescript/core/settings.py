"""WaveScript settings.

Fixed oscillator constants and the per-run engine settings object.

BUILD ID: settings_v1.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

# ============================================================================
# OSCILLATOR CONSTANTS
# ============================================================================

SIZE = 256                 # samples per buffer
PRINT_SAMPLES = 8          # samples shown by describe()
TWO_PI = 2 * math.pi

DEFAULT_AMP = 1.0
DEFAULT_FREQ = 1.0
DEFAULT_PHASE = 0.0

# Bump steps and clamp ranges (also the ranges random waves are drawn from)
AMP_STEP = 0.1
AMP_RANGE = (0.1, 2.0)
FREQ_STEP = 0.5
FREQ_RANGE = (0.5, 10.0)
PHASE_STEP = 0.2

# Tolerance used by the reference comparison ('x' command)
REFERENCE_TOLERANCE = 1e-10

# ============================================================================
# ENGINE CONSTANTS
# ============================================================================

MAX_LOOP_ITERATIONS = 10_000


@dataclass
class EngineSettings:
    """Settings for one program run.

    Attributes:
        size: Number of samples in each oscillator buffer.
        seed: Seed for the random generator. None draws one from OS entropy.
        max_loop_iterations: Upper bound on iterations of a single while loop.
    """
    size: int = SIZE
    seed: Optional[int] = None
    max_loop_iterations: int = MAX_LOOP_ITERATIONS
