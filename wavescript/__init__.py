"""WaveScript package.

WaveScript - a tiny whitespace-tokenized language for shaping a single
sine oscillator. Source text is tokenized, translated into structured
instructions and executed against a fixed-size oscillator state.

VERSION: 1.0
BUILD ID: wavescript_v1.0_20261017

FEATURES:
- Parameter assignment (amplitude, frequency, phase)
- Element-wise operations against a fixed reference sine
- Wave inversion and randomization
- if / else blocks and while loops keyed on amplitude
- One-character command language on the oscillator (A a F f P p + - * / I = R N x)
"""

__version__ = "1.0.0"
__build__ = "wavescript_v1.0_20261017"

__all__ = ["core", "dsp", "lang", "engine"]
