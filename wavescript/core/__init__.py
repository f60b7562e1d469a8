"""Core functionality for WaveScript.

This subpackage contains the Oscillator class, which owns the amplitude,
frequency and phase parameters together with the sample buffers derived
from them. Settings and error types used across the package live here
too.
"""

from .oscillator import Oscillator  # noqa: F401
from .settings import EngineSettings  # noqa: F401
from .errors import (  # noqa: F401
    WaveScriptError, UsageError, FileOpenFailure, ErrorKind, Diagnostic,
)
