"""
NXT telegrams: validated parameters for the SetOutputState direct command.

The package exposes:
- Named constant sets for ports, mode flags, regulation and run state (`constants`)
- The error raised for out-of-domain values (`errors`)
- Construction defaults for an output state (`config`)
- The validated output state record itself (`output_state`)
"""

from .config import OutputStateConfig
from .constants import RUN_FOREVER, OutputModeFlags, OutputPort, RegulationMode, RunState
from .errors import InvalidValueError
from .output_state import OutputState

__all__ = [
    "config",
    "constants",
    "errors",
    "output_state",
    "InvalidValueError",
    "OutputModeFlags",
    "OutputPort",
    "OutputState",
    "OutputStateConfig",
    "RegulationMode",
    "RUN_FOREVER",
    "RunState",
]
