"""
Construction defaults for an output state.

Every field is optional. Values left alone resolve to:
- port: UNSET (no port chosen; pick A, B, C or ALL before sending)
- power, turn_ratio: 0
- mode_flags: 0 (no flags)
- regulation_mode, run_state: IDLE (0)
- tacho_limit: RUN_FOREVER (0)

No validation happens here; OutputState validates each value as it is applied.
"""

from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Union

from .constants import RUN_FOREVER, OutputPort, RegulationMode, RunState


class _Unset(Enum):
    # Enum so the marker survives dataclasses.asdict() copies.
    UNSET = "unset"

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset.UNSET


@dataclass
class OutputStateConfig:
    """Field values for a new OutputState."""

    port: Union[OutputPort, _Unset] = UNSET
    power: int = 0
    mode_flags: int = 0
    regulation_mode: RegulationMode = RegulationMode.IDLE
    turn_ratio: int = 0
    run_state: RunState = RunState.IDLE
    tacho_limit: int = RUN_FOREVER

    @classmethod
    def field_names(cls) -> tuple:
        return tuple(f.name for f in fields(cls))

    def as_dict(self) -> dict:
        return asdict(self)
