"""
Named value spaces for the SetOutputState command.

Members are integer-valued so they drop straight into the telegram bytes, but
the exclusive sets (port, regulation mode, run state) are enum types and are
checked by type, not by value, when assigned to an OutputState.
"""

from enum import IntEnum, IntFlag
from typing import Final


class OutputPort(IntEnum):
    """Motor output selector."""

    A = 0x00
    B = 0x01
    C = 0x02
    ALL = 0xFF  # every output at once


class OutputModeFlags(IntFlag):
    """Combinable mode bits; any OR of the members is a valid mode byte."""

    MOTORON = 0x01
    BRAKE = 0x02
    REGULATED = 0x04


class RegulationMode(IntEnum):
    IDLE = 0x00
    MOTOR_SPEED = 0x01
    MOTOR_SYNC = 0x02


class RunState(IntEnum):
    IDLE = 0x00
    RAMPUP = 0x10
    RUNNING = 0x20
    RAMPDOWN = 0x40


# Tacho limit of 0 means run until told otherwise.
RUN_FOREVER: Final[int] = 0

POWER_MIN: Final[int] = -100
POWER_MAX: Final[int] = 100
TURN_RATIO_MIN: Final[int] = -100
TURN_RATIO_MAX: Final[int] = 100
MODE_FLAGS_MAX: Final[int] = int(OutputModeFlags.MOTORON | OutputModeFlags.BRAKE | OutputModeFlags.REGULATED)
TACHO_LIMIT_MAX: Final[int] = 0xFFFFFFFF  # unsigned long, 4 bytes
