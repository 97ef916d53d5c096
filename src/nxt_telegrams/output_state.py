"""
Validated parameter set for the SetOutputState direct command.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Mapping, Optional

from .config import UNSET, OutputStateConfig
from .constants import (
    MODE_FLAGS_MAX,
    POWER_MAX,
    POWER_MIN,
    RUN_FOREVER,
    TACHO_LIMIT_MAX,
    TURN_RATIO_MAX,
    TURN_RATIO_MIN,
    OutputModeFlags,
    OutputPort,
    RegulationMode,
    RunState,
)
from .errors import InvalidValueError

LOG = logging.getLogger(__name__)


def _check_int(field: str, value: Any, low: int, high: int) -> int:
    # bool is an int subclass; True is not a power level.
    if not isinstance(value, int) or isinstance(value, bool) or not low <= value <= high:
        raise InvalidValueError(field, value, f"an integer in [{low}, {high}]")
    return int(value)


def _check_member(field: str, value: Any, enum_cls: type[Enum]) -> Any:
    if not isinstance(value, enum_cls):
        names = ", ".join(member.name for member in enum_cls)
        raise InvalidValueError(field, value, f"one of {enum_cls.__name__}.{{{names}}}")
    return value


class OutputState:
    """
    Motor output parameters, checked on every assignment.

    Two equivalent ways to fill one in:
    - keyed: ``OutputState(port=OutputPort.A, power=75)`` or
      ``OutputState({"port": OutputPort.A})``
    - builder: ``OutputState().for_port(OutputPort.B).with_power(100)``

    Fields are also plain properties. A rejected value raises
    InvalidValueError and leaves the field as it was.

    Instances compare equal by field values and are mutable, so they are
    not hashable and cannot be used as dict keys or set members.
    """

    RUN_FOREVER = RUN_FOREVER

    def __init__(self, fields: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> None:
        values = dict(fields or {})
        values.update(kwargs)
        unknown = sorted(str(name) for name in set(values) - set(OutputStateConfig.field_names()))
        if unknown:
            raise TypeError(f"unknown output state field(s): {', '.join(unknown)}")
        self._apply(OutputStateConfig(**values))

    @classmethod
    def from_config(cls, config: OutputStateConfig) -> OutputState:
        return cls(config.as_dict())

    def _apply(self, config: OutputStateConfig) -> None:
        self._port: Optional[OutputPort] = None
        if config.port is not UNSET:
            self.port = config.port
        self.power = config.power
        self.mode_flags = config.mode_flags
        self.regulation_mode = config.regulation_mode
        self.turn_ratio = config.turn_ratio
        self.run_state = config.run_state
        self.tacho_limit = config.tacho_limit

    def _assign(self, field: str, value: Any) -> None:
        setattr(self, f"_{field}", value)
        LOG.debug("output state %s -> %r", field, value)

    # Properties

    @property
    def port(self) -> Optional[OutputPort]:
        """Selected output, or None if no port has been chosen yet."""
        return self._port

    @port.setter
    def port(self, value: OutputPort) -> None:
        self._assign("port", _check_member("port", value, OutputPort))

    @property
    def power(self) -> int:
        return self._power

    @power.setter
    def power(self, value: int) -> None:
        self._assign("power", _check_int("power", value, POWER_MIN, POWER_MAX))

    @property
    def mode_flags(self) -> OutputModeFlags:
        return self._mode_flags

    @mode_flags.setter
    def mode_flags(self, value: int) -> None:
        flags = _check_int("mode_flags", value, 0, MODE_FLAGS_MAX)
        self._assign("mode_flags", OutputModeFlags(flags))

    @property
    def regulation_mode(self) -> RegulationMode:
        return self._regulation_mode

    @regulation_mode.setter
    def regulation_mode(self, value: RegulationMode) -> None:
        self._assign("regulation_mode", _check_member("regulation_mode", value, RegulationMode))

    @property
    def turn_ratio(self) -> int:
        return self._turn_ratio

    @turn_ratio.setter
    def turn_ratio(self, value: int) -> None:
        self._assign("turn_ratio", _check_int("turn_ratio", value, TURN_RATIO_MIN, TURN_RATIO_MAX))

    @property
    def run_state(self) -> RunState:
        return self._run_state

    @run_state.setter
    def run_state(self, value: RunState) -> None:
        self._assign("run_state", _check_member("run_state", value, RunState))

    @property
    def tacho_limit(self) -> int:
        """Tacho counts to run for; RUN_FOREVER (0) means no limit."""
        return self._tacho_limit

    @tacho_limit.setter
    def tacho_limit(self, value: int) -> None:
        self._assign("tacho_limit", _check_int("tacho_limit", value, 0, TACHO_LIMIT_MAX))

    # Builder

    def for_port(self, port: OutputPort) -> OutputState:
        self.port = port
        return self

    def with_power(self, power: int) -> OutputState:
        self.power = power
        return self

    def with_mode_flags(self, mode_flags: int) -> OutputState:
        self.mode_flags = mode_flags
        return self

    def with_regulation_mode(self, regulation_mode: RegulationMode) -> OutputState:
        self.regulation_mode = regulation_mode
        return self

    def with_turn_ratio(self, turn_ratio: int) -> OutputState:
        self.turn_ratio = turn_ratio
        return self

    def with_run_state(self, run_state: RunState) -> OutputState:
        self.run_state = run_state
        return self

    def with_tacho_limit(self, tacho_limit: int) -> OutputState:
        self.tacho_limit = tacho_limit
        return self

    # Read-only views for the serializer

    @property
    def is_addressed(self) -> bool:
        return self._port is not None

    def as_dict(self) -> dict:
        """Field values keyed by name, in telegram order."""
        return {name: getattr(self, name) for name in OutputStateConfig.field_names()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OutputState):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self) -> str:
        body = ", ".join(f"{name}={value!r}" for name, value in self.as_dict().items())
        return f"OutputState({body})"
