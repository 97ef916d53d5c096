"""Errors raised while building an output state."""

from __future__ import annotations

from typing import Any


class InvalidValueError(ValueError):
    """
    A field was offered a value outside its domain.

    Carries the field name, the rejected value and a human readable
    description of what the field accepts.
    """

    def __init__(self, field: str, value: Any, domain: str) -> None:
        self.field = field
        self.value = value
        self.domain = domain
        super().__init__(f"{field} must be {domain}, got {value!r}")
