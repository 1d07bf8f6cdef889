"""Type definitions for salary calculation."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SalaryInput(Protocol):
    """Anything exposing a designation and a number of working hours."""

    designation: Any
    working_hours: Any


@dataclass(frozen=True)
class Employee:
    """An employee as seen by the salary calculator.

    Owned by the caller. The calculator only reads it.
    """

    designation: str | None
    working_hours: Decimal | int | float  # hours, expected >= 0
