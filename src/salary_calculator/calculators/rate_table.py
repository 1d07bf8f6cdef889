"""Designation to hourly rate lookup."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from decimal import Decimal
from types import MappingProxyType
from typing import Any

DEFAULT_RATES: Mapping[str, Decimal] = MappingProxyType(
    {
        "Developer": Decimal("1000"),
        "Manager": Decimal("2000"),
    }
)


class SalaryCalculationError(Exception):
    """Base class for salary calculation failures."""


class RateNotFoundError(SalaryCalculationError):
    """Raised when no rate is defined for a designation."""

    def __init__(self, designation: Any):
        self.designation = designation
        super().__init__(f"No hourly rate defined for designation {designation!r}")


class RateTable:
    """Immutable mapping from designation label to hourly rate.

    Matching is exact and case-sensitive: "developer" is not "Developer".
    Rates are held as Decimal regardless of the type they were given in.
    """

    def __init__(self, rates: Mapping[str, Decimal | int | float | str]):
        normalized: dict[str, Decimal] = {}
        for designation, rate in rates.items():
            amount = Decimal(str(rate))
            if amount < 0:
                raise ValueError(
                    f"Rate for {designation!r} must be non-negative, got {amount}"
                )
            normalized[designation] = amount
        self._rates: Mapping[str, Decimal] = MappingProxyType(normalized)

    @property
    def designations(self) -> tuple[str, ...]:
        return tuple(self._rates)

    def rate_for(self, designation: Any) -> Decimal | None:
        """Return the hourly rate, or None when the designation is unknown."""
        if not isinstance(designation, str):
            return None
        return self._rates.get(designation)

    def require_rate(self, designation: Any) -> Decimal:
        """Return the hourly rate.

        Raises:
            RateNotFoundError: If the designation has no rate
        """
        rate = self.rate_for(designation)
        if rate is None:
            raise RateNotFoundError(designation)
        return rate

    def as_dict(self) -> dict[str, str]:
        """Return a JSON-friendly copy of the table."""
        return {designation: str(rate) for designation, rate in self._rates.items()}

    def __contains__(self, designation: object) -> bool:
        return isinstance(designation, str) and designation in self._rates

    def __iter__(self) -> Iterator[str]:
        return iter(self._rates)

    def __len__(self) -> int:
        return len(self._rates)

    def __repr__(self) -> str:
        return f"RateTable({dict(self._rates)!r})"


DEFAULT_RATE_TABLE = RateTable(DEFAULT_RATES)
