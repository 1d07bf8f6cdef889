"""Salary calculation from designation and working hours."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from salary_calculator.calculators.rate_table import (
    DEFAULT_RATE_TABLE,
    RateNotFoundError,
    RateTable,
    SalaryCalculationError,
)
from salary_calculator.calculators.types import SalaryInput

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


class InvalidEmployeeError(SalaryCalculationError):
    """Raised when an employee record cannot be used for calculation."""

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")


class SalaryCalculator:
    """Computes pay as working hours times the hourly rate of a designation.

    In the default mode an unrecognized designation contributes zero pay
    and negative hours are passed through unchecked. With ``strict=True``
    both are rejected:

    - unknown or missing designation raises RateNotFoundError
    - negative or missing hours raise InvalidEmployeeError

    Non-numeric hours for a recognized designation raise InvalidEmployeeError
    in either mode, since no amount can be produced from them.
    """

    OUTPUT_PRECISION = Decimal("0.01")

    def __init__(self, rate_table: RateTable | None = None, strict: bool = False):
        self.rate_table = rate_table if rate_table is not None else DEFAULT_RATE_TABLE
        self.strict = strict

    def calculate_salary(self, employee: SalaryInput) -> float:
        """Calculate the salary for one employee.

        Int and float hours are multiplied as floats, so the result is
        exactly ``working_hours * rate``. Decimal hours are multiplied in
        Decimal and converted at the end.

        Args:
            employee: Object exposing ``designation`` and ``working_hours``

        Returns:
            working_hours * rate, or 0.0 for an unrecognized designation

        Raises:
            RateNotFoundError: Strict mode only, designation has no rate
            InvalidEmployeeError: Hours are unusable or the result is out of range
        """
        rate = self._resolve_rate(employee)
        if rate is None:
            return 0.0

        value = getattr(employee, "working_hours", None)
        hours = self._coerce_hours(value)

        if isinstance(value, Decimal):
            salary = float(self._multiply(hours, rate, value))
        else:
            operand = value if isinstance(value, (int, float)) else hours
            try:
                salary = float(operand) * float(rate)
            except OverflowError as e:
                raise InvalidEmployeeError("working_hours", value, "out of range") from e

        if not math.isfinite(salary):
            raise InvalidEmployeeError("working_hours", value, "out of range")
        return salary

    def calculate_salary_amount(self, employee: SalaryInput) -> Decimal:
        """Calculate the salary as a Decimal rounded to cents."""
        rate = self._resolve_rate(employee)
        if rate is None:
            return ZERO.quantize(self.OUTPUT_PRECISION)

        value = getattr(employee, "working_hours", None)
        amount = self._multiply(self._coerce_hours(value), rate, value)
        try:
            return amount.quantize(self.OUTPUT_PRECISION, rounding=ROUND_HALF_UP)
        except ArithmeticError as e:
            raise InvalidEmployeeError("working_hours", value, "out of range") from e

    def calculate_salaries(self, employees: Iterable[SalaryInput]) -> list[float]:
        """Calculate salaries for several employees, in input order."""
        return [self.calculate_salary(employee) for employee in employees]

    def _resolve_rate(self, employee: SalaryInput) -> Decimal | None:
        designation = getattr(employee, "designation", None)
        rate = self.rate_table.rate_for(designation)

        if rate is None:
            if self.strict:
                raise RateNotFoundError(designation)
            logger.debug("No rate for designation %r, salary is zero", designation)
        return rate

    @staticmethod
    def _multiply(hours: Decimal, rate: Decimal, value: Any) -> Decimal:
        try:
            return hours * rate
        except ArithmeticError as e:
            raise InvalidEmployeeError("working_hours", value, "out of range") from e

    def _coerce_hours(self, value: Any) -> Decimal:
        # bool is an int subclass but True is never a count of hours
        if value is None or isinstance(value, bool):
            raise InvalidEmployeeError("working_hours", value, "must be a number")

        try:
            hours = value if isinstance(value, Decimal) else Decimal(str(value))
        except (InvalidOperation, ValueError) as e:
            raise InvalidEmployeeError("working_hours", value, "must be a number") from e

        if not hours.is_finite():
            raise InvalidEmployeeError("working_hours", value, "must be finite")

        if hours < 0 and self.strict:
            raise InvalidEmployeeError("working_hours", value, "must be non-negative")

        return hours


_default_calculator = SalaryCalculator()


def calculate_salary(employee: SalaryInput) -> float:
    """Calculate a salary with the default rate table in the default mode."""
    return _default_calculator.calculate_salary(employee)
