"""Salary calculation."""

from salary_calculator.calculators.rate_table import (
    DEFAULT_RATE_TABLE,
    DEFAULT_RATES,
    RateNotFoundError,
    RateTable,
    SalaryCalculationError,
)
from salary_calculator.calculators.salary import (
    InvalidEmployeeError,
    SalaryCalculator,
    calculate_salary,
)
from salary_calculator.calculators.types import Employee, SalaryInput

__all__ = [
    "DEFAULT_RATE_TABLE",
    "DEFAULT_RATES",
    "Employee",
    "InvalidEmployeeError",
    "RateNotFoundError",
    "RateTable",
    "SalaryCalculationError",
    "SalaryCalculator",
    "SalaryInput",
    "calculate_salary",
]
