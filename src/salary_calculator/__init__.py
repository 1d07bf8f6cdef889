"""Salary calculator: pay from designation and hours worked."""

from salary_calculator.calculators import (
    DEFAULT_RATE_TABLE,
    DEFAULT_RATES,
    Employee,
    InvalidEmployeeError,
    RateNotFoundError,
    RateTable,
    SalaryCalculationError,
    SalaryCalculator,
    SalaryInput,
    calculate_salary,
)

__version__ = "1.0.0"

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
