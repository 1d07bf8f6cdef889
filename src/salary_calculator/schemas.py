"""Pydantic schemas for records read and written by the CLI."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from salary_calculator.calculators.types import Employee


class EmployeeRecord(BaseModel):
    """One employee line of a batch input file."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    designation: str | None = None
    working_hours: Decimal = Field(alias="workingHours")

    def to_employee(self) -> Employee:
        return Employee(designation=self.designation, working_hours=self.working_hours)


class SalaryResult(BaseModel):
    """Computed salary for one employee."""

    designation: str | None
    working_hours: float
    salary: float
