"""Salary calculator command line interface.

Usage:
    salary-calculator calculate --designation Developer --hours 8
    salary-calculator batch --input employees.jsonl
    salary-calculator rates

Batch input is JSON lines, one employee per line:
    {"designation": "Manager", "working_hours": 8}
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from decimal import Decimal, InvalidOperation
from typing import Callable, TextIO

from pydantic import ValidationError

from salary_calculator.calculators import (
    DEFAULT_RATE_TABLE,
    Employee,
    SalaryCalculationError,
    SalaryCalculator,
)
from salary_calculator.config import get_settings
from salary_calculator.schemas import EmployeeRecord, SalaryResult

logger = logging.getLogger(__name__)


def parse_hours(s: str) -> Decimal:
    """Parse a number of hours."""
    try:
        return Decimal(s)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid number of hours: {s!r}") from None


class SalaryCli:
    """Salary calculator command line interface."""

    def __init__(self) -> None:
        self.parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        """Build argument parser."""
        parser = argparse.ArgumentParser(
            prog="salary-calculator",
            description="Compute pay from designation and hours worked",
        )
        subparsers = parser.add_subparsers(dest="command", help="Commands")

        calculate = subparsers.add_parser(
            "calculate",
            help="Calculate the salary of one employee",
        )
        calculate.add_argument(
            "--designation",
            type=str,
            required=True,
            help="Designation label, e.g. Developer or Manager (case-sensitive)",
        )
        calculate.add_argument(
            "--hours",
            type=parse_hours,
            required=True,
            help="Working hours",
        )
        calculate.add_argument(
            "--strict",
            action="store_true",
            help="Fail on unknown designations and negative hours",
        )

        batch = subparsers.add_parser(
            "batch",
            help="Calculate salaries for a JSON lines file of employees",
        )
        batch.add_argument(
            "--input",
            type=argparse.FileType("r"),
            default="-",
            help="Input file path (.jsonl format), '-' for stdin (default)",
        )
        batch.add_argument(
            "--strict",
            action="store_true",
            help="Fail on unknown designations and negative hours",
        )

        subparsers.add_parser(
            "rates",
            help="Show the designation rate table",
        )

        return parser

    def run(self, args: list[str] | None = None) -> int:
        """Run the CLI with given arguments."""
        parsed = self.parser.parse_args(args)

        if not parsed.command:
            self.parser.print_help()
            return 1

        settings = get_settings()
        logging.basicConfig(level=settings.log_level_number)

        handlers: dict[str, Callable[..., int]] = {
            "calculate": self._cmd_calculate,
            "batch": self._cmd_batch,
            "rates": self._cmd_rates,
        }

        handler = handlers.get(parsed.command)
        if handler:
            return handler(parsed)

        print(f"Unknown command: {parsed.command}", file=sys.stderr)
        return 1

    def _calculator(self, args: argparse.Namespace) -> SalaryCalculator:
        return SalaryCalculator(strict=args.strict or get_settings().strict)

    def _cmd_calculate(self, args: argparse.Namespace) -> int:
        """Calculate one salary."""
        calculator = self._calculator(args)
        employee = Employee(designation=args.designation, working_hours=args.hours)

        try:
            salary = calculator.calculate_salary(employee)
        except SalaryCalculationError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1

        result = SalaryResult(
            designation=employee.designation,
            working_hours=float(args.hours),
            salary=salary,
        )
        print(result.model_dump_json())
        return 0

    def _cmd_batch(self, args: argparse.Namespace) -> int:
        """Calculate salaries line by line."""
        calculator = self._calculator(args)
        try:
            failures = self._process_batch(calculator, args.input)
        finally:
            if args.input is not sys.stdin:
                args.input.close()

        if failures:
            print(f"{failures} record(s) failed", file=sys.stderr)
            return 1
        return 0

    def _process_batch(self, calculator: SalaryCalculator, stream: TextIO) -> int:
        failures = 0
        for line_number, line in enumerate(stream, start=1):
            if not line.strip():
                continue

            try:
                record = EmployeeRecord.model_validate_json(line)
                salary = calculator.calculate_salary(record.to_employee())
            except (ValidationError, SalaryCalculationError) as e:
                logger.info("Rejected batch line %d", line_number)
                print(f"line {line_number}: {e}", file=sys.stderr)
                failures += 1
                continue

            result = SalaryResult(
                designation=record.designation,
                working_hours=float(record.working_hours),
                salary=salary,
            )
            print(result.model_dump_json())
        return failures

    def _cmd_rates(self, args: argparse.Namespace) -> int:
        """Show the rate table."""
        print(json.dumps(DEFAULT_RATE_TABLE.as_dict(), indent=2))
        return 0


def main() -> int:
    """CLI entry point."""
    cli = SalaryCli()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
