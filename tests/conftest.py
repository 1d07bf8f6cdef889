"""Pytest fixtures for salary calculator tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from salary_calculator.calculators import Employee, SalaryCalculator
from salary_calculator.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Start every test from default settings."""
    monkeypatch.delenv("SALARY_STRICT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def calculator() -> SalaryCalculator:
    """Calculator with the default rate table."""
    return SalaryCalculator()


@pytest.fixture
def strict_calculator() -> SalaryCalculator:
    """Calculator that raises instead of returning zero."""
    return SalaryCalculator(strict=True)


@pytest.fixture
def developer() -> Employee:
    return Employee(designation="Developer", working_hours=8)


@pytest.fixture
def manager() -> Employee:
    return Employee(designation="Manager", working_hours=8)
