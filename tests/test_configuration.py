"""Mini README: Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from budgettracker.configuration import BudgetSettings
from budgettracker.ledger import Currency


def test_defaults() -> None:
    settings = BudgetSettings()

    assert settings.default_currency is Currency.DOLLARS
    assert settings.interface_port == 8000
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BUDGET_DEFAULT_CURRENCY", "riels")
    monkeypatch.setenv("BUDGET_INTERFACE_PORT", "9001")
    monkeypatch.setenv("BUDGET_LOG_LEVEL", "debug")

    settings = BudgetSettings()

    assert settings.default_currency is Currency.RIELS
    assert settings.interface_port == 9001
    assert settings.log_level == "DEBUG"


def test_invalid_values_are_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BUDGET_DEFAULT_CURRENCY", "EUR")

    with pytest.raises(ValidationError):
        BudgetSettings()
