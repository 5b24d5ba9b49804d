"""Mini README: Centralised configuration for the budget tracker.

Structure:
    * BudgetSettings - Pydantic settings model read from ``BUDGET_*`` variables.
    * get_settings - cached accessor shared by the CLI and the web interface.

Usage:
    Import ``get_settings`` to find the host/port to serve on, the currency
    preselected on the entry form and the log level. Values may also come
    from a ``.env`` file in the working directory. Nothing here persists
    ledger state; balances always start at zero.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Union

from pydantic import Field, validator
from pydantic_settings import BaseSettings

from .ledger import Currency


class BudgetSettings(BaseSettings):
    """Runtime configuration for the budget tracker."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles such as auto-reload.",
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the web dashboard to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the web dashboard listens on.",
        ge=1,
        le=65535,
    )
    default_currency: Currency = Field(
        Currency.DOLLARS,
        description="Currency selected on the entry form when the screen opens.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level name (DEBUG, INFO, WARNING, ...).",
    )

    class Config:
        env_prefix = "BUDGET_"
        env_file = ".env"
        case_sensitive = False

    @validator("default_currency", pre=True)
    def _coerce_currency(cls, value: Union[str, Currency]) -> Currency:
        """Accept codes or names in any casing (``usd``, ``Riels``)."""

        if isinstance(value, Currency):
            return value
        return Currency.from_str(str(value))

    @validator("log_level")
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper()


@lru_cache()
def get_settings() -> BudgetSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return BudgetSettings()
