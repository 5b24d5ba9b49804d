"""Mini README: Core package initializer for the budget tracker.

The package is split into ``ledger`` (balances and transaction history),
``presentation`` (parsing, formatting and screen state shared by every
front end) and ``interface`` (the FastAPI dashboard). Only the logging
helper is re-exported here so importing the package stays cheap.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
