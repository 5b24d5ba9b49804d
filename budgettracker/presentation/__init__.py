"""Mini README: Presentation helpers shared by the web and terminal front ends.

Exports the amount parser, the amount formatter and the ``BudgetScreen``
state object. Nothing here imports a UI framework.
"""

from .parsing import format_amount, parse_amount
from .screen import BudgetScreen, HistoryRow

__all__ = ["BudgetScreen", "HistoryRow", "format_amount", "parse_amount"]
