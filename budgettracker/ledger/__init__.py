"""Mini README: Ledger package for balances and transaction history.

``models`` holds the value types (currencies, kinds, transactions) and
``ledger`` the observable aggregate that records them. Import from here
rather than the submodules.
"""

from .ledger import LEDGER_CONTEXT, Ledger, LedgerListener, amount_in_range, replay_balances
from .models import Currency, Transaction, TransactionKind

__all__ = [
    "Currency",
    "LEDGER_CONTEXT",
    "Ledger",
    "LedgerListener",
    "Transaction",
    "TransactionKind",
    "amount_in_range",
    "replay_balances",
]
