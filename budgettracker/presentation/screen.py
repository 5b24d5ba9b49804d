"""Mini README: Framework-free state for the single budget screen.

Structure:
    * HistoryRow - display-ready view of one transaction.
    * BudgetScreen - typed fields, currency selector, history toggle and the
      two submit actions (income / expense).

The screen mirrors what a user sees: an amount field, a description field,
an exclusive currency selector and two buttons. Submitting only reaches the
ledger when the amount parses; otherwise the typed values stay in place.
The web dashboard and the terminal session both drive one of these.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Union

from ..ledger import Currency, Ledger, Transaction, TransactionKind
from ..logging_utils import get_logger
from .parsing import format_amount, parse_amount

LOGGER = get_logger(__name__)

# Display order of the balance panel.
BALANCE_ORDER = (Currency.DOLLARS, Currency.RIELS)


@dataclass(frozen=True, slots=True)
class HistoryRow:
    """One line of the history view."""

    transaction_id: str
    amount: str
    description: str
    kind: str
    tone: str


class BudgetScreen:
    """Hold entry-form state and forward valid submissions to a ledger."""

    def __init__(self, ledger: Ledger, default_currency: Currency = Currency.DOLLARS) -> None:
        self.ledger = ledger
        self.amount_text = ""
        self.description = ""
        self.currency = default_currency
        self.history_visible = False
        self.revision = 0
        ledger.subscribe(self._on_ledger_change)

    def _on_ledger_change(self, ledger: Ledger, transaction: Transaction) -> None:
        self.revision += 1
        LOGGER.debug("Screen refreshed after %s (revision %s)", transaction.transaction_id, self.revision)

    def close(self) -> None:
        """Stop listening to the ledger."""

        self.ledger.unsubscribe(self._on_ledger_change)

    def select_currency(self, currency: Union[Currency, str]) -> Currency:
        """Switch the exclusive currency selector."""

        self.currency = currency if isinstance(currency, Currency) else Currency.from_str(currency)
        return self.currency

    def toggle_history(self) -> bool:
        self.history_visible = not self.history_visible
        return self.history_visible

    def submit(self, kind: TransactionKind) -> Optional[Transaction]:
        """Record the typed amount as ``kind``; skip silently when it does not parse."""

        amount = parse_amount(self.amount_text)
        if amount is None:
            LOGGER.debug("Ignoring %s submission with unparseable amount %r", kind.value, self.amount_text)
            return None
        transaction = self.ledger.record(amount, self.currency, kind, self.description)
        self.amount_text = ""
        self.description = ""
        return transaction

    def submit_income(self) -> Optional[Transaction]:
        return self.submit(TransactionKind.INCOME)

    def submit_expense(self) -> Optional[Transaction]:
        return self.submit(TransactionKind.EXPENSE)

    def balance_lines(self) -> List[str]:
        """Formatted balances, dollars first."""

        return [format_amount(self.ledger.balance_of(currency), currency) for currency in BALANCE_ORDER]

    def history_rows(self) -> List[HistoryRow]:
        """Formatted history, most recent first."""

        return [
            HistoryRow(
                transaction_id=transaction.transaction_id,
                amount=format_amount(transaction.amount, transaction.currency),
                description=transaction.description,
                kind=transaction.kind.value,
                tone="income" if transaction.kind is TransactionKind.INCOME else "expense",
            )
            for transaction in self.ledger.transactions()
        ]
