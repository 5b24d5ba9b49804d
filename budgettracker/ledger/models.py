"""Mini README: Value types recorded by the budget ledger.

Structure:
    * Currency - closed set of supported currencies keyed by short code.
    * TransactionKind - income versus expense, carrying the balance sign.
    * Transaction - frozen dataclass describing one recorded event.

Amounts are ``Decimal`` magnitudes; the kind decides whether a transaction
adds to or subtracts from its currency's balance. No conversion between
currencies exists anywhere in the package.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Dict


class Currency(str, Enum):
    """Currencies the tracker keeps a separate balance for."""

    RIELS = "KHR"
    DOLLARS = "USD"

    @property
    def code(self) -> str:
        """Short code appended to formatted amounts."""

        return self.value

    @classmethod
    def from_str(cls, value: str) -> "Currency":
        """Accept either the code (``"usd"``) or the member name (``"dollars"``)."""

        try:
            normalised = value.strip().upper()
        except AttributeError as error:
            raise ValueError(f"Unsupported currency: {value}") from error
        for member in cls:
            if normalised in (member.value, member.name):
                return member
        raise ValueError(f"Unsupported currency: {value}")


class TransactionKind(str, Enum):
    """Whether a transaction increases or decreases a balance."""

    INCOME = "Income"
    EXPENSE = "Expense"

    @property
    def sign(self) -> int:
        return 1 if self is TransactionKind.INCOME else -1

    @classmethod
    def from_str(cls, value: str) -> "TransactionKind":
        """Coerce arbitrary casing into a valid transaction kind."""

        try:
            return cls(value.strip().capitalize())
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported transaction kind: {value}") from error


@dataclass(frozen=True, slots=True)
class Transaction:
    """Immutable ledger entry created once by ``Ledger.record``."""

    transaction_id: str
    amount: Decimal
    currency: Currency
    kind: TransactionKind
    description: str = ""

    @property
    def signed_amount(self) -> Decimal:
        """Amount as applied to the balance: positive for income, negative for expenses."""

        return self.amount * self.kind.sign

    def as_dict(self) -> Dict[str, str]:
        """Export the transaction with serialisable values."""

        return {
            "transaction_id": self.transaction_id,
            "amount": str(self.amount),
            "currency": self.currency.code,
            "kind": self.kind.value,
            "description": self.description,
        }
