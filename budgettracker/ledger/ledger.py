"""Mini README: In-memory budget ledger with per-currency running balances.

Structure:
    * Ledger - owns the transaction history and one balance per currency,
      and notifies subscribers synchronously after every ``record``.
    * replay_balances - recomputes balances from a transaction sequence.

The ledger is the only place financial state changes. Front ends hold a
reference, read balances and history, and subscribe to change
notifications instead of depending on a UI framework's reactivity. History
is kept most recent first, so ``transactions()`` never needs to sort.
"""

from __future__ import annotations

from decimal import Context, Decimal, DivisionByZero, Inexact, InvalidOperation, Overflow, localcontext
from typing import Callable, Dict, Iterable, List, Tuple, Union

from ..logging_utils import get_logger
from .models import Currency, Transaction, TransactionKind

LOGGER = get_logger(__name__)

LedgerListener = Callable[["Ledger", Transaction], None]
AmountLike = Union[Decimal, int, float, str]

# Amounts stay below 1e31 with no digits finer than 1e-30, so sums of them stay exact within 200 digits.
AMOUNT_MAX_ADJUSTED = 30
AMOUNT_MIN_EXPONENT = -30
LEDGER_CONTEXT = Context(prec=200, traps=[InvalidOperation, DivisionByZero, Overflow, Inexact])


def _to_decimal(amount: AmountLike) -> Decimal:
    """Convert caller input to ``Decimal`` without float representation noise."""

    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, float):
        return Decimal(str(amount))
    return Decimal(amount)


def amount_in_range(value: Decimal) -> bool:
    """Return ``True`` when ``value`` is finite and within the range the ledger sums exactly."""

    if not value.is_finite():
        return False
    return value.adjusted() <= AMOUNT_MAX_ADJUSTED and value.as_tuple().exponent >= AMOUNT_MIN_EXPONENT


def replay_balances(transactions: Iterable[Transaction]) -> Dict[Currency, Decimal]:
    """Sum signed amounts per currency starting from zero.

    ``transactions`` is taken in the order ``Ledger.transactions()`` returns
    it (most recent first) and replayed oldest first, the order ``record``
    applied them.
    """

    balances = {currency: Decimal("0") for currency in Currency}
    with localcontext(LEDGER_CONTEXT):
        for transaction in reversed(tuple(transactions)):
            balances[transaction.currency] += transaction.signed_amount
    return balances


class Ledger:
    """Single source of truth for balances and transaction history."""

    def __init__(self) -> None:
        self._transactions: List[Transaction] = []
        self._balances: Dict[Currency, Decimal] = {currency: Decimal("0") for currency in Currency}
        self._listeners: List[LedgerListener] = []
        self._sequence = 0
        LOGGER.debug("Ledger initialised for currencies %s", [currency.code for currency in Currency])

    def __len__(self) -> int:
        return len(self._transactions)

    def _next_id(self) -> str:
        """Identifier the next recorded transaction will receive."""

        return f"txn_{self._sequence + 1:04d}"

    def record(
        self,
        amount: AmountLike,
        currency: Currency,
        kind: TransactionKind,
        description: str = "",
    ) -> Transaction:
        """Record a transaction, update its currency balance and notify subscribers.

        The amount is applied exactly as given. Passing a positive magnitude
        is the caller's obligation; zero or negative values are logged and
        still recorded, so a negative income lowers the balance.

        Balances are summed exactly under ``LEDGER_CONTEXT``. An amount the
        context cannot add exactly raises ``decimal.Inexact`` or
        ``decimal.Overflow`` before any state changes; ``parse_amount`` never
        lets such a value through.
        """

        value = _to_decimal(amount)
        if value <= 0:
            LOGGER.warning(
                "Recording non-positive %s amount %s %s", kind.value.lower(), value, currency.code
            )
        transaction = Transaction(
            transaction_id=self._next_id(),
            amount=value,
            currency=currency,
            kind=kind,
            description=description,
        )
        with localcontext(LEDGER_CONTEXT):
            new_balance = self._balances[currency] + transaction.signed_amount
        self._sequence += 1
        self._transactions.insert(0, transaction)
        self._balances[currency] = new_balance
        LOGGER.info(
            "Recorded %s %s %s (%s); balance now %s",
            transaction.transaction_id,
            kind.value.lower(),
            value,
            currency.code,
            self._balances[currency],
        )
        self._notify(transaction)
        return transaction

    def balance_of(self, currency: Currency) -> Decimal:
        """Return the running balance for one currency."""

        return self._balances[currency]

    def balances(self) -> Dict[Currency, Decimal]:
        """Return a copy of every balance keyed by currency."""

        return dict(self._balances)

    def transactions(self) -> Tuple[Transaction, ...]:
        """Return the full history, most recently recorded first."""

        return tuple(self._transactions)

    def subscribe(self, listener: LedgerListener) -> None:
        """Register a callable invoked as ``listener(ledger, transaction)`` after each record."""

        if listener in self._listeners:
            return
        self._listeners.append(listener)
        LOGGER.debug("Subscribed listener %r (%s total)", listener, len(self._listeners))

    def unsubscribe(self, listener: LedgerListener) -> None:
        """Remove a previously subscribed listener."""

        if listener not in self._listeners:
            raise KeyError(f"Listener {listener!r} is not subscribed")
        self._listeners.remove(listener)

    def _notify(self, transaction: Transaction) -> None:
        # Iterate over a copy so listeners may unsubscribe themselves.
        for listener in list(self._listeners):
            listener(self, transaction)

    def export_snapshot(self) -> Dict[str, object]:
        """Export balances and history for JSON responses."""

        return {
            "balances": {currency.code: str(balance) for currency, balance in self._balances.items()},
            "transactions": [transaction.as_dict() for transaction in self._transactions],
        }
