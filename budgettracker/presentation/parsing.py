"""Mini README: Text helpers shared by every front end.

Structure:
    * parse_amount - the single numeric gate between typed text and the ledger.
    * format_amount - two-decimal rendering with the currency code appended.

Keeping these free of web or terminal imports lets the dashboard, the
terminal session and the tests agree on exactly which inputs are recorded
and how balances are displayed.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Optional

from ..ledger import Currency, amount_in_range


def parse_amount(text: Optional[str]) -> Optional[Decimal]:
    """Return the typed amount as ``Decimal`` or ``None`` when it cannot be recorded.

    Only numeric parsing happens here. Signs are kept, so ``"-5"`` parses
    to ``Decimal("-5")``; deciding what a negative amount means is left to
    the ledger's caller. Non-finite values and values outside the range the
    ledger sums exactly (1e31 or more, or digits finer than 1e-30) are rejected.
    """

    if text is None:
        return None
    # Surrounding whitespace is tolerated; a strict float parse of the raw field would reject " 8 ".
    stripped = text.strip()
    if not stripped:
        return None
    try:
        value = Decimal(stripped)
    except InvalidOperation:
        return None
    if not amount_in_range(value):
        return None
    return value


def format_amount(amount: Decimal, currency: Currency) -> str:
    """Render ``amount`` to two decimal places followed by the currency code."""

    return f"{amount:.2f} {currency.code}"
