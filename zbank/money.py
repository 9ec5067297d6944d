"""
Exact decimal helpers for account balances.

Amounts are always ``Decimal`` with two fractional digits; floats never
touch a balance.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

CENT = Decimal("0.01")
ZERO = Decimal("0.00")
# NUMERIC(19, 2) leaves 17 integer digits; SQLite stores the same range as text.
MAX_AMOUNT = Decimal("99999999999999999.99")


def to_money(value: Union[Decimal, int, str]) -> Decimal:
    """Convert ``value`` to a Decimal carrying exactly two fractional digits."""
    if not isinstance(value, Decimal):
        try:
            value = Decimal(str(value))
        except InvalidOperation as exc:
            raise ValueError(f"Not a decimal amount: {value!r}") from exc
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def has_at_most_two_places(value: Decimal) -> bool:
    return value == value.quantize(CENT)


def format_money(value: Decimal) -> str:
    return str(to_money(value))
