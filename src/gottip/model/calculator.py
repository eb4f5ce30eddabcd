"""
Tip Calculator
==============
Pure arithmetic for the tip amount and the grand total.

Amounts are `decimal.Decimal` so that ``total == subtotal + tip`` holds
exactly. Rounding to cents happens only when a value is formatted for display.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional, Union

from gottip.config import CURRENCY_SYMBOL, TIP_PERCENT_MAX, TIP_PERCENT_MIN

CENT = Decimal("0.01")
HUNDRED = Decimal(100)

# Digits with an optional decimal point: "12", "12.", "12.5", ".5" (not ".")
_SUBTOTAL_PATTERN = re.compile(r"^(?:[0-9]+\.?[0-9]*|\.[0-9]+)$")

Number = Union[int, float, Decimal]


@dataclass(frozen=True)
class TipResult:
    subtotal: Decimal
    percent: Decimal
    tip: Decimal
    total: Decimal

    @property
    def tip_display(self) -> str:
        return str(round_cents(self.tip))

    @property
    def total_display(self) -> str:
        return str(round_cents(self.total))


def round_cents(amount: Decimal) -> Decimal:
    """Round half-up to two decimal places."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(amount.as_tuple().digits) + 4)
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def format_currency(amount: Decimal) -> str:
    """Format an amount as e.g. ``$23.00``."""
    return f"{CURRENCY_SYMBOL}{round_cents(amount)}"


def parse_subtotal(text: Optional[str]) -> Optional[Decimal]:
    """
    Parse the subtotal buffer.

    Returns None for a missing, empty or non-numeric value. Only plain
    non-negative decimals are accepted, so signs, exponents, "nan" and
    "inf" all count as not parseable.
    """
    if text is None:
        return None
    text = text.strip()
    if not _SUBTOTAL_PATTERN.match(text):
        return None
    return Decimal(text)


def validate_percent(percent: Number) -> Decimal:
    value = Decimal(str(percent))
    if not value.is_finite() or not TIP_PERCENT_MIN <= value <= TIP_PERCENT_MAX:
        raise ValueError(
            f"Tip percentage must be between {TIP_PERCENT_MIN} and {TIP_PERCENT_MAX}, got {percent!r}."
        )
    return value


def compute(subtotal: Optional[str], percent: Number) -> Optional[TipResult]:
    """
    Compute the tip and the total for a subtotal buffer.

    Args:
        subtotal: The text of the subtotal field, or None.
        percent: Tip percentage in the range 0-30.

    Returns:
        A TipResult, or None if the subtotal is not a number yet.

    Raises:
        ValueError: If `percent` is outside 0-30.
    """
    rate = validate_percent(percent)
    amount = parse_subtotal(subtotal)
    if amount is None:
        return None

    # Enough precision that neither the product nor the sum is rounded
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(amount.as_tuple().digits) + len(rate.as_tuple().digits) + 6)
        tip = amount * rate / HUNDRED
        total = amount + tip

    return TipResult(subtotal=amount, percent=rate, tip=tip, total=total)
