"""
Amount parsing for feed price and cost columns.

Vendor feeds are inconsistent: empty cells, placeholder text and junk all
degrade to zero instead of failing the row.
"""

import re
from decimal import Decimal, DecimalException, Overflow, localcontext
from typing import Optional

from ..common.constants import MAX_AMOUNT_INTEGER_DIGITS, ZERO_PRICE_MARKUP

ZERO = Decimal(0)

# ASCII-only decimal literal: no digit separators, no unicode digits, no nan/inf
_AMOUNT_RE = re.compile(r'[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')


def _to_decimal(value: str) -> Optional[Decimal]:
    """Return the value as a bounded, non-negative Decimal, or None."""
    if not _AMOUNT_RE.fullmatch(value):
        return None
    try:
        amount = Decimal(value)
    except DecimalException:
        return None
    if amount < 0:
        return None
    if amount and amount.adjusted() >= MAX_AMOUNT_INTEGER_DIGITS:
        return None
    return amount


def parse_amount(text: str) -> Decimal:
    """
    Parse a price or cost cell.

    Args:
        text: Raw cell text (surrounding whitespace is ignored)

    Returns:
        The parsed decimal, or Decimal(0) for empty, non-numeric,
        negative or out-of-range values
    """
    value = text.strip()
    if not value:
        return ZERO

    amount = _to_decimal(value)
    if amount is None or amount == 0:
        # -0 and 0.00 both collapse to a plain zero
        return ZERO
    return amount


def is_unusable_amount(text: str) -> bool:
    """True for a non-empty cell that parse_amount() would coerce to zero."""
    value = text.strip()
    return bool(value) and _to_decimal(value) is None


def resolve_standard_price(standard_price: Decimal, wholesale_cost: Decimal) -> Decimal:
    """
    Apply the zero-price fallback.

    A feed row with no retail price is priced at twice its wholesale cost.
    If wholesale cost is also zero, or doubling it leaves the decimal
    range, the result is zero.
    """
    if standard_price != 0:
        return standard_price

    with localcontext() as ctx:
        ctx.traps[Overflow] = False
        doubled = wholesale_cost * ZERO_PRICE_MARKUP
    return doubled if doubled.is_finite() else ZERO
