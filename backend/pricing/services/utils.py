from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

TWOPLACES = Decimal("0.01")
ZERO = Decimal("0")

DEFAULT_CURRENCY_PREFIX = "Rs. "


def d(val) -> Decimal:
    """Coerce incoming values to Decimal safely. Missing values become zero."""
    if val is None or val == "":
        return ZERO
    if isinstance(val, Decimal):
        return val
    try:
        return Decimal(str(val))
    except InvalidOperation:
        return ZERO


def finite(val) -> Decimal:
    """Like d(), but NaN and infinities collapse to zero."""
    amount = d(val)
    if not amount.is_finite():
        return ZERO
    return amount


def q2(amount) -> Decimal:
    """Quantize to cents, half away from zero."""
    return finite(amount).quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def format_currency(amount, prefix: str = DEFAULT_CURRENCY_PREFIX) -> str:
    """Render an amount for invoice text, e.g. 1234.5 -> 'Rs. 1,234.50'."""
    return f"{prefix}{q2(amount):,.2f}"
