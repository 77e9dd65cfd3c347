"""Decimal arithmetic shared by the pricing and validation rules.

Every amount is a ``Decimal`` to avoid floating-point rounding errors that
would be unacceptable in price calculations.  Discount amounts are always
rounded half-up to cents; there is no per-currency scale.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from apm.domain.exceptions import ValidationError

PRICE_QUANTUM = Decimal("0.01")
PRICE_ROUNDING = ROUND_HALF_UP
HUNDRED = Decimal("100")


def discount_amount(sales_price: Decimal, percentage: Decimal) -> Decimal:
    """Return ``sales_price * percentage / 100`` rounded half-up to cents."""
    return (sales_price * percentage / HUNDRED).quantize(
        PRICE_QUANTUM, rounding=PRICE_ROUNDING
    )


def discounted_price(sales_price: Decimal, percentage: Decimal) -> Decimal:
    """Sales price minus the rounded discount amount (no floor applied)."""
    return sales_price - discount_amount(sales_price, percentage)


# --- Parsing -----------------------------------------------------------------


def to_decimal(value: str | int | float | Decimal | None) -> Decimal | None:
    """Coerce user or storage input to Decimal; ``None`` stays unset.

    Floats are converted through ``str`` so ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary approximation.
    """
    if value is None:
        return None
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid decimal amount: {value!r}") from exc
    if not result.is_finite():
        raise ValidationError(f"Invalid decimal amount: {value!r}")
    return result


def to_date(value: str | date | None) -> date | None:
    """Parse an ISO ``YYYY-MM-DD`` calendar date; ``None`` stays unset.

    A ``datetime`` is truncated to its calendar date.
    """
    if isinstance(value, datetime):
        return value.date()
    if value is None or isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value.strip())
    except ValueError as exc:
        raise ValidationError(
            f"Invalid date {value!r}, expected YYYY-MM-DD"
        ) from exc
