"""Discount value object.

A percentage reduction valid over an inclusive range of calendar dates.
Discounts are immutable and compared by value, so two discounts with the
same fields are equal even when they sit on different articles.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal

from apm.domain.exceptions import ValidationError
from apm.domain.model.pricing import HUNDRED, to_date, to_decimal


@dataclass(frozen=True)
class Discount:
    """A time-bounded percentage discount.

    Every field may be unset while a discount is being assembled; rules that
    need a field skip discounts lacking it, except ``is_valid_on`` and
    ``overlaps`` which require both dates.

    Invariants (enforced by ``check``, which ``of`` and the article gate run;
    stored discounts are reconstituted without it):
    - ``discount_percentage`` lies in [0, 100]
    - ``start_date <= end_date`` when both are set
    """

    id: int | None = None
    description: str | None = None
    discount_percentage: Decimal | None = None
    start_date: date | None = None
    end_date: date | None = None

    def __post_init__(self) -> None:
        pct = self.discount_percentage
        if pct is not None and not isinstance(pct, Decimal):
            raise ValidationError(
                f"Discount percentage must be a Decimal, got {type(pct).__name__}"
            )

    def check(self) -> None:
        """Raise ValidationError if the percentage or date range is invalid."""
        pct = self.discount_percentage
        if pct is not None and (pct < 0 or pct > HUNDRED):
            raise ValidationError(
                f"Discount percentage must be between 0 and 100, got {pct}"
            )
        if (
            self.start_date is not None
            and self.end_date is not None
            and self.start_date > self.end_date
        ):
            raise ValidationError(
                f"Discount start date {self.start_date} is after "
                f"end date {self.end_date}"
            )

    @property
    def has_period(self) -> bool:
        return self.start_date is not None and self.end_date is not None

    def is_valid_on(self, day: date) -> bool:
        """True if *day* falls within ``[start_date, end_date]``.

        Raises ValueError when either bound is unset.
        """
        self._require_period()
        return self.start_date <= day <= self.end_date  # type: ignore[operator]

    def overlaps(self, other: Discount) -> bool:
        """Closed-interval overlap; touching endpoints count as overlapping.

        Raises ValueError when either discount lacks a bound.
        """
        self._require_period()
        other._require_period()
        return (
            not self.start_date > other.end_date  # type: ignore[operator]
            and not other.start_date > self.end_date  # type: ignore[operator]
        )

    def _require_period(self) -> None:
        if not self.has_period:
            raise ValueError(
                f"Discount {self.description!r} has no complete validity period"
            )

    def with_id(self, discount_id: int) -> Discount:
        return replace(self, id=discount_id)

    def __str__(self) -> str:
        pct = "?" if self.discount_percentage is None else f"{self.discount_percentage}%"
        start = self.start_date.isoformat() if self.start_date else "?"
        end = self.end_date.isoformat() if self.end_date else "?"
        return f"{self.description or '(no description)'} {pct} [{start} .. {end}]"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(
        description: str | None,
        percentage: str | int | Decimal | None,
        start: str | date | None,
        end: str | date | None,
    ) -> Discount:
        """Coerce strings to Decimal and dates, then run ``check``."""
        discount = Discount(
            description=description,
            discount_percentage=to_decimal(percentage),
            start_date=to_date(start),
            end_date=to_date(end),
        )
        discount.check()
        return discount
