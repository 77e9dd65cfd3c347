"""Article aggregate: the core of the domain.

The Article owns its ordered list of discounts and is the only place that
knows how a discount turns into a sale price.  Discount order matters: when
several discounts could apply on one day the first one in the list wins.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from apm.domain.model.discount import Discount
from apm.domain.model.pricing import discounted_price


def discounts_overlap(discounts: Iterable[Discount]) -> bool:
    """True if any two dated discounts share at least one calendar day.

    Discounts missing either date are exempt from the check.
    """
    dated = [d for d in discounts if d.has_period]
    if len(dated) <= 1:
        return False
    for i, first in enumerate(dated):
        for second in dated[i + 1:]:
            if first.overlaps(second):
                return True
    return False


@dataclass
class Article:
    """Aggregate root for a sellable item.

    ``net_price`` is the floor: no discount may take the sale price below
    it.  ``sales_price`` is the list price discounts are computed from.
    ``vat_ratio`` is stored only; it never enters a price calculation.

    The ``__init__`` does not run the discount invariants so the repository
    can reconstitute stored articles as they are.  Use cases run
    ``validate_article`` before every save.
    """

    id: int | None = None
    name: str | None = None
    slogan: str | None = None
    net_price: Decimal | None = None
    sales_price: Decimal | None = None
    vat_ratio: Decimal | None = None
    discounts: list[Discount] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.discounts is None:
            self.discounts = []
        else:
            self.discounts = list(self.discounts)

    # --- Discount collection --------------------------------------------------

    def add_discount(self, discount: Discount) -> None:
        self.discounts.append(discount)

    def remove_discount(self, discount: Discount) -> None:
        """Remove the first discount equal to *discount*; no-op if absent."""
        if discount in self.discounts:
            self.discounts.remove(discount)

    def replace_discounts(self, discounts: Iterable[Discount]) -> None:
        self.discounts = list(discounts)

    # --- Pricing --------------------------------------------------------------

    def get_applicable_discount(self, day: date) -> Discount | None:
        """Return the first discount (by list order) valid on *day*."""
        return self._first_valid_discount(day)

    def calculate_discounted_price(self, day: date) -> Decimal | None:
        """Sale price on *day* after the applicable discount.

        Returns ``sales_price`` unchanged when it is unset or no discount
        applies.  The result is clamped up to ``net_price`` if the discount
        would take it lower.
        """
        if self.sales_price is None or not self.discounts:
            return self.sales_price

        discount = self._first_valid_discount(day)
        if discount is None or discount.discount_percentage is None:
            return self.sales_price

        price = discounted_price(self.sales_price, discount.discount_percentage)
        if self.net_price is not None and price < self.net_price:
            return self.net_price
        return price

    def has_discount_on(self, day: date) -> bool:
        """True if any discount covers *day*."""
        return any(d.is_valid_on(day) for d in self.discounts)

    # --- Invariant checks -----------------------------------------------------

    def validate_no_overlapping_discounts(self) -> bool:
        return not discounts_overlap(self.discounts)

    def discounts_below_net_price(self) -> list[Discount]:
        """Discounts whose reduction would push the price under ``net_price``.

        Empty when either price is unset; discounts without a percentage are
        ignored.
        """
        if self.sales_price is None or self.net_price is None:
            return []
        return [
            d
            for d in self.discounts
            if d.discount_percentage is not None
            and discounted_price(self.sales_price, d.discount_percentage) < self.net_price
        ]

    def validate_discounts(self) -> bool:
        """Both invariants as a single yes/no answer."""
        if self.sales_price is None or self.net_price is None:
            return True
        return self.validate_no_overlapping_discounts() and not self.discounts_below_net_price()

    # --- Internal helpers -----------------------------------------------------

    def _first_valid_discount(self, day: date) -> Discount | None:
        for discount in self.discounts:
            if discount.is_valid_on(day):
                return discount
        return None
