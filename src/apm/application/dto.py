"""Data Transfer Objects: plain containers that cross layer boundaries."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from apm.domain.model.discount import Discount


@dataclass(frozen=True)
class ArticlePatch:
    """Input: the new state of an existing article.

    Every scalar field replaces the stored value, even when it is None.
    ``discounts`` distinguishes "leave as is" (None) from "clear" ([]).
    """

    name: str | None = None
    slogan: str | None = None
    net_price: Decimal | None = None
    sales_price: Decimal | None = None
    vat_ratio: Decimal | None = None
    discounts: list[Discount] | None = None
