"""Read-only projections of an Article returned by list queries.

There are exactly two variants, told apart by ``kind``: ``PlainArticle``
(stored data only) and ``PricedArticle`` (stored data plus the price for a
given day).  Both are snapshots built fresh per query and never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import ClassVar, Union

from apm.domain.model.article import Article
from apm.domain.model.discount import Discount


@dataclass(frozen=True)
class ArticleView:
    """Fields shared by every article projection."""

    id: int | None
    name: str | None
    slogan: str | None
    net_price: Decimal | None
    sales_price: Decimal | None
    vat_ratio: Decimal | None
    discounts: tuple[Discount, ...]


@dataclass(frozen=True)
class PlainArticle(ArticleView):
    kind: ClassVar[str] = "plain"

    @staticmethod
    def of(article: Article) -> PlainArticle:
        return PlainArticle(
            id=article.id,
            name=article.name,
            slogan=article.slogan,
            net_price=article.net_price,
            sales_price=article.sales_price,
            vat_ratio=article.vat_ratio,
            discounts=tuple(article.discounts),
        )


@dataclass(frozen=True)
class PricedArticle(ArticleView):
    """An article together with its sale price on one day."""

    kind: ClassVar[str] = "priced"

    final_price: Decimal | None = None
    applied_discount: Discount | None = None

    @property
    def has_active_discount(self) -> bool:
        return self.applied_discount is not None

    @staticmethod
    def of(article: Article, day: date) -> PricedArticle:
        return PricedArticle(
            id=article.id,
            name=article.name,
            slogan=article.slogan,
            net_price=article.net_price,
            sales_price=article.sales_price,
            vat_ratio=article.vat_ratio,
            discounts=tuple(article.discounts),
            final_price=article.calculate_discounted_price(day),
            applied_discount=article.get_applicable_discount(day),
        )


ArticleProjection = Union[PlainArticle, PricedArticle]
