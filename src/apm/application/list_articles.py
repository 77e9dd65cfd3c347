"""Application service: List Articles use case (query).

Returns plain or priced projections depending on two flags:

    with_prices  discount_only  result
    -----------  -------------  ------------------------------------------
    no           no             every article, plain
    yes          no             every article, priced for ``day``
    no           yes            articles with a discount on ``day``, plain
    yes          yes            priced articles with an applied discount
"""

from __future__ import annotations

from datetime import date

from apm.domain.exceptions import ValidationError
from apm.domain.model.article_view import (
    ArticleProjection,
    PlainArticle,
    PricedArticle,
)
from apm.domain.repository.article_repository import ArticleRepository


class ListArticlesHandler:

    def __init__(self, article_repo: ArticleRepository) -> None:
        self._article_repo = article_repo

    def handle(
        self,
        day: date | None = None,
        with_prices: bool = False,
        discount_only: bool = False,
    ) -> list[ArticleProjection]:
        if (with_prices or discount_only) and day is None:
            raise ValidationError(
                "Date is required when filtering by prices or discounts"
            )

        articles = self._article_repo.list_all()

        if with_prices and discount_only:
            priced = [PricedArticle.of(a, day) for a in articles]  # type: ignore[arg-type]
            return [p for p in priced if p.has_active_discount]
        if with_prices:
            return [PricedArticle.of(a, day) for a in articles]  # type: ignore[arg-type]
        if discount_only:
            return [PlainArticle.of(a) for a in articles if a.has_discount_on(day)]  # type: ignore[arg-type]
        return [PlainArticle.of(a) for a in articles]
