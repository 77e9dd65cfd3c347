"""Application service: Add Discount use case.

Appends one discount to an existing article.  The whole article goes
through the validation gate again, so the new discount must neither
overlap an existing one nor undercut the net price.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from apm.domain.model.article import Article
from apm.domain.model.discount import Discount
from apm.domain.repository.article_repository import ArticleRepository
from apm.domain.service.article_validation import validate_article

logger = logging.getLogger(__name__)


class AddDiscountHandler:

    def __init__(self, article_repo: ArticleRepository) -> None:
        self._article_repo = article_repo

    def handle(self, article_id: int, discount: Discount) -> Article | None:
        article = self._article_repo.get_by_id(article_id)
        if article is None:
            return None

        candidate = replace(article)
        candidate.add_discount(replace(discount, id=None))

        validate_article(candidate)
        saved = self._article_repo.save(candidate)
        logger.info("Added discount %r to article #%s", discount.description, saved.id)
        return saved
