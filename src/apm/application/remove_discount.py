"""Application service: Remove Discount use case."""

from __future__ import annotations

import logging
from dataclasses import replace

from apm.domain.exceptions import EntityNotFoundError
from apm.domain.model.article import Article
from apm.domain.repository.article_repository import ArticleRepository
from apm.domain.service.article_validation import validate_article

logger = logging.getLogger(__name__)


class RemoveDiscountHandler:

    def __init__(self, article_repo: ArticleRepository) -> None:
        self._article_repo = article_repo

    def handle(self, article_id: int, discount_id: int) -> Article | None:
        """Remove the discount with *discount_id* from an article.

        Returns None if the article does not exist.  A discount ID that is
        not on the article is an error, since the caller named it explicitly.
        """
        article = self._article_repo.get_by_id(article_id)
        if article is None:
            return None

        discount = next((d for d in article.discounts if d.id == discount_id), None)
        if discount is None:
            raise EntityNotFoundError(
                f"Discount #{discount_id} not found on article #{article_id}"
            )

        candidate = replace(article)
        candidate.remove_discount(discount)
        validate_article(candidate)
        saved = self._article_repo.save(candidate)
        logger.info("Removed discount #%s from article #%s", discount_id, saved.id)
        return saved
