"""Application service: Update Article use case.

Loads the stored article, merges the patch into it, re-runs the
validation gate on the merged state and only then saves.  A missing
article is reported as ``None`` rather than an exception.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from apm.application.dto import ArticlePatch
from apm.domain.model.article import Article
from apm.domain.repository.article_repository import ArticleRepository
from apm.domain.service.article_validation import validate_article

logger = logging.getLogger(__name__)


class UpdateArticleHandler:

    def __init__(self, article_repo: ArticleRepository) -> None:
        self._article_repo = article_repo

    def handle(self, article_id: int, patch: ArticlePatch) -> Article | None:
        article = self._article_repo.get_by_id(article_id)
        if article is None:
            logger.debug("Article #%s not found for update", article_id)
            return None

        # Merge into a copy so a rejected patch leaves the loaded article as is
        merged = replace(
            article,
            name=patch.name,
            slogan=patch.slogan,
            net_price=patch.net_price,
            sales_price=patch.sales_price,
            vat_ratio=patch.vat_ratio,
        )
        if patch.discounts is not None:
            merged.replace_discounts(patch.discounts)

        validate_article(merged)
        saved = self._article_repo.save(merged)
        logger.info("Updated article #%s", saved.id)
        return saved
