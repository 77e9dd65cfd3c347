"""Application service: Create Article use case."""

from __future__ import annotations

import logging

from apm.domain.model.article import Article
from apm.domain.repository.article_repository import ArticleRepository
from apm.domain.service.article_validation import validate_article

logger = logging.getLogger(__name__)


class CreateArticleHandler:

    def __init__(self, article_repo: ArticleRepository) -> None:
        self._article_repo = article_repo

    def handle(self, article: Article) -> Article:
        """Add a new article to the catalog.

        Any ID on the incoming article is dropped; the repository always
        assigns a fresh one.
        """
        article.id = None
        validate_article(article)
        saved = self._article_repo.save(article)
        logger.info("Created article #%s %r", saved.id, saved.name)
        return saved
