"""Application service: Delete Article use case.

Discounts belong to exactly one article and disappear with it; the
repository handles that, so there is nothing to orchestrate here.
"""

from __future__ import annotations

from apm.domain.repository.article_repository import ArticleRepository


class DeleteArticleHandler:

    def __init__(self, article_repo: ArticleRepository) -> None:
        self._article_repo = article_repo

    def handle(self, article_id: int) -> bool:
        return self._article_repo.delete_by_id(article_id)

    def exists(self, article_id: int) -> bool:
        return self._article_repo.exists_by_id(article_id)
