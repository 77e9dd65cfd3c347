"""Application service: Show Article use case (query)."""

from __future__ import annotations

from apm.domain.model.article import Article
from apm.domain.repository.article_repository import ArticleRepository


class ShowArticleHandler:

    def __init__(self, article_repo: ArticleRepository) -> None:
        self._article_repo = article_repo

    def handle(self, article_id: int) -> Article | None:
        return self._article_repo.get_by_id(article_id)

    def list_all(self) -> list[Article]:
        return self._article_repo.list_all()
