"""Abstract repository for the Article aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, in-memory)
live in the infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from apm.domain.model.article import Article


class ArticleRepository(ABC):

    @abstractmethod
    def save(self, article: Article) -> Article:
        """Insert or update an article, assigning an ID if it has none.

        Returns the stored article.
        """

    @abstractmethod
    def get_by_id(self, article_id: int) -> Article | None:
        """Return an article by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Article]:
        """Return every stored article."""

    @abstractmethod
    def delete_by_id(self, article_id: int) -> bool:
        """Remove an article and its discounts; True if something was removed."""

    @abstractmethod
    def exists_by_id(self, article_id: int) -> bool:
        """True if an article with this ID is stored."""
