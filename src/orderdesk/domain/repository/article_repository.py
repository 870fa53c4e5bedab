"""Abstract repository for the Article aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderdesk.domain.model.article import Article


class ArticleRepository(ABC):

    @abstractmethod
    def get_by_id(self, article_id: str) -> Article | None:
        """Return an article by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Article]:
        """Return every article in the catalog."""

    @abstractmethod
    def save(self, article: Article) -> None:
        """Persist a new or updated article."""
