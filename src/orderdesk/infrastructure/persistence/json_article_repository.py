"""JSON-file-backed implementation of ArticleRepository."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from orderdesk.domain.model.article import Article
from orderdesk.domain.model.value_objects import Currency, Tax
from orderdesk.domain.repository.article_repository import ArticleRepository

logger = logging.getLogger(__name__)


class JsonArticleRepository(ArticleRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ArticleRepository interface ------------------------------------------

    def get_by_id(self, article_id: str) -> Article | None:
        return self._load().get(article_id)

    def list_all(self) -> list[Article]:
        return list(self._load().values())

    def save(self, article: Article) -> None:
        articles = self._load()
        articles[article.id] = article
        self._persist(articles)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Article]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        articles = {
            item["id"]: Article(
                id=item["id"],
                description=item["description"],
                unit_price=item["unit_price"],
                currency=Currency(item.get("currency", "EUR")),
                tax=Tax(item.get("tax", "STANDARD_VAT")),
            )
            for item in raw
        }
        logger.debug("Loaded %d articles from %s", len(articles), self._file_path)
        return articles

    def _persist(self, articles: dict[str, Article]) -> None:
        raw = [
            {
                "id": a.id,
                "description": a.description,
                "unit_price": a.unit_price,
                "currency": a.currency.value,
                "tax": a.tax.value,
            }
            for a in articles.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
