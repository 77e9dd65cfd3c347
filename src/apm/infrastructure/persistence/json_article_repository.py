"""JSON-file-backed implementation of ArticleRepository.

The whole catalog lives in one file as a list of article documents with
their discounts embedded.  Decimals are stored as strings and dates as
ISO ``YYYY-MM-DD`` so nothing is lost to float conversion.
"""

from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path

from apm.domain.model.article import Article
from apm.domain.model.discount import Discount
from apm.domain.model.pricing import to_date, to_decimal
from apm.domain.repository.article_repository import ArticleRepository

logger = logging.getLogger(__name__)


class JsonArticleRepository(ArticleRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ArticleRepository interface ------------------------------------------

    def save(self, article: Article) -> Article:
        records = self._load_raw()

        if article.id is None:
            article.id = self._next_id(records)
        article.replace_discounts(self._with_discount_ids(article.discounts))

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(records):
            if raw["id"] == article.id:
                records[i] = self._to_raw(article)
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(article))

        self._persist_raw(records)
        logger.info("Article saved with ID %s", article.id)
        return article

    def get_by_id(self, article_id: int) -> Article | None:
        for raw in self._load_raw():
            if raw["id"] == article_id:
                return self._to_domain(raw)
        logger.debug("Article not found with ID %s", article_id)
        return None

    def list_all(self) -> list[Article]:
        articles = [self._to_domain(raw) for raw in self._load_raw()]
        logger.debug("Loaded %d articles", len(articles))
        return articles

    def delete_by_id(self, article_id: int) -> bool:
        records = self._load_raw()
        remaining = [raw for raw in records if raw["id"] != article_id]
        if len(remaining) == len(records):
            logger.debug("Article not found for deletion with ID %s", article_id)
            return False
        self._persist_raw(remaining)
        logger.info("Article deleted with ID %s", article_id)
        return True

    def exists_by_id(self, article_id: int) -> bool:
        return any(raw["id"] == article_id for raw in self._load_raw())

    # --- ID assignment --------------------------------------------------------

    @staticmethod
    def _next_id(records: list[dict]) -> int:
        if not records:
            return 1
        return max(raw["id"] for raw in records) + 1

    @staticmethod
    def _with_discount_ids(discounts: list[Discount]) -> list[Discount]:
        """Give every unsaved discount the next free per-article ID."""
        next_id = max((d.id for d in discounts if d.id is not None), default=0) + 1
        result: list[Discount] = []
        for discount in discounts:
            if discount.id is None:
                discount = discount.with_id(next_id)
                next_id += 1
            result.append(discount)
        return result

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(article: Article) -> dict:
        return {
            "id": article.id,
            "name": article.name,
            "slogan": article.slogan,
            "net_price": _str_or_none(article.net_price),
            "sales_price": _str_or_none(article.sales_price),
            "vat_ratio": _str_or_none(article.vat_ratio),
            "discounts": [
                {
                    "id": d.id,
                    "description": d.description,
                    "discount_percentage": _str_or_none(d.discount_percentage),
                    "start_date": _iso_or_none(d.start_date),
                    "end_date": _iso_or_none(d.end_date),
                }
                for d in article.discounts
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Article:
        discounts = [
            Discount(
                id=d.get("id"),
                description=d.get("description"),
                discount_percentage=to_decimal(d.get("discount_percentage")),
                start_date=to_date(d.get("start_date")),
                end_date=to_date(d.get("end_date")),
            )
            for d in raw.get("discounts") or []
        ]
        return Article(
            id=raw["id"],
            name=raw.get("name"),
            slogan=raw.get("slogan"),
            net_price=to_decimal(raw.get("net_price")),
            sales_price=to_decimal(raw.get("sales_price")),
            vat_ratio=to_decimal(raw.get("vat_ratio")),
            discounts=discounts,
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")


def _str_or_none(value: object) -> str | None:
    return None if value is None else str(value)


def _iso_or_none(value: date | None) -> str | None:
    return None if value is None else value.isoformat()
