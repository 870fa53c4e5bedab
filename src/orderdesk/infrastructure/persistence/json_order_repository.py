"""JSON-file-backed implementation of OrderRepository.

Orders are stored with references (customer id, article ids) rather than
copies; the references are resolved through the customer and article
repositories on load.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

from orderdesk.domain.exceptions import EntityNotFoundError
from orderdesk.domain.model.order import Order
from orderdesk.domain.repository.article_repository import ArticleRepository
from orderdesk.domain.repository.customer_repository import CustomerRepository
from orderdesk.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class JsonOrderRepository(OrderRepository):

    def __init__(
        self,
        file_path: Path,
        customer_repo: CustomerRepository,
        article_repo: ArticleRepository,
    ) -> None:
        self._file_path = file_path
        self._customer_repo = customer_repo
        self._article_repo = article_repo
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: str) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, order: Order) -> None:
        orders = self._load_raw()

        if order.id is None:
            order.assign_id(self._next_id(orders))

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                replaced = True
                break
        if not replaced:
            orders.append(self._to_raw(order))

        self._persist_raw(orders)
        logger.debug("Saved order %s (%d items)", order.id, order.items_count)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _next_id(orders: list[dict]) -> str:
        numeric = [int(o["id"]) for o in orders if o["id"].isdigit()]
        return str(max(numeric) + 1) if numeric else "1"

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer_id": order.customer.id,
            "created_at": order.created_at.isoformat(),
            "items": [
                {"article_id": item.article.id, "units": item.units}
                for item in order.items
            ],
        }

    def _to_domain(self, raw: dict) -> Order:
        customer = self._customer_repo.get_by_id(raw["customer_id"])
        if customer is None:
            raise EntityNotFoundError(
                f"Order {raw['id']} references unknown customer {raw['customer_id']}"
            )
        order = Order(
            customer=customer,
            id=raw["id"],
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
        for item in raw["items"]:
            article = self._article_repo.get_by_id(item["article_id"])
            if article is None:
                raise EntityNotFoundError(
                    f"Order {raw['id']} references unknown article '{item['article_id']}'"
                )
            order.add_item(article, item["units"])
        return order

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
