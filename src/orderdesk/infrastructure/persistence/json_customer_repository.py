"""JSON-file-backed implementation of CustomerRepository."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from orderdesk.domain.model.customer import Customer
from orderdesk.domain.repository.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- CustomerRepository interface -----------------------------------------

    def get_by_id(self, customer_id: int) -> Customer | None:
        return self._load().get(customer_id)

    def list_all(self) -> list[Customer]:
        return list(self._load().values())

    def save(self, customer: Customer) -> None:
        customers = self._load()
        customers[customer.id] = customer
        self._persist(customers)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[int, Customer]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        customers: dict[int, Customer] = {}
        for item in raw:
            customer = Customer(id=item["id"]).set_name_parts(
                item["first_name"], item["last_name"]
            )
            for contact in item.get("contacts", []):
                customer.add_contact(contact)
            customers[customer.id] = customer
        logger.debug("Loaded %d customers from %s", len(customers), self._file_path)
        return customers

    def _persist(self, customers: dict[int, Customer]) -> None:
        raw = [
            {
                "id": c.id,
                "first_name": c.first_name,
                "last_name": c.last_name,
                "contacts": list(c.contacts),
            }
            for c in customers.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
