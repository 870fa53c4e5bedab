"""Article aggregate.

Articles live independently of orders. An order item references the article
itself, so a price update is visible to every order that contains it.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderdesk.domain.exceptions import ValidationError
from orderdesk.domain.model.value_objects import Currency, Tax


@dataclass
class Article:
    """An article in the catalog.

    Invariants:
    - ``description`` is never empty
    - ``unit_price`` is a non-negative integer amount of cents
    - ``id`` can be assigned once and never changes afterwards
    """

    description: str
    unit_price: int
    id: str | None = None
    currency: Currency = Currency.EUR
    tax: Tax = Tax.STANDARD_VAT

    def __post_init__(self) -> None:
        if not self.description:
            raise ValidationError("Article description is required")
        if not isinstance(self.unit_price, int) or isinstance(self.unit_price, bool):
            raise ValidationError(
                f"Unit price must be an integer, got {type(self.unit_price).__name__}"
            )
        if self.unit_price < 0:
            raise ValidationError(
                f"Unit price cannot be negative, got {self.unit_price}"
            )
        if self.currency is None:
            raise ValidationError("Article currency is required")
        if self.tax is None:
            raise ValidationError("Article tax rate is required")

    def assign_id(self, article_id: str) -> Article:
        if not article_id:
            raise ValidationError("Article ID is required")
        if self.id is not None and self.id != article_id:
            raise ValidationError(
                f"Article ID already assigned ({self.id}), cannot change to {article_id}"
            )
        self.id = article_id
        return self

    def update_price(self, new_price: int) -> None:
        """Change the unit price (in cents)."""
        if new_price < 0:
            raise ValidationError("Unit price cannot be negative")
        self.unit_price = new_price
