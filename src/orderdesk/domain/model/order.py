"""Order aggregate: a customer's ordered list of article items.

The Order owns its items; insertion order is preserved and is the order in
which items are printed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from orderdesk.domain.exceptions import ValidationError
from orderdesk.domain.model.article import Article
from orderdesk.domain.model.customer import Customer

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
EARLIEST_CREATION_DATE = datetime(2020, 1, 1, tzinfo=timezone.utc)
MAX_CREATION_DATE_AHEAD = timedelta(days=1)


@dataclass(frozen=True)
class OrderItem:
    """One line of an order: an article and how many units were ordered."""

    article: Article
    units: int

    def __post_init__(self) -> None:
        if self.article is None:
            raise ValidationError("Order item requires an article")
        if not isinstance(self.units, int) or self.units <= 0:
            raise ValidationError("Units ordered must be positive")


@dataclass
class Order:
    """Aggregate root for customer orders.

    Invariants:
    - the owning customer exists and already has an id
    - every item has a positive unit count
    - ``id`` can be assigned once and never changes afterwards
    """

    customer: Customer
    id: str | None = None
    _items: list[OrderItem] = field(default_factory=list, init=False, repr=False)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if self.customer is None:
            raise ValidationError("Order requires a customer")
        if self.customer.id is None:
            raise ValidationError("Order customer has no id assigned")

    # --- Identity -------------------------------------------------------------

    def assign_id(self, order_id: str) -> Order:
        if not order_id:
            raise ValidationError("Order ID is required")
        if self.id is not None and self.id != order_id:
            raise ValidationError(
                f"Order ID already assigned ({self.id}), cannot change to {order_id}"
            )
        self.id = order_id
        return self

    def set_created_at(self, created_at: datetime) -> Order:
        """Backdate or adjust the creation timestamp.

        Accepted range: 2020-01-01 <= created_at <= now + 1 day.
        Naive datetimes are taken as UTC.
        """
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        upper = datetime.now(timezone.utc) + MAX_CREATION_DATE_AHEAD
        if not EARLIEST_CREATION_DATE <= created_at <= upper:
            raise ValidationError(
                f"Creation date {created_at.isoformat()} outside bounds "
                f"({EARLIEST_CREATION_DATE.date()} <= date <= now + 1 day)"
            )
        self.created_at = created_at
        return self

    # --- Items ----------------------------------------------------------------

    @property
    def items(self) -> tuple[OrderItem, ...]:
        return tuple(self._items)

    @property
    def items_count(self) -> int:
        return len(self._items)

    def add_item(self, article: Article, units: int) -> Order:
        self._items.append(OrderItem(article=article, units=units))
        return self

    def remove_item(self, index: int) -> None:
        if 0 <= index < len(self._items):
            del self._items[index]

    def clear_items(self) -> None:
        self._items.clear()
