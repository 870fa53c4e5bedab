"""Domain service: order valuation.

Computes gross values and the VAT included in them.  All amounts are
integers in the minor currency unit (cents).

VAT is treated as *included* in the gross price (EU-invoice convention):

    net = gross / (1 + p/100)
    vat = gross - net            (rounded half away from zero)

The VAT of an order is the sum of the rounded VAT of each item, not the
VAT of the order total.  The two can differ by one cent.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from orderdesk.domain.exceptions import InvalidArgumentError
from orderdesk.domain.model.order import Order, OrderItem
from orderdesk.domain.model.value_objects import Tax


class ValueCalculator:

    # --- Values ---------------------------------------------------------------

    def item_value(self, item: OrderItem) -> int:
        """unit price x units ordered."""
        if item is None:
            raise InvalidArgumentError("argument item is None")
        return item.article.unit_price * item.units

    def order_value(self, order: Order) -> int:
        if order is None:
            raise InvalidArgumentError("argument order is None")
        return sum(self.item_value(item) for item in order.items)

    # --- VAT ------------------------------------------------------------------

    def item_vat(self, item: OrderItem) -> int:
        """VAT included in the value of a single order item."""
        if item is None:
            raise InvalidArgumentError("argument item is None")
        return self.gross_to_vat(self.item_value(item), item.article.tax)

    def order_vat(self, order: Order) -> int:
        """Sum of the per-item rounded VAT values."""
        if order is None:
            raise InvalidArgumentError("argument order is None")
        return sum(self.item_vat(item) for item in order.items)

    def gross_to_vat(self, gross_value: int, tax: Tax) -> int:
        """VAT included in *gross_value*.

        A negative gross value yields zero VAT rather than an error.
        """
        percent = self.tax_percent(tax)
        if gross_value < 0:
            return 0
        net_value = gross_value / (1.0 + percent / 100.0)
        return _round_half_away(gross_value - net_value)

    # --- Rates ----------------------------------------------------------------

    @staticmethod
    def tax_percent(tax: Tax) -> int:
        """Percentage for a tax variant: 0, 19 or 7."""
        if tax is None:
            raise InvalidArgumentError("argument tax is None")
        if tax is Tax.TAX_FREE:
            return 0
        if tax is Tax.STANDARD_VAT:
            return 19
        if tax is Tax.REDUCED_VAT:
            return 7
        raise InvalidArgumentError(f"unknown tax rate: {tax!r}")


def _round_half_away(value: float) -> int:
    return int(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
