"""Report builder: renders customers, articles and orders as text tables.

Values come from the ValueCalculator, strings from the price and
name/contact formatters, layout from the TableFormatter.  Every report is
built from scratch on each call, so rendering the same input twice yields
the same text.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from orderdesk.application.name_contact_formatter import NameContactFormatter
from orderdesk.application.price_formatter import PriceFormatter
from orderdesk.application.table_formatter import TableFormatter
from orderdesk.domain.exceptions import InvalidArgumentError
from orderdesk.domain.model.article import Article
from orderdesk.domain.model.customer import Customer
from orderdesk.domain.model.order import Order
from orderdesk.domain.model.value_objects import Tax
from orderdesk.domain.service.value_calculator import ValueCalculator

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Column layouts
# ---------------------------------------------------------------------------
CUSTOMER_COLUMNS = ("| %8s ", "| %-32s", "| %-36s |")
CUSTOMER_HEADER = ("Cust.-ID", "Name", "Contact")

ARTICLE_COLUMNS = ("|%-10s", "| %-32s", "| %10s", "%4s", "|  %-18s  |")
ARTICLE_HEADER = ("Article-ID", "Description", "Price", "CUR", "VAT rate")

ORDER_COLUMNS = ("|%-10s|", " %-25s", " %8s", "%1s", " %12s", "| %8s", " %12s|")
ORDER_HEADER = ("Order-ID", "Orders", "VAT", "*", "Price", "VAT", "Total")

REDUCED_VAT_MARKER = "*"
LAST_ITEM = -1


@dataclass
class GrandTotal:
    """Running totals threaded through the orders report."""

    value: int = 0
    vat: int = 0


class ReportBuilder:

    def __init__(
        self,
        calculator: ValueCalculator,
        price_formatter: PriceFormatter,
        name_formatter: NameContactFormatter,
    ) -> None:
        self._calculator = calculator
        self._prices = price_formatter
        self._names = name_formatter

    # --- Customers ------------------------------------------------------------

    def customers_report(self, customers: Iterable[Customer]) -> str:
        tf = TableFormatter(*CUSTOMER_COLUMNS).line().row(*CUSTOMER_HEADER).line()
        count = 0
        for customer in customers:
            tf.row(
                str(customer.id),
                self._names.format_name(customer, 0),
                self._names.format_contacts(customer, 1),
            )
            count += 1
        tf.line()
        logger.debug("Rendered customers report with %d rows", count)
        return tf.get()

    # --- Articles -------------------------------------------------------------

    def articles_report(self, articles: Iterable[Article]) -> str:
        tf = TableFormatter(*ARTICLE_COLUMNS).line().row(*ARTICLE_HEADER).line()
        count = 0
        for article in articles:
            tf.row(
                article.id,
                article.description,
                self._prices.format_price(article.unit_price, 0),
                article.currency.value,
                self._tax_label(article.tax),
            )
            count += 1
        tf.line()
        logger.debug("Rendered articles report with %d rows", count)
        return tf.get()

    def _tax_label(self, tax: Tax) -> str:
        """e.g. "19.0% STANDARD_VAT", " 7.0% REDUCED_VAT"."""
        rate = f"{float(self._calculator.tax_percent(tax)):.1f}"
        return f"{rate:>4}% {tax.value}"

    # --- Orders ---------------------------------------------------------------

    def orders_report(self, orders: Iterable[Order]) -> str:
        totals = GrandTotal()
        tf = TableFormatter(*ORDER_COLUMNS).line().row(*ORDER_HEADER).line()

        count = 0
        for order in orders:
            self.print_order(order, tf, totals).line()
            count += 1

        tf.row(
            None, None, None, None,
            "Total:",
            self._prices.format_price(totals.vat),
            self._prices.format_price(totals.value, 1),
        )
        tf.line(None, None, None, None, None, "=", "=")
        logger.debug(
            "Rendered orders report: %d orders, value=%d, vat=%d",
            count, totals.value, totals.vat,
        )
        return tf.get()

    def print_order(self, order: Order, tf: TableFormatter, totals: GrandTotal) -> TableFormatter:
        """Render one order into *tf* and add its value and VAT to *totals*.

        Only the row of the last item carries the order's VAT and total;
        earlier item rows leave those two columns empty.
        """
        if order is None or tf is None:
            raise InvalidArgumentError("argument order or table formatter is None")

        tf.row(order.id, f"{order.customer.first_name}'s orders", "", "", "", "", "")

        remaining = order.items_count - 1
        for item in order.items:
            remaining -= 1
            article = item.article
            marker = REDUCED_VAT_MARKER if article.tax is Tax.REDUCED_VAT else " "

            if remaining == LAST_ITEM:
                order_vat = self._prices.format_price(self._calculator.order_vat(order), 0)
                order_total = self._prices.format_price(self._calculator.order_value(order), 1)
            else:
                order_vat = ""
                order_total = ""

            description = f"- {item.units} {article.description}"
            if item.units > 1:
                description += f", {item.units}x {self._prices.format_price(article.unit_price, 0)}"

            tf.row(
                "",
                description,
                self._prices.format_price(self._calculator.item_vat(item), 0) + marker,
                "",
                self._prices.format_price(self._calculator.item_value(item), 1),
                order_vat,
                order_total,
            )

        totals.vat += self._calculator.order_vat(order)
        totals.value += self._calculator.order_value(order)
        return tf
