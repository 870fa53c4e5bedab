"""Tests for the ShowReports use case.

Uses in-memory fake repositories, no file I/O.
"""

import pytest

from orderdesk.application.name_contact_formatter import NameContactFormatter
from orderdesk.application.price_formatter import PriceFormatter
from orderdesk.application.report_builder import ReportBuilder
from orderdesk.application.show_reports import ShowReportsHandler
from orderdesk.domain.exceptions import ValidationError
from orderdesk.domain.model.article import Article
from orderdesk.domain.model.customer import Customer
from orderdesk.domain.model.order import Order
from orderdesk.domain.service.value_calculator import ValueCalculator
from tests.fakes import FakeArticleRepository, FakeCustomerRepository, FakeOrderRepository


def _setup() -> ShowReportsHandler:
    eric = Customer("Eric Meyer", id=892474).add_contact("eric98@yahoo.com")
    anne = Customer("Bayer, Anne", id=643270).add_contact("(030) 3481-23352")
    tim = Customer("Tim Schulz-Mueller", id=286516).add_contact("tim2346@gmx.de")

    cup = Article("Tasse", 299, id="SKU-458362")
    pot = Article("Kanne", 1999, id="SKU-518957")
    helmet = Article("Fahrradhelm", 16900, id="SKU-663942")
    pan = Article("Pfanne", 4999, id="SKU-300926")

    order = Order(eric, id="5234968294").add_item(pot, 1)

    return ShowReportsHandler(
        customer_repo=FakeCustomerRepository([eric, anne, tim]),
        article_repo=FakeArticleRepository([cup, pot, helmet, pan]),
        order_repo=FakeOrderRepository([order]),
        builder=ReportBuilder(ValueCalculator(), PriceFormatter(), NameContactFormatter()),
    )


class TestCustomers:

    def test_insertion_order_by_default(self):
        text = _setup().customers()
        assert text.index("Meyer, Eric") < text.index("Bayer, Anne") < text.index("Schulz-Mueller, Tim")

    def test_sorted_by_last_name(self):
        text = _setup().customers(sort_by_name=True)
        assert text.index("Bayer, Anne") < text.index("Meyer, Eric") < text.index("Schulz-Mueller, Tim")


class TestArticles:

    def test_all_articles(self):
        text = _setup().articles()
        for name in ("Tasse", "Kanne", "Fahrradhelm", "Pfanne"):
            assert name in text

    def test_top_most_expensive(self):
        text = _setup().articles(top=2)
        assert text.index("Fahrradhelm") < text.index("Pfanne")
        assert "Tasse" not in text
        assert "Kanne" not in text

    def test_top_larger_than_catalog(self):
        text = _setup().articles(top=10)
        assert len(text.splitlines()) == 4 + 4

    def test_non_positive_top_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            _setup().articles(top=0)


class TestOrders:

    def test_orders_report(self):
        text = _setup().orders()
        assert "Eric's orders" in text
        assert "19.99 EUR" in text
        assert "Total:" in text
