"""Tests for the built-in sample data set."""

from orderdesk.domain.lookup import find
from orderdesk.domain.service.value_calculator import ValueCalculator
from orderdesk.infrastructure import sample_data


class TestSampleData:

    def test_counts(self):
        data = sample_data.build()
        assert len(data.customers) == 6
        assert len(data.articles) == 9
        assert len(data.orders) == 7

    def test_ids_are_unique(self):
        data = sample_data.build()
        assert len({c.id for c in data.customers}) == len(data.customers)
        assert len({a.id for a in data.articles}) == len(data.articles)
        assert len({o.id for o in data.orders}) == len(data.orders)

    def test_every_order_customer_is_listed(self):
        data = sample_data.build()
        ids = {c.id for c in data.customers}
        assert all(o.customer.id in ids for o in data.orders)

    def test_erics_first_order(self):
        data = sample_data.build()
        order = find(data.orders, lambda o: o.id == "8592356245").get()
        calc = ValueCalculator()
        assert calc.order_value(order) == 12979
        assert calc.order_vat(order) == 1318

    def test_build_returns_fresh_objects(self):
        assert sample_data.build().customers[0] is not sample_data.build().customers[0]
