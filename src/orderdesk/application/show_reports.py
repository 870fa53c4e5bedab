"""Application service: Show Reports use case (query).

Loads customers, articles and orders from their repositories, applies the
requested ordering or limit, and hands them to the ReportBuilder.
"""

from __future__ import annotations

from orderdesk.application.report_builder import ReportBuilder
from orderdesk.domain.exceptions import ValidationError
from orderdesk.domain.repository.article_repository import ArticleRepository
from orderdesk.domain.repository.customer_repository import CustomerRepository
from orderdesk.domain.repository.order_repository import OrderRepository


class ShowReportsHandler:

    def __init__(
        self,
        customer_repo: CustomerRepository,
        article_repo: ArticleRepository,
        order_repo: OrderRepository,
        builder: ReportBuilder,
    ) -> None:
        self._customer_repo = customer_repo
        self._article_repo = article_repo
        self._order_repo = order_repo
        self._builder = builder

    def customers(self, sort_by_name: bool = False) -> str:
        """Customers table, optionally sorted alphabetically by last name."""
        customers = self._customer_repo.list_all()
        if sort_by_name:
            customers = sorted(customers, key=lambda c: (c.last_name, c.first_name))
        return self._builder.customers_report(customers)

    def articles(self, top: int | None = None) -> str:
        """Articles table; with *top*, only the most expensive *top* articles."""
        articles = self._article_repo.list_all()
        if top is not None:
            if top <= 0:
                raise ValidationError("Number of top articles must be positive")
            articles = sorted(articles, key=lambda a: a.unit_price, reverse=True)[:top]
        return self._builder.articles_report(articles)

    def orders(self) -> str:
        return self._builder.orders_report(self._order_repo.list_all())
