"""Application service: Seed Data use case.

Writes a set of customers, articles and orders into the repositories.
Customers and articles are saved first so that the order repository can
resolve its references.
"""

from __future__ import annotations

from orderdesk.domain.exceptions import ValidationError
from orderdesk.domain.model.article import Article
from orderdesk.domain.model.customer import Customer
from orderdesk.domain.model.order import Order
from orderdesk.domain.repository.article_repository import ArticleRepository
from orderdesk.domain.repository.customer_repository import CustomerRepository
from orderdesk.domain.repository.order_repository import OrderRepository


class SeedDataHandler:

    def __init__(
        self,
        customer_repo: CustomerRepository,
        article_repo: ArticleRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._customer_repo = customer_repo
        self._article_repo = article_repo
        self._order_repo = order_repo

    def handle(
        self,
        customers: list[Customer],
        articles: list[Article],
        orders: list[Order],
        force: bool = False,
    ) -> tuple[int, int, int]:
        """Save everything; refuse to touch a non-empty store unless *force*.

        Returns the number of (customers, articles, orders) written.
        """
        if not force and (
            self._customer_repo.list_all()
            or self._article_repo.list_all()
            or self._order_repo.list_all()
        ):
            raise ValidationError("Data store is not empty (use force to overwrite)")

        for customer in customers:
            self._customer_repo.save(customer)
        for article in articles:
            self._article_repo.save(article)
        for order in orders:
            self._order_repo.save(order)

        return len(customers), len(articles), len(orders)
