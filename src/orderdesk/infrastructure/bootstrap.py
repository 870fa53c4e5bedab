"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from orderdesk.application.name_contact_formatter import NameContactFormatter
from orderdesk.application.price_formatter import PriceFormatter
from orderdesk.application.report_builder import ReportBuilder
from orderdesk.application.show_reports import ShowReportsHandler
from orderdesk.domain.service.value_calculator import ValueCalculator
from orderdesk.infrastructure.persistence.json_article_repository import (
    JsonArticleRepository,
)
from orderdesk.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from orderdesk.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def customer_repository(data_dir: Path = DEFAULT_DATA_DIR) -> JsonCustomerRepository:
    return JsonCustomerRepository(data_dir / "customers.json")


def article_repository(data_dir: Path = DEFAULT_DATA_DIR) -> JsonArticleRepository:
    return JsonArticleRepository(data_dir / "articles.json")


def order_repository(data_dir: Path = DEFAULT_DATA_DIR) -> JsonOrderRepository:
    return JsonOrderRepository(
        data_dir / "orders.json",
        customer_repo=customer_repository(data_dir),
        article_repo=article_repository(data_dir),
    )


def report_builder() -> ReportBuilder:
    return ReportBuilder(
        calculator=ValueCalculator(),
        price_formatter=PriceFormatter(),
        name_formatter=NameContactFormatter(),
    )


def show_reports_handler(data_dir: Path = DEFAULT_DATA_DIR) -> ShowReportsHandler:
    return ShowReportsHandler(
        customer_repo=customer_repository(data_dir),
        article_repo=article_repository(data_dir),
        order_repo=order_repository(data_dir),
        builder=report_builder(),
    )
