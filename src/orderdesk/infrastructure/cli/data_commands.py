"""CLI commands that manage the data store."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from orderdesk.application.seed_data import SeedDataHandler
from orderdesk.domain.exceptions import DomainException
from orderdesk.infrastructure import sample_data
from orderdesk.infrastructure.bootstrap import (
    article_repository,
    customer_repository,
    order_repository,
)

logger = logging.getLogger(__name__)


@click.command("seed")
@click.option("--force", is_flag=True, default=False, help="Write even if data exists.")
@click.pass_obj
def seed(data_dir: Path, force: bool) -> None:
    """Fill the data store with sample customers, articles and orders."""
    handler = SeedDataHandler(
        customer_repo=customer_repository(data_dir),
        article_repo=article_repository(data_dir),
        order_repo=order_repository(data_dir),
    )
    data = sample_data.build()

    try:
        counts = handler.handle(data.customers, data.articles, data.orders, force=force)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    logger.info("Seeded data store at %s", data_dir)
    click.echo(
        "({}) Customer objects written.\n"
        "({}) Article objects written.\n"
        "({}) Order objects written.".format(*counts)
    )
