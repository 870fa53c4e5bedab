"""CLI commands that print reports."""

from __future__ import annotations

from pathlib import Path

import click

from orderdesk.domain.exceptions import DomainException
from orderdesk.infrastructure.bootstrap import show_reports_handler


@click.command("customers")
@click.option("--sort-by-name", is_flag=True, default=False, help="Sort by last name.")
@click.pass_obj
def report_customers(data_dir: Path, sort_by_name: bool) -> None:
    """Print all customers."""
    handler = show_reports_handler(data_dir)

    try:
        text = handler.customers(sort_by_name=sort_by_name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Customers:")
    click.echo(text, nl=False)


@click.command("articles")
@click.option("--top", type=int, default=None, help="Only the N most expensive articles.")
@click.pass_obj
def report_articles(data_dir: Path, top: int | None) -> None:
    """Print the article catalog."""
    handler = show_reports_handler(data_dir)

    try:
        text = handler.articles(top=top)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Articles:")
    click.echo(text, nl=False)


@click.command("orders")
@click.pass_obj
def report_orders(data_dir: Path) -> None:
    """Print all orders with VAT and totals."""
    handler = show_reports_handler(data_dir)

    try:
        text = handler.orders()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Orders:")
    click.echo(text, nl=False)


@click.command("all")
@click.pass_obj
def report_all(data_dir: Path) -> None:
    """Print customers, articles and orders."""
    handler = show_reports_handler(data_dir)

    try:
        blocks = [
            ("Customers:", handler.customers()),
            ("Articles:", handler.articles()),
            ("Orders:", handler.orders()),
        ]
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for title, text in blocks:
        click.echo(title)
        click.echo(text)
