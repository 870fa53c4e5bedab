import logging
from pathlib import Path

import click

from orderdesk.infrastructure.bootstrap import DEFAULT_DATA_DIR
from orderdesk.infrastructure.cli.data_commands import seed
from orderdesk.infrastructure.cli.report_commands import (
    report_all,
    report_articles,
    report_customers,
    report_orders,
)


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    envvar="ORDERDESK_DATA_DIR",
    show_default=True,
    help="Directory holding the JSON data files.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, verbose: bool) -> None:
    """orderdesk — customer, article and order reports"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = data_dir


@cli.group()
def report() -> None:
    """Print reports as text tables."""


# Register subcommands
cli.add_command(seed)
report.add_command(report_customers)
report.add_command(report_articles)
report.add_command(report_orders)
report.add_command(report_all)
