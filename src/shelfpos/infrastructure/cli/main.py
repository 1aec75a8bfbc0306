import click

from shelfpos.infrastructure.bootstrap import prepare_directories, settings
from shelfpos.infrastructure.cli.item_commands import (
    item_add,
    item_categories,
    item_delete,
    item_list,
    item_search,
    item_update,
)
from shelfpos.infrastructure.cli.report_commands import report_pdf, report_periods, report_show
from shelfpos.infrastructure.cli.sale_commands import sale
from shelfpos.infrastructure.logging_config import configure_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """shelfpos: store point of sale and inventory"""
    config = settings()
    try:
        prepare_directories(config)
        configure_logging(verbose=verbose, log_file=config.log_file)
    except OSError as exc:
        raise click.ClickException(f"Error setting up environment: {exc}")
    ctx.obj = config


@cli.group()
def item() -> None:
    """Browse and manage catalog items."""


@cli.group()
def report() -> None:
    """Monthly sales reports."""


# Register subcommands
item.add_command(item_add)
item.add_command(item_categories)
item.add_command(item_delete)
item.add_command(item_list)
item.add_command(item_search)
item.add_command(item_update)
report.add_command(report_pdf)
report.add_command(report_periods)
report.add_command(report_show)
cli.add_command(sale)
