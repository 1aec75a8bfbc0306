"""CLI commands for the monthly sales ledger."""

from __future__ import annotations

from datetime import datetime

import click

from shelfpos.application.show_sales_report import ShowSalesReportHandler
from shelfpos.domain.exceptions import DomainException
from shelfpos.domain.model.transaction import period_key_for
from shelfpos.infrastructure.bootstrap import ledger_repository
from shelfpos.infrastructure.config import Settings
from shelfpos.infrastructure.rendering.pdf import generate_sales_report_pdf

_PERIOD_HELP = "Reporting month as YYYY-MM (default: this month)."


@click.command("show")
@click.option("--period", default=None, help=_PERIOD_HELP)
@click.pass_obj
def report_show(config: Settings, period: str | None) -> None:
    """Show cumulative sales for a month."""
    handler = ShowSalesReportHandler(ledger_repo=ledger_repository(config))
    period = period or period_key_for(datetime.now())

    try:
        dto = handler.handle(period)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Monthly Sales Report {dto.period}")
    if not dto.lines:
        click.echo("No sales recorded.")
        return
    click.echo(f"  {'Item':<20} {'Qty':>6} {'Revenue':>12}")
    click.echo(f"  {'-'*40}")
    for line in dto.lines:
        click.echo(f"  {line.name:<20} {line.quantity:>6} {line.revenue:>12}")
    click.echo(f"  {'-'*40}")
    click.echo(f"  {'Total':<20} {dto.total_quantity:>6} {dto.total_revenue:>12} {dto.currency}")


@click.command("pdf")
@click.option("--period", default=None, help=_PERIOD_HELP)
@click.pass_obj
def report_pdf(config: Settings, period: str | None) -> None:
    """Write a month's sales report as PDF."""
    handler = ShowSalesReportHandler(ledger_repo=ledger_repository(config))
    period = period or period_key_for(datetime.now())

    try:
        dto = handler.handle(period)
        path = generate_sales_report_pdf(dto, config.store_name, config.reports_dir)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Sales report saved: {path}")


@click.command("periods")
@click.pass_obj
def report_periods(config: Settings) -> None:
    """List the months that have recorded sales."""
    handler = ShowSalesReportHandler(ledger_repo=ledger_repository(config))
    periods = handler.periods()

    if not periods:
        click.echo("No sales recorded yet.")
        return
    for period in periods:
        click.echo(period)
