"""CLI command for ringing up and settling a sale."""

from __future__ import annotations

import click

from shelfpos.application.dto import CartDTO, ItemSpec, ReceiptDTO
from shelfpos.application.place_order import OrderSession, PlaceOrderHandler
from shelfpos.domain.exceptions import DomainException, InsufficientTender, ValidationError
from shelfpos.domain.model.value_objects import Money
from shelfpos.infrastructure.bootstrap import catalog_repository, ledger_repository
from shelfpos.infrastructure.config import Settings
from shelfpos.infrastructure.rendering.pdf import generate_receipt_pdf
from shelfpos.infrastructure.rendering.text_receipt import render_receipt

_CANCEL = "cancel"


def _parse_items(raw: str) -> list[ItemSpec]:
    """Parse 'P1:3,Rice 1kg:2' into ItemSpec list."""
    specs: list[ItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ItemIdOrName:Quantity'."
            )
        query, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for item '{query}'."
            )
        specs.append(ItemSpec(query=query.strip(), quantity=qty))
    return specs


def _display_cart(dto: CartDTO) -> None:
    click.echo("Order Summary:")
    click.echo(f"  {'Item':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for line in dto.lines:
        click.echo(
            f"  {line.name:<20} {line.quantity:>5} {line.unit_price:>10} {line.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Total Price:':<27} {dto.subtotal:>20}")


def _settle(session: OrderSession, tender: str | None) -> ReceiptDTO | None:
    """Take cash until it covers the total; ``None`` means cancelled."""
    try:
        if tender is not None:
            return session.checkout(tender)

        while True:
            cash = click.prompt(
                "Enter cash amount (or type 'cancel' to abort)", type=str
            ).strip().lower()
            if cash == _CANCEL:
                session.cancel()
                return None
            try:
                Money.of(cash)
            except ValidationError:
                click.echo("Invalid amount. Please try again.")
                continue
            try:
                return session.checkout(cash)
            except InsufficientTender as exc:
                click.echo(f"{exc}. Please try again.")
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("sale")
@click.option("--items", required=True, help="Items as 'IdOrName:Qty,IdOrName:Qty'.")
@click.option("--tender", default=None, help="Cash received; asked for when omitted.")
@click.option(
    "--receipt",
    type=click.Choice(["text", "pdf", "none"]),
    default="text",
    show_default=True,
    help="Receipt to produce after checkout.",
)
@click.pass_obj
def sale(config: Settings, items: str, tender: str | None, receipt: str) -> None:
    """Ring up items and check out."""
    specs = _parse_items(items)

    handler = PlaceOrderHandler(
        catalog_repo=catalog_repository(config),
        ledger_repo=ledger_repository(config),
    )

    try:
        session = handler.open_session()
        session.add_all(specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(session.summary())

    result = _settle(session, tender)
    if result is None:
        click.echo("Checkout canceled.")
        return

    click.echo(f"Change: {result.change} {result.currency}")

    if receipt == "text":
        click.echo(render_receipt(result, config.store_name))
    elif receipt == "pdf":
        try:
            path = generate_receipt_pdf(result, config.store_name, config.receipts_dir)
        except DomainException as exc:
            raise click.ClickException(f"Sale recorded, but the receipt failed: {exc}")
        click.echo(f"Receipt saved: {path}")
    else:
        click.echo("No receipt will be printed.")

    click.echo("Checkout complete. Inventory and sales report have been updated.")
