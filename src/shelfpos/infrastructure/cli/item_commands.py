"""CLI commands for catalog items.

Browsing is open to staff; add/update/delete ask for the manager
password first.
"""

from __future__ import annotations

import functools

import click

from shelfpos.application.add_item import AddItemHandler
from shelfpos.application.delete_item import DeleteItemHandler
from shelfpos.application.show_inventory import ShowInventoryHandler
from shelfpos.application.update_item import UpdateItemHandler
from shelfpos.domain.exceptions import DomainException
from shelfpos.infrastructure.bootstrap import catalog_repository
from shelfpos.infrastructure.config import Settings
from shelfpos.infrastructure.rendering.text_receipt import render_item_table


def manager_only(command):
    """Require ``--password`` to match the configured manager password."""

    @click.option(
        "--password",
        prompt="Enter Manager Password",
        hide_input=True,
        help="Manager password.",
    )
    @click.pass_obj
    @functools.wraps(command)
    def wrapper(config: Settings, password: str, **kwargs):
        if password != config.manager_password:
            raise click.ClickException("Authentication failed.")
        return command(config, **kwargs)

    return wrapper


@click.command("list")
@click.option("--category", default=None, help="Only items in this category.")
@click.pass_obj
def item_list(config: Settings, category: str | None) -> None:
    """Show the inventory, optionally for one category."""
    handler = ShowInventoryHandler(catalog_repo=catalog_repository(config))

    try:
        items = handler.handle(category=category)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not items:
        click.echo("No products found in inventory.")
        return
    click.echo(render_item_table(items))


@click.command("search")
@click.argument("text")
@click.pass_obj
def item_search(config: Settings, text: str) -> None:
    """Find items by exact ID or by part of the name."""
    handler = ShowInventoryHandler(catalog_repo=catalog_repository(config))
    items = handler.search(text)

    if not items:
        click.echo("No matching products found.")
        return
    click.echo(render_item_table(items))


@click.command("categories")
@click.pass_obj
def item_categories(config: Settings) -> None:
    """List the categories in the catalog."""
    handler = ShowInventoryHandler(catalog_repo=catalog_repository(config))
    categories = handler.categories()

    if not categories:
        click.echo("No categories found.")
        return
    for category in categories:
        click.echo(category)


@click.command("add")
@click.option("--id", "item_id", required=True, help="Unique item ID.")
@click.option("--name", required=True, help="Item name.")
@click.option("--category", required=True, help="Category label.")
@click.option("--quantity", required=True, type=click.IntRange(min=0), help="Stock on hand.")
@click.option("--price", required=True, help="Unit price (e.g. 55.00).")
@manager_only
def item_add(
    config: Settings, item_id: str, name: str, category: str, quantity: int, price: str
) -> None:
    """Add a new item to the catalog."""
    handler = AddItemHandler(catalog_repo=catalog_repository(config))

    try:
        item = handler.handle(item_id, name, category, quantity, price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item {item.id} '{item.name}' added at {item.price}")


@click.command("update")
@click.option("--id", "item_id", required=True, help="Item ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--category", default=None, help="New category.")
@click.option("--quantity", default=None, type=click.IntRange(min=0), help="New stock on hand.")
@click.option("--price", default=None, help="New unit price.")
@manager_only
def item_update(
    config: Settings,
    item_id: str,
    name: str | None,
    category: str | None,
    quantity: int | None,
    price: str | None,
) -> None:
    """Update an item; options left out keep their current value."""
    handler = UpdateItemHandler(catalog_repo=catalog_repository(config))

    try:
        item = handler.handle(item_id, name=name, category=category, quantity=quantity, price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item {item.id} updated: {item.name}, {item.category}, {item.quantity} @ {item.price}")


@click.command("delete")
@click.option("--id", "item_id", required=True, help="Item ID.")
@manager_only
def item_delete(config: Settings, item_id: str) -> None:
    """Remove an item from the catalog."""
    handler = DeleteItemHandler(catalog_repo=catalog_repository(config))

    try:
        item = handler.handle(item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item {item.id} '{item.name}' deleted.")
