"""CLI commands for stock adjustments."""

from __future__ import annotations

import click

from bakery.application.dto import StockPayload
from bakery.domain.exceptions import DomainException
from bakery.infrastructure.bootstrap import product_store


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def stock_show(obj: dict, product_id: int) -> None:
    """Print the quantity on hand for a product."""
    store = product_store(obj.get("data_dir"))

    try:
        quantity = store.get_stock(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(quantity)


@click.command("add")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--amount", required=True, type=int, help="Units to add.")
@click.pass_obj
def stock_add(obj: dict, product_id: int, amount: int) -> None:
    """Add units to a product's stock."""
    store = product_store(obj.get("data_dir"))

    try:
        product = store.add_quantity(product_id, StockPayload(amount=amount))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} stock is now {product.quantity}")


@click.command("offload")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--amount", required=True, type=int, help="Units to take out.")
@click.pass_obj
def stock_offload(obj: dict, product_id: int, amount: int) -> None:
    """Take units out of a product's stock."""
    store = product_store(obj.get("data_dir"))

    try:
        product = store.offload_quantity(product_id, StockPayload(amount=amount))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} stock is now {product.quantity}")
