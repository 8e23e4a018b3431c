"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from bakery.application.dto import ProductPayload
from bakery.domain.exceptions import DomainException
from bakery.infrastructure.bootstrap import product_store
from bakery.infrastructure.cli.formatting import (
    CATEGORY_CHOICE,
    echo_product,
    echo_product_table,
)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.option("--category", required=True, type=CATEGORY_CHOICE, help="Product category.")
@click.pass_obj
def product_add(obj: dict, name: str, quantity: int, category: str) -> None:
    """Add a new product to the ledger."""
    store = product_store(obj.get("data_dir"))

    try:
        product = store.add_product(
            ProductPayload(name=name, quantity=quantity, category=category)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added "
        f"({product.category.value}, quantity={product.quantity})"
    )


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_show(obj: dict, product_id: int) -> None:
    """Show a single product."""
    store = product_store(obj.get("data_dir"))

    try:
        product = store.get_product(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    echo_product(product)


@click.command("list")
@click.pass_obj
def product_list(obj: dict) -> None:
    """List all products in the ledger."""
    store = product_store(obj.get("data_dir"))
    echo_product_table(store.list_all_products(), "No products found.")


@click.command("search")
@click.option("--category", required=True, type=CATEGORY_CHOICE, help="Category to match.")
@click.pass_obj
def product_search(obj: dict, category: str) -> None:
    """List the products of one category."""
    store = product_store(obj.get("data_dir"))
    echo_product_table(
        store.search_by_category(category),
        f"No products in category '{category}'.",
    )


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", required=True, help="New name.")
@click.option("--quantity", required=True, type=int, help="New quantity.")
@click.option("--category", required=True, type=CATEGORY_CHOICE, help="New category.")
@click.pass_obj
def product_update(
    obj: dict, product_id: int, name: str, quantity: int, category: str
) -> None:
    """Replace a product's name, quantity and category."""
    store = product_store(obj.get("data_dir"))

    try:
        product = store.update_product(
            product_id,
            ProductPayload(name=name, quantity=quantity, category=category),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} updated")
    echo_product(product)


@click.command("remove")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_remove(obj: dict, product_id: int) -> None:
    """Delete a product."""
    store = product_store(obj.get("data_dir"))

    try:
        product = store.remove_product(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' removed")


@click.command("clear")
@click.confirmation_option(prompt="Remove every product from the ledger?")
@click.pass_obj
def product_clear(obj: dict) -> None:
    """Remove every product. Ids are never reused."""
    store = product_store(obj.get("data_dir"))
    store.clear_all_products()
    click.echo("All products removed.")
