"""Plain-text rendering shared by the CLI commands."""

from __future__ import annotations

import click

from bakery.domain.model.product import Category, Product

CATEGORY_CHOICE = click.Choice([c.value for c in Category], case_sensitive=False)


def _timestamp(value) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S") if value else "-"


def echo_product(product: Product) -> None:
    click.echo(f"ID:         {product.id}")
    click.echo(f"Name:       {product.name}")
    click.echo(f"Category:   {product.category.value}")
    click.echo(f"Quantity:   {product.quantity}")
    click.echo(f"Created:    {_timestamp(product.created_at)}")
    click.echo(f"Updated:    {_timestamp(product.updated_at)}")


def echo_product_table(products: list[Product], empty_message: str) -> None:
    if not products:
        click.echo(empty_message)
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Category':<10} {'Quantity':>10}")
    click.echo("-" * 49)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<20} {p.category.value:<10} {p.quantity.value:>10}"
        )
