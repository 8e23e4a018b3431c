import click

from bakery.infrastructure.cli.product_commands import (
    product_add,
    product_clear,
    product_list,
    product_remove,
    product_search,
    product_show,
    product_update,
)
from bakery.infrastructure.cli.stock_commands import stock_add, stock_offload, stock_show
from bakery.infrastructure.logging import LOG_LEVELS, add_context, configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory holding products.json (overrides BAKERY_DATA_DIR).",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Override LOG_LEVEL for this run.",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: str | None, log_level: str | None) -> None:
    """Bakery Ledger: product and stock inventory"""
    configure_logging(log_level.upper() if log_level else None)
    add_context(command=ctx.invoked_subcommand)
    ctx.obj = {"data_dir": data_dir}


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def stock() -> None:
    """Adjust stock levels."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_clear)
product.add_command(product_list)
product.add_command(product_remove)
product.add_command(product_search)
product.add_command(product_show)
product.add_command(product_update)
stock.add_command(stock_add)
stock.add_command(stock_offload)
stock.add_command(stock_show)
