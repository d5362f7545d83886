import logging

import click

from smartcart.infrastructure.cli.catalog_commands import catalog_list
from smartcart.infrastructure.cli.shop_commands import shop


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log session activity.")
def cli(verbose: bool) -> None:
    """SmartCart — in-store shopping assistant"""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


@cli.group()
def catalog() -> None:
    """Browse the product catalog."""


# Register subcommands
catalog.add_command(catalog_list)
cli.add_command(shop)
