import logging

import click

from teeshop.infrastructure.cli.design_commands import design_save, design_show, design_update
from teeshop.infrastructure.cli.order_commands import (
    order_challan,
    order_checkout,
    order_show,
    quote,
)
from teeshop.infrastructure.cli.style_commands import style_add, style_list
from teeshop.infrastructure.config import load_environment


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Teeshop — custom t-shirt designs, quotes and orders"""
    load_environment()
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)-8s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@cli.group()
def design() -> None:
    """Manage designs."""


@cli.group()
def style() -> None:
    """Manage the style catalog."""


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
design.add_command(design_save)
design.add_command(design_show)
design.add_command(design_update)
style.add_command(style_add)
style.add_command(style_list)
order.add_command(order_challan)
order.add_command(order_checkout)
order.add_command(order_show)
cli.add_command(quote)
