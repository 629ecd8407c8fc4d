"""CLI commands for the style catalog."""

from __future__ import annotations

import click

from teeshop.application.add_style import AddStyleHandler
from teeshop.domain.exceptions import DomainException
from teeshop.infrastructure.bootstrap import pricing_config, style_repository
from teeshop.infrastructure.cli.parsing import parse_pairs


@click.command("add")
@click.option("--name", required=True, help="Style name, e.g. 'Classic Crew'.")
@click.option("--price", required=True, help="Base price per unit (e.g. 250).")
@click.option(
    "--sizes",
    default="S:0,M:0,L:0,XL:0",
    show_default=True,
    help="Sizes with per-unit surcharge as 'Size:Cost,Size:Cost'.",
)
@click.option("--description", default="", help="Catalog description.")
@click.option("--colors", default="", help="Comma-separated color names.")
def style_add(name: str, price: str, sizes: str, description: str, colors: str) -> None:
    """Add a t-shirt style to the catalog."""
    try:
        handler = AddStyleHandler(style_repo=style_repository())
        style = handler.handle(
            name=name,
            base_price=price,
            sizes=dict(parse_pairs(sizes, "size")),
            description=description,
            colors=[c.strip() for c in colors.split(",") if c.strip()],
            currency=pricing_config().currency,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Style '{style.name}' added at {style.base_price}")


@click.command("list")
def style_list() -> None:
    """List all styles in the catalog."""
    styles = style_repository().list_all()

    if not styles:
        click.echo("No styles found.")
        return

    click.echo(f"{'Name':<20} {'Base price':>14} {'Active':>7}  Sizes")
    click.echo("-" * 60)
    for s in styles:
        sizes = ", ".join(
            o.size if o.additional_cost.is_zero else f"{o.size}(+{o.additional_cost.amount})"
            for o in s.available_sizes
        )
        click.echo(
            f"{s.name:<20} {str(s.base_price):>14} {'yes' if s.is_active else 'no':>7}  {sizes}"
        )
