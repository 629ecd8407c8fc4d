"""CLI commands for quoting and the Order aggregate."""

from __future__ import annotations

import click

from teeshop.application.calculate_quote import CalculateQuoteHandler
from teeshop.application.checkout import CheckoutHandler
from teeshop.application.dto import ChallanDTO, CustomerSpec, OrderDTO, PriceBreakdownDTO
from teeshop.application.prepare_challan import PrepareChallanHandler
from teeshop.application.show_order import ShowOrderHandler
from teeshop.domain.exceptions import DomainException
from teeshop.domain.model.quote import ShippingMethod
from teeshop.infrastructure.bootstrap import (
    design_repository,
    order_repository,
    pricing_config,
    style_repository,
)
from teeshop.infrastructure.cli.parsing import parse_sizes

_shipping = click.option(
    "--shipping",
    type=click.Choice([m.value for m in ShippingMethod]),
    default=ShippingMethod.STANDARD.value,
    show_default=True,
    help="Shipping method.",
)


def _display_breakdown(pb: PriceBreakdownDTO) -> None:
    click.echo(f"  {'Base price':<28} {pb.base_price:>16}")
    for line in pb.additional_costs:
        click.echo(f"  {line.description:<28} {line.amount:>16}")
    click.echo(f"  {'-'*45}")
    click.echo(f"  {'Subtotal':<28} {pb.subtotal:>16}")
    click.echo(f"  {'Tax':<28} {pb.tax:>16}")
    click.echo(f"  {'Shipping':<28} {pb.shipping:>16}")
    click.echo(f"  {'-'*45}")
    click.echo(f"  {'Total':<28} {pb.total:>16}")


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order {dto.order_number}  (status={dto.status}, payment={dto.payment_status})")
    click.echo(f"Customer: {dto.customer_name} <{dto.customer_email}>")
    click.echo(f"Design:   {dto.design_id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"Shipping: {dto.shipping_method}")
    sizes = ", ".join(f"{label}:{qty}" for label, qty in dto.sizes.items() if qty > 0)
    click.echo(f"Sizes:    {sizes}  (total {dto.total_quantity})")
    click.echo()
    _display_breakdown(dto.price_breakdown)


def _display_challan(dto: ChallanDTO) -> None:
    click.echo("Printer Challan")
    click.echo(f"Order Number: {dto.order_number}")
    click.echo()
    click.echo("Design Information")
    click.echo(f"  {dto.design_name}  ({dto.style} / {dto.color})")
    for view in dto.views:
        if view.has_content:
            detail = f'Dimensions: {view.width_inches:.2f}" x {view.height_inches:.2f}"'
        else:
            detail = "No design elements"
        click.echo(f"  {view.view.capitalize() + ' View':<12} {detail}")
    click.echo()
    click.echo("Quantity Information")
    click.echo(f"  {'Size':<8} {'Quantity':>8}")
    click.echo(f"  {'-'*17}")
    for size, qty in dto.size_rows:
        click.echo(f"  {size:<8} {qty:>8}")
    click.echo(f"  {'-'*17}")
    click.echo(f"  {'Total':<8} {dto.total_quantity:>8}")
    click.echo()
    click.echo("This challan is for printing purposes only.")
    click.echo(f"Generated on {dto.generated_on}")


@click.command("quote")
@click.option("--design", "design_id", required=True, help="Shareable design ID.")
@click.option("--sizes", required=True, help="Quantities as 'Size:Qty,Size:Qty'.")
@click.option("--text/--no-text", "has_text", default=None, help="Override text printing.")
@click.option("--image/--no-image", "has_image", default=None, help="Override image printing.")
@click.option("--back/--no-back", "has_back", default=None, help="Override back design printing.")
@_shipping
def quote(
    design_id: str,
    sizes: str,
    has_text: bool | None,
    has_image: bool | None,
    has_back: bool | None,
    shipping: str,
) -> None:
    """Calculate a price quote for a saved design."""
    try:
        handler = CalculateQuoteHandler(
            design_repo=design_repository(),
            style_repo=style_repository(),
            config=pricing_config(),
        )
        dto = handler.handle(
            design_id,
            parse_sizes(sizes),
            has_text=has_text,
            has_image=has_image,
            has_back_design=has_back,
            shipping_method=ShippingMethod.parse(shipping),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Quote for design {dto.design_id}  ({dto.total_quantity} units, {dto.shipping_method} shipping)")
    click.echo()
    _display_breakdown(dto.price_breakdown)


@click.command("checkout")
@click.option("--design", "design_id", required=True, help="Shareable design ID.")
@click.option("--sizes", required=True, help="Quantities as 'Size:Qty,Size:Qty'.")
@click.option("--name", required=True, help="Customer name.")
@click.option("--email", required=True, help="Customer email.")
@click.option("--address", required=True, help="Shipping address.")
@click.option("--phone", default=None, help="Customer phone.")
@_shipping
def order_checkout(
    design_id: str,
    sizes: str,
    name: str,
    email: str,
    address: str,
    phone: str | None,
    shipping: str,
) -> None:
    """Place an order for a saved design."""
    try:
        handler = CheckoutHandler(
            design_repo=design_repository(),
            style_repo=style_repository(),
            order_repo=order_repository(),
            config=pricing_config(),
        )
        dto = handler.handle(
            design_id,
            parse_sizes(sizes),
            CustomerSpec(name=name, email=email, address=address, phone=phone),
            shipping_method=ShippingMethod.parse(shipping),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.order_number} created.")
    _display_order(dto)


@click.command("show")
@click.option("--number", "order_number", required=True, help="Order number, e.g. ORD-123456-42.")
def order_show(order_number: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_number)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("challan")
@click.option("--number", "order_number", required=True, help="Order number.")
def order_challan(order_number: str) -> None:
    """Print the production challan for an order."""
    try:
        handler = PrepareChallanHandler(
            order_repo=order_repository(),
            design_repo=design_repository(),
            pixels_per_inch=pricing_config().pixels_per_inch,
        )
        dto = handler.handle(order_number)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_challan(dto)
