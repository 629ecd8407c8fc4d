"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Money is formatted as
strings (e.g. "INR 1693.00"); dimensions stay numeric.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from teeshop.domain.model.design import Design, View
from teeshop.domain.model.order import Order
from teeshop.domain.model.quote import PriceBreakdown


# --- Inputs -------------------------------------------------------------------


@dataclass(frozen=True)
class DesignSpec:
    """Input: a design as submitted by the client.

    ``elements`` keeps the client representation (dicts with ``position``,
    ``size``, ``view``...); the handler turns it into domain elements.
    Fields left as None are not changed on update.
    """

    name: str | None = None
    style: str | None = None
    color: str | None = None
    elements: list[dict[str, Any]] | None = None
    is_public: bool | None = None


@dataclass(frozen=True)
class CustomerSpec:
    name: str
    email: str
    address: str
    phone: str | None = None


# --- Outputs ------------------------------------------------------------------


@dataclass(frozen=True)
class ViewDimensionsDTO:
    view: str
    width_inches: float
    height_inches: float


@dataclass(frozen=True)
class DesignDTO:
    id: str
    name: str
    style: str
    color: str
    elements: list[dict[str, Any]]
    dimensions: list[ViewDimensionsDTO]
    is_public: bool
    updated_at: str


@dataclass(frozen=True)
class CostLineDTO:
    description: str
    amount: str


@dataclass(frozen=True)
class PriceBreakdownDTO:
    base_price: str
    additional_costs: list[CostLineDTO]
    subtotal: str
    tax: str
    shipping: str
    total: str


@dataclass(frozen=True)
class QuoteDTO:
    design_id: str
    total_quantity: int
    sizes: dict[str, int]
    shipping_method: str
    price_breakdown: PriceBreakdownDTO


@dataclass(frozen=True)
class OrderDTO:
    order_number: str
    design_id: str
    customer_name: str
    customer_email: str
    status: str
    payment_status: str
    sizes: dict[str, int]
    total_quantity: int
    shipping_method: str
    price_breakdown: PriceBreakdownDTO
    created_at: str


@dataclass(frozen=True)
class ChallanViewDTO:
    view: str
    width_inches: float
    height_inches: float
    has_content: bool


@dataclass(frozen=True)
class ChallanDTO:
    """Everything the production document shows, ready for layout."""

    order_number: str
    design_name: str
    style: str
    color: str
    views: list[ChallanViewDTO]
    size_rows: list[tuple[str, int]] = field(default_factory=list)
    total_quantity: int = 0
    generated_on: str = ""


# --- Mapping ------------------------------------------------------------------


def design_to_dto(design: Design) -> DesignDTO:
    dimensions = design.dimensions or {}
    return DesignDTO(
        id=design.shareable_id,
        name=design.name,
        style=design.tshirt.style,
        color=design.tshirt.color,
        elements=[element.to_dict() for element in design.elements],
        dimensions=[
            ViewDimensionsDTO(
                view=view.value,
                width_inches=dimensions[view].width_inches if view in dimensions else 0.0,
                height_inches=dimensions[view].height_inches if view in dimensions else 0.0,
            )
            for view in View
        ],
        is_public=design.is_public,
        updated_at=design.updated_at.strftime("%Y-%m-%d %H:%M UTC"),
    )


def breakdown_to_dto(breakdown: PriceBreakdown) -> PriceBreakdownDTO:
    return PriceBreakdownDTO(
        base_price=str(breakdown.base_price),
        additional_costs=[
            CostLineDTO(description=line.description, amount=str(line.amount))
            for line in breakdown.additional_costs
        ],
        subtotal=str(breakdown.subtotal),
        tax=str(breakdown.tax),
        shipping=str(breakdown.shipping),
        total=str(breakdown.total),
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        order_number=order.order_number,
        design_id=order.design_id,
        customer_name=order.customer.name,
        customer_email=order.customer.email,
        status=order.status.value,
        payment_status=order.payment_status.value,
        sizes=order.sizes.as_dict(),
        total_quantity=order.total_quantity,
        shipping_method=order.shipping_method.value,
        price_breakdown=breakdown_to_dto(order.price_breakdown),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
