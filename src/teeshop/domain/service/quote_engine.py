"""Domain service: quote engine.

Turns a catalog style, the requested size quantities and the design's
chargeable features into a ``PriceBreakdown``. The engine holds no state;
every pricing constant comes in through an explicit ``PricingConfig`` so
callers (and tests) can price with any configuration.

Line-item order is part of the output and is fixed:
text, image, back design, plus size surcharge.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal

from teeshop.domain.exceptions import InvalidQuantity, ValidationError
from teeshop.domain.model.design import PIXELS_PER_INCH, DesignElement, ElementType, View
from teeshop.domain.model.quote import (
    CostLine,
    DesignFeatures,
    PriceBreakdown,
    ShippingMethod,
)
from teeshop.domain.model.style import TShirtStyle
from teeshop.domain.model.value_objects import DEFAULT_CURRENCY, Money, SizeQuantities

TEXT_PRINTING = "Text printing"
IMAGE_PRINTING = "Image printing"
BACK_DESIGN_PRINTING = "Back design printing"
PLUS_SIZE_SURCHARGE = "Plus size surcharge"


@dataclass(frozen=True)
class PricingConfig:
    """Pricing constants, all in the same currency."""

    text_printing_cost: Money = Money.of(100)
    image_printing_cost: Money = Money.of(100)
    back_design_cost: Money = Money.of(100)
    standard_shipping_cost: Money = Money.of(100)
    rush_shipping_cost: Money = Money.of(300)
    tax_rate: Decimal = Decimal("0.18")
    pixels_per_inch: int = PIXELS_PER_INCH
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not self.tax_rate.is_finite() or not Decimal("0") <= self.tax_rate < Decimal("1"):
            raise ValidationError(f"Tax rate must be in [0, 1), got {self.tax_rate}")
        if self.pixels_per_inch <= 0:
            raise ValidationError("Pixels per inch must be positive")
        for amount in (
            self.text_printing_cost,
            self.image_printing_cost,
            self.back_design_cost,
            self.standard_shipping_cost,
            self.rush_shipping_cost,
        ):
            if amount.currency != self.currency:
                raise ValidationError(
                    f"Pricing amount {amount} is not in {self.currency}"
                )

    def shipping_cost(self, method: ShippingMethod) -> Money:
        if method is ShippingMethod.RUSH:
            return self.rush_shipping_cost
        return self.standard_shipping_cost


def derive_features(elements: Iterable[DesignElement]) -> DesignFeatures:
    """The single source of truth for which print features a design uses."""
    has_text = has_image = has_back = False
    for element in elements:
        if element.type is ElementType.TEXT:
            has_text = True
        elif element.type in (ElementType.IMAGE, ElementType.CLIPART):
            has_image = True
        if element.view is View.BACK:
            has_back = True
    return DesignFeatures(has_text=has_text, has_image=has_image, has_back_design=has_back)


def compute_quote(
    style: TShirtStyle,
    size_quantities: SizeQuantities | Mapping[str, int],
    features: DesignFeatures,
    config: PricingConfig,
    shipping_method: ShippingMethod = ShippingMethod.STANDARD,
) -> PriceBreakdown:
    """Price an order of *style* in the requested sizes.

    Raises InvalidQuantity when nothing is ordered; no breakdown is
    produced in that case.
    """
    if not isinstance(size_quantities, SizeQuantities):
        size_quantities = SizeQuantities.of(size_quantities)

    total_quantity = size_quantities.total
    if total_quantity <= 0:
        raise InvalidQuantity("Total quantity must be greater than 0")

    if style.base_price.currency != config.currency:
        raise ValidationError(
            f"Style '{style.name}' is priced in {style.base_price.currency}, "
            f"expected {config.currency}"
        )

    base_price = style.base_price * total_quantity

    additional_costs: list[CostLine] = []
    if features.has_text:
        additional_costs.append(CostLine(TEXT_PRINTING, config.text_printing_cost))
    if features.has_image:
        additional_costs.append(CostLine(IMAGE_PRINTING, config.image_printing_cost))
    if features.has_back_design:
        additional_costs.append(CostLine(BACK_DESIGN_PRINTING, config.back_design_cost))

    surcharge = _plus_size_surcharge(style, size_quantities, config.currency)
    if not surcharge.is_zero:
        additional_costs.append(CostLine(PLUS_SIZE_SURCHARGE, surcharge))

    subtotal = base_price
    for line in additional_costs:
        subtotal = subtotal + line.amount

    tax = subtotal.apply_rate(config.tax_rate)
    shipping = config.shipping_cost(shipping_method)

    return PriceBreakdown(
        base_price=base_price,
        additional_costs=tuple(additional_costs),
        subtotal=subtotal,
        tax=tax,
        shipping=shipping,
        total=subtotal + tax + shipping,
    )


def _plus_size_surcharge(
    style: TShirtStyle, size_quantities: SizeQuantities, currency: str
) -> Money:
    surcharge = Money.zero(currency)
    for size, quantity in size_quantities.ordered():
        option = style.size_option(size)
        if option is None or option.additional_cost.is_zero:
            continue
        surcharge = surcharge + option.additional_cost * quantity
    return surcharge
