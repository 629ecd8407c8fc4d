"""Value objects produced and consumed by the quote engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from teeshop.domain.exceptions import ValidationError
from teeshop.domain.model.value_objects import Money


class ShippingMethod(Enum):
    STANDARD = "standard"
    RUSH = "rush"

    @staticmethod
    def parse(value: str | None) -> ShippingMethod:
        """Unknown or missing methods fall back to standard shipping."""
        if not value:
            return ShippingMethod.STANDARD
        try:
            return ShippingMethod(value.strip().lower())
        except ValueError:
            return ShippingMethod.STANDARD


@dataclass(frozen=True)
class DesignFeatures:
    """Which chargeable print features a design uses."""

    has_text: bool = False
    has_image: bool = False
    has_back_design: bool = False


@dataclass(frozen=True)
class CostLine:
    """One itemized additional cost, e.g. "Text printing"."""

    description: str
    amount: Money


@dataclass(frozen=True)
class PriceBreakdown:
    """Itemized price for an order.

    Invariants (checked on construction):
    - ``subtotal == base_price + sum(additional_costs)``
    - ``total == subtotal + tax + shipping``
    """

    base_price: Money
    additional_costs: tuple[CostLine, ...]
    subtotal: Money
    tax: Money
    shipping: Money
    total: Money

    def __post_init__(self) -> None:
        expected_subtotal = self.base_price + self.additional_costs_total
        if expected_subtotal != self.subtotal:
            raise ValidationError(
                f"Subtotal {self.subtotal} does not match base price plus "
                f"additional costs ({expected_subtotal})"
            )
        if self.subtotal + self.tax + self.shipping != self.total:
            raise ValidationError(
                f"Total {self.total} does not equal subtotal + tax + shipping"
            )

    @property
    def additional_costs_total(self) -> Money:
        result = Money.zero(self.base_price.currency)
        for line in self.additional_costs:
            result = result + line.amount
        return result
