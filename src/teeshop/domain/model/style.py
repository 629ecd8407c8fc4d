"""TShirtStyle aggregate — a catalog entry the quote engine prices against.

Styles live independently of designs and orders. A design refers to a
style by name; orders capture the price at checkout time, so later catalog
changes never affect existing orders.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from teeshop.domain.exceptions import ValidationError
from teeshop.domain.model.value_objects import Money


@dataclass(frozen=True)
class SizeOption:
    """A size offered by a style, with its per-unit surcharge."""

    size: str
    additional_cost: Money
    is_available: bool = True

    def __post_init__(self) -> None:
        if not self.size or not self.size.strip():
            raise ValidationError("Size label is required")


@dataclass
class TShirtStyle:
    """A catalog entry.

    Only active styles can be quoted or ordered.
    """

    name: str
    base_price: Money
    description: str = ""
    available_sizes: list[SizeOption] = field(default_factory=list)
    colors: list[str] = field(default_factory=list)
    is_active: bool = True

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Style name is required")
        labels = [option.size for option in self.available_sizes]
        if len(labels) != len(set(labels)):
            raise ValidationError(f"Duplicate size labels in style '{self.name}'")
        for option in self.available_sizes:
            if option.additional_cost.currency != self.base_price.currency:
                raise ValidationError(
                    f"Size {option.size} surcharge currency "
                    f"{option.additional_cost.currency} does not match "
                    f"base price currency {self.base_price.currency}"
                )

    def size_option(self, size: str) -> SizeOption | None:
        """Return the catalog entry for *size*, or None."""
        for option in self.available_sizes:
            if option.size == size:
                return option
        return None
