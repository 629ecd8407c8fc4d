"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from teeshop.domain.exceptions import InvalidQuantity, ValidationError

DEFAULT_CURRENCY = "INR"

_WHOLE_UNIT = Decimal("1")


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int) or isinstance(factor, bool):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def apply_rate(self, rate: Decimal) -> Money:
        """Return ``self * rate`` rounded half-up to a whole currency unit."""
        scaled = (self.amount * rate).quantize(_WHOLE_UNIT, rounding=ROUND_HALF_UP)
        return Money(scaled, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.currency} {self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = DEFAULT_CURRENCY) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)), currency)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero(currency: str = DEFAULT_CURRENCY) -> Money:
        return Money(Decimal("0"), currency)


def _pixel(value: object, label: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{label} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValidationError(f"{label} must be finite, got {value!r}")
    return float(value)


@dataclass(frozen=True)
class Position:
    """Top-left corner of an element, in pixels."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _pixel(self.x, "position.x"))
        object.__setattr__(self, "y", _pixel(self.y, "position.y"))


@dataclass(frozen=True)
class Size:
    """Unrotated width and height of an element, in pixels."""

    width: float
    height: float

    def __post_init__(self) -> None:
        width = _pixel(self.width, "size.width")
        height = _pixel(self.height, "size.height")
        if width < 0 or height < 0:
            raise ValidationError(
                f"Element size cannot be negative, got {width}x{height}"
            )
        object.__setattr__(self, "width", width)
        object.__setattr__(self, "height", height)


@dataclass(frozen=True)
class SizeQuantities:
    """Requested quantity per garment size label, in request order.

    Individual quantities may be zero; whether the total is orderable is
    decided by the quote engine.
    """

    items: tuple[tuple[str, int], ...]

    def __post_init__(self) -> None:
        for label, qty in self.items:
            if not label or not label.strip():
                raise InvalidQuantity("Size label is required")
            if isinstance(qty, bool) or not isinstance(qty, int):
                raise InvalidQuantity(
                    f"Quantity for size {label} must be an integer, got {qty!r}"
                )
            if qty < 0:
                raise InvalidQuantity(
                    f"Quantity for size {label} cannot be negative, got {qty}"
                )

    @property
    def total(self) -> int:
        return sum(qty for _, qty in self.items)

    def ordered(self) -> list[tuple[str, int]]:
        """Sizes with a quantity above zero."""
        return [(label, qty) for label, qty in self.items if qty > 0]

    def as_dict(self) -> dict[str, int]:
        return dict(self.items)

    @staticmethod
    def of(raw: Mapping[str, int]) -> SizeQuantities:
        return SizeQuantities(tuple((str(label), qty) for label, qty in raw.items()))
