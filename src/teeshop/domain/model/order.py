"""Order aggregate — a checked-out design with a locked price.

The Order captures the price breakdown computed at checkout. Later changes
to the style catalog or pricing configuration never touch existing orders.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from teeshop.domain.exceptions import ValidationError
from teeshop.domain.model.quote import PriceBreakdown, ShippingMethod
from teeshop.domain.model.value_objects import SizeQuantities


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"


class PaymentStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"


@dataclass(frozen=True)
class Customer:
    name: str
    email: str
    address: str
    phone: str | None = None

    def __post_init__(self) -> None:
        for label, value in (("name", self.name), ("email", self.email), ("address", self.address)):
            if not value or not value.strip():
                raise ValidationError(f"Customer {label} is required")
        if "@" not in self.email:
            raise ValidationError(f"Invalid customer email: {self.email!r}")


def generate_order_number() -> str:
    """``ORD-<last six digits of epoch millis>-<0..999>``."""
    millis = str(int(time.time() * 1000))[-6:]
    return f"ORD-{millis}-{random.randint(0, 999)}"


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use the ``Order.create()`` factory for new orders. The ``__init__`` is
    intentionally simple so the repository can reconstitute persisted
    orders without re-validating.
    """

    order_number: str
    design_id: str
    customer: Customer
    sizes: SizeQuantities
    shipping_method: ShippingMethod
    price_breakdown: PriceBreakdown
    status: OrderStatus = OrderStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        order_number: str,
        design_id: str,
        customer: Customer,
        sizes: SizeQuantities,
        shipping_method: ShippingMethod,
        price_breakdown: PriceBreakdown,
    ) -> Order:
        if not order_number:
            raise ValidationError("Order number is required")
        if not design_id:
            raise ValidationError("Design id is required")
        return Order(
            order_number=order_number,
            design_id=design_id,
            customer=customer,
            sizes=sizes,
            shipping_method=shipping_method,
            price_breakdown=price_breakdown,
        )

    @property
    def total_quantity(self) -> int:
        return self.sizes.total
