"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from teeshop.domain.model.order import (
    Customer,
    Order,
    OrderStatus,
    PaymentStatus,
)
from teeshop.domain.model.quote import CostLine, PriceBreakdown, ShippingMethod
from teeshop.domain.model.value_objects import Money, SizeQuantities
from teeshop.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def get_by_number(self, order_number: str) -> Order | None:
        for raw in self._load_raw():
            if raw["order_number"] == order_number:
                return self._to_domain(raw)
        return None

    def save(self, order: Order) -> None:
        orders = self._load_raw()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(orders):
            if raw["order_number"] == order.order_number:
                orders[i] = self._to_raw(order)
                replaced = True
                break
        if not replaced:
            orders.append(self._to_raw(order))

        self._persist_raw(orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        breakdown = order.price_breakdown
        return {
            "order_number": order.order_number,
            "design_id": order.design_id,
            "customer": {
                "name": order.customer.name,
                "email": order.customer.email,
                "address": order.customer.address,
                "phone": order.customer.phone,
            },
            "sizes": [[label, qty] for label, qty in order.sizes.items],
            "shipping_method": order.shipping_method.value,
            "currency": breakdown.total.currency,
            "price_breakdown": {
                "base_price": str(breakdown.base_price.amount),
                "additional_costs": [
                    {"description": line.description, "amount": str(line.amount.amount)}
                    for line in breakdown.additional_costs
                ],
                "subtotal": str(breakdown.subtotal.amount),
                "tax": str(breakdown.tax.amount),
                "shipping": str(breakdown.shipping.amount),
                "total": str(breakdown.total.amount),
            },
            "status": order.status.value,
            "payment_status": order.payment_status.value,
            "created_at": order.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        currency = raw["currency"]

        def money(value: str) -> Money:
            return Money(Decimal(value), currency)

        pb = raw["price_breakdown"]
        breakdown = PriceBreakdown(
            base_price=money(pb["base_price"]),
            additional_costs=tuple(
                CostLine(line["description"], money(line["amount"]))
                for line in pb["additional_costs"]
            ),
            subtotal=money(pb["subtotal"]),
            tax=money(pb["tax"]),
            shipping=money(pb["shipping"]),
            total=money(pb["total"]),
        )
        return Order(
            order_number=raw["order_number"],
            design_id=raw["design_id"],
            customer=Customer(**raw["customer"]),
            sizes=SizeQuantities(tuple((label, qty) for label, qty in raw["sizes"])),
            shipping_method=ShippingMethod(raw["shipping_method"]),
            price_breakdown=breakdown,
            status=OrderStatus(raw["status"]),
            payment_status=PaymentStatus(raw["payment_status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
