"""Application service: Checkout use case.

Prices the design exactly like a quote (features always derived from the
design), snapshots the breakdown on a new pending Order and persists it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from teeshop.application.calculate_quote import load_design_and_style, resolve_features
from teeshop.application.dto import CustomerSpec, OrderDTO, order_to_dto
from teeshop.domain.exceptions import ValidationError
from teeshop.domain.model.order import Customer, Order, generate_order_number
from teeshop.domain.model.quote import ShippingMethod
from teeshop.domain.model.value_objects import SizeQuantities
from teeshop.domain.repository.design_repository import DesignRepository
from teeshop.domain.repository.order_repository import OrderRepository
from teeshop.domain.repository.style_repository import StyleRepository
from teeshop.domain.service.quote_engine import PricingConfig, compute_quote

logger = logging.getLogger(__name__)

MAX_ORDER_NUMBER_ATTEMPTS = 5


class CheckoutHandler:

    def __init__(
        self,
        design_repo: DesignRepository,
        style_repo: StyleRepository,
        order_repo: OrderRepository,
        config: PricingConfig,
        order_number_factory: Callable[[], str] = generate_order_number,
    ) -> None:
        self._design_repo = design_repo
        self._style_repo = style_repo
        self._order_repo = order_repo
        self._config = config
        self._order_number_factory = order_number_factory

    def handle(
        self,
        design_id: str,
        sizes: Mapping[str, int],
        customer: CustomerSpec,
        shipping_method: ShippingMethod = ShippingMethod.STANDARD,
    ) -> OrderDTO:
        """Place an order.

        Steps:
        1. Validate customer details and quantities.
        2. Resolve design and active style (fail if either is missing).
        3. Compute the breakdown with features derived from the design.
        4. Persist a pending order under a fresh order number.
        """
        buyer = Customer(
            name=customer.name.strip(),
            email=customer.email.strip(),
            address=customer.address.strip(),
            phone=customer.phone.strip() if customer.phone else None,
        )
        quantities = SizeQuantities.of(sizes)

        design, style = load_design_and_style(self._design_repo, self._style_repo, design_id)
        features = resolve_features(design)
        breakdown = compute_quote(style, quantities, features, self._config, shipping_method)

        order = Order.create(
            order_number=self._next_order_number(),
            design_id=design.shareable_id,
            customer=buyer,
            sizes=quantities,
            shipping_method=shipping_method,
            price_breakdown=breakdown,
        )
        self._order_repo.save(order)

        logger.info(
            "Created order %s for design %s: %d units, total %s",
            order.order_number, design_id, order.total_quantity, breakdown.total,
        )
        return order_to_dto(order)

    def _next_order_number(self) -> str:
        for _ in range(MAX_ORDER_NUMBER_ATTEMPTS):
            number = self._order_number_factory()
            if self._order_repo.get_by_number(number) is None:
                return number
            logger.debug("Order number %s already taken, retrying", number)
        raise ValidationError("Could not allocate a unique order number")
