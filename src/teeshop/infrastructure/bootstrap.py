"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from teeshop.domain.service.quote_engine import PricingConfig
from teeshop.infrastructure.config import data_dir, load_pricing_config
from teeshop.infrastructure.persistence.json_design_repository import (
    JsonDesignRepository,
)
from teeshop.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from teeshop.infrastructure.persistence.json_style_repository import (
    JsonStyleRepository,
)


def pricing_config() -> PricingConfig:
    return load_pricing_config()


def design_repository() -> JsonDesignRepository:
    return JsonDesignRepository(data_dir() / "designs.json")


def style_repository() -> JsonStyleRepository:
    return JsonStyleRepository(data_dir() / "styles.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(data_dir() / "orders.json")
