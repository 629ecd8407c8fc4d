"""Application service: Add Style use case."""

from __future__ import annotations

import logging

from teeshop.domain.exceptions import ValidationError
from teeshop.domain.model.style import SizeOption, TShirtStyle
from teeshop.domain.model.value_objects import DEFAULT_CURRENCY, Money
from teeshop.domain.repository.style_repository import StyleRepository

logger = logging.getLogger(__name__)


class AddStyleHandler:

    def __init__(self, style_repo: StyleRepository) -> None:
        self._style_repo = style_repo

    def handle(
        self,
        name: str,
        base_price: str,
        sizes: dict[str, str] | None = None,
        description: str = "",
        colors: list[str] | None = None,
        currency: str = DEFAULT_CURRENCY,
    ) -> TShirtStyle:
        """Add a style to the catalog.

        *sizes* maps each size label to its per-unit surcharge
        (``"0"`` for regular sizes).
        """
        if not name or not name.strip():
            raise ValidationError("Style name is required")
        if self._style_repo.get_active_by_name(name.strip()) is not None:
            raise ValidationError(f"Style '{name.strip()}' already exists")

        style = TShirtStyle(
            name=name.strip(),
            base_price=Money.of(base_price, currency),
            description=description,
            available_sizes=[
                SizeOption(size=label, additional_cost=Money.of(cost, currency))
                for label, cost in (sizes or {}).items()
            ],
            colors=list(colors or []),
        )
        self._style_repo.save(style)

        logger.info("Added style %s at %s", style.name, style.base_price)
        return style
