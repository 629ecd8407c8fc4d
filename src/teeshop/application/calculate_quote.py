"""Application service: Calculate Quote use case.

Resolves the design and its catalog style, then asks the quote engine for
a price breakdown. Feature flags supplied by the caller take precedence;
anything left unset is derived from the design's elements with the same
function checkout uses.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from teeshop.application.dto import QuoteDTO, breakdown_to_dto
from teeshop.domain.exceptions import DesignNotFound, StyleNotFound
from teeshop.domain.model.design import Design
from teeshop.domain.model.quote import DesignFeatures, ShippingMethod
from teeshop.domain.model.style import TShirtStyle
from teeshop.domain.model.value_objects import SizeQuantities
from teeshop.domain.repository.design_repository import DesignRepository
from teeshop.domain.repository.style_repository import StyleRepository
from teeshop.domain.service.quote_engine import PricingConfig, compute_quote, derive_features

logger = logging.getLogger(__name__)


def load_design_and_style(
    design_repo: DesignRepository,
    style_repo: StyleRepository,
    design_id: str,
) -> tuple[Design, TShirtStyle]:
    design = design_repo.get_by_shareable_id(design_id)
    if design is None:
        raise DesignNotFound(f"Design '{design_id}' not found")

    style = style_repo.get_active_by_name(design.tshirt.style)
    if style is None:
        raise StyleNotFound(f"T-shirt style '{design.tshirt.style}' not found")
    return design, style


def resolve_features(
    design: Design,
    has_text: bool | None = None,
    has_image: bool | None = None,
    has_back_design: bool | None = None,
) -> DesignFeatures:
    """Explicit flags win; unset ones come from the design itself."""
    derived = derive_features(design.elements)
    return DesignFeatures(
        has_text=derived.has_text if has_text is None else has_text,
        has_image=derived.has_image if has_image is None else has_image,
        has_back_design=derived.has_back_design if has_back_design is None else has_back_design,
    )


class CalculateQuoteHandler:

    def __init__(
        self,
        design_repo: DesignRepository,
        style_repo: StyleRepository,
        config: PricingConfig,
    ) -> None:
        self._design_repo = design_repo
        self._style_repo = style_repo
        self._config = config

    def handle(
        self,
        design_id: str,
        sizes: Mapping[str, int],
        has_text: bool | None = None,
        has_image: bool | None = None,
        has_back_design: bool | None = None,
        shipping_method: ShippingMethod = ShippingMethod.STANDARD,
    ) -> QuoteDTO:
        quantities = SizeQuantities.of(sizes)
        design, style = load_design_and_style(self._design_repo, self._style_repo, design_id)
        features = resolve_features(design, has_text, has_image, has_back_design)

        breakdown = compute_quote(style, quantities, features, self._config, shipping_method)
        logger.info(
            "Quoted design %s: %d units, total %s",
            design_id, quantities.total, breakdown.total,
        )

        return QuoteDTO(
            design_id=design_id,
            total_quantity=quantities.total,
            sizes=quantities.as_dict(),
            shipping_method=shipping_method.value,
            price_breakdown=breakdown_to_dto(breakdown),
        )
