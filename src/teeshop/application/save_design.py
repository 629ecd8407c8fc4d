"""Application service: Save Design use case.

Builds the Design aggregate from client input, computes its print
dimensions and persists it under a fresh shareable ID.
"""

from __future__ import annotations

import logging

from teeshop.application.dto import DesignDTO, DesignSpec, design_to_dto
from teeshop.domain.exceptions import ValidationError
from teeshop.domain.model.design import PIXELS_PER_INCH, Design, DesignElement, TShirtChoice
from teeshop.domain.repository.design_repository import DesignRepository

logger = logging.getLogger(__name__)


def build_elements(raw_elements: list[dict]) -> list[DesignElement]:
    """Turn client element dicts into validated domain elements."""
    return [DesignElement.from_dict(raw) for raw in raw_elements]


class SaveDesignHandler:

    def __init__(
        self,
        design_repo: DesignRepository,
        pixels_per_inch: int = PIXELS_PER_INCH,
    ) -> None:
        self._design_repo = design_repo
        self._pixels_per_inch = pixels_per_inch

    def handle(self, spec: DesignSpec, email: str) -> DesignDTO:
        if spec.style is None or spec.color is None:
            raise ValidationError("T-shirt style and color are required")

        design = Design.create(
            name=spec.name or "",
            tshirt=TShirtChoice(style=spec.style, color=spec.color),
            elements=build_elements(spec.elements or []),
            email=email,
            is_public=bool(spec.is_public),
            pixels_per_inch=self._pixels_per_inch,
        )
        self._design_repo.save(design)

        logger.info(
            "Saved design %s (%d elements)", design.shareable_id, len(design.elements)
        )
        return design_to_dto(design)
