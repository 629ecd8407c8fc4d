"""Application service: Update Design use case.

Only the fields present in the request are changed; dimensions are always
recomputed from the resulting element list.
"""

from __future__ import annotations

import logging

from teeshop.application.dto import DesignDTO, DesignSpec, design_to_dto
from teeshop.application.save_design import build_elements
from teeshop.domain.exceptions import DesignNotFound
from teeshop.domain.model.design import PIXELS_PER_INCH, TShirtChoice
from teeshop.domain.repository.design_repository import DesignRepository

logger = logging.getLogger(__name__)


class UpdateDesignHandler:

    def __init__(
        self,
        design_repo: DesignRepository,
        pixels_per_inch: int = PIXELS_PER_INCH,
    ) -> None:
        self._design_repo = design_repo
        self._pixels_per_inch = pixels_per_inch

    def handle(self, shareable_id: str, spec: DesignSpec) -> DesignDTO:
        design = self._design_repo.get_by_shareable_id(shareable_id)
        if design is None:
            raise DesignNotFound(f"Design '{shareable_id}' not found")

        tshirt = None
        if spec.style is not None or spec.color is not None:
            tshirt = TShirtChoice(
                style=spec.style if spec.style is not None else design.tshirt.style,
                color=spec.color if spec.color is not None else design.tshirt.color,
            )
        elements = build_elements(spec.elements) if spec.elements is not None else None

        design.update(
            name=spec.name,
            tshirt=tshirt,
            elements=elements,
            is_public=spec.is_public,
            pixels_per_inch=self._pixels_per_inch,
        )
        self._design_repo.save(design)

        logger.info("Updated design %s", shareable_id)
        return design_to_dto(design)
