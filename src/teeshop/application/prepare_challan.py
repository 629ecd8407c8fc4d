"""Application service: Prepare Challan use case.

Collects what the print shop's work order shows: per-view print
dimensions and the size/quantity table. Layout and rendering happen
elsewhere; this handler only supplies the values.
"""

from __future__ import annotations

import logging
from datetime import date

from teeshop.application.dto import ChallanDTO, ChallanViewDTO
from teeshop.domain.exceptions import DesignNotFound, OrderNotFound
from teeshop.domain.model.design import PIXELS_PER_INCH, View
from teeshop.domain.repository.design_repository import DesignRepository
from teeshop.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class PrepareChallanHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        design_repo: DesignRepository,
        pixels_per_inch: int = PIXELS_PER_INCH,
    ) -> None:
        self._order_repo = order_repo
        self._design_repo = design_repo
        self._pixels_per_inch = pixels_per_inch

    def handle(self, order_number: str, today: date | None = None) -> ChallanDTO:
        order = self._order_repo.get_by_number(order_number)
        if order is None:
            raise OrderNotFound(f"Order {order_number} not found")

        design = self._design_repo.get_by_shareable_id(order.design_id)
        if design is None:
            raise DesignNotFound(f"Design '{order.design_id}' not found")

        # Designs stored before dimensions were tracked get them now.
        if design.dimensions is None:
            logger.info("Computing missing dimensions for design %s", design.shareable_id)
            design.refresh_dimensions(self._pixels_per_inch)
            self._design_repo.save(design)

        views = [
            ChallanViewDTO(
                view=view.value,
                width_inches=design.dimensions[view].width_inches,
                height_inches=design.dimensions[view].height_inches,
                has_content=design.dimensions[view].has_content,
            )
            for view in View
        ]

        return ChallanDTO(
            order_number=order.order_number,
            design_name=design.name,
            style=design.tshirt.style,
            color=design.tshirt.color,
            views=views,
            size_rows=order.sizes.ordered(),
            total_quantity=order.total_quantity,
            generated_on=(today or date.today()).isoformat(),
        )
