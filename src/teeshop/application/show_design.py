"""Application service: Show Design use case (query)."""

from __future__ import annotations

from teeshop.application.dto import DesignDTO, design_to_dto
from teeshop.domain.exceptions import DesignNotFound
from teeshop.domain.repository.design_repository import DesignRepository


class ShowDesignHandler:

    def __init__(self, design_repo: DesignRepository) -> None:
        self._design_repo = design_repo

    def handle(self, shareable_id: str) -> DesignDTO:
        design = self._design_repo.get_by_shareable_id(shareable_id)
        if design is None:
            raise DesignNotFound(f"Design '{shareable_id}' not found")
        return design_to_dto(design)
