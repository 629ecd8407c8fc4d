"""Abstract repository for Design aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from teeshop.domain.model.design import Design


class DesignRepository(ABC):

    @abstractmethod
    def get_by_shareable_id(self, shareable_id: str) -> Design | None:
        """Return a design by its shareable ID, or None if not found."""

    @abstractmethod
    def save(self, design: Design) -> None:
        """Persist a new or updated design."""
