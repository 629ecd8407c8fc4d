"""Abstract repository for TShirtStyle aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from teeshop.domain.model.style import TShirtStyle


class StyleRepository(ABC):

    @abstractmethod
    def get_active_by_name(self, name: str) -> TShirtStyle | None:
        """Return the active style with this exact name, or None."""

    @abstractmethod
    def list_all(self) -> list[TShirtStyle]:
        """Return every style in the catalog, active or not."""

    @abstractmethod
    def save(self, style: TShirtStyle) -> None:
        """Persist a new or updated style."""
