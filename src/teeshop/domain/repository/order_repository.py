"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from teeshop.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_number(self, order_number: str) -> Order | None:
        """Return an order by its order number, or None if not found."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order."""
