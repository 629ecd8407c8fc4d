"""JSON-file-backed implementation of StyleRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from teeshop.domain.model.style import SizeOption, TShirtStyle
from teeshop.domain.model.value_objects import DEFAULT_CURRENCY, Money
from teeshop.domain.repository.style_repository import StyleRepository


class JsonStyleRepository(StyleRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- StyleRepository interface --------------------------------------------

    def get_active_by_name(self, name: str) -> TShirtStyle | None:
        for style in self._load().values():
            if style.name == name and style.is_active:
                return style
        return None

    def list_all(self) -> list[TShirtStyle]:
        return list(self._load().values())

    def save(self, style: TShirtStyle) -> None:
        styles = self._load()
        styles[style.name] = style
        self._persist(styles)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, TShirtStyle]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {item["name"]: self._to_domain(item) for item in raw}

    @staticmethod
    def _to_domain(item: dict) -> TShirtStyle:
        currency = item.get("currency", DEFAULT_CURRENCY)
        return TShirtStyle(
            name=item["name"],
            base_price=Money(Decimal(item["base_price"]), currency),
            description=item.get("description", ""),
            available_sizes=[
                SizeOption(
                    size=s["size"],
                    additional_cost=Money(Decimal(s.get("additional_cost", "0")), currency),
                    is_available=s.get("is_available", True),
                )
                for s in item.get("available_sizes", [])
            ],
            colors=list(item.get("colors", [])),
            is_active=item.get("is_active", True),
        )

    def _persist(self, styles: dict[str, TShirtStyle]) -> None:
        raw = [
            {
                "name": s.name,
                "description": s.description,
                "base_price": str(s.base_price.amount),
                "currency": s.base_price.currency,
                "available_sizes": [
                    {
                        "size": o.size,
                        "is_available": o.is_available,
                        "additional_cost": str(o.additional_cost.amount),
                    }
                    for o in s.available_sizes
                ],
                "colors": s.colors,
                "is_active": s.is_active,
            }
            for s in styles.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
