"""JSON-file-backed implementation of DesignRepository."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from teeshop.domain.model.design import (
    Design,
    DesignElement,
    TShirtChoice,
    View,
    ViewDimensions,
)
from teeshop.domain.repository.design_repository import DesignRepository


class JsonDesignRepository(DesignRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- DesignRepository interface -------------------------------------------

    def get_by_shareable_id(self, shareable_id: str) -> Design | None:
        for raw in self._load_raw():
            if raw["shareable_id"] == shareable_id:
                return self._to_domain(raw)
        return None

    def save(self, design: Design) -> None:
        designs = self._load_raw()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(designs):
            if raw["shareable_id"] == design.shareable_id:
                designs[i] = self._to_raw(design)
                replaced = True
                break
        if not replaced:
            designs.append(self._to_raw(design))

        self._persist_raw(designs)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(design: Design) -> dict:
        dimensions = None
        if design.dimensions is not None:
            dimensions = {
                view.value: {
                    "width_inches": dims.width_inches,
                    "height_inches": dims.height_inches,
                }
                for view, dims in design.dimensions.items()
            }
        return {
            "shareable_id": design.shareable_id,
            "name": design.name,
            "tshirt": {"style": design.tshirt.style, "color": design.tshirt.color},
            "elements": [element.to_dict() for element in design.elements],
            "dimensions": dimensions,
            "is_public": design.is_public,
            "email": design.email,
            "created_at": design.created_at.isoformat(),
            "updated_at": design.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Design:
        dimensions = None
        if raw.get("dimensions"):
            dimensions = {
                View(view): ViewDimensions(d["width_inches"], d["height_inches"])
                for view, d in raw["dimensions"].items()
            }
        return Design(
            shareable_id=raw["shareable_id"],
            name=raw["name"],
            tshirt=TShirtChoice(raw["tshirt"]["style"], raw["tshirt"]["color"]),
            elements=[DesignElement.from_dict(e) for e in raw["elements"]],
            dimensions=dimensions,
            is_public=raw.get("is_public", False),
            email=raw.get("email", ""),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, designs: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(designs, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
