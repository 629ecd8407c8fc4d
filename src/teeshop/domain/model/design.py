"""Design aggregate — a named t-shirt design made of placed elements.

A Design owns its elements and the per-view print dimensions derived from
them. Dimensions are recomputed every time the element list changes so the
stored values never drift from the geometry.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from teeshop.domain.exceptions import ValidationError
from teeshop.domain.model.value_objects import Position, Size


class View(Enum):
    FRONT = "front"
    BACK = "back"
    LEFT = "left"
    RIGHT = "right"


class ElementType(Enum):
    TEXT = "text"
    CLIPART = "clipart"
    IMAGE = "image"


DEFAULT_DESIGN_NAME = "Untitled Design"

PIXELS_PER_INCH = 72


def _parse_enum(enum_cls, value: Any, label: str):
    try:
        return enum_cls(value)
    except ValueError as exc:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValidationError(
            f"Invalid {label} {value!r}; expected one of: {allowed}"
        ) from exc


@dataclass(frozen=True)
class DesignElement:
    """A single text, clipart or image item placed on one view.

    ``rotation`` is stored for rendering but plays no part in print
    dimensions: the bounding box uses the unrotated size.
    """

    id: str
    type: ElementType
    position: Position
    size: Size
    layer: int
    view: View
    rotation: float = 0.0
    properties: dict[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationError("Element id is required")
        if isinstance(self.layer, bool) or not isinstance(self.layer, int):
            raise ValidationError(f"Element layer must be an integer, got {self.layer!r}")

    @property
    def right(self) -> float:
        return self.position.x + self.size.width

    @property
    def bottom(self) -> float:
        return self.position.y + self.size.height

    @staticmethod
    def from_dict(raw: dict[str, Any]) -> DesignElement:
        """Build an element from its client/JSON representation."""
        try:
            position = raw["position"]
            size = raw["size"]
            return DesignElement(
                id=str(raw["id"]),
                type=_parse_enum(ElementType, raw["type"], "element type"),
                position=Position(position["x"], position["y"]),
                size=Size(size["width"], size["height"]),
                layer=raw["layer"],
                view=_parse_enum(View, raw["view"], "view"),
                rotation=float(raw.get("rotation", 0) or 0),
                properties=dict(raw.get("properties") or {}),
            )
        except KeyError as exc:
            raise ValidationError(f"Malformed design element: missing {exc}") from exc
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Malformed design element: {exc}") from exc

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            "position": {"x": self.position.x, "y": self.position.y},
            "size": {"width": self.size.width, "height": self.size.height},
            "rotation": self.rotation,
            "layer": self.layer,
            "view": self.view.value,
            "properties": dict(self.properties),
        }


@dataclass(frozen=True)
class ViewDimensions:
    """Printable extent of one view, in inches."""

    width_inches: float = 0.0
    height_inches: float = 0.0

    @property
    def has_content(self) -> bool:
        return self.width_inches > 0 or self.height_inches > 0


@dataclass(frozen=True)
class TShirtChoice:
    style: str
    color: str

    def __post_init__(self) -> None:
        for label, value in (("style", self.style), ("color", self.color)):
            if not isinstance(value, str) or not value.strip():
                raise ValidationError(f"T-shirt {label} is required")


@dataclass
class Design:
    """Aggregate root for saved designs.

    Use ``Design.create()`` for new designs — it assigns the shareable id
    and computes dimensions. The ``__init__`` is intentionally simple so
    the repository can reconstitute persisted designs as they were stored.
    """

    shareable_id: str
    name: str
    tshirt: TShirtChoice
    elements: list[DesignElement]
    dimensions: dict[View, ViewDimensions] | None = None
    is_public: bool = False
    email: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW designs only) ----------------------------------

    @staticmethod
    def create(
        name: str,
        tshirt: TShirtChoice,
        elements: list[DesignElement],
        email: str,
        is_public: bool = False,
        pixels_per_inch: int = PIXELS_PER_INCH,
    ) -> Design:
        if not email or not email.strip():
            raise ValidationError("Email is required to save a design")
        _assert_name(name)
        _assert_unique_ids(elements)

        design = Design(
            shareable_id=str(uuid.uuid4()),
            name=(name or "").strip() or DEFAULT_DESIGN_NAME,
            tshirt=tshirt,
            elements=list(elements),
            is_public=is_public,
            email=email.strip(),
        )
        design.refresh_dimensions(pixels_per_inch)
        return design

    # --- Mutations ------------------------------------------------------------

    def update(
        self,
        name: str | None = None,
        tshirt: TShirtChoice | None = None,
        elements: list[DesignElement] | None = None,
        is_public: bool | None = None,
        pixels_per_inch: int = PIXELS_PER_INCH,
    ) -> None:
        """Apply the supplied fields, leaving the others untouched.

        Dimensions are recomputed on every update.
        """
        _assert_name(name)
        if name:
            self.name = name.strip() or self.name
        if tshirt is not None:
            self.tshirt = tshirt
        if elements is not None:
            _assert_unique_ids(elements)
            self.elements = list(elements)
        if is_public is not None:
            self.is_public = is_public
        self.refresh_dimensions(pixels_per_inch)
        self.updated_at = datetime.now(timezone.utc)

    def refresh_dimensions(self, pixels_per_inch: int = PIXELS_PER_INCH) -> None:
        # Local import: the calculator module depends on this one.
        from teeshop.domain.service.dimension_calculator import compute_dimensions

        self.dimensions = compute_dimensions(self.elements, pixels_per_inch)


def _assert_unique_ids(elements: list[DesignElement]) -> None:
    seen: set[str] = set()
    for element in elements:
        if element.id in seen:
            raise ValidationError(f"Duplicate element id '{element.id}' in design")
        seen.add(element.id)


def _assert_name(name: object) -> None:
    if name is not None and not isinstance(name, str):
        raise ValidationError(f"Design name must be text, got {name!r}")
