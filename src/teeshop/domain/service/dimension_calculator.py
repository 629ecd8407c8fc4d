"""Domain service: print dimensions of a design.

For each view the placed elements are enclosed in an axis-aligned bounding
box and its pixel extent is converted to inches. Rotation is not taken
into account: rotated elements contribute their unrotated width and height
at their stored position, which understates the true extent.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from teeshop.domain.exceptions import ValidationError
from teeshop.domain.model.design import (
    PIXELS_PER_INCH,
    DesignElement,
    View,
    ViewDimensions,
)

_HUNDREDTHS = Decimal("0.01")


def compute_dimensions(
    elements: Iterable[DesignElement],
    pixels_per_inch: int = PIXELS_PER_INCH,
) -> dict[View, ViewDimensions]:
    """Return the printable size of every view, in inches.

    Views without elements get ``ViewDimensions(0, 0)``. The result does
    not depend on element order and the input is never modified.
    """
    if pixels_per_inch <= 0:
        raise ValidationError("pixels_per_inch must be positive")

    elements = list(elements)
    return {
        view: _view_dimensions(
            [el for el in elements if el.view is view], pixels_per_inch
        )
        for view in View
    }


def _view_dimensions(elements: list[DesignElement], ppi: int) -> ViewDimensions:
    if not elements:
        return ViewDimensions(0.0, 0.0)

    min_x = min(el.position.x for el in elements)
    min_y = min(el.position.y for el in elements)
    max_x = max(el.right for el in elements)
    max_y = max(el.bottom for el in elements)

    return ViewDimensions(
        width_inches=_to_inches(max_x - min_x, ppi),
        height_inches=_to_inches(max_y - min_y, ppi),
    )


def _to_inches(pixels: float, ppi: int) -> float:
    inches = Decimal(str(pixels)) / Decimal(ppi)
    return float(inches.quantize(_HUNDREDTHS, rounding=ROUND_HALF_UP))
