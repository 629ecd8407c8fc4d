"""Unit tests for the dimension calculator."""

from itertools import permutations

import pytest

from teeshop.domain.exceptions import ValidationError
from teeshop.domain.model.design import View, ViewDimensions
from teeshop.domain.service.dimension_calculator import PIXELS_PER_INCH, compute_dimensions
from tests.builders import element


class TestEmptyViews:

    def test_no_elements_gives_zero_for_every_view(self):
        dims = compute_dimensions([])
        assert set(dims) == set(View)
        for view in View:
            assert dims[view] == ViewDimensions(0.0, 0.0)

    def test_views_without_elements_stay_zero(self):
        dims = compute_dimensions([element(view="front", width=72, height=144)])
        assert dims[View.BACK] == ViewDimensions(0.0, 0.0)
        assert dims[View.LEFT] == ViewDimensions(0.0, 0.0)
        assert dims[View.RIGHT] == ViewDimensions(0.0, 0.0)


class TestBoundingBox:

    def test_worked_example(self):
        elements = [
            element("a", x=10, y=20, width=140, height=50),
            element("b", x=50, y=10, width=30, height=30),
        ]
        dims = compute_dimensions(elements)
        # box 10..150 x 10..70
        assert dims[View.FRONT].width_inches == 1.94
        assert dims[View.FRONT].height_inches == 0.83

    def test_box_spans_furthest_right_edge(self):
        elements = [
            element("a", x=10, y=20, width=100, height=50),
            element("b", x=50, y=10, width=30, height=30),
        ]
        dims = compute_dimensions(elements)
        # box 10..110 x 10..70
        assert dims[View.FRONT] == ViewDimensions(1.39, 0.83)

    def test_single_element_converts_at_72_ppi(self):
        dims = compute_dimensions([element(x=300, y=300, width=144, height=36)])
        assert PIXELS_PER_INCH == 72
        assert dims[View.FRONT] == ViewDimensions(2.0, 0.5)

    def test_views_are_measured_independently(self):
        elements = [
            element("f", view="front", x=0, y=0, width=72, height=72),
            element("b", view="back", x=500, y=500, width=144, height=72),
        ]
        dims = compute_dimensions(elements)
        assert dims[View.FRONT] == ViewDimensions(1.0, 1.0)
        assert dims[View.BACK] == ViewDimensions(2.0, 1.0)

    def test_rotation_is_ignored(self):
        straight = compute_dimensions([element(width=144, height=36)])
        rotated = compute_dimensions([element(width=144, height=36, rotation=90)])
        assert straight == rotated

    def test_rounds_half_up_to_hundredths(self):
        # 0.45 in = 32.4 px; 0.005 in rounds up
        dims = compute_dimensions([element(width=0.36, height=32.4)])
        assert dims[View.FRONT].width_inches == 0.01
        assert dims[View.FRONT].height_inches == 0.45

    def test_zero_size_element_gives_zero_extent(self):
        dims = compute_dimensions([element(x=40, y=40, width=0, height=0)])
        assert dims[View.FRONT] == ViewDimensions(0.0, 0.0)
        assert not dims[View.FRONT].has_content

    def test_custom_pixels_per_inch(self):
        dims = compute_dimensions([element(width=300, height=150)], pixels_per_inch=300)
        assert dims[View.FRONT] == ViewDimensions(1.0, 0.5)

    def test_non_positive_pixels_per_inch_rejected(self):
        with pytest.raises(ValidationError, match="pixels_per_inch"):
            compute_dimensions([element()], pixels_per_inch=0)


class TestProperties:

    def test_box_contains_every_element(self):
        elements = [
            element("a", x=5, y=80, width=40, height=10),
            element("b", x=-20, y=15, width=10, height=200),
            element("c", x=60, y=-5, width=100, height=20),
        ]
        dims = compute_dimensions(elements)
        min_x = min(e.position.x for e in elements)
        max_x = max(e.position.x + e.size.width for e in elements)
        min_y = min(e.position.y for e in elements)
        max_y = max(e.position.y + e.size.height for e in elements)
        for e in elements:
            assert min_x <= e.position.x and max_x >= e.right
            assert min_y <= e.position.y and max_y >= e.bottom
        assert dims[View.FRONT].width_inches == round((max_x - min_x) / 72, 2)
        assert dims[View.FRONT].height_inches == round((max_y - min_y) / 72, 2)

    def test_order_of_elements_does_not_matter(self):
        elements = [
            element("a", x=10, y=20, width=100, height=50),
            element("b", x=50, y=10, width=30, height=30, view="back"),
            element("c", x=0, y=90, width=15, height=15),
        ]
        expected = compute_dimensions(elements)
        for ordering in permutations(elements):
            assert compute_dimensions(list(ordering)) == expected

    def test_input_is_not_modified(self):
        elements = [element("a"), element("b", x=30)]
        snapshot = list(elements)
        compute_dimensions(elements)
        assert elements == snapshot
