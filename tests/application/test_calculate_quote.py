"""Integration tests for the CalculateQuote use case."""

import pytest

from teeshop.application.calculate_quote import CalculateQuoteHandler
from teeshop.domain.exceptions import DesignNotFound, InvalidQuantity, StyleNotFound
from teeshop.domain.model.quote import ShippingMethod
from teeshop.domain.service.quote_engine import PricingConfig
from tests.builders import design, element, style
from tests.fakes import FakeDesignRepository, FakeStyleRepository


def _setup(elements=None, styles=None):
    saved = design(elements=elements)
    handler = CalculateQuoteHandler(
        design_repo=FakeDesignRepository([saved]),
        style_repo=FakeStyleRepository(styles if styles is not None else [style()]),
        config=PricingConfig(),
    )
    return handler, saved.shareable_id


def _lines(dto):
    return [(c.description, c.amount) for c in dto.price_breakdown.additional_costs]


class TestExplicitFlags:

    def test_worked_example(self):
        handler, design_id = _setup(elements=[element(type="clipart", view="back")])
        dto = handler.handle(
            design_id,
            {"M": 2, "L": 3},
            has_text=True,
            has_image=False,
            has_back_design=False,
        )
        assert dto.total_quantity == 5
        assert dto.sizes == {"M": 2, "L": 3}
        assert dto.price_breakdown.base_price == "INR 1250.00"
        assert _lines(dto) == [("Text printing", "INR 100.00")]
        assert dto.price_breakdown.subtotal == "INR 1350.00"
        assert dto.price_breakdown.tax == "INR 243.00"
        assert dto.price_breakdown.shipping == "INR 100.00"
        assert dto.price_breakdown.total == "INR 1693.00"

    def test_rush_shipping(self):
        handler, design_id = _setup(elements=[element(type="text")])
        dto = handler.handle(
            design_id, {"M": 2, "L": 3}, shipping_method=ShippingMethod.RUSH
        )
        assert dto.shipping_method == "rush"
        assert dto.price_breakdown.shipping == "INR 300.00"
        assert dto.price_breakdown.total == "INR 1893.00"


class TestDerivedFlags:

    def test_flags_come_from_elements_when_not_given(self):
        handler, design_id = _setup(
            elements=[element("t", type="text"), element("i", type="image", view="back")]
        )
        dto = handler.handle(design_id, {"M": 1})
        assert [d for d, _ in _lines(dto)] == [
            "Text printing",
            "Image printing",
            "Back design printing",
        ]

    def test_partial_override(self):
        handler, design_id = _setup(
            elements=[element("t", type="text"), element("i", type="image")]
        )
        dto = handler.handle(design_id, {"M": 1}, has_image=False)
        assert [d for d, _ in _lines(dto)] == ["Text printing"]

    def test_derived_matches_explicit(self):
        handler, design_id = _setup(
            elements=[element("t", type="text"), element("c", type="clipart")]
        )
        derived = handler.handle(design_id, {"S": 1, "XL": 2})
        explicit = handler.handle(
            design_id, {"S": 1, "XL": 2},
            has_text=True, has_image=True, has_back_design=False,
        )
        assert derived.price_breakdown == explicit.price_breakdown


class TestQuoteFailures:

    def test_zero_quantity(self):
        handler, design_id = _setup()
        with pytest.raises(InvalidQuantity):
            handler.handle(design_id, {"M": 0})

    def test_unknown_design(self):
        handler, _ = _setup()
        with pytest.raises(DesignNotFound):
            handler.handle("does-not-exist", {"M": 1})

    def test_inactive_style_is_not_found(self):
        handler, design_id = _setup(styles=[style(is_active=False)])
        with pytest.raises(StyleNotFound, match="Classic Crew"):
            handler.handle(design_id, {"M": 1})
