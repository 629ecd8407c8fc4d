"""End-to-end tests for the command-line interface."""

import json
import re

import pytest
from click.testing import CliRunner

from teeshop.infrastructure.cli.main import cli
from tests.builders import element_dict

DESIGN_DOC = {
    "name": "Team Shirt",
    "tshirt": {"style": "Classic Crew", "color": "Black"},
    "isPublic": True,
    "elements": [
        element_dict("a", x=10, y=20, width=140, height=50),
        element_dict("b", type="clipart", x=50, y=10, width=30, height=30),
    ],
}


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("TEESHOP_DATA_DIR", str(tmp_path / "data"))
    for variable in ("TAX_RATE", "CURRENCY", "PIXELS_PER_INCH", "STANDARD_SHIPPING_COST"):
        monkeypatch.delenv(variable, raising=False)
    return CliRunner()


@pytest.fixture
def design_file(tmp_path):
    path = tmp_path / "design.json"
    path.write_text(json.dumps(DESIGN_DOC))
    return path


def _invoke(runner, *args):
    result = runner.invoke(cli, list(args))
    assert result.exit_code == 0, result.output
    return result.output


def _saved_design_id(runner, design_file):
    _invoke(runner, "style", "add", "--name", "Classic Crew", "--price", "250")
    output = _invoke(
        runner, "design", "save", "--file", str(design_file), "--email", "owner@example.com"
    )
    return re.search(r"Design (\S+)  \(Team Shirt\)", output).group(1)


class TestDesignCommands:

    def test_save_prints_dimensions(self, runner, design_file):
        _invoke(runner, "style", "add", "--name", "Classic Crew", "--price", "250")
        output = _invoke(
            runner, "design", "save", "--file", str(design_file), "--email", "o@example.com"
        )
        assert "Design saved." in output
        assert re.search(r"front\s+1\.94\s+0\.83", output)
        assert re.search(r"back\s+0\.00\s+0\.00", output)
        assert "Public:  yes" in output

    def test_show_unknown_design(self, runner):
        result = runner.invoke(cli, ["design", "show", "--id", "nope"])
        assert result.exit_code != 0
        assert "Design 'nope' not found" in result.output

    def test_invalid_element(self, runner, tmp_path):
        bad = dict(DESIGN_DOC, elements=[element_dict(width=-1)])
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(bad))
        result = runner.invoke(
            cli, ["design", "save", "--file", str(path), "--email", "o@example.com"]
        )
        assert result.exit_code != 0
        assert "cannot be negative" in result.output


class TestQuoteCommand:

    def test_explicit_flags(self, runner, design_file):
        design_id = _saved_design_id(runner, design_file)
        output = _invoke(
            runner, "quote", "--design", design_id, "--sizes", "M:2,L:3",
            "--text", "--no-image", "--no-back",
        )
        assert "5 units, standard shipping" in output
        assert re.search(r"Text printing\s+INR 100\.00", output)
        assert "Image printing" not in output
        assert re.search(r"Total\s+INR 1693\.00", output)

    def test_derived_flags_and_rush(self, runner, design_file):
        design_id = _saved_design_id(runner, design_file)
        output = _invoke(
            runner, "quote", "--design", design_id, "--sizes", "M:2,L:3", "--shipping", "rush"
        )
        assert "Image printing" in output
        assert re.search(r"Shipping\s+INR 300\.00", output)

    def test_zero_quantity(self, runner, design_file):
        design_id = _saved_design_id(runner, design_file)
        result = runner.invoke(cli, ["quote", "--design", design_id, "--sizes", "M:0"])
        assert result.exit_code != 0
        assert "greater than 0" in result.output

    def test_malformed_sizes(self, runner, design_file):
        design_id = _saved_design_id(runner, design_file)
        result = runner.invoke(cli, ["quote", "--design", design_id, "--sizes", "M=2"])
        assert result.exit_code != 0
        assert "Invalid size format" in result.output


class TestOrderCommands:

    def test_checkout_then_challan(self, runner, design_file):
        design_id = _saved_design_id(runner, design_file)
        output = _invoke(
            runner, "order", "checkout", "--design", design_id, "--sizes", "M:2,L:3",
            "--name", "Asha", "--email", "asha@example.com", "--address", "Pune",
        )
        order_number = re.search(r"Order (ORD-\d{6}-\d+) created\.", output).group(1)
        assert "status=pending, payment=pending" in output

        shown = _invoke(runner, "order", "show", "--number", order_number)
        assert "Asha <asha@example.com>" in shown

        challan = _invoke(runner, "order", "challan", "--number", order_number)
        assert f"Order Number: {order_number}" in challan
        assert 'Dimensions: 1.94" x 0.83"' in challan
        assert "No design elements" in challan
        assert re.search(r"Total\s+5", challan)

    def test_challan_for_unknown_order(self, runner):
        result = runner.invoke(cli, ["order", "challan", "--number", "ORD-000000-0"])
        assert result.exit_code != 0
        assert "not found" in result.output


class TestStyleCommands:

    def test_list(self, runner):
        _invoke(runner, "style", "add", "--name", "Heavy", "--price", "400",
                "--sizes", "M:0,2XL:60")
        output = _invoke(runner, "style", "list")
        assert "Heavy" in output
        assert "2XL(+60)" in output

    def test_empty_catalog(self, runner):
        assert "No styles found." in _invoke(runner, "style", "list")


class TestBadConfiguration:

    @pytest.mark.parametrize(
        "variable,value,message",
        [
            ("TAX_RATE", "abc", "TAX_RATE must be a number"),
            ("TAX_RATE", "1.5", "Tax rate must be in [0, 1)"),
            ("TAX_RATE", "NaN", "TAX_RATE must be a finite number"),
            ("PIXELS_PER_INCH", "x", "PIXELS_PER_INCH must be an integer"),
        ],
    )
    def test_quote_reports_bad_setting(self, runner, monkeypatch, variable, value, message):
        monkeypatch.setenv(variable, value)
        result = runner.invoke(cli, ["quote", "--design", "x", "--sizes", "M:1"])
        assert result.exit_code == 1
        assert f"Error: {message}" in result.output

    def test_design_save_reports_bad_setting(self, runner, monkeypatch, design_file):
        monkeypatch.setenv("PIXELS_PER_INCH", "x")
        result = runner.invoke(
            cli, ["design", "save", "--file", str(design_file), "--email", "o@example.com"]
        )
        assert result.exit_code == 1
        assert "PIXELS_PER_INCH must be an integer" in result.output

    def test_challan_reports_bad_setting(self, runner, monkeypatch):
        monkeypatch.setenv("TAX_RATE", "abc")
        result = runner.invoke(cli, ["order", "challan", "--number", "ORD-000000-0"])
        assert result.exit_code == 1
        assert "TAX_RATE must be a number" in result.output

    def test_style_add_reports_nan_tax_rate(self, runner, monkeypatch):
        monkeypatch.setenv("TAX_RATE", "sNaN")
        result = runner.invoke(cli, ["style", "add", "--name", "Other", "--price", "250"])
        assert result.exit_code == 1
        assert "TAX_RATE must be a finite number" in result.output


class TestMalformedInput:

    def _save(self, runner, tmp_path, document):
        path = tmp_path / "odd.json"
        path.write_text(json.dumps(document))
        return runner.invoke(
            cli, ["design", "save", "--file", str(path), "--email", "o@example.com"]
        )

    def test_tshirt_must_be_an_object(self, runner, tmp_path):
        result = self._save(runner, tmp_path, dict(DESIGN_DOC, tshirt="Classic Crew"))
        assert result.exit_code == 2
        assert "'tshirt' must be an object" in result.output

    def test_name_must_be_text(self, runner, tmp_path):
        result = self._save(runner, tmp_path, dict(DESIGN_DOC, name=42))
        assert result.exit_code == 2
        assert "'name' must be a string" in result.output

    def test_style_must_be_text(self, runner, tmp_path):
        doc = dict(DESIGN_DOC, tshirt={"style": ["Classic Crew"], "color": "Black"})
        result = self._save(runner, tmp_path, doc)
        assert result.exit_code == 2
        assert "'style' must be a string" in result.output

    def test_elements_must_be_a_list(self, runner, tmp_path):
        result = self._save(runner, tmp_path, dict(DESIGN_DOC, elements={"a": 1}))
        assert result.exit_code == 2
        assert "'elements' must be a list" in result.output

    def test_element_must_be_an_object(self, runner, tmp_path):
        result = self._save(runner, tmp_path, dict(DESIGN_DOC, elements=["text"]))
        assert result.exit_code == 1
        assert "Malformed design element" in result.output

    def test_duplicate_size_in_quote(self, runner, design_file):
        design_id = _saved_design_id(runner, design_file)
        result = runner.invoke(cli, ["quote", "--design", design_id, "--sizes", "M:2,M:3"])
        assert result.exit_code == 2
        assert "Duplicate size 'M'" in result.output

    def test_duplicate_size_in_style_add(self, runner):
        result = runner.invoke(
            cli, ["style", "add", "--name", "Heavy", "--price", "400", "--sizes", "M:0,M:10"]
        )
        assert result.exit_code == 2
        assert "Duplicate size 'M'" in result.output
