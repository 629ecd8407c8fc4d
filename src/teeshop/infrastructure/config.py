"""Runtime configuration read from the environment.

A ``.env`` file in the working directory is loaded first, so deployments
can keep pricing overrides next to the data directory. Every setting has a
default; unset variables keep it.

    TEXT_PRINTING_COST      default 100
    IMAGE_PRINTING_COST     default 100
    BACK_DESIGN_COST        default 100
    STANDARD_SHIPPING_COST  default 100
    RUSH_SHIPPING_COST      default 300
    TAX_RATE                default 0.18
    PIXELS_PER_INCH         default 72
    CURRENCY                default INR
    TEESHOP_DATA_DIR        default <project root>/data
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from teeshop.domain.exceptions import ValidationError
from teeshop.domain.model.value_objects import DEFAULT_CURRENCY, Money
from teeshop.domain.service.quote_engine import PricingConfig

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_MONEY_SETTINGS = {
    "TEXT_PRINTING_COST": "text_printing_cost",
    "IMAGE_PRINTING_COST": "image_printing_cost",
    "BACK_DESIGN_COST": "back_design_cost",
    "STANDARD_SHIPPING_COST": "standard_shipping_cost",
    "RUSH_SHIPPING_COST": "rush_shipping_cost",
}


def load_environment() -> None:
    """Load ``.env`` without overriding variables already set."""
    load_dotenv(find_dotenv(usecwd=True), override=False)


def load_pricing_config(environ: Mapping[str, str] | None = None) -> PricingConfig:
    """Build a PricingConfig from *environ* (``os.environ`` by default)."""
    env = os.environ if environ is None else environ
    currency = env.get("CURRENCY", DEFAULT_CURRENCY).strip() or DEFAULT_CURRENCY
    defaults = PricingConfig()

    overrides: dict[str, object] = {"currency": currency}
    for variable, attr in _MONEY_SETTINGS.items():
        raw = env.get(variable)
        amount = getattr(defaults, attr).amount if raw is None else raw
        overrides[attr] = Money.of(amount, currency)

    if "TAX_RATE" in env:
        overrides["tax_rate"] = _decimal(env["TAX_RATE"], "TAX_RATE")
    if "PIXELS_PER_INCH" in env:
        overrides["pixels_per_inch"] = _int(env["PIXELS_PER_INCH"], "PIXELS_PER_INCH")

    return PricingConfig(**overrides)


def data_dir(environ: Mapping[str, str] | None = None) -> Path:
    env = os.environ if environ is None else environ
    configured = env.get("TEESHOP_DATA_DIR")
    return Path(configured) if configured else _DEFAULT_DATA_DIR


def _decimal(raw: str, variable: str) -> Decimal:
    try:
        value = Decimal(raw.strip())
    except InvalidOperation as exc:
        raise ValidationError(f"{variable} must be a number, got {raw!r}") from exc
    if not value.is_finite():
        raise ValidationError(f"{variable} must be a finite number, got {raw!r}")
    return value


def _int(raw: str, variable: str) -> int:
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValidationError(f"{variable} must be an integer, got {raw!r}") from exc
