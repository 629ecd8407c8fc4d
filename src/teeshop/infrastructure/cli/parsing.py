"""Option-string parsing shared by the CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click

from teeshop.application.dto import DesignSpec


def parse_pairs(raw: str, what: str) -> list[tuple[str, str]]:
    """Parse 'M:2,L:3' into [('M', '2'), ('L', '3')].

    A label may appear only once.
    """
    pairs: list[tuple[str, str]] = []
    seen: set[str] = set()
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid {what} format '{pair}'. Expected 'Size:Value'."
            )
        label, value = pair.rsplit(":", 1)
        label = label.strip()
        if label in seen:
            raise click.BadParameter(f"Duplicate {what} '{label}'.")
        seen.add(label)
        pairs.append((label, value.strip()))
    return pairs


def parse_sizes(raw: str) -> dict[str, int]:
    """Parse 'M:2,L:3' into {'M': 2, 'L': 3}."""
    sizes: dict[str, int] = {}
    for label, qty_str in parse_pairs(raw, "size"):
        try:
            sizes[label] = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for size '{label}'."
            )
    return sizes


def read_design_file(path: Path) -> DesignSpec:
    """Read a design document as exported by the design editor."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"{path} is not valid JSON: {exc}")
    if not isinstance(raw, dict):
        raise click.BadParameter(f"{path} must contain a JSON object")

    tshirt = raw.get("tshirt")
    if tshirt is None:
        tshirt = {}
    elif not isinstance(tshirt, dict):
        raise click.BadParameter(f"{path}: 'tshirt' must be an object with style and color")
    elements = raw.get("elements")
    if elements is not None and not isinstance(elements, list):
        raise click.BadParameter(f"{path}: 'elements' must be a list")

    is_public = raw.get("isPublic", raw.get("is_public"))
    return DesignSpec(
        name=_optional_text(path, raw, "name"),
        style=_optional_text(path, tshirt, "style"),
        color=_optional_text(path, tshirt, "color"),
        elements=elements,
        is_public=bool(is_public) if is_public is not None else None,
    )


def _optional_text(path: Path, data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise click.BadParameter(f"{path}: '{key}' must be a string")
    return value
