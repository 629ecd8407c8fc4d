"""CLI commands for the Design aggregate."""

from __future__ import annotations

from pathlib import Path

import click

from teeshop.application.dto import DesignDTO
from teeshop.application.save_design import SaveDesignHandler
from teeshop.application.show_design import ShowDesignHandler
from teeshop.application.update_design import UpdateDesignHandler
from teeshop.domain.exceptions import DomainException
from teeshop.infrastructure.bootstrap import design_repository, pricing_config
from teeshop.infrastructure.cli.parsing import read_design_file

_design_file = click.option(
    "--file",
    "design_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Design JSON exported by the editor.",
)


def _display_design(dto: DesignDTO) -> None:
    click.echo(f"Design {dto.id}  ({dto.name})")
    click.echo(f"T-shirt: {dto.style} / {dto.color}")
    click.echo(f"Public:  {'yes' if dto.is_public else 'no'}")
    click.echo(f"Elements: {len(dto.elements)}")
    click.echo()
    click.echo(f"  {'View':<8} {'Width (in)':>12} {'Height (in)':>12}")
    click.echo(f"  {'-'*34}")
    for dims in dto.dimensions:
        click.echo(
            f"  {dims.view:<8} {dims.width_inches:>12.2f} {dims.height_inches:>12.2f}"
        )


@click.command("save")
@_design_file
@click.option("--email", required=True, help="Owner email address.")
def design_save(design_file: Path, email: str) -> None:
    """Save a new design and compute its print dimensions."""
    spec = read_design_file(design_file)

    try:
        handler = SaveDesignHandler(
            design_repo=design_repository(),
            pixels_per_inch=pricing_config().pixels_per_inch,
        )
        dto = handler.handle(spec, email=email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Design saved.")
    _display_design(dto)


@click.command("update")
@click.option("--id", "design_id", required=True, help="Shareable design ID.")
@_design_file
def design_update(design_id: str, design_file: Path) -> None:
    """Update an existing design (dimensions are recomputed)."""
    spec = read_design_file(design_file)

    try:
        handler = UpdateDesignHandler(
            design_repo=design_repository(),
            pixels_per_inch=pricing_config().pixels_per_inch,
        )
        dto = handler.handle(design_id, spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Design updated.")
    _display_design(dto)


@click.command("show")
@click.option("--id", "design_id", required=True, help="Shareable design ID.")
def design_show(design_id: str) -> None:
    """Show a saved design and its print dimensions."""
    handler = ShowDesignHandler(design_repo=design_repository())

    try:
        dto = handler.handle(design_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_design(dto)
