"""
pvshed CLI.

Command-line interface to derive shed geometry and PV layouts.

Usage:
    pvshed derive --type SYM --width 15 --bays 4
    pvshed derive --type ASYM2 --width 25.5 --json
    pvshed layout --height 3 --length 10 --orientation auto
    pvshed variants
    pvshed panels
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError as SchemaError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .catalog.building_types import get_profile
from .catalog.panels import PANEL_LIBRARY, get_panel
from .catalog.variants import VariantRegistry, load_variant_overrides, variant_key
from .core.config import settings
from .core.models import (
    BuildingParameters,
    DerivedGeometry,
    LayoutParameters,
    PanelModel,
    PanelOrientation,
    StructuralType,
)
from .geometry.derivation import create_building_config
from .geometry.layout import layout_surface
from .geometry.presets import default_params_for_type, params_for_width_change
from .utils.logging_config import get_logger, setup_logging
from .utils.validation import ValidationError, validate_building_params

app = typer.Typer(
    name="pvshed",
    help="pvshed - Parametric geometry and PV layout of solar sheds",
    add_completion=False,
)
console = Console()
logger = get_logger(__name__)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Configure logging before any command runs."""
    setup_logging(level="DEBUG" if verbose else None)


def _load_registry(variants_file: Optional[Path]) -> VariantRegistry:
    registry = VariantRegistry()
    path = variants_file or settings.variants_file
    if path is None:
        return registry

    try:
        overrides = load_variant_overrides(path)
    # JSONDecodeError and pydantic ValidationError are both ValueErrors
    except (OSError, ValueError) as e:
        logger.debug("Rejected variants file %s", path, exc_info=True)
        console.print(f"[red]Invalid variants file[/red] {escape(str(path))}: {escape(str(e))}")
        raise typer.Exit(1)
    registry.replace_overrides(overrides)
    return registry


def _resolve_panel(panel_id: Optional[str]) -> PanelModel:
    if panel_id is None:
        return settings.default_panel()
    panel = get_panel(panel_id)
    if panel is None:
        known = ", ".join(p.id for p in PANEL_LIBRARY)
        console.print(f"[red]Unknown panel '{panel_id}'.[/red] Known panels: {known}")
        raise typer.Exit(1)
    return panel


def _layout_params(
    margin: Optional[float],
    gap: Optional[float],
    orientation: Optional[PanelOrientation],
) -> LayoutParameters:
    base = settings.layout_parameters()
    return LayoutParameters(
        margin_m=base.margin_m if margin is None else margin,
        gap_m=base.gap_m if gap is None else gap,
        orientation=orientation or base.orientation,
    )


def _geometry_table(derived: DerivedGeometry) -> Table:
    table = Table(title="Derived geometry")
    table.add_column("Quantity")
    table.add_column("Pan A", justify="right")
    table.add_column("Pan B", justify="right")

    table.add_row("Pan width (m)", f"{derived.pan_width_a:.2f}", f"{derived.pan_width_b:.2f}")
    table.add_row("Height delta (m)", f"{derived.height_delta_a:.2f}", f"{derived.height_delta_b:.2f}")
    table.add_row("Rafter (m)", f"{derived.rafter_length_a:.2f}", f"{derived.rafter_length_b:.2f}")
    table.add_row("Surface (m2)", f"{derived.surface_a:.2f}", f"{derived.surface_b:.2f}")
    table.add_row("PV zone", "yes" if derived.zone_pv_a else "no", "yes" if derived.zone_pv_b else "no")
    table.add_row("Panels", str(derived.panel_count_a), str(derived.panel_count_b))
    table.add_row("Power (kWc)", f"{derived.power_kwc_a:.2f}", f"{derived.power_kwc_b:.2f}")
    return table


@app.command()
def derive(
    structural_type: StructuralType = typer.Option(..., "--type", "-t", help="Structural type"),
    width: Optional[float] = typer.Option(None, "--width", "-w", help="Width (m), first catalog width if omitted"),
    spacing: float = typer.Option(6.0, "--spacing", help="Bay spacing (6 or 7.5 m)"),
    bays: int = typer.Option(4, "--bays", "-b", help="Number of bays (1-20)"),
    eave_left: Optional[float] = typer.Option(None, "--eave-left", help="Left eave height (m)"),
    eave_right: Optional[float] = typer.Option(None, "--eave-right", help="Right eave height (m)"),
    ridge: Optional[float] = typer.Option(None, "--ridge", help="Ridge height (m)"),
    panel_id: Optional[str] = typer.Option(None, "--panel", help="Panel model id"),
    orientation: Optional[PanelOrientation] = typer.Option(None, "--orientation", help="Panel orientation"),
    margin: Optional[float] = typer.Option(None, "--margin", help="Perimeter margin (m)"),
    gap: Optional[float] = typer.Option(None, "--gap", help="Gap between panels (m)"),
    variants_file: Optional[Path] = typer.Option(None, "--variants", help="JSON variant overrides"),
    ruleset: Optional[str] = typer.Option(None, "--ruleset", help="Ruleset version tag"),
    as_json: bool = typer.Option(False, "--json", help="Print the configuration as JSON"),
    strict: bool = typer.Option(True, "--strict/--no-strict", help="Reject widths outside the catalog"),
):
    """
    Derive the geometry and PV layout of a shed.

    Heights default to the variant of the chosen (type, width).
    """
    registry = _load_registry(variants_file)
    panel = _resolve_panel(panel_id)
    layout = _layout_params(margin, gap, orientation)

    try:
        params = default_params_for_type(structural_type, registry)
        if width is not None:
            params = params_for_width_change(params, width, registry)
        overrides = {"spacing": spacing, "bay_count": bays}
        if eave_left is not None:
            overrides["eave_height_left"] = eave_left
        if eave_right is not None:
            overrides["eave_height_right"] = eave_right
        if ridge is not None:
            overrides["ridge_height"] = ridge
        params = BuildingParameters.model_validate({**params.model_dump(), **overrides})
        if strict:
            validate_building_params(params)
    except ValidationError as e:
        console.print(f"[red]Invalid {e.field}:[/red] {e}")
        if e.suggestions:
            console.print(f"Allowed: {', '.join(e.suggestions)}")
        raise typer.Exit(1)
    except SchemaError as e:
        console.print(f"[red]Invalid parameters:[/red] {e.error_count()} error(s)")
        for error in e.errors():
            console.print(f"  {'.'.join(str(p) for p in error['loc'])}: {error['msg']}")
        raise typer.Exit(1)

    config = create_building_config(
        params,
        ruleset or settings.ruleset_version,
        registry=registry,
        panel=panel,
        layout=layout,
    )
    derived = config.derived

    if as_json:
        typer.echo(config.model_dump_json(indent=2))
        return

    profile = get_profile(params.type)
    console.print(Panel.fit(
        f"[bold blue]{profile.label}[/bold blue] {variant_key(params.type, params.width)}\n"
        f"{derived.length:.2f} m x {derived.total_width:.2f} m, pitch {derived.pitch_angle:g} deg, "
        f"ridge at {derived.ridge_position:.2f} m"
    ))
    if derived.variant_synthesized:
        console.print("[yellow]![/yellow] No variant for this width, heights synthesized")

    console.print(_geometry_table(derived))

    if derived.has_intermediate_poles:
        offsets = ", ".join(f"{o:.2f}" for o in derived.pole_offsets)
        console.print(f"Poles: {derived.intermediate_pole_count} per row at {offsets} m")

    console.print(
        f"[green]✓[/green] {derived.panel_count} x {panel.name}: "
        f"[bold]{derived.power_kwc:.2f} kWc[/bold]"
    )


@app.command()
def layout(
    height: float = typer.Option(..., "--height", help="Surface height along the rafter (m)"),
    length: float = typer.Option(..., "--length", help="Surface length along the ridge (m)"),
    panel_id: Optional[str] = typer.Option(None, "--panel", help="Panel model id"),
    orientation: Optional[PanelOrientation] = typer.Option(None, "--orientation", help="Panel orientation"),
    margin: Optional[float] = typer.Option(None, "--margin", help="Perimeter margin (m)"),
    gap: Optional[float] = typer.Option(None, "--gap", help="Gap between panels (m)"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
):
    """Lay out panels on a single rectangular surface."""
    panel = _resolve_panel(panel_id)
    result = layout_surface(height, length, panel, _layout_params(margin, gap, orientation))

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
        return

    console.print(
        f"{result.columns} x {result.rows} {result.orientation.value} = "
        f"[bold]{result.panel_count}[/bold] panels, {result.power_kwc:.2f} kWc"
    )


@app.command()
def variants(
    variants_file: Optional[Path] = typer.Option(None, "--variants", help="JSON variant overrides"),
):
    """List the effective variant table."""
    registry = _load_registry(variants_file)

    table = Table(title="Variants")
    table.add_column("Key")
    table.add_column("Eave L", justify="right")
    table.add_column("Eave R", justify="right")
    table.add_column("Ridge", justify="right")
    table.add_column("Ridge @", justify="right")
    table.add_column("Pole @", justify="right")

    def fmt(value: Optional[float]) -> str:
        return "-" if value is None else f"{value:g}"

    for (structural_type, width), variant in registry.variants().items():
        key = variant_key(structural_type, width)
        if registry.overrides.get((structural_type, width)) is not None:
            key = f"{key} *"
        table.add_row(
            key,
            fmt(variant.eave_height_left),
            fmt(variant.eave_height_right),
            fmt(variant.ridge_height),
            fmt(variant.ridge_offset_from_left),
            fmt(variant.pole_offset_from_left),
        )
    console.print(table)


@app.command()
def panels():
    """List the panel library."""
    table = Table(title="Panels")
    table.add_column("Id")
    table.add_column("Manufacturer")
    table.add_column("Size (m)")
    table.add_column("Power (W)", justify="right")

    for panel in PANEL_LIBRARY:
        table.add_row(
            panel.id,
            panel.manufacturer,
            f"{panel.length_m:g} x {panel.width_m:g}",
            f"{panel.power_w:g}",
        )
    console.print(table)


if __name__ == "__main__":
    app()
