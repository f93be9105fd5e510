"""
Panel Layout (calepinage)

Fits the densest regular grid of PV modules on a rectangular roof surface:
- Perimeter margin and inter-panel gap
- Portrait (module length along the rafter) or landscape (module length
  along the building)
- Automatic mode keeps whichever orientation holds more modules

Surfaces too small for a single module give an empty result, never an error.
"""

import math

from ..core.models import (
    LayoutParameters,
    PanelModel,
    PanelOrientation,
    SurfaceLayoutResult,
)


def round2(value: float) -> float:
    """Round half up to 2 decimals."""
    return math.floor(value * 100 + 0.5) / 100


def fit_count(available: float, panel_size: float, gap: float) -> int:
    """
    Number of modules of ``panel_size`` that fit in ``available`` metres.

    n modules take n * size + (n - 1) * gap, hence
    n <= (available + gap) / (size + gap).
    """
    if available <= 0 or panel_size <= 0:
        return 0
    return max(0, math.floor((available + gap) / (panel_size + gap)))


def _grid(usable_height: float, usable_width: float, panel: PanelModel, gap: float,
          orientation: PanelOrientation) -> tuple[int, int]:
    """(columns, rows) of one fixed orientation."""
    if orientation == PanelOrientation.PORTRAIT:
        rows = fit_count(usable_height, panel.length_m, gap)
        columns = fit_count(usable_width, panel.width_m, gap)
    else:
        rows = fit_count(usable_height, panel.width_m, gap)
        columns = fit_count(usable_width, panel.length_m, gap)
    return columns, rows


def _empty(zone_name: str, surface: float, layout: LayoutParameters) -> SurfaceLayoutResult:
    orientation = layout.orientation
    if orientation == PanelOrientation.AUTO:
        orientation = PanelOrientation.PORTRAIT
    return SurfaceLayoutResult(
        zone_name=zone_name,
        surface_m2=round2(surface),
        usable_surface_m2=0.0,
        columns=0,
        rows=0,
        panel_count=0,
        power_kwc=0.0,
        orientation=orientation,
    )


def layout_surface(
    surface_height: float,
    surface_width: float,
    panel: PanelModel,
    layout: LayoutParameters,
    zone_name: str = "surface",
) -> SurfaceLayoutResult:
    """
    Compute the panel grid of one roof surface.

    Args:
        surface_height: Rafter length, eave to ridge (m)
        surface_width: Building length along the ridge (m)
        panel: Module dimensions and rating
        layout: Margin, gap and orientation preference
        zone_name: Label carried into the result (e.g. "pan_a")

    Returns:
        SurfaceLayoutResult with the selected grid and its power
    """
    if surface_height == 0 or surface_width == 0:
        return _empty(zone_name, 0.0, layout)

    surface = surface_height * surface_width
    usable_height = surface_height - 2 * layout.margin_m
    usable_width = surface_width - 2 * layout.margin_m

    if usable_height <= 0 or usable_width <= 0:
        return _empty(zone_name, surface, layout)

    gap = layout.gap_m
    if layout.orientation == PanelOrientation.AUTO:
        portrait = _grid(usable_height, usable_width, panel, gap, PanelOrientation.PORTRAIT)
        landscape = _grid(usable_height, usable_width, panel, gap, PanelOrientation.LANDSCAPE)
        if portrait[0] * portrait[1] >= landscape[0] * landscape[1]:
            orientation, (columns, rows) = PanelOrientation.PORTRAIT, portrait
        else:
            orientation, (columns, rows) = PanelOrientation.LANDSCAPE, landscape
    else:
        orientation = layout.orientation
        columns, rows = _grid(usable_height, usable_width, panel, gap, orientation)

    panel_count = columns * rows
    return SurfaceLayoutResult(
        zone_name=zone_name,
        surface_m2=round2(surface),
        usable_surface_m2=round2(usable_height * usable_width),
        columns=columns,
        rows=rows,
        panel_count=panel_count,
        power_kwc=round2(panel_count * panel.power_w / 1000),
        orientation=orientation,
    )
