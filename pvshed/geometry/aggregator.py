"""Roll per-pan calepinage results up into building totals."""

from typing import Optional

from ..core.models import BuildingLayout, PvSummary, SurfaceLayoutResult
from .layout import round2


def summarize(
    pan_a: Optional[SurfaceLayoutResult],
    pan_b: Optional[SurfaceLayoutResult],
) -> PvSummary:
    """Sum pan A and pan B; a pan without a layout counts as zero."""
    count_a = pan_a.panel_count if pan_a else 0
    count_b = pan_b.panel_count if pan_b else 0
    kwc_a = pan_a.power_kwc if pan_a else 0.0
    kwc_b = pan_b.power_kwc if pan_b else 0.0

    return PvSummary(
        panel_count_a=count_a,
        panel_count_b=count_b,
        power_kwc_a=kwc_a,
        power_kwc_b=kwc_b,
        panel_count=count_a + count_b,
        power_kwc=round2(kwc_a + kwc_b),
    )


def summarize_layout(layout: BuildingLayout) -> PvSummary:
    return summarize(layout.zone("pan_a"), layout.zone("pan_b"))
