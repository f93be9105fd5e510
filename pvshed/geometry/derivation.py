"""
Building Geometry Derivation

Derives the full roof geometry of a shed from its user parameters:
- Length and total width (with extensions)
- Ridge position and ground width of each pan
- Height delta and exact rafter length of each pan (Pythagoras)
- Roof surfaces
- Intermediate pole rows and the zones they split
- PV eligibility and panel layout of each pan

Pan A is the right-hand pan, pan B the left-hand one. Asymmetric sheds carry
their high eave on the left, so pan A is the long, low pan.

Per-type rules live in TOPOLOGY_RULES, one entry per StructuralType.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from ..catalog.building_types import (
    POLE_WIDTH_THRESHOLD_M,
    PV_MAX_PITCH_DEG,
    PV_MIN_PITCH_DEG,
    TypeProfile,
    get_profile,
)
from ..catalog.panels import DEFAULT_LAYOUT, get_default_panel
from ..catalog.variants import VariantRegistry, variant_key
from ..core.models import (
    BuildingConfig,
    BuildingLayout,
    BuildingParameters,
    DerivedGeometry,
    LayoutParameters,
    PanelModel,
    PolePlacement,
    PoleRequirement,
    StructuralType,
    SurfaceLayoutResult,
    Variant,
)
from .aggregator import summarize
from .layout import layout_surface, round2

logger = logging.getLogger(__name__)


# =============================================================================
# RIDGE POSITION STRATEGIES
# =============================================================================


def _ridge_from_heights(params: BuildingParameters, profile: TypeProfile) -> float:
    """Horizontal run of the left pan at the nominal pitch."""
    tan_pitch = math.tan(math.radians(profile.pitch_deg))
    return abs(params.ridge_height - params.eave_height_left) / tan_pitch


def _ridge_centered(params, variant, profile) -> float:
    return params.width / 2


def _ridge_at_left_edge(params, variant, profile) -> float:
    # No true ridge; the high side is the left edge
    return 0.0


def _ridge_asymmetric(params, variant, profile) -> float:
    if variant.ridge_offset_from_left is not None:
        return variant.ridge_offset_from_left
    return _ridge_from_heights(params, profile)


def _ridge_asymmetric_pole(params, variant, profile) -> float:
    if variant.ridge_offset_from_left is not None:
        return variant.ridge_offset_from_left
    if variant.zone_left is not None:
        return variant.zone_left
    return _ridge_from_heights(params, profile)


# =============================================================================
# HEIGHT DELTA STRATEGIES
# =============================================================================


def _deltas_to_ridge(params: BuildingParameters) -> Tuple[float, float]:
    # Pan A drops to the right eave, pan B to the left eave
    return (
        params.ridge_height - params.eave_height_right,
        params.ridge_height - params.eave_height_left,
    )


def _deltas_mono(params: BuildingParameters) -> Tuple[float, float]:
    return params.eave_height_left - params.eave_height_right, 0.0


def _deltas_canopy(params: BuildingParameters) -> Tuple[float, float]:
    return abs(params.eave_height_left - params.eave_height_right), 0.0


@dataclass(frozen=True)
class TopologyRules:
    """How one structural type places its ridge and measures its pans."""
    ridge_position: Callable[[BuildingParameters, Variant, TypeProfile], float]
    height_deltas: Callable[[BuildingParameters], Tuple[float, float]]
    has_true_ridge: bool


TOPOLOGY_RULES: Dict[StructuralType, TopologyRules] = {
    StructuralType.SYMMETRIC: TopologyRules(_ridge_centered, _deltas_to_ridge, True),
    StructuralType.ASYMMETRIC: TopologyRules(_ridge_asymmetric, _deltas_to_ridge, True),
    StructuralType.ASYMMETRIC_POLE: TopologyRules(_ridge_asymmetric_pole, _deltas_to_ridge, True),
    StructuralType.MONO_PITCH: TopologyRules(_ridge_at_left_edge, _deltas_mono, False),
    StructuralType.CANOPY_LEFT: TopologyRules(_ridge_at_left_edge, _deltas_canopy, False),
    StructuralType.CANOPY_RIGHT: TopologyRules(_ridge_at_left_edge, _deltas_canopy, False),
    StructuralType.CANOPY_DOUBLE: TopologyRules(_ridge_at_left_edge, _deltas_canopy, False),
    StructuralType.CANOPY_FLAT: TopologyRules(_ridge_at_left_edge, _deltas_canopy, False),
}

_missing = set(StructuralType) - set(TOPOLOGY_RULES)
if _missing:
    raise RuntimeError(f"No topology rules for {sorted(t.value for t in _missing)}")

# Fraction of the width at which each pole row stands
PLACEMENT_FRACTIONS: Dict[PolePlacement, Tuple[float, ...]] = {
    PolePlacement.CENTER: (0.5,),
    PolePlacement.LEFT: (0.25,),
    PolePlacement.RIGHT: (0.75,),
    PolePlacement.BOTH: (0.25, 0.75),
}


# =============================================================================
# UNROUNDED GEOMETRY
# =============================================================================


def calculate_length(params: BuildingParameters) -> float:
    return params.bay_count * params.spacing


def calculate_total_width(params: BuildingParameters) -> float:
    return params.width + params.extension_left_width + params.extension_right_width


def ridge_position(params: BuildingParameters, variant: Variant) -> float:
    """Distance of the ridge from the left edge (m)."""
    profile = get_profile(params.type)
    return TOPOLOGY_RULES[params.type].ridge_position(params, variant, profile)


def pan_widths(params: BuildingParameters, variant: Variant) -> Tuple[float, float]:
    """Ground width of pan A (right) and pan B (left)."""
    if not get_profile(params.type).has_two_pans:
        return params.width, 0.0
    ridge = ridge_position(params, variant)
    return params.width - ridge, ridge


def height_deltas(params: BuildingParameters) -> Tuple[float, float]:
    """Vertical drop of pan A and pan B from their high edge to their eave."""
    return TOPOLOGY_RULES[params.type].height_deltas(params)


def rafter_length(pan_width: float, height_delta: float) -> float:
    """Sloped length of a pan: sqrt(width^2 + dh^2)."""
    return math.sqrt(pan_width * pan_width + height_delta * height_delta)


def has_intermediate_poles(params: BuildingParameters) -> bool:
    requirement = get_profile(params.type).pole_requirement
    if requirement == PoleRequirement.ALWAYS:
        return True
    if requirement == PoleRequirement.ABOVE_WIDTH_THRESHOLD:
        return params.width > POLE_WIDTH_THRESHOLD_M
    return False


def intermediate_pole_count(params: BuildingParameters) -> int:
    """One pole per frame line: bays + 1."""
    if not has_intermediate_poles(params):
        return 0
    return params.bay_count + 1


def pole_offsets(params: BuildingParameters, variant: Variant) -> List[float]:
    """
    Distance of every intermediate pole row from the left edge.

    Precedence: variant pole offset, legacy left zone width, ridge position
    (types with a true ridge), then the placement fraction of the type.
    """
    if not has_intermediate_poles(params):
        return []
    if variant.pole_offset_from_left is not None:
        return [variant.pole_offset_from_left]
    if variant.zone_left is not None:
        return [variant.zone_left]
    if TOPOLOGY_RULES[params.type].has_true_ridge:
        return [ridge_position(params, variant)]

    placement = get_profile(params.type).pole_placement or PolePlacement.CENTER
    return [params.width * fraction for fraction in PLACEMENT_FRACTIONS[placement]]


def zone_widths(params: BuildingParameters, variant: Variant) -> List[float]:
    """Spans between walls and pole rows, left to right."""
    edges = [0.0] + sorted(pole_offsets(params, variant)) + [params.width]
    return [right - left for left, right in zip(edges, edges[1:])]


def is_pv_eligible(profile: TypeProfile, rafter: float) -> bool:
    """A pan takes panels when it exists and its pitch suits flush mounting."""
    if rafter <= 0:
        return False
    if profile.flat_mount:
        return True
    return PV_MIN_PITCH_DEG <= profile.pitch_deg <= PV_MAX_PITCH_DEG


# =============================================================================
# LAYOUT
# =============================================================================


def _layout_pans(
    profile: TypeProfile,
    length: float,
    rafter_a: float,
    rafter_b: float,
    panel: PanelModel,
    layout: LayoutParameters,
) -> Tuple[Optional[SurfaceLayoutResult], Optional[SurfaceLayoutResult]]:
    """Calepinage of each PV-eligible pan from its rafter and the building length."""
    pan_a = pan_b = None
    if is_pv_eligible(profile, rafter_a):
        pan_a = layout_surface(rafter_a, length, panel, layout, zone_name="pan_a")
    if is_pv_eligible(profile, rafter_b):
        pan_b = layout_surface(rafter_b, length, panel, layout, zone_name="pan_b")
    return pan_a, pan_b


def _rafters(params: BuildingParameters, variant: Variant) -> Tuple[float, float]:
    width_a, width_b = pan_widths(params, variant)
    delta_a, delta_b = height_deltas(params)
    return rafter_length(width_a, delta_a), rafter_length(width_b, delta_b)


def layout_building(
    params: BuildingParameters,
    registry: Optional[VariantRegistry] = None,
    panel: Optional[PanelModel] = None,
    layout: Optional[LayoutParameters] = None,
) -> BuildingLayout:
    """
    Calepinage of every PV-eligible pan of a building.

    Args:
        params: Building parameters
        registry: Variant lookup (built-in defaults when omitted)
        panel: Module model (library default when omitted)
        layout: Margin/gap/orientation (catalog default when omitted)

    Returns:
        BuildingLayout with one zone per eligible pan
    """
    registry = registry or VariantRegistry()
    panel = panel or get_default_panel()
    layout = layout or DEFAULT_LAYOUT

    variant = registry.resolve_or_synthesize(params.type, params.width)
    rafter_a, rafter_b = _rafters(params, variant)
    pan_a, pan_b = _layout_pans(
        get_profile(params.type), calculate_length(params), rafter_a, rafter_b, panel, layout
    )
    zones = [z for z in (pan_a, pan_b) if z is not None]
    summary = summarize(pan_a, pan_b)

    return BuildingLayout(
        panel=panel,
        layout=layout,
        zones=zones,
        panel_count=summary.panel_count,
        power_kwc=summary.power_kwc,
    )


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================


def derive(
    params: BuildingParameters,
    ruleset_version: str,
    registry: Optional[VariantRegistry] = None,
    panel: Optional[PanelModel] = None,
    layout: Optional[LayoutParameters] = None,
) -> DerivedGeometry:
    """
    Compute the derived geometry snapshot of a building.

    Args:
        params: Building parameters
        ruleset_version: Tag of the pricing/geometry ruleset, echoed back
        registry: Variant lookup (built-in defaults when omitted)
        panel: Module model used for the calepinage
        layout: Calepinage settings

    Returns:
        DerivedGeometry with every value rounded to 2 decimals

    Example:
        params = BuildingParameters(type="SYM", width=15, spacing=6, bay_count=4,
                                    eave_height_left=5.5, eave_height_right=5.5,
                                    ridge_height=6.8)
        geometry = derive(params, "v1")
        print(f"{geometry.panel_count} panels, {geometry.power_kwc} kWc")
    """
    registry = registry or VariantRegistry()
    panel = panel or get_default_panel()
    layout = layout or DEFAULT_LAYOUT

    profile = get_profile(params.type)
    variant = registry.resolve_or_synthesize(params.type, params.width)

    length = calculate_length(params)
    ridge = ridge_position(params, variant)
    width_a, width_b = pan_widths(params, variant)
    delta_a, delta_b = height_deltas(params)
    rafter_a = rafter_length(width_a, delta_a)
    rafter_b = rafter_length(width_b, delta_b)
    surface_a = length * rafter_a
    surface_b = length * rafter_b

    poles = has_intermediate_poles(params)
    offsets = pole_offsets(params, variant)

    pv = summarize(*_layout_pans(profile, length, rafter_a, rafter_b, panel, layout))

    logger.debug(
        "Derived %s: %.2f m2 roof, %d panels, %.2f kWc",
        variant_key(params.type, params.width),
        surface_a + surface_b,
        pv.panel_count,
        pv.power_kwc,
        extra={"structural_type": params.type.value, "ruleset_version": ruleset_version},
    )

    return DerivedGeometry(
        length=round2(length),
        total_width=round2(calculate_total_width(params)),
        pitch_angle=round2(profile.pitch_deg),
        ridge_position=round2(ridge),
        pan_width_a=round2(width_a),
        pan_width_b=round2(width_b),
        height_delta_a=round2(delta_a),
        height_delta_b=round2(delta_b),
        rafter_length_a=round2(rafter_a),
        rafter_length_b=round2(rafter_b),
        surface_a=round2(surface_a),
        surface_b=round2(surface_b),
        surface_total=round2(surface_a + surface_b),
        has_intermediate_poles=poles,
        intermediate_pole_count=intermediate_pole_count(params),
        pole_placement=profile.pole_placement if poles else None,
        pole_offset_from_left=round2(offsets[0]) if offsets else None,
        pole_offsets=[round2(o) for o in offsets],
        zone_widths=[round2(z) for z in zone_widths(params, variant)],
        zone_pv_a=is_pv_eligible(profile, rafter_a),
        zone_pv_b=is_pv_eligible(profile, rafter_b),
        panel_count_a=pv.panel_count_a,
        panel_count_b=pv.panel_count_b,
        power_kwc_a=pv.power_kwc_a,
        power_kwc_b=pv.power_kwc_b,
        panel_count=pv.panel_count,
        power_kwc=pv.power_kwc,
        ruleset_version=ruleset_version,
        variant_synthesized=variant.synthesized,
    )


def create_building_config(
    params: BuildingParameters,
    ruleset_version: str,
    registry: Optional[VariantRegistry] = None,
    panel: Optional[PanelModel] = None,
    layout: Optional[LayoutParameters] = None,
) -> BuildingConfig:
    """Pair the parameters with their derived geometry."""
    return BuildingConfig(
        params=params,
        derived=derive(params, ruleset_version, registry, panel, layout),
    )
