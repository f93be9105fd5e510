"""
Building Type Catalog - Structural profiles of the eight shed topologies.

Defines per structural type:
- Display label
- Nominal roof pitch (degrees)
- Default eave height used when no variant exists
- Widths offered in the catalog
- Whether the roof has two pans and accepts extensions
- Intermediate pole requirement and placement
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..core.models import PolePlacement, PoleRequirement, StructuralType


# Width above which optional intermediate poles become required (m)
POLE_WIDTH_THRESHOLD_M = 20.0

# Pitch range on which panels can be mounted flush (degrees)
PV_MIN_PITCH_DEG = 5.0
PV_MAX_PITCH_DEG = 35.0

# Slope and eave used to fabricate a variant that is missing from the table
FALLBACK_PITCH_DEG = 10.0
FALLBACK_EAVE_HEIGHT_M = 4.0


@dataclass(frozen=True)
class TypeProfile:
    """Static characteristics of one structural type."""
    type: StructuralType
    label: str
    pitch_deg: float
    widths: Tuple[float, ...]
    has_two_pans: bool
    allows_extensions: bool
    pole_requirement: PoleRequirement
    pole_placement: Optional[PolePlacement] = None
    default_eave_height: Optional[float] = None  # None for canopies
    flat_mount: bool = False  # Panels sit on tilt-adjustable mounts


TYPE_PROFILES: Dict[StructuralType, TypeProfile] = {
    StructuralType.SYMMETRIC: TypeProfile(
        type=StructuralType.SYMMETRIC,
        label="Symmetric",
        pitch_deg=10.0,
        widths=(15.0, 18.6, 22.3, 26.0, 29.8, 33.5),
        has_two_pans=True,
        allows_extensions=False,
        pole_requirement=PoleRequirement.ABOVE_WIDTH_THRESHOLD,
        pole_placement=PolePlacement.CENTER,
        default_eave_height=5.5,
    ),
    StructuralType.ASYMMETRIC: TypeProfile(
        type=StructuralType.ASYMMETRIC,
        label="Asymmetric, single zone",
        pitch_deg=15.0,
        widths=(16.4, 20.0),
        has_two_pans=True,
        allows_extensions=True,
        pole_requirement=PoleRequirement.NEVER,
        default_eave_height=4.0,
    ),
    StructuralType.ASYMMETRIC_POLE: TypeProfile(
        type=StructuralType.ASYMMETRIC_POLE,
        label="Asymmetric, two zones",
        pitch_deg=15.0,
        widths=(25.5, 29.1),
        has_two_pans=True,
        allows_extensions=True,
        pole_requirement=PoleRequirement.ALWAYS,
        pole_placement=PolePlacement.CENTER,
        default_eave_height=4.0,
    ),
    StructuralType.MONO_PITCH: TypeProfile(
        type=StructuralType.MONO_PITCH,
        label="Mono-pitch",
        pitch_deg=15.0,
        widths=(12.7, 16.4),
        has_two_pans=False,
        allows_extensions=True,
        pole_requirement=PoleRequirement.NEVER,
        default_eave_height=4.0,
    ),
    StructuralType.CANOPY_LEFT: TypeProfile(
        type=StructuralType.CANOPY_LEFT,
        label="Carport, single left",
        pitch_deg=10.0,
        widths=(6.9,),
        has_two_pans=False,
        allows_extensions=False,
        pole_requirement=PoleRequirement.ALWAYS,
        pole_placement=PolePlacement.LEFT,
    ),
    StructuralType.CANOPY_RIGHT: TypeProfile(
        type=StructuralType.CANOPY_RIGHT,
        label="Carport, single right",
        pitch_deg=10.0,
        widths=(6.9,),
        has_two_pans=False,
        allows_extensions=False,
        pole_requirement=PoleRequirement.ALWAYS,
        pole_placement=PolePlacement.RIGHT,
    ),
    StructuralType.CANOPY_DOUBLE: TypeProfile(
        type=StructuralType.CANOPY_DOUBLE,
        label="Carport, double",
        pitch_deg=10.0,
        widths=(9.1, 11.3),
        has_two_pans=False,
        allows_extensions=False,
        pole_requirement=PoleRequirement.ALWAYS,
        pole_placement=PolePlacement.BOTH,
    ),
    StructuralType.CANOPY_FLAT: TypeProfile(
        type=StructuralType.CANOPY_FLAT,
        label="Carport, flat with pole",
        pitch_deg=10.0,
        widths=(15.8, 20.2, 24.6),
        has_two_pans=False,
        allows_extensions=False,
        pole_requirement=PoleRequirement.ALWAYS,
        pole_placement=PolePlacement.CENTER,
        flat_mount=True,
    ),
}

_missing = set(StructuralType) - set(TYPE_PROFILES)
if _missing:
    raise RuntimeError(f"No type profile for {sorted(t.value for t in _missing)}")


def get_profile(structural_type: StructuralType) -> TypeProfile:
    """Get the catalog profile of a structural type."""
    return TYPE_PROFILES[StructuralType(structural_type)]


def widths_for_type(structural_type: StructuralType) -> Tuple[float, ...]:
    """Catalog widths offered for a structural type."""
    return TYPE_PROFILES[StructuralType(structural_type)].widths


def all_widths() -> Tuple[float, ...]:
    """Every catalog width across all types, sorted."""
    return tuple(sorted({w for p in TYPE_PROFILES.values() for w in p.widths}))
