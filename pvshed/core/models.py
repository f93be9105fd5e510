"""
Pydantic models for shed building configurations.

Covers the input parameters chosen by the user, the variant table rows that
define canonical heights per (type, width), the panel/layout inputs of the
calepinage, and the derived geometry snapshot returned by the engine.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class StructuralType(str, Enum):
    SYMMETRIC = "SYM"
    ASYMMETRIC = "ASYM1"            # Asymmetric, single zone (no pole)
    ASYMMETRIC_POLE = "ASYM2"       # Asymmetric, two zones split by a pole
    MONO_PITCH = "MONO"
    CANOPY_LEFT = "VL_LEFT"
    CANOPY_RIGHT = "VL_RIGHT"
    CANOPY_DOUBLE = "VL_DOUBLE"
    CANOPY_FLAT = "PL"


class ExtensionType(str, Enum):
    NONE = "none"
    AWNING = "awning"
    LEAN_TO = "lean_to"


class PolePlacement(str, Enum):
    CENTER = "center"
    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"


class PoleRequirement(str, Enum):
    ALWAYS = "always"
    ABOVE_WIDTH_THRESHOLD = "above_width_threshold"
    NEVER = "never"


class PanelOrientation(str, Enum):
    AUTO = "auto"
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


ALLOWED_SPACINGS = (6.0, 7.5)
DEFAULT_STRUCTURE_COLOR = "#1a1a1a"


# =============================================================================
# INPUT SCHEMA
# =============================================================================


class BuildingParameters(BaseModel):
    """
    User-chosen building parameters.

    Field bounds mirror the upstream form schema. Whether the width belongs
    to the catalog of its type is checked by
    ``pvshed.utils.validation.validate_building_params``, not here.
    """

    type: StructuralType
    width: float = Field(ge=6, le=50, description="Building width (m)")
    spacing: float = Field(default=6.0, description="Bay spacing (m)")
    bay_count: int = Field(default=4, ge=1, le=20)
    eave_height_left: float = Field(ge=2, le=12, description="Left eave height (m)")
    eave_height_right: float = Field(ge=2, le=12, description="Right eave height (m)")
    ridge_height: float = Field(ge=3, le=15, description="Ridge height (m)")
    extension_left: ExtensionType = ExtensionType.NONE
    extension_right: ExtensionType = ExtensionType.NONE
    extension_left_width: float = Field(default=0.0, ge=0, le=10)
    extension_right_width: float = Field(default=0.0, ge=0, le=10)
    structure_color: str = DEFAULT_STRUCTURE_COLOR

    @field_validator("spacing")
    @classmethod
    def _spacing_allowed(cls, value: float) -> float:
        if value not in ALLOWED_SPACINGS:
            raise ValueError(f"spacing must be one of {ALLOWED_SPACINGS}, got {value}")
        return value


class Variant(BaseModel):
    """Canonical heights and offsets for one (type, width) combination."""

    model_config = ConfigDict(frozen=True)

    type: StructuralType
    width: float
    eave_height_left: float = Field(ge=2, le=15)
    eave_height_right: float = Field(ge=2, le=15)
    ridge_height: float = Field(ge=2, le=20)
    ridge_offset_from_left: Optional[float] = None
    pole_offset_from_left: Optional[float] = None
    # Legacy zone split, used when no explicit pole offset is set
    zone_left: Optional[float] = None
    zone_right: Optional[float] = None
    synthesized: bool = False


# =============================================================================
# PANELS & LAYOUT
# =============================================================================


class PanelModel(BaseModel):
    """Physical PV module."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    manufacturer: str
    length_m: float = Field(ge=0.5, le=3)
    width_m: float = Field(ge=0.5, le=2)
    power_w: float = Field(ge=100, le=1000)


class LayoutParameters(BaseModel):
    """Calepinage settings."""

    model_config = ConfigDict(frozen=True)

    margin_m: float = Field(default=0.10, ge=0, le=1)
    gap_m: float = Field(default=0.02, ge=0, le=0.5)
    orientation: PanelOrientation = PanelOrientation.AUTO


class SurfaceLayoutResult(BaseModel):
    """Panel grid fitted on one roof surface."""

    model_config = ConfigDict(frozen=True)

    zone_name: str
    surface_m2: float
    usable_surface_m2: float
    columns: int        # Along the building length
    rows: int           # Along the rafter
    panel_count: int
    power_kwc: float
    orientation: PanelOrientation


class BuildingLayout(BaseModel):
    """Calepinage of every PV-eligible pan of a building."""

    panel: PanelModel
    layout: LayoutParameters
    zones: list[SurfaceLayoutResult] = Field(default_factory=list)
    panel_count: int = 0
    power_kwc: float = 0.0

    def zone(self, name: str) -> Optional[SurfaceLayoutResult]:
        for zone in self.zones:
            if zone.zone_name == name:
                return zone
        return None


class PvSummary(BaseModel):
    """Per-pan and total panel counts embedded in the derived geometry."""

    model_config = ConfigDict(frozen=True)

    panel_count_a: int = 0
    panel_count_b: int = 0
    power_kwc_a: float = 0.0
    power_kwc_b: float = 0.0
    panel_count: int = 0
    power_kwc: float = 0.0


# =============================================================================
# OUTPUT SCHEMA
# =============================================================================


class DerivedGeometry(BaseModel):
    """
    Read-only geometry snapshot computed from BuildingParameters.

    Pan A is the right-hand pan (low eave side on asymmetric buildings),
    pan B the left-hand one. Single-pan types report everything on pan A.
    """

    model_config = ConfigDict(frozen=True)

    length: float
    total_width: float
    pitch_angle: float  # Nominal pitch of the type (display only)

    ridge_position: float  # Distance from the left edge (m)
    pan_width_a: float
    pan_width_b: float
    height_delta_a: float
    height_delta_b: float
    rafter_length_a: float
    rafter_length_b: float
    surface_a: float
    surface_b: float
    surface_total: float

    has_intermediate_poles: bool
    intermediate_pole_count: int
    pole_placement: Optional[PolePlacement] = None
    pole_offset_from_left: Optional[float] = None
    pole_offsets: list[float] = Field(default_factory=list)
    zone_widths: list[float] = Field(default_factory=list)

    zone_pv_a: bool
    zone_pv_b: bool

    panel_count_a: int
    panel_count_b: int
    power_kwc_a: float
    power_kwc_b: float
    panel_count: int
    power_kwc: float

    ruleset_version: str
    variant_synthesized: bool = False


class BuildingConfig(BaseModel):
    """Parameters and derived geometry, as handed to persistence."""

    params: BuildingParameters
    derived: DerivedGeometry
