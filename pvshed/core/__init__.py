"""Core models and configuration."""

from .models import (
    BuildingConfig,
    BuildingLayout,
    BuildingParameters,
    DerivedGeometry,
    ExtensionType,
    LayoutParameters,
    PanelModel,
    PanelOrientation,
    PolePlacement,
    PoleRequirement,
    PvSummary,
    StructuralType,
    SurfaceLayoutResult,
    Variant,
)
from .config import Settings

__all__ = [
    "BuildingConfig",
    "BuildingLayout",
    "BuildingParameters",
    "DerivedGeometry",
    "ExtensionType",
    "LayoutParameters",
    "PanelModel",
    "PanelOrientation",
    "PolePlacement",
    "PoleRequirement",
    "PvSummary",
    "StructuralType",
    "SurfaceLayoutResult",
    "Variant",
    "Settings",
]
