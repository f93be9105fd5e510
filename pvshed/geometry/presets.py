"""
Parameter presets.

Builds default parameters for a structural type and rebases existing
parameters when the user switches type or width, pulling canonical heights
from the variant registry.
"""

import math
from typing import Optional

from ..catalog.building_types import FALLBACK_EAVE_HEIGHT_M, get_profile
from ..catalog.variants import VariantRegistry
from ..core.models import (
    DEFAULT_STRUCTURE_COLOR,
    BuildingParameters,
    ExtensionType,
    StructuralType,
)

DEFAULT_SPACING_M = 6.0
DEFAULT_BAY_COUNT = 4
DEFAULT_WIDTH_M = 15.0


def _heights_from_pitch(structural_type: StructuralType, width: float) -> dict:
    """Eave from the type default, ridge half a span higher at nominal pitch."""
    profile = get_profile(structural_type)
    eave = profile.default_eave_height or FALLBACK_EAVE_HEIGHT_M
    ridge = eave + (width / 2) * math.tan(math.radians(profile.pitch_deg))
    return {
        "eave_height_left": eave,
        "eave_height_right": eave,
        "ridge_height": round(ridge, 1),
    }


def _variant_heights(registry: VariantRegistry, structural_type: StructuralType,
                     width: float) -> Optional[dict]:
    variant = registry.lookup(structural_type, width)
    if variant is None:
        return None
    return {
        "eave_height_left": variant.eave_height_left,
        "eave_height_right": variant.eave_height_right,
        "ridge_height": variant.ridge_height,
    }


def default_params_for_type(
    structural_type: StructuralType,
    registry: Optional[VariantRegistry] = None,
) -> BuildingParameters:
    """Starting parameters for a type: first catalog width, 4 bays of 6 m."""
    registry = registry or VariantRegistry()
    structural_type = StructuralType(structural_type)
    widths = get_profile(structural_type).widths
    width = widths[0] if widths else DEFAULT_WIDTH_M

    heights = _variant_heights(registry, structural_type, width)
    if heights is None:
        heights = _heights_from_pitch(structural_type, width)

    return BuildingParameters(
        type=structural_type,
        width=width,
        spacing=DEFAULT_SPACING_M,
        bay_count=DEFAULT_BAY_COUNT,
        extension_left=ExtensionType.NONE,
        extension_right=ExtensionType.NONE,
        extension_left_width=0.0,
        extension_right_width=0.0,
        structure_color=DEFAULT_STRUCTURE_COLOR,
        **heights,
    )


def params_for_type_change(
    current: BuildingParameters,
    new_type: StructuralType,
    registry: Optional[VariantRegistry] = None,
) -> BuildingParameters:
    """
    Switch parameters to another structural type.

    Keeps the width if the new type offers it, reloads the heights and
    drops extensions the new type does not accept.
    """
    registry = registry or VariantRegistry()
    new_type = StructuralType(new_type)
    profile = get_profile(new_type)

    if current.width in profile.widths:
        width = current.width
    else:
        width = profile.widths[0] if profile.widths else DEFAULT_WIDTH_M

    heights = _variant_heights(registry, new_type, width)
    if heights is None:
        heights = _heights_from_pitch(new_type, width)

    update = {"type": new_type, "width": width, **heights}
    if not profile.allows_extensions:
        update.update(
            extension_left=ExtensionType.NONE,
            extension_right=ExtensionType.NONE,
            extension_left_width=0.0,
            extension_right_width=0.0,
        )
    return current.model_copy(update=update)


def params_for_width_change(
    current: BuildingParameters,
    new_width: float,
    registry: Optional[VariantRegistry] = None,
) -> BuildingParameters:
    """Switch width, reloading heights when a variant exists for it."""
    registry = registry or VariantRegistry()
    heights = _variant_heights(registry, current.type, new_width) or {}
    return current.model_copy(update={"width": new_width, **heights})
