"""
Catalog Module - Static data of the shed configurator.

Provides:
- Structural type profiles (pitch, widths, poles)
- Built-in variant table and the variant registry
- Panel library and default calepinage settings
"""

from .building_types import (
    TYPE_PROFILES,
    TypeProfile,
    all_widths,
    get_profile,
    widths_for_type,
)
from .panels import (
    DEFAULT_LAYOUT,
    DEFAULT_PANEL_ID,
    PANEL_LIBRARY,
    get_default_panel,
    get_panel,
)
from .variants import (
    DEFAULT_VARIANTS,
    VariantRegistry,
    load_variant_overrides,
    synthesize_variant,
    variant_key,
)

__all__ = [
    'TYPE_PROFILES',
    'TypeProfile',
    'all_widths',
    'get_profile',
    'widths_for_type',
    'DEFAULT_LAYOUT',
    'DEFAULT_PANEL_ID',
    'PANEL_LIBRARY',
    'get_default_panel',
    'get_panel',
    'DEFAULT_VARIANTS',
    'VariantRegistry',
    'load_variant_overrides',
    'synthesize_variant',
    'variant_key',
]
