"""
Variant Registry - Canonical heights per (structural type, width).

A variant fixes the eave and ridge heights of one catalog entry, plus the
ridge and pole offsets of asymmetric and pole-bearing types. Built-in
defaults can be overridden at runtime by an admin-managed set.

Usage:
    registry = VariantRegistry()
    registry.replace_overrides(load_variant_overrides("variants.json"))
    variant = registry.resolve_or_synthesize(StructuralType.SYMMETRIC, 15)
"""

import json
import logging
import math
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union

from ..core.models import StructuralType, Variant
from .building_types import FALLBACK_EAVE_HEIGHT_M, FALLBACK_PITCH_DEG

logger = logging.getLogger(__name__)

VariantKey = Tuple[StructuralType, float]


def _width_key(width: float) -> float:
    # 25.5 and 25.500000001 must resolve to the same entry
    return round(float(width), 3)


def make_key(structural_type: StructuralType, width: float) -> VariantKey:
    return (StructuralType(structural_type), _width_key(width))


def variant_key(structural_type: StructuralType, width: float) -> str:
    """Human readable key, e.g. ``"ASYM2_25.5"``."""
    return f"{StructuralType(structural_type).value}_{_width_key(width):g}"


def _v(type_, width, left, right, ridge, **offsets) -> Variant:
    return Variant(
        type=type_,
        width=width,
        eave_height_left=left,
        eave_height_right=right,
        ridge_height=ridge,
        **offsets,
    )


S = StructuralType

# =============================================================================
# BUILT-IN VARIANT TABLE
# =============================================================================

_DEFAULT_VARIANT_LIST = [
    # Symmetric: equal eaves, ridge at mid-span
    _v(S.SYMMETRIC, 15, 5.5, 5.5, 6.8),
    _v(S.SYMMETRIC, 18.6, 5.5, 5.5, 7.1),
    _v(S.SYMMETRIC, 22.3, 5.5, 5.5, 7.5),
    _v(S.SYMMETRIC, 26, 5.5, 5.5, 7.8),
    _v(S.SYMMETRIC, 29.8, 5.5, 5.5, 8.1),
    _v(S.SYMMETRIC, 33.5, 5.5, 5.5, 8.5),

    # Asymmetric single zone: high eave on the left, ridge offset = dh / tan(15)
    _v(S.ASYMMETRIC, 16.4, 6.4, 4, 7.4, ridge_offset_from_left=3.73),
    _v(S.ASYMMETRIC, 20, 7.2, 4, 8.4, ridge_offset_from_left=4.48),

    # Asymmetric two zones: pole under the ridge
    _v(S.ASYMMETRIC_POLE, 25.5, 6.9, 4, 8.9,
       ridge_offset_from_left=6.55, pole_offset_from_left=6.55,
       zone_left=6.55, zone_right=18.95),
    _v(S.ASYMMETRIC_POLE, 29.1, 7.9, 4, 9.8,
       ridge_offset_from_left=6.55, pole_offset_from_left=6.55,
       zone_left=6.55, zone_right=22.55),

    # Mono-pitch: high side left, low side right
    _v(S.MONO_PITCH, 12.7, 7.4, 4, 7.4),
    _v(S.MONO_PITCH, 16.4, 8.4, 4, 8.4),

    # Carports
    _v(S.CANOPY_LEFT, 6.9, 4.7, 3.7, 4.7),
    _v(S.CANOPY_RIGHT, 6.9, 4.1, 2.9, 4.1),
    _v(S.CANOPY_DOUBLE, 9.1, 4.6, 3, 4.6),
    _v(S.CANOPY_DOUBLE, 11.3, 4.7, 2.8, 4.7),
    _v(S.CANOPY_FLAT, 15.8, 7.9, 5.1, 7.9, zone_left=7.9, zone_right=7.9),
    _v(S.CANOPY_FLAT, 20.2, 9.3, 5.7, 9.3, zone_left=10.1, zone_right=10.1),
    _v(S.CANOPY_FLAT, 24.6, 9.3, 5, 9.3, zone_left=12.3, zone_right=12.3),
]

DEFAULT_VARIANTS: Mapping[VariantKey, Variant] = MappingProxyType(
    {make_key(v.type, v.width): v for v in _DEFAULT_VARIANT_LIST}
)


def synthesize_variant(structural_type: StructuralType, width: float) -> Variant:
    """
    Fabricate a variant from a flat 10 degree pitch and a 4 m eave.

    The ridge sits half a span above the eave at that pitch. The result is
    flagged ``synthesized`` so callers can tell it apart from catalog data.
    """
    height_delta = (width / 2) * math.tan(math.radians(FALLBACK_PITCH_DEG))
    return Variant(
        type=structural_type,
        width=width,
        eave_height_left=FALLBACK_EAVE_HEIGHT_M,
        eave_height_right=FALLBACK_EAVE_HEIGHT_M,
        ridge_height=FALLBACK_EAVE_HEIGHT_M + height_delta,
        synthesized=True,
    )


class VariantRegistry:
    """
    Lookup of variants with an optional override set.

    The override set is held as one immutable mapping and swapped wholesale,
    so readers never see a half-applied update.
    """

    def __init__(
        self,
        overrides: Optional[Iterable[Variant]] = None,
        defaults: Optional[Iterable[Variant]] = None,
    ):
        if defaults is None:
            self._defaults: Mapping[VariantKey, Variant] = DEFAULT_VARIANTS
        else:
            self._defaults = MappingProxyType({make_key(v.type, v.width): v for v in defaults})
        self._overrides: Mapping[VariantKey, Variant] = MappingProxyType({})
        if overrides is not None:
            self.replace_overrides(overrides)

    @property
    def overrides(self) -> Mapping[VariantKey, Variant]:
        return self._overrides

    def lookup(self, structural_type: StructuralType, width: float) -> Optional[Variant]:
        """Get the variant for (type, width), overrides first. None on a miss."""
        key = make_key(structural_type, width)
        variant = self._overrides.get(key)
        if variant is None:
            variant = self._defaults.get(key)
        return variant

    def resolve_or_synthesize(self, structural_type: StructuralType, width: float) -> Variant:
        """Get the variant for (type, width), fabricating one on a miss."""
        variant = self.lookup(structural_type, width)
        if variant is not None:
            return variant

        logger.warning(
            "No variant for %s, synthesizing from %.0f deg pitch",
            variant_key(structural_type, width),
            FALLBACK_PITCH_DEG,
            extra={"variant_key": variant_key(structural_type, width)},
        )
        return synthesize_variant(StructuralType(structural_type), width)

    def replace_overrides(
        self,
        variants: Union[Iterable[Variant], Mapping[VariantKey, Variant]],
    ) -> None:
        """Install a new override set, discarding the previous one."""
        if isinstance(variants, Mapping):
            variants = variants.values()
        table = {make_key(v.type, v.width): v for v in variants}
        self._overrides = MappingProxyType(table)
        logger.info("Installed %d variant overrides", len(table))

    def reset_to_defaults(self) -> None:
        """Drop every override."""
        self._overrides = MappingProxyType({})
        logger.info("Variant overrides reset to defaults")

    def variants(self) -> Dict[VariantKey, Variant]:
        """Effective table: defaults with overrides applied, sorted by key."""
        merged = {**self._defaults, **self._overrides}
        return dict(sorted(merged.items(), key=lambda item: (item[0][0].value, item[0][1])))


def load_variant_overrides(path: Union[str, Path]) -> Dict[VariantKey, Variant]:
    """
    Read an override set from a JSON file.

    The file holds a list of variant objects, or an object whose values are
    variant objects (keys such as ``"SYM_15"`` are ignored).

    Raises:
        OSError: The file cannot be read
        ValueError: Malformed JSON or a row failing validation
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = list(data.values())
    if not isinstance(data, list):
        raise ValueError("expected a list or an object of variants")

    variants = [Variant.model_validate(item) for item in data]
    logger.debug("Loaded %d variants from %s", len(variants), path)
    return {make_key(v.type, v.width): v for v in variants}
