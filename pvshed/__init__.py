"""
pvshed - Parametric geometry and PV calepinage of solar sheds.

Usage:
    from pvshed import BuildingParameters, VariantRegistry, derive

    registry = VariantRegistry()
    geometry = derive(params, ruleset_version="v1", registry=registry)
"""

from .catalog.variants import VariantRegistry
from .core.models import BuildingParameters, DerivedGeometry, StructuralType
from .geometry.derivation import create_building_config, derive, layout_building

__version__ = "0.1.0"

__all__ = [
    "BuildingParameters",
    "DerivedGeometry",
    "StructuralType",
    "VariantRegistry",
    "create_building_config",
    "derive",
    "layout_building",
]
