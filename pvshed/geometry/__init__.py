"""
Geometry Module - Derive shed roof geometry and its PV layout.

Calculates:
- Ridge position, pan widths and exact rafter lengths per structural type
- Roof surfaces and intermediate pole rows
- Panel grid (calepinage) on every PV-eligible pan
- Pan azimuths for production estimates
"""

from .aggregator import summarize, summarize_layout
from .derivation import (
    TOPOLOGY_RULES,
    create_building_config,
    derive,
    layout_building,
)
from .layout import fit_count, layout_surface, round2
from .orientation import pan_azimuths
from .presets import (
    default_params_for_type,
    params_for_type_change,
    params_for_width_change,
)

__all__ = [
    'summarize',
    'summarize_layout',
    'TOPOLOGY_RULES',
    'create_building_config',
    'derive',
    'layout_building',
    'fit_count',
    'layout_surface',
    'round2',
    'pan_azimuths',
    'default_params_for_type',
    'params_for_type_change',
    'params_for_width_change',
]
