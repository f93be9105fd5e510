"""
Pytest configuration and fixtures for pvshed tests.

Provides reusable test fixtures for:
- Variant registries
- Building parameters per structural type
- Panel models and layout settings
"""

import logging
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pvshed.catalog.variants import VariantRegistry
from pvshed.core.models import (
    BuildingParameters,
    LayoutParameters,
    PanelModel,
    PanelOrientation,
    StructuralType,
)


# =============================================================================
# REGISTRY FIXTURES
# =============================================================================

@pytest.fixture
def registry() -> VariantRegistry:
    """Registry holding only the built-in variants."""
    return VariantRegistry()


@pytest.fixture
def empty_registry() -> VariantRegistry:
    """Registry without any variant, every lookup synthesizes."""
    return VariantRegistry(defaults=[])


# =============================================================================
# PARAMETER FIXTURES
# =============================================================================

def make_params(structural_type, width, left, right, ridge, **kwargs) -> BuildingParameters:
    """Build parameters with 4 bays of 6 m unless overridden."""
    values = dict(
        type=StructuralType(structural_type),
        width=width,
        spacing=6.0,
        bay_count=4,
        eave_height_left=left,
        eave_height_right=right,
        ridge_height=ridge,
    )
    values.update(kwargs)
    return BuildingParameters(**values)


@pytest.fixture
def sym_params() -> BuildingParameters:
    """Symmetric 15 m shed, 4 bays of 6 m."""
    return make_params("SYM", 15, 5.5, 5.5, 6.8)


@pytest.fixture
def asym_pole_params() -> BuildingParameters:
    """Asymmetric two-zone 25.5 m shed with its catalog heights."""
    return make_params("ASYM2", 25.5, 6.9, 4.0, 8.9)


@pytest.fixture
def mono_params() -> BuildingParameters:
    """Mono-pitch 12.7 m shed, high side on the left."""
    return make_params("MONO", 12.7, 7.4, 4.0, 7.4)


# =============================================================================
# PANEL FIXTURES
# =============================================================================

@pytest.fixture
def large_panel() -> PanelModel:
    """2.278 m x 1.134 m module."""
    return PanelModel(
        id="test_580",
        name="Test 580W",
        manufacturer="Test",
        length_m=2.278,
        width_m=1.134,
        power_w=580,
    )


@pytest.fixture
def auto_layout() -> LayoutParameters:
    """15 cm margin, 2 cm gap, best orientation."""
    return LayoutParameters(margin_m=0.15, gap_m=0.02, orientation=PanelOrientation.AUTO)


# =============================================================================
# LOGGING
# =============================================================================

@pytest.fixture
def restore_logging():
    """Put the root logger back as it was after a test reconfigures it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
