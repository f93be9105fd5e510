"""Tests for parameter presets and pan orientation."""
import pytest

from conftest import make_params
from pvshed.core.models import ExtensionType, StructuralType
from pvshed.geometry.orientation import pan_azimuths
from pvshed.geometry.presets import (
    default_params_for_type,
    params_for_type_change,
    params_for_width_change,
)


class TestDefaultParams:
    """Test starting parameters per type."""

    def test_symmetric_from_catalog(self, registry):
        """Test SYM starts at 15 m with its catalog heights."""
        params = default_params_for_type(StructuralType.SYMMETRIC, registry)
        assert params.width == 15
        assert params.spacing == 6
        assert params.bay_count == 4
        assert (params.eave_height_left, params.eave_height_right, params.ridge_height) == (5.5, 5.5, 6.8)
        assert params.extension_left == ExtensionType.NONE

    def test_canopy_from_catalog(self, registry):
        params = default_params_for_type("VL_DOUBLE", registry)
        assert params.width == 9.1
        assert (params.eave_height_left, params.eave_height_right) == (4.6, 3.0)

    @pytest.mark.parametrize("structural_type", list(StructuralType))
    def test_every_type_has_defaults(self, registry, structural_type):
        """Test each type yields valid parameters on its first catalog width."""
        params = default_params_for_type(structural_type, registry)
        assert params.type == structural_type
        assert params.ridge_height >= max(params.eave_height_left, params.eave_height_right)

    def test_without_variant_uses_pitch(self, empty_registry):
        """Test heights from the type default eave and nominal pitch."""
        params = default_params_for_type(StructuralType.SYMMETRIC, empty_registry)
        # 5.5 + 7.5 x tan(10) = 6.82
        assert params.eave_height_left == 5.5
        assert params.ridge_height == 6.8

    def test_canopy_without_variant_uses_fallback_eave(self, empty_registry):
        """Test canopies fall back to a 4 m eave."""
        params = default_params_for_type(StructuralType.CANOPY_LEFT, empty_registry)
        # 4 + 3.45 x tan(10) = 4.61
        assert params.eave_height_left == 4.0
        assert params.ridge_height == 4.6


class TestTypeChange:
    """Test switching structural type."""

    def test_width_not_offered_resets(self, sym_params, registry):
        """Test SYM 15 -> ASYM1 moves to the first ASYM1 width."""
        params = params_for_type_change(sym_params, StructuralType.ASYMMETRIC, registry)
        assert params.type == StructuralType.ASYMMETRIC
        assert params.width == 16.4
        assert (params.eave_height_left, params.eave_height_right, params.ridge_height) == (6.4, 4.0, 7.4)

    def test_width_offered_is_kept(self, registry):
        """Test ASYM1 16.4 -> MONO keeps 16.4."""
        current = make_params("ASYM1", 16.4, 6.4, 4.0, 7.4)
        params = params_for_type_change(current, "MONO", registry)
        assert params.width == 16.4
        assert params.eave_height_left == 8.4

    def test_bays_and_spacing_kept(self, registry):
        current = make_params("SYM", 15, 5.5, 5.5, 6.8, spacing=7.5, bay_count=9)
        params = params_for_type_change(current, StructuralType.CANOPY_FLAT, registry)
        assert params.spacing == 7.5
        assert params.bay_count == 9

    def test_extensions_cleared_when_not_allowed(self, registry):
        """Test extensions are dropped on types without them."""
        current = make_params("ASYM1", 16.4, 6.4, 4.0, 7.4,
                              extension_left=ExtensionType.AWNING, extension_left_width=3.0)
        params = params_for_type_change(current, StructuralType.SYMMETRIC, registry)
        assert params.extension_left == ExtensionType.NONE
        assert params.extension_left_width == 0.0

    def test_extensions_kept_when_allowed(self, registry):
        current = make_params("ASYM1", 16.4, 6.4, 4.0, 7.4,
                              extension_right=ExtensionType.LEAN_TO, extension_right_width=2.0)
        params = params_for_type_change(current, StructuralType.MONO_PITCH, registry)
        assert params.extension_right == ExtensionType.LEAN_TO
        assert params.extension_right_width == 2.0

    def test_input_untouched(self, sym_params, registry):
        before = sym_params.model_copy(deep=True)
        params_for_type_change(sym_params, StructuralType.MONO_PITCH, registry)
        assert sym_params == before


class TestWidthChange:
    """Test switching width."""

    def test_reloads_variant_heights(self, sym_params, registry):
        params = params_for_width_change(sym_params, 18.6, registry)
        assert params.width == 18.6
        assert params.ridge_height == 7.1

    def test_keeps_heights_without_variant(self, sym_params, registry):
        """Test an off-catalog width leaves the heights alone."""
        params = params_for_width_change(sym_params, 17, registry)
        assert params.width == 17
        assert params.ridge_height == 6.8
        assert params.eave_height_left == 5.5


class TestPanAzimuths:
    """Test pan azimuths from the ridge orientation."""

    @pytest.mark.parametrize("orientation,two_pans,expected", [
        (90, True, (180, 0)),
        (0, False, (90, None)),
        (-90, True, (0, 180)),
        (350, True, (80, 260)),
        (450, True, (180, 0)),
    ])
    def test_azimuths(self, orientation, two_pans, expected):
        assert pan_azimuths(orientation, two_pans) == expected
