"""Tests for environment-driven settings."""
import pytest

from pvshed.catalog.panels import DEFAULT_PANEL_ID
from pvshed.core.config import Settings
from pvshed.core.models import PanelOrientation


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run without any PVSHED_ variable or .env file."""
    monkeypatch.chdir(tmp_path)
    for name in ("RULESET_VERSION", "VARIANTS_FILE", "DEFAULT_PANEL_ID", "LAYOUT_MARGIN_M",
                 "LAYOUT_GAP_M", "LAYOUT_ORIENTATION", "LOG_LEVEL", "LOG_TO_FILE", "LOG_DIR"):
        monkeypatch.delenv(f"PVSHED_{name}", raising=False)
    return monkeypatch


class TestSettings:
    """Test defaults and overrides."""

    def test_defaults(self, clean_env):
        settings = Settings()
        assert settings.ruleset_version == "default"
        assert settings.variants_file is None
        assert settings.default_panel_id == DEFAULT_PANEL_ID
        assert settings.log_level == "WARNING"

    def test_default_layout(self, clean_env):
        """Test the calepinage defaults: 2 cm margin, 1.5 cm gap, landscape."""
        layout = Settings().layout_parameters()
        assert layout.margin_m == 0.02
        assert layout.gap_m == 0.015
        assert layout.orientation == PanelOrientation.LANDSCAPE

    def test_env_overrides(self, clean_env):
        clean_env.setenv("PVSHED_RULESET_VERSION", "2026.10")
        clean_env.setenv("PVSHED_LAYOUT_ORIENTATION", "auto")
        clean_env.setenv("PVSHED_LAYOUT_MARGIN_M", "0.15")
        settings = Settings()
        assert settings.ruleset_version == "2026.10"
        assert settings.layout_parameters().orientation == PanelOrientation.AUTO
        assert settings.layout_parameters().margin_m == 0.15

    def test_env_file(self, clean_env, tmp_path):
        """Test values are read from a .env file in the working directory."""
        (tmp_path / ".env").write_text("PVSHED_DEFAULT_PANEL_ID=longi_himo6_555\n")
        assert Settings().default_panel().id == "longi_himo6_555"

    def test_unknown_panel_falls_back(self, clean_env):
        clean_env.setenv("PVSHED_DEFAULT_PANEL_ID", "no_such_panel")
        assert Settings().default_panel().id == DEFAULT_PANEL_ID

    def test_rejects_negative_margin(self, clean_env):
        from pydantic import ValidationError

        clean_env.setenv("PVSHED_LAYOUT_MARGIN_M", "-1")
        with pytest.raises(ValidationError):
            Settings()
