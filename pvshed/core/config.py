"""
Configuration management for pvshed.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..catalog.panels import DEFAULT_PANEL_ID, get_default_panel, get_panel
from .models import LayoutParameters, PanelModel, PanelOrientation


class Settings(BaseSettings):
    """
    Application settings.

    Can be configured via environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="PVSHED_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Ruleset
    ruleset_version: str = Field(default="default", description="Ruleset tag stamped on derived geometry")
    variants_file: Path | None = Field(default=None, description="JSON file of variant overrides")

    # Calepinage defaults
    default_panel_id: str = Field(default=DEFAULT_PANEL_ID, description="Panel model from the library")
    layout_margin_m: float = Field(default=0.02, ge=0, le=1, description="Perimeter margin (m)")
    layout_gap_m: float = Field(default=0.015, ge=0, le=0.5, description="Gap between panels (m)")
    layout_orientation: PanelOrientation = Field(default=PanelOrientation.LANDSCAPE)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="WARNING")
    log_to_file: bool = Field(default=False)
    log_dir: Path = Field(default=Path("logs"))

    def layout_parameters(self) -> LayoutParameters:
        return LayoutParameters(
            margin_m=self.layout_margin_m,
            gap_m=self.layout_gap_m,
            orientation=self.layout_orientation,
        )

    def default_panel(self) -> PanelModel:
        """Configured panel, or the library default when the id is unknown."""
        return get_panel(self.default_panel_id) or get_default_panel()


# Global settings instance
settings = Settings()
