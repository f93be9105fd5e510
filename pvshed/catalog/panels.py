"""
Panel library and default calepinage settings.
"""

from typing import Dict, List, Optional

from ..core.models import LayoutParameters, PanelModel, PanelOrientation


PANEL_LIBRARY: List[PanelModel] = [
    # Sized so a 30 m x 15 m symmetric shed takes 13 x 8 landscape panels per pan
    PanelModel(
        id="nelson_standard_465",
        name="Standard 465W (13x8)",
        manufacturer="Nelson",
        length_m=2.29,
        width_m=0.93,
        power_w=465,
    ),
    PanelModel(
        id="jinko_tiger_neo_580",
        name="Tiger Neo 580W",
        manufacturer="Jinko Solar",
        length_m=2.278,
        width_m=1.134,
        power_w=580,
    ),
    PanelModel(
        id="longi_himo6_555",
        name="Hi-MO 6 555W",
        manufacturer="LONGi",
        length_m=2.278,
        width_m=1.134,
        power_w=555,
    ),
    PanelModel(
        id="canadian_hiku7_670",
        name="HiKu7 670W",
        manufacturer="Canadian Solar",
        length_m=2.384,
        width_m=1.303,
        power_w=670,
    ),
]

PANELS_BY_ID: Dict[str, PanelModel] = {p.id: p for p in PANEL_LIBRARY}

DEFAULT_PANEL_ID = "nelson_standard_465"

# 2 cm perimeter margin, 1.5 cm between modules, landscape rows
DEFAULT_LAYOUT = LayoutParameters(
    margin_m=0.02,
    gap_m=0.015,
    orientation=PanelOrientation.LANDSCAPE,
)


def get_panel(panel_id: str) -> Optional[PanelModel]:
    """Look up a panel model by id."""
    return PANELS_BY_ID.get(panel_id)


def get_default_panel() -> PanelModel:
    return PANELS_BY_ID[DEFAULT_PANEL_ID]
