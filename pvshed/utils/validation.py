"""
Catalog validation for building parameters.

The geometry engine trusts its input. This module is what the form layer
runs before handing parameters over: it checks that the width exists in the
catalog of the chosen type, that the bay spacing is allowed and that
extensions are only requested on types that accept them.

Usage:
    from pvshed.utils.validation import validate_building_params, ValidationError

    try:
        validate_building_params(params)
    except ValidationError as e:
        print(e.field, e.suggestions)
"""

import logging
from typing import List, Optional

from ..catalog.building_types import get_profile
from ..core.models import ALLOWED_SPACINGS, BuildingParameters, ExtensionType

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    """Raised when building parameters do not match the catalog."""

    def __init__(self, message: str, field: str = "", suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field = field
        self.suggestions = suggestions or []


def validate_width(params: BuildingParameters) -> float:
    widths = get_profile(params.type).widths
    if params.width not in widths:
        raise ValidationError(
            f"Width {params.width:g} m is not offered for {params.type.value}",
            field="width",
            suggestions=[f"{w:g}" for w in widths],
        )
    return params.width


def validate_spacing(params: BuildingParameters) -> float:
    if params.spacing not in ALLOWED_SPACINGS:
        raise ValidationError(
            f"Bay spacing {params.spacing:g} m is not allowed",
            field="spacing",
            suggestions=[f"{s:g}" for s in ALLOWED_SPACINGS],
        )
    return params.spacing


def validate_extensions(params: BuildingParameters) -> None:
    if get_profile(params.type).allows_extensions:
        return

    for side in ("left", "right"):
        kind = getattr(params, f"extension_{side}")
        width = getattr(params, f"extension_{side}_width")
        if kind != ExtensionType.NONE or width > 0:
            raise ValidationError(
                f"{params.type.value} does not accept a {side} extension",
                field=f"extension_{side}",
                suggestions=[ExtensionType.NONE.value],
            )


def validate_building_params(params: BuildingParameters) -> BuildingParameters:
    """
    Check parameters against the catalog.

    Returns:
        The parameters unchanged

    Raises:
        ValidationError: On the first failing check
    """
    validate_width(params)
    validate_spacing(params)
    validate_extensions(params)
    logger.debug("Parameters valid", extra={"structural_type": params.type.value})
    return params
