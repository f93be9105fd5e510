"""Utility modules."""

from .logging_config import (
    get_logger,
    setup_logging,
    PvshedFormatter,
    FileFormatter,
)
from .validation import (
    validate_building_params,
    validate_extensions,
    validate_spacing,
    validate_width,
    ValidationError,
)

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    "PvshedFormatter",
    "FileFormatter",
    # Validation
    "validate_building_params",
    "validate_extensions",
    "validate_spacing",
    "validate_width",
    "ValidationError",
]
