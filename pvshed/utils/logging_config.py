"""
pvshed Logging Configuration.

Provides consistent logging setup across all modules with:
- Structured log format with timestamps
- File and console handlers
- Log level and log directory from pvshed settings (PVSHED_LOG_LEVEL, PVSHED_LOG_DIR)
- Context-aware logging (structural type, variant key, ruleset)

Usage:
    from pvshed.utils.logging_config import get_logger

    logger = get_logger(__name__)
    logger.info("Deriving building", extra={"variant_key": "SYM_15"})
"""

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from ..core.config import settings

CONTEXT_KEYS = ["structural_type", "width", "variant_key", "ruleset_version"]


class PvshedFormatter(logging.Formatter):
    """Custom formatter with color support for console output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = True):
        self.use_colors = use_colors and sys.stdout.isatty()
        super().__init__(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)

        extras = [
            f"{key}={getattr(record, key)}"
            for key in CONTEXT_KEYS
            if hasattr(record, key)
        ]
        if extras:
            formatted = f"{formatted} [{', '.join(extras)}]"

        if self.use_colors:
            color = self.COLORS.get(record.levelname, "")
            return f"{color}{formatted}{self.RESET}"
        return formatted


class FileFormatter(logging.Formatter):
    """JSON-like formatter for file output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in CONTEXT_KEYS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return str(log_data)


def setup_logging(
    level: Optional[str] = None,
    log_to_file: Optional[bool] = None,
    log_file: Optional[str] = None,
    log_dir: Optional[Path] = None,
) -> None:
    """
    Configure logging for the entire application.

    Arguments left to None are taken from ``settings``.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Whether to also log to a file
        log_file: Custom log file path (default: <log_dir>/pvshed_YYYYMMDD.log)
        log_dir: Directory for the default log file
    """
    level = (level or settings.log_level).upper()
    if log_to_file is None:
        log_to_file = settings.log_to_file
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level, logging.INFO))

    # Remove handlers installed by a previous call
    for handler in list(root_logger.handlers):
        if isinstance(handler.formatter, (PvshedFormatter, FileFormatter)):
            root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(PvshedFormatter(use_colors=True))
    console_handler.setLevel(getattr(logging, level, logging.INFO))
    root_logger.addHandler(console_handler)

    if log_to_file:
        directory = Path(log_dir) if log_dir is not None else settings.log_dir
        if log_file is None:
            directory.mkdir(parents=True, exist_ok=True)
            log_path = directory / f"pvshed_{datetime.now().strftime('%Y%m%d')}.log"
        else:
            log_path = Path(log_file)

        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(FileFormatter())
        file_handler.setLevel(logging.DEBUG)  # Always log everything to file
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)

