"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(log_dir: Path = None) -> Path:
    """
    Setup logger for templating context.

    Args:
        log_dir: Directory for this templating session

    Returns:
        Path to log file
    """
    return _setup_logger(context_name="template", log_dir=log_dir)


# Wrapper functions with automatic [template] prefix


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_resource_loaded(kind: str, path: Path) -> None:
    """Log that a static resource (template, stylesheet, config) was read from disk."""
    _log_debug(f"Loaded {kind}: {path}")


def log_invalid_config(path: Path, problem: str) -> None:
    """Log a section config validation failure before it is raised."""
    _log_error(f"Invalid section config {path}: {problem}")


def log_section_rendered(section_name: str, size: int) -> None:
    """Log a rendered section and its fragment size."""
    _log_debug(f"Rendered section '{section_name}' ({size} chars)")


def log_section_failed(section_name: str, error: Exception) -> None:
    """Log a section left out of the document because its data was malformed."""
    _log_warning(f"Skipped section '{section_name}': {type(error).__name__}: {error}")
