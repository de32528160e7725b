"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path = None) -> Path:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this rendering session

    Returns:
        Path to log file

    Example:
        from vitae.contexts.rendering.logger import setup_rendering_logger

        log_file = setup_rendering_logger(Path("outs/logs/render"))
        html = render(resume)
    """
    return _setup_logger(context_name="render", log_dir=log_dir)


# Wrapper functions with automatic [render] prefix


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_start(present_sections: list) -> None:
    """Log start of a render with the top-level fields present in the record."""
    _log_debug(f"Rendering resume with sections: {', '.join(present_sections) or '(none)'}")


def log_render_result(size: int, elapsed_time: float) -> None:
    """Log the size of the finished document and how long it took."""
    _log_debug(f"Rendered document ({size} chars, {elapsed_time * 1000:.2f}ms)")


def log_invalid_input(received_type: str) -> None:
    """Log a rejected top-level value."""
    _log_error(f"Resume record must be a mapping, got {received_type}")
