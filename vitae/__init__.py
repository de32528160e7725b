"""
vitae - JSON Resume to timeline HTML

Renders a JSON Resume record into a single self-contained HTML fragment with
embedded styling: personal sections in a left column, dated sections on a
timeline in a right column.

Architecture:
- Templating Context: Escaping, element and fragment builders, section markup
- Rendering Context: Public render() entry point and document assembly
"""

from loguru import logger

from vitae.contexts.rendering import render

__version__ = "0.1.0"

# Library code stays quiet until a caller runs one of the setup_*_logger helpers
logger.disable("vitae")

__all__ = ["render"]
