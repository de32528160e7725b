"""
Templating Context

Responsibilities:
- Escapes caller data for HTML text and attribute positions
- Builds elements, recurring fragments and per-section markup
- Loads the HTML shell templates, stylesheet and fixed section layout

Owns: Markup generation, escaping discipline, static layout resources
Never: Reads resume data from files or validates it against the schema
"""

from vitae.contexts.templating.exceptions import (
    InvalidResumeStructureError,
    InvalidSectionConfigError,
    TemplateRenderError,
)
from vitae.contexts.templating.html_escaping import escape_html, safe_text
from vitae.contexts.templating.html_generator import ResumeToHTMLConverter
from vitae.contexts.templating.registries import SectionRegistry, TemplateRegistry

__all__ = [
    # Escaping
    "escape_html",
    "safe_text",
    # Converter and registries
    "ResumeToHTMLConverter",
    "SectionRegistry",
    "TemplateRegistry",
    # Exceptions
    "InvalidResumeStructureError",
    "InvalidSectionConfigError",
    "TemplateRenderError",
]
