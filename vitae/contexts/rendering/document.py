"""
Document Assembler

Public entry point turning a JSON Resume record into the HTML fragment.
"""

import time
from collections.abc import Mapping
from typing import Any

from vitae.contexts.rendering.logger import log_invalid_input, log_render_result, log_render_start
from vitae.contexts.templating.exceptions import InvalidResumeStructureError
from vitae.contexts.templating.html_generator import ResumeToHTMLConverter

_converter = None


def get_converter() -> ResumeToHTMLConverter:
    """
    Get the shared converter, creating it on first use.

    The converter only holds read-only caches (templates, stylesheet, layout),
    so one instance serves every render call.
    """
    global _converter
    if _converter is None:
        _converter = ResumeToHTMLConverter()
    return _converter


def render(resume: Mapping[str, Any]) -> str:
    """
    Render a JSON Resume record to a self-contained HTML fragment.

    The output is a container div holding an embedded <style> block, a left
    column (basics, languages, skills, interests, references) and a right
    column (work, projects, volunteer, education). Absent fields leave no
    trace; a present but empty collection renders its heading with no items.

    Args:
        resume: Resume record as a mapping (dict or OmegaConf DictConfig).
                Every field is optional and unknown fields are ignored.

    Returns:
        HTML string (not a full <html> document)

    Raises:
        InvalidResumeStructureError: If resume is not a mapping

    Example:
        >>> html = render({"basics": {"name": "A"}})
        >>> '<h1 class="resume-name">A</h1>' in html
        True
    """
    if not isinstance(resume, Mapping):
        log_invalid_input(type(resume).__name__)
        raise InvalidResumeStructureError(
            f"Resume record must be a mapping, got {type(resume).__name__}"
        )

    start = time.perf_counter()
    log_render_start([str(key) for key, value in resume.items() if value is not None])

    html = get_converter().generate_document(resume)

    log_render_result(len(html), time.perf_counter() - start)
    return html
