"""Custom exceptions for templating context with template references."""

from pathlib import Path
from typing import Optional


class TemplateRenderError(Exception):
    """
    Exception raised when an HTML shell template fails to render.

    Attributes:
        message: Error description
        template_name: Name of the template being rendered
        template_path: Path to the template file
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_name: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_name = template_name
        self.template_path = template_path
        self.original_error = original_error

        # Build enhanced error message
        parts = [message]

        if template_name and template_path:
            parts.append(f"\nTemplate: {template_path}")
            parts.append(f"Name: {template_name}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))


class InvalidSectionConfigError(ValueError):
    """
    Exception raised when the section layout config is malformed.

    Raised at load time for unknown section kinds, unknown timeline slot kinds,
    or column entries that name no configured section.
    """

    pass


class InvalidResumeStructureError(ValueError):
    """
    Exception raised when the resume record is not a mapping.

    Missing or extra fields are never errors; only a top-level value that
    cannot be read as a record (a list, a string, None) is rejected.
    """

    pass
