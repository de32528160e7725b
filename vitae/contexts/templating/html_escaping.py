"""
HTML escaping for caller-supplied text.

Every piece of resume data passes through escape_html exactly once before it
lands in element content or an attribute value.
"""

from typing import Any

# Ampersand handled by translate in the same pass, so no double-escaping
HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#39;",
    }
)


def escape_html(text: str) -> str:
    """
    Replace the five HTML metacharacters with their entities.

    Example:
        >>> escape_html('<a href="x">Tom & Jerry\\'s</a>')
        '&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&#39;s&lt;/a&gt;'
    """
    return text.translate(HTML_ESCAPES)


def safe_text(text: Any = None) -> str:
    """
    Escape text for HTML output, folding absent values into an empty string.

    Non-string scalars (a year loaded from YAML as int, say) are converted
    with str() first.

    Args:
        text: Raw value from the resume record, possibly None

    Returns:
        Escaped text, or "" when text is None or empty
    """
    if text is None or text == "":
        return ""
    return escape_html(text if isinstance(text, str) else str(text))
