"""
Text processing utilities for links and display strings.
"""

import re
from urllib.parse import urlsplit

URL_SCHEME_PREFIX = re.compile(r"^https?://", re.IGNORECASE)


def strip_url_scheme(url: str) -> str:
    """
    Remove a leading http:// or https:// from a URL for display.

    Example:
        >>> strip_url_scheme("https://github.com/x")
        'github.com/x'
        >>> strip_url_scheme("ftp://example.com")
        'ftp://example.com'
    """
    return URL_SCHEME_PREFIX.sub("", url, count=1)


def prepend_without_overlap(prefix: str, value: str) -> str:
    """
    Prepend a link prefix unless the value already starts with it.

    Comparison is case-insensitive so "MAILTO:a@b.c" is left alone.

    Args:
        prefix: Link prefix such as "mailto:" or "tel:"
        value: Raw value from the resume

    Returns:
        Value carrying exactly one copy of the prefix

    Example:
        >>> prepend_without_overlap("mailto:", "jane@example.com")
        'mailto:jane@example.com'
        >>> prepend_without_overlap("mailto:", "mailto:jane@example.com")
        'mailto:jane@example.com'
    """
    if value.lower().startswith(prefix.lower()):
        return value
    return prefix + value


def is_absolute_url(text: str) -> bool:
    """
    Check whether text is an absolute URL with a scheme and an authority.

    Relative paths, bare words and strings the URL parser rejects
    (e.g. an unterminated IPv6 host) all return False. urlsplit does not
    validate hosts, so an authority holding whitespace or control characters
    is rejected here.

    Example:
        >>> is_absolute_url("https://example.com/ref")
        True
        >>> is_absolute_url("not a url")
        False
    """
    try:
        parts = urlsplit(text.strip())
        # Accessing port validates it and raises ValueError on garbage
        parts.port
    except ValueError:
        return False

    if any(char.isspace() or not char.isprintable() for char in parts.netloc):
        return False

    return bool(parts.scheme) and bool(parts.netloc)
