"""
HTML element builder.

The builder escapes class names and attribute keys/values itself. Inner HTML
is passed through verbatim because it is often nested markup; callers escape
text content before handing it over.
"""

from typing import Mapping, Optional

from vitae.contexts.templating.html_escaping import escape_html

# Elements that never take content or a closing tag
VOID_ELEMENTS = frozenset({"br", "hr", "img", "input", "link", "meta"})


def element(
    tag: str,
    class_name: str = "",
    inner_html: str = "",
    attributes: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Build a single HTML element string.

    Args:
        tag: Tag name (e.g., "div", "a")
        class_name: Raw class string; omitted entirely when empty
        inner_html: Already-escaped content, inserted as-is
        attributes: Ordered mapping of attribute name to raw value

    Returns:
        HTML string such as '<a class="url" href="https://x">x</a>'

    Example:
        >>> element("a", "url", "x.org", {"href": "https://x.org/?a=1&b=2"})
        '<a class="url" href="https://x.org/?a=1&amp;b=2">x.org</a>'
        >>> element("h2", "", "Skills")
        '<h2>Skills</h2>'
    """
    parts = [f"<{tag}"]
    if class_name:
        parts.append(f' class="{escape_html(class_name)}"')
    for key, value in (attributes or {}).items():
        parts.append(f' {escape_html(key)}="{escape_html(value)}"')
    parts.append(">")

    if tag in VOID_ELEMENTS:
        return "".join(parts)

    parts.append(f"{inner_html}</{tag}>")
    return "".join(parts)


def link(url: str, display_html: str, class_name: str = "") -> str:
    """Anchor pointing at the raw url, with pre-escaped display content."""
    return element("a", class_name, display_html, {"href": url})
