"""
Fragment Helpers

Small composers for the shapes that recur across sections: contact line,
location line, keyword chips, bullet lists and the timeline date block.
"""

from typing import Any, Iterable, List, Mapping, Optional

from vitae.contexts.templating.html_elements import element, link
from vitae.contexts.templating.html_escaping import safe_text
from vitae.contexts.templating.html_patterns import (
    ContentClasses,
    IconClasses,
    LinkPrefixes,
    Literals,
    SectionClasses,
)
from vitae.utils.text_processing import prepend_without_overlap, strip_url_scheme

LOCATION_FIELDS = ("address", "city", "region", "postalCode", "countryCode")


def as_items(value: Any) -> List[Any]:
    """
    Normalize an optional collection field to a list.

    None becomes [], a lone string becomes a one-element list (so it is not
    exploded into characters), anything else iterable is listed in order.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


def as_record(value: Any) -> Mapping[str, Any]:
    """
    Normalize a record that should be a mapping.

    Anything else (a bare string, a number, a list) reads as a record with no
    fields, so only that record renders empty.
    """
    return value if isinstance(value, Mapping) else {}


def _raw(value: Any) -> str:
    """Raw string form of a scalar field, for attribute values."""
    return value if isinstance(value, str) else str(value)


def _icon(icon_class: str) -> str:
    return element("i", icon_class)


def _contact_item(icon_class: str, href: str, display: str) -> str:
    inner = f"{_icon(icon_class)} {link(href, safe_text(display))}"
    return element("span", ContentClasses.CONTACT_ITEM, inner)


def contact_info(
    email: Optional[str] = None,
    phone: Optional[str] = None,
    url: Optional[str] = None,
    profiles: Optional[Iterable[Mapping[str, Any]]] = None,
) -> str:
    """
    Build the contact block: one icon + link item per present contact field.

    Profiles need both network and url; incomplete profiles are skipped.
    The network name is lower-cased into a brand icon class, which the element
    builder escapes.

    Returns:
        div.contact-info string, or "" when there is nothing to show
    """
    items = []

    if email:
        email = _raw(email)
        items.append(
            _contact_item(IconClasses.EMAIL, prepend_without_overlap(LinkPrefixes.EMAIL, email), email)
        )
    if phone:
        phone = _raw(phone)
        items.append(
            _contact_item(IconClasses.PHONE, prepend_without_overlap(LinkPrefixes.PHONE, phone), phone)
        )
    if url:
        url = _raw(url)
        items.append(_contact_item(IconClasses.WEBSITE, url, strip_url_scheme(url)))

    for profile in as_items(profiles):
        profile = as_record(profile)
        network = profile.get("network")
        profile_url = profile.get("url")
        if not (network and profile_url):
            continue
        profile_url = _raw(profile_url)
        icon_class = IconClasses.BRAND_PREFIX + _raw(network).lower()
        items.append(_contact_item(icon_class, profile_url, strip_url_scheme(profile_url)))

    if not items:
        return ""
    return element("div", ContentClasses.CONTACT_INFO, "".join(items))


def location_line(location: Optional[Mapping[str, Any]] = None) -> str:
    """
    Join present location parts in fixed order with ", ".

    Returns:
        div.location string, or "" when no part is present
    """
    location = as_record(location)
    parts = [safe_text(location.get(field)) for field in LOCATION_FIELDS]
    parts = [part for part in parts if part]
    if not parts:
        return ""
    return element("div", ContentClasses.LOCATION, Literals.LOCATION_SEPARATOR.join(parts))


def chips(keywords: Optional[Iterable[Any]] = None) -> str:
    """
    Build a row of pill-styled keyword spans, preserving input order.

    An empty or absent sequence yields the bare wrapper; callers decide
    whether to reach this helper for empty keywords.
    """
    spans = "".join(element("span", ContentClasses.CHIP, safe_text(keyword)) for keyword in as_items(keywords))
    return element("div", ContentClasses.CHIPS, spans)


def highlight_list(items: Optional[Iterable[Any]] = None, css_class: str = ContentClasses.HIGHLIGHTS) -> str:
    """
    Build a bullet list of strings.

    Unlike chips(), this self-omits: an absent or empty sequence returns "".
    """
    entries = as_items(items)
    if not entries:
        return ""
    return element("ul", css_class, "".join(element("li", "", safe_text(entry)) for entry in entries))


def timeline_dates(start_date: Any = None, end_date: Any = None) -> str:
    """
    Build the date column of a timeline entry.

    The end marker comes first (the literal "Present" when end_date is absent),
    followed by a line break and the start marker when start_date is present.
    Dates are opaque strings and are not parsed.

    Returns:
        div.timeline string, or "" when both dates are absent
    """
    if not start_date and not end_date:
        return ""

    end_marker = safe_text(end_date) if end_date else Literals.PRESENT
    content = element("span", ContentClasses.DATE, end_marker)
    if start_date:
        content += Literals.DATE_BREAK
        content += element("span", ContentClasses.DATE, safe_text(start_date))

    return element("div", SectionClasses.TIMELINE, content)
