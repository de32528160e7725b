"""
HTML Generator

Converts a JSON Resume record to the two-column timeline HTML layout.
"""

from typing import Any, Callable, Dict, List, Mapping

from vitae.contexts.templating.fragments import (
    as_items,
    as_record,
    chips,
    contact_info,
    highlight_list,
    location_line,
    timeline_dates,
)
from vitae.contexts.templating.html_elements import element, link
from vitae.contexts.templating.html_escaping import safe_text
from vitae.contexts.templating.html_patterns import (
    ContentClasses,
    LayoutClasses,
    Literals,
    SectionClasses,
)
from vitae.contexts.templating.logger import log_section_failed, log_section_rendered
from vitae.contexts.templating.registries import SectionRegistry, TemplateRegistry
from vitae.utils.text_processing import is_absolute_url, strip_url_scheme


class ResumeToHTMLConverter:
    """Converts a resume record to HTML."""

    def __init__(
        self,
        template_registry: TemplateRegistry = None,
        section_registry: SectionRegistry = None,
    ):
        self.template_registry = template_registry or TemplateRegistry()
        self.section_registry = section_registry or SectionRegistry()

        self._section_renderers: Dict[str, Callable[[Any, Dict[str, Any]], str]] = {
            "basics": self.convert_basics,
            "named_list": self.convert_named_list,
            "references": self.convert_references,
            "timeline": self.convert_timeline,
        }

    def _wrap_section(self, content: str, title: str = "", css_class: str = SectionClasses.SECTION) -> str:
        """Wrap section content in its div, with an h2 heading when titled."""
        return self.template_registry.render(
            "section_wrapper",
            css_class=css_class,
            title=safe_text(title),
            content=content,
        )

    def convert_basics(self, basics: Mapping[str, Any], layout: Dict[str, Any] = None) -> str:
        """
        Convert the basics record to the untitled personal header section.

        Args:
            basics: Basics record (name, label, image, contact fields, location, summary)
            layout: Section layout (unused; basics has a fixed shape)

        Returns:
            HTML string for the section, or "" when basics is absent
        """
        if basics is None:
            return ""
        basics = as_record(basics)

        content = ""
        if basics.get("image"):
            content += element(
                "img",
                ContentClasses.PROFILE_PICTURE,
                attributes={"src": str(basics["image"]), "alt": Literals.PROFILE_PICTURE_ALT},
            )
        if basics.get("name"):
            content += element("h1", ContentClasses.RESUME_NAME, safe_text(basics["name"]))
        if basics.get("label"):
            content += element("h2", ContentClasses.JOB_TITLE, safe_text(basics["label"]))

        content += location_line(basics.get("location"))
        content += contact_info(
            basics.get("email"),
            basics.get("phone"),
            basics.get("url"),
            basics.get("profiles"),
        )

        if basics.get("summary"):
            content += element("p", "", safe_text(basics["summary"]))

        return self._wrap_section(content)

    def convert_named_list(self, entries: List[Mapping[str, Any]], layout: Dict[str, Any]) -> str:
        """
        Convert a simple list section (languages, skills, interests).

        Each entry renders its label as h3, an optional subtitle as h4, and
        keyword chips when the section has keywords and the entry's list is
        non-empty.

        Args:
            entries: Section entries
            layout: Section layout with title, label, and optional subtitle/keywords fields

        Returns:
            HTML string for the section, or "" when the collection is absent
        """
        if entries is None:
            return ""

        label_field = layout["label"]
        subtitle_field = layout.get("subtitle")
        keywords_field = layout.get("keywords")

        items = []
        for entry in map(as_record, as_items(entries)):
            item = ""
            if entry.get(label_field):
                item += element("h3", "", safe_text(entry[label_field]))
            if subtitle_field and entry.get(subtitle_field):
                item += element("h4", ContentClasses.SUBTITLE, safe_text(entry[subtitle_field]))
            if keywords_field and as_items(entry.get(keywords_field)):
                item += chips(entry[keywords_field])
            items.append(element("div", SectionClasses.SECTION_ITEM, item))

        return self._wrap_section("".join(items), layout["title"])

    def convert_references(self, references: List[Mapping[str, Any]], layout: Dict[str, Any]) -> str:
        """
        Convert the references section.

        A reference that parses as an absolute URL becomes a link showing the
        scheme-stripped address; anything else is a plain paragraph.

        Args:
            references: Reference entries (name, reference)
            layout: Section layout with title

        Returns:
            HTML string for the section, or "" when the collection is absent
        """
        if references is None:
            return ""

        items = []
        for entry in map(as_record, as_items(references)):
            item = ""
            if entry.get("name"):
                item += element("h3", "", safe_text(entry["name"]))

            reference = entry.get("reference")
            if reference:
                reference = str(reference)
                if is_absolute_url(reference):
                    item += link(reference, safe_text(strip_url_scheme(reference)), ContentClasses.REFERENCE_LINK)
                else:
                    item += element("p", "", safe_text(reference))

            items.append(element("div", SectionClasses.SECTION_ITEM, item))

        return self._wrap_section("".join(items), layout["title"], SectionClasses.REFERENCES)

    def convert_timeline(self, entries: List[Mapping[str, Any]], layout: Dict[str, Any]) -> str:
        """
        Convert a timeline section (work, projects, volunteer, education).

        Every entry gets the date column followed by a details block whose
        slots come from the section layout, rendered in configured order.

        Args:
            entries: Timeline entries
            layout: Section layout with title and slots

        Returns:
            HTML string for the section, or "" when the collection is absent
        """
        if entries is None:
            return ""

        items = [
            self.convert_timeline_entry(as_record(entry), layout["slots"]) for entry in as_items(entries)
        ]
        return self._wrap_section("".join(items), layout["title"])

    def convert_timeline_entry(self, entry: Mapping[str, Any], slots: List[Dict[str, Any]]) -> str:
        """
        Convert a single timeline entry.

        Args:
            entry: Timeline entry with optional startDate/endDate and slot fields
            slots: Ordered slot configs for this section

        Returns:
            HTML string for div.timeline-section-item
        """
        details = "".join(self._convert_slot(entry, slot) for slot in slots)

        content = timeline_dates(entry.get("startDate"), entry.get("endDate"))
        content += element("div", SectionClasses.TIMELINE_DETAILS, details)
        return element("div", SectionClasses.TIMELINE_ITEM, content)

    def _convert_slot(self, entry: Mapping[str, Any], slot: Dict[str, Any]) -> str:
        """Render one slot of a timeline details block, or "" when its field is absent."""
        kind = slot["kind"]

        if kind == "annex":
            return self._convert_annex(entry, slot)

        value = entry.get(slot["field"])
        if not value:
            return ""

        if kind == "title":
            return element("h3", "", safe_text(value))
        elif kind == "description":
            return element("span", ContentClasses.DESCRIPTION, safe_text(value))
        elif kind == "subtitle":
            return element("h4", ContentClasses.SUBTITLE, safe_text(value))
        elif kind == "paragraph":
            return element("p", "", safe_text(value))
        elif kind == "link":
            url = str(value)
            prefix = Literals.BULLET_SEPARATOR if slot.get("prefix") == "bullet" else ""
            return prefix + link(url, safe_text(strip_url_scheme(url)), ContentClasses.DESCRIPTION)
        elif kind == "list":
            return highlight_list(value, slot.get("css_class", ContentClasses.HIGHLIGHTS))
        elif kind == "chips":
            return chips(value) if as_items(value) else ""

        raise ValueError(f"Unknown slot kind: {kind}")

    def _convert_annex(self, entry: Mapping[str, Any], slot: Dict[str, Any]) -> str:
        """
        Render the secondary line under a timeline title.

        Only present parts are rendered. With `separator: bullet`, present parts
        are joined by a bullet, so a lone part never carries a stray separator.
        """
        parts = []
        for part in slot.get("parts", []):
            value = entry.get(part["field"])
            if not value:
                continue

            style = part["style"]
            if style == "text":
                parts.append(element("span", "", safe_text(value)))
            elif style == "plain":
                parts.append(safe_text(value))
            elif style == "description":
                parts.append(element("span", ContentClasses.DESCRIPTION, safe_text(value)))
            elif style == "link":
                url = str(value)
                parts.append(link(url, safe_text(strip_url_scheme(url)), ContentClasses.URL))

        if not parts:
            return ""

        separator = Literals.BULLET_SEPARATOR if slot.get("separator") == "bullet" else ""
        return element("div", ContentClasses.TITLE_ANNEX, separator.join(parts))

    def convert_section(self, section_name: str, value: Any) -> str:
        """
        Convert one top-level resume field using its configured layout.

        Args:
            section_name: Resume field name (e.g., 'skills', 'work')
            value: The field's value, None when absent

        Returns:
            HTML string for the section, or "" when absent
        """
        layout = self.section_registry.get_section(section_name)
        renderer = self._section_renderers[layout["kind"]]
        return renderer(value, layout)

    def generate_column(self, resume: Mapping[str, Any], column: str) -> str:
        """
        Generate all sections of one column in configured order.

        A section that raises on malformed data is logged and left out; the
        other sections still render.

        Args:
            resume: Resume record
            column: 'left' or 'right'

        Returns:
            Concatenated section HTML
        """
        rendered = []
        for section_name in self.section_registry.get_column(column):
            value = resume.get(section_name)
            if value is None:
                continue

            try:
                section_html = self.convert_section(section_name, value)
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                log_section_failed(section_name, e)
                continue

            log_section_rendered(section_name, len(section_html))
            rendered.append(section_html)

        return "".join(rendered)

    def generate_document(self, resume: Mapping[str, Any]) -> str:
        """
        Generate the complete document fragment.

        Args:
            resume: Resume record

        Returns:
            Container div holding the stylesheet and both columns
        """
        left_column = self.generate_column(resume, "left")
        right_column = self.generate_column(resume, "right")

        return self.template_registry.render(
            "document",
            layout=LayoutClasses,
            stylesheet=self.template_registry.get_stylesheet(),
            left_column=left_column,
            right_column=right_column,
        )
