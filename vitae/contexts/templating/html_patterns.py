"""
HTML Pattern Constants

Centralized class names, icon classes and literal markup used for generation.
Organized into frozen dataclasses by category for immutability and clear grouping.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutClasses:
    """
    Page layout classes.

    Used by the document shell and the stylesheet.
    """
    CONTAINER: str = 'resume-container'
    LEFT_COLUMN: str = 'left-column'
    RIGHT_COLUMN: str = 'right-column'


@dataclass(frozen=True)
class SectionClasses:
    """
    Section and item wrapper classes.
    """
    SECTION: str = 'section'
    REFERENCES: str = 'section references'
    SECTION_ITEM: str = 'section-item'
    TIMELINE_ITEM: str = 'timeline-section-item'
    TIMELINE: str = 'timeline'
    TIMELINE_DETAILS: str = 'timeline-section-details'


@dataclass(frozen=True)
class ContentClasses:
    """
    Classes applied to content elements inside sections.
    """
    RESUME_NAME: str = 'resume-name'
    JOB_TITLE: str = 'job-title'
    PROFILE_PICTURE: str = 'profile-picture'
    LOCATION: str = 'location'
    CONTACT_INFO: str = 'contact-info'
    CONTACT_ITEM: str = 'contact-item'
    CHIPS: str = 'chips'
    CHIP: str = 'chip'
    HIGHLIGHTS: str = 'highlights'
    SUBTITLE: str = 'subtitle'
    DESCRIPTION: str = 'description'
    TITLE_ANNEX: str = 'title-anex'
    DATE: str = 'date'
    URL: str = 'url'
    REFERENCE_LINK: str = 'reference-link'


@dataclass(frozen=True)
class IconClasses:
    """
    Font Awesome icon classes for contact items.

    Profile icons are built from BRAND_PREFIX plus the lower-cased network name.
    """
    EMAIL: str = 'fas fa-envelope'
    PHONE: str = 'fas fa-phone'
    WEBSITE: str = 'fas fa-globe'
    BRAND_PREFIX: str = 'fa-brands fa-'


@dataclass(frozen=True)
class LinkPrefixes:
    """
    Schemes prepended to contact values to build hrefs.
    """
    EMAIL: str = 'mailto:'
    PHONE: str = 'tel:'


@dataclass(frozen=True)
class Literals:
    """
    Fixed text and separators emitted verbatim (already valid HTML).
    """
    PRESENT: str = 'Present'
    PROFILE_PICTURE_ALT: str = 'Profile Picture'
    BULLET_SEPARATOR: str = ' &bull; '
    DATE_BREAK: str = ' <br> '
    LOCATION_SEPARATOR: str = ', '
