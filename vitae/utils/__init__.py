"""
Shared utilities for vitae.

Common functionality used across contexts:
- Logger setup
- Link and display text helpers
"""

from vitae.utils.text_processing import is_absolute_url, prepend_without_overlap, strip_url_scheme

__all__ = ["is_absolute_url", "prepend_without_overlap", "strip_url_scheme"]
