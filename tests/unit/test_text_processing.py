"""Unit tests for link and display text helpers."""

import pytest

from vitae.utils.text_processing import is_absolute_url, prepend_without_overlap, strip_url_scheme


@pytest.mark.unit
class TestStripUrlScheme:
    """Tests for strip_url_scheme."""

    def test_strips_https(self):
        assert strip_url_scheme("https://github.com/x") == "github.com/x"

    def test_strips_http(self):
        assert strip_url_scheme("http://example.com") == "example.com"

    def test_case_insensitive(self):
        assert strip_url_scheme("HTTPS://Example.com") == "Example.com"

    def test_other_schemes_untouched(self):
        assert strip_url_scheme("ftp://example.com") == "ftp://example.com"

    def test_only_leading_prefix(self):
        assert strip_url_scheme("example.com/?next=https://x") == "example.com/?next=https://x"


@pytest.mark.unit
class TestPrependWithoutOverlap:
    """Tests for prepend_without_overlap."""

    def test_adds_prefix(self):
        assert prepend_without_overlap("mailto:", "a@b.c") == "mailto:a@b.c"

    def test_keeps_existing_prefix(self):
        assert prepend_without_overlap("tel:", "tel:+1555") == "tel:+1555"

    def test_existing_prefix_case_insensitive(self):
        assert prepend_without_overlap("mailto:", "MAILTO:a@b.c") == "MAILTO:a@b.c"


@pytest.mark.unit
class TestIsAbsoluteUrl:
    """Tests for is_absolute_url."""

    @pytest.mark.parametrize(
        "text",
        [
            "https://example.com",
            "http://example.com/ref?id=1",
            "ftp://files.example.com/cv.pdf",
        ],
    )
    def test_absolute_urls(self, text):
        assert is_absolute_url(text)

    @pytest.mark.parametrize(
        "text",
        [
            "not a url",
            "example.com/ref",
            "/relative/path",
            "Jane: a great colleague",
            "",
            "http://[::1",
            "http://example.com:notaport",
            "http://exa mple.com",
            "https://example.com\x00/ref",
        ],
    )
    def test_not_absolute_urls(self, text):
        assert not is_absolute_url(text)
