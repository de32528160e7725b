"""Unit tests for fragment helpers."""

import pytest

from vitae.contexts.templating.fragments import (
    as_items,
    as_record,
    chips,
    contact_info,
    highlight_list,
    location_line,
    timeline_dates,
)


@pytest.mark.unit
class TestContactInfo:
    """Tests for contact_info."""

    def test_email_phone_url(self):
        result = contact_info("jane@example.com", "123-456", "https://jane.dev")

        assert result.startswith('<div class="contact-info">')
        assert (
            '<span class="contact-item"><i class="fas fa-envelope"></i> '
            '<a href="mailto:jane@example.com">jane@example.com</a></span>'
        ) in result
        assert '<a href="tel:123-456">123-456</a>' in result
        assert '<i class="fas fa-globe"></i> <a href="https://jane.dev">jane.dev</a>' in result

    def test_items_in_fixed_order(self):
        result = contact_info("e@x.y", "1", "https://x.y")
        assert result.index("mailto:") < result.index("tel:") < result.index("fa-globe")

    def test_profile_icon_lower_cased(self):
        result = contact_info(profiles=[{"network": "GitHub", "url": "https://github.com/x"}])

        assert '<i class="fa-brands fa-github"></i>' in result
        assert '<a href="https://github.com/x">github.com/x</a>' in result

    def test_incomplete_profiles_skipped(self):
        result = contact_info(
            profiles=[
                {"network": "GitHub"},
                {"url": "https://example.com/me"},
                {"network": "GitLab", "url": "https://gitlab.com/x"},
            ]
        )

        assert result.count("contact-item") == 1
        assert "fa-gitlab" in result
        assert "example.com/me" not in result

    def test_network_name_escaped_in_icon_class(self):
        result = contact_info(profiles=[{"network": 'X" onclick="y', "url": "https://x.com"}])

        assert 'onclick="y' not in result
        assert 'class="fa-brands fa-x&quot; onclick=&quot;y"' in result

    def test_existing_mailto_not_doubled(self):
        result = contact_info(email="mailto:jane@example.com")
        assert 'href="mailto:jane@example.com"' in result
        assert "mailto:mailto:" not in result

    def test_nothing_to_show(self):
        assert contact_info() == ""
        assert contact_info(profiles=[{"network": "GitHub"}]) == ""

    def test_non_mapping_profiles_skipped(self):
        result = contact_info(profiles=["github", None, {"network": "GitLab", "url": "https://gitlab.com/x"}])

        assert result.count("contact-item") == 1
        assert "fa-gitlab" in result


@pytest.mark.unit
class TestLocationLine:
    """Tests for location_line."""

    def test_all_parts_in_order(self):
        location = {
            "countryCode": "US",
            "city": "Springfield",
            "address": "1 Main St",
            "postalCode": "62701",
            "region": "IL",
        }
        assert location_line(location) == '<div class="location">1 Main St, Springfield, IL, 62701, US</div>'

    def test_missing_parts_leave_no_separator(self):
        assert location_line({"city": "Paris", "countryCode": "FR"}) == '<div class="location">Paris, FR</div>'

    def test_parts_escaped(self):
        assert location_line({"city": "A&B"}) == '<div class="location">A&amp;B</div>'

    def test_empty_location(self):
        assert location_line({}) == ""
        assert location_line(None) == ""

    def test_non_mapping_location(self):
        assert location_line("Oslo") == ""
        assert location_line(["Oslo"]) == ""


@pytest.mark.unit
class TestChips:
    """Tests for chips."""

    def test_chips_preserve_order(self):
        result = chips(["Python", "Go", "<Rust>"])
        assert result == (
            '<div class="chips"><span class="chip">Python</span>'
            '<span class="chip">Go</span><span class="chip">&lt;Rust&gt;</span></div>'
        )

    def test_empty_chips_keep_wrapper(self):
        assert chips([]) == '<div class="chips"></div>'
        assert chips(None) == '<div class="chips"></div>'


@pytest.mark.unit
class TestHighlightList:
    """Tests for highlight_list."""

    def test_highlights(self):
        result = highlight_list(["One", "Two & three"])
        assert result == '<ul class="highlights"><li>One</li><li>Two &amp; three</li></ul>'

    def test_custom_class(self):
        assert highlight_list(["Compilers"], "courses") == '<ul class="courses"><li>Compilers</li></ul>'

    def test_empty_list_self_omits(self):
        assert highlight_list([]) == ""
        assert highlight_list(None) == ""


@pytest.mark.unit
class TestTimelineDates:
    """Tests for timeline_dates."""

    def test_both_dates_end_first(self):
        result = timeline_dates("2020-01", "2023-12")
        assert result == (
            '<div class="timeline"><span class="date">2023-12</span> <br> '
            '<span class="date">2020-01</span></div>'
        )

    def test_missing_end_is_present(self):
        result = timeline_dates("2020-01")
        assert result == (
            '<div class="timeline"><span class="date">Present</span> <br> '
            '<span class="date">2020-01</span></div>'
        )
        assert result.index("Present") < result.index("2020-01")

    def test_end_only(self):
        assert timeline_dates(end_date="2021") == '<div class="timeline"><span class="date">2021</span></div>'

    def test_no_dates(self):
        assert timeline_dates() == ""

    def test_dates_are_opaque_but_escaped(self):
        result = timeline_dates("sometime <soon>", "whenever")
        assert "sometime &lt;soon&gt;" in result
        assert "whenever" in result


@pytest.mark.unit
def test_as_items():
    assert as_items(None) == []
    assert as_items("solo") == ["solo"]
    assert as_items(("a", "b")) == ["a", "b"]


@pytest.mark.unit
def test_as_record():
    record = {"name": "A"}
    assert as_record(record) is record
    assert as_record("A") == {}
    assert as_record(None) == {}
    assert as_record(["A"]) == {}
