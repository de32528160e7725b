"""Unit tests for the element builder."""

import pytest

from vitae.contexts.templating.html_elements import element, link


@pytest.mark.unit
def test_element_with_class_and_content():
    assert element("h1", "resume-name", "A") == '<h1 class="resume-name">A</h1>'


@pytest.mark.unit
def test_element_omits_empty_class():
    result = element("h2", "", "Skills")
    assert result == "<h2>Skills</h2>"
    assert 'class=""' not in result


@pytest.mark.unit
def test_element_escapes_attribute_values():
    result = element("a", "", "x", {"href": 'https://x.org/?a=1&b="2"'})
    assert result == '<a href="https://x.org/?a=1&amp;b=&quot;2&quot;">x</a>'


@pytest.mark.unit
def test_element_escapes_class_name():
    result = element("i", 'fa-brands fa-x" onclick="y')
    assert result == '<i class="fa-brands fa-x&quot; onclick=&quot;y"></i>'


@pytest.mark.unit
def test_element_keeps_attribute_order():
    result = element("img", "", attributes={"src": "a.png", "alt": "A"})
    assert result.index("src=") < result.index("alt=")


@pytest.mark.unit
def test_element_inner_html_passes_through():
    """Nested markup is not escaped a second time."""
    inner = element("span", "chip", "a&amp;b")
    result = element("div", "chips", inner)
    assert result == '<div class="chips"><span class="chip">a&amp;b</span></div>'


@pytest.mark.unit
def test_void_element_has_no_closing_tag():
    result = element("img", "profile-picture", attributes={"src": "me.jpg"})
    assert result == '<img class="profile-picture" src="me.jpg">'


@pytest.mark.unit
def test_link():
    assert link("https://a.b", "a.b", "url") == '<a class="url" href="https://a.b">a.b</a>'
