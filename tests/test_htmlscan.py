import pytest

from pplay.htmlscan import (
    get_after_delimiter,
    get_between_two,
    get_between_two_closed,
    get_from_intern,
)


def test_after_delimiter_single_form():
    html = '<form action="/go"><input name="q"></form>'
    result = get_after_delimiter(html, "form")
    assert len(result) == 1
    assert result[0].startswith('form action="/go"')
    assert 'name="q"' in result[0]
    assert result[0].endswith("</")


def test_after_delimiter_keeps_case():
    result = get_after_delimiter("<FORM a=1></FORM>", "form")
    assert len(result) == 1
    assert result[0].startswith("FORM a=1")


def test_after_delimiter_two_forms_in_order():
    result = get_after_delimiter("<form>a</form><form>b</form>", "form")
    assert len(result) == 2
    assert "a" in result[0] and "b" not in result[0]
    assert "b" in result[1]


def test_after_delimiter_unclosed_gives_nothing():
    assert get_after_delimiter("<form a=1>", "form") == []


def test_after_delimiter_requires_opening_bracket():
    assert get_after_delimiter("form </form>", "form") == []


def test_after_delimiter_ignores_comments():
    html = "<!-- <form>x</form> --><form>y</form>"
    result = get_after_delimiter(html, "form")
    assert len(result) == 1
    assert "y" in result[0] and "x" not in result[0]


def test_after_delimiter_empty_seeking():
    with pytest.raises(ValueError):
        get_after_delimiter("<form></form>", "")


def test_between_two_options():
    raw = '<select name="s"><option value="1">One<option value="2" selected>Two</select>'
    assert get_between_two(raw, "option") == [
        'option value="1"',
        'option value="2" selected',
    ]


def test_between_two_spaces_after_bracket():
    assert get_between_two("< option x>", "option") == ["option x"]


def test_between_two_unclosed_keeps_partial():
    result = get_between_two('<option value="1"', "option")
    assert len(result) == 1
    assert result[0].startswith("option value=")


def test_between_two_not_a_tag():
    assert get_between_two("option value", "option") == []


def test_between_two_closed_text():
    assert get_between_two_closed('<a href="x">Click here</a>', "a") == "Click here"


def test_between_two_closed_nested():
    raw = '<a href="x"><b>Bold</b></a>'
    assert get_between_two_closed(raw, "a") == "<b>Bold</b>"


def test_between_two_closed_without_brackets():
    assert get_between_two_closed("plain", "a") == ""


def test_from_intern_single_link():
    raw = '<p><a href="http://example.com/">Home</a></p>'
    assert get_from_intern(raw, "href", "a") == ['<a href="http://example.com/">Home</a>']


def test_from_intern_keeps_case():
    raw = '<A HREF="x">Y</A>'
    assert get_from_intern(raw, "href", "a") == [raw]


def test_from_intern_two_links():
    first = '<a href="/one">One</a>'
    second = '<a href="/two"><b>Two</b></a>'
    assert get_from_intern(first + " and " + second, "href", "a") == [first, second]


def test_from_intern_other_tags_ignored():
    assert get_from_intern('<link href="style.css">', "href", "a") == []
    assert get_from_intern("<abbr href=x>t</abbr>", "href", "a") == []


def test_from_intern_needs_equal_sign():
    assert get_from_intern("<a href>x</a>", "href", "a") == []


def test_from_intern_unclosed():
    assert get_from_intern('<a href="x">no end', "href", "a") == []


def test_from_intern_empty_words():
    with pytest.raises(ValueError):
        get_from_intern("<a href=x></a>", "", "a")