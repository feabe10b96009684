import pytest

from pplay.form_model import Form
from pplay.forms import FormSet, parse_form, split_inputs

LOGIN = (
    '<html><form action="/login" method="post">'
    '<input type="text" name="user"><input type="submit" value="Go">'
    "</form></html>"
)

SELECT = (
    '<form action="/pick"><select name="color">'
    '<option value="red">Red</option>'
    '<option value="blue" selected>Blue</option>'
    "</select></form>"
)


def test_login_form_fields():
    forms = FormSet(LOGIN)
    assert len(forms) == 1
    form = forms[0]
    assert form.url == "/login"
    assert form.method == "POST"
    assert form.multipart is False
    assert [(i.name, i.type, i.value) for i in form.inputs] == [
        ("user", "text", ""),
        ("", "submit", "Go"),
    ]


def test_report_of_login_form():
    assert FormSet(LOGIN).report() == (
        '--- FORM report. Uses POST to URL "/login"\n'
        'Input: NAME="user" (text)\n'
        'Button: "Go" (submit)\n'
        "--- end of FORM\n"
    )


def test_method_defaults_to_get():
    form = FormSet(SELECT)[0]
    assert form.method == "GET"
    assert form.url == "/pick"
    assert form.inputs == []


def test_select_options():
    form = FormSet(SELECT)[0]
    assert len(form.selects) == 1
    select = form.selects[0]
    assert select.name == "color"
    assert [(o.value, o.selected) for o in select.options] == [
        ("red", False),
        ("blue", True),
    ]
    report = FormSet(SELECT).report()
    assert '    Option VALUE="blue" (SELECTED)\n' in report
    assert "[end of select]\n" in report


def test_textarea_and_multipart():
    html = (
        '<form action="/post" enctype="multipart/form-data">'
        '<textarea name="body">hi</textarea></form>'
    )
    form = FormSet(html)[0]
    assert form.multipart is True
    assert [t.name for t in form.textareas] == ["body"]
    assert "--- type: multipart form upload\n" in FormSet(html).report()


def test_upper_case_tags():
    form = FormSet('<FORM ACTION="/a" METHOD="get"><INPUT NAME="q"></FORM>')[0]
    assert form.url == "/a"
    assert form.method == "GET"
    assert [i.name for i in form.inputs] == ["q"]


def test_commented_form_ignored():
    html = "<!-- " + LOGIN + " -->" + SELECT
    forms = FormSet(html)
    assert len(forms) == 1
    assert forms[0].url == "/pick"


def test_several_forms_in_order():
    forms = FormSet(LOGIN + SELECT)
    assert len(forms) == 2
    assert [f.url for f in forms] == ["/login", "/pick"]


def test_out_of_range_gives_first_form():
    forms = FormSet(LOGIN + SELECT)
    assert forms[5] == forms[0]
    assert forms[-1] == forms[0]


def test_no_forms_gives_empty_form():
    forms = FormSet("<p>nothing</p>")
    assert len(forms) == 0
    assert forms[0] == Form()
    assert forms.report() == ""


def test_getitem_returns_copy():
    forms = FormSet(LOGIN)
    first = forms[0]
    first.url = "/changed"
    first.inputs.clear()
    assert forms[0].url == "/login"
    assert len(forms[0].inputs) == 2


def test_report_hides_single_space_value():
    forms = FormSet('<form action="/s"><input type="text" name="x" value=" "></form>')
    assert forms[0].inputs[0].value == " "
    assert "VALUE" not in forms.report()
    assert 'Input: NAME="x" (text)\n' in forms.report()


def test_split_inputs_chunks():
    raw = 'form><input name="a"><input name="b">'
    chunks = split_inputs(raw)
    assert len(chunks) == 2
    assert all(chunk.startswith("input ") for chunk in chunks)
    assert chunks[-1] == 'input name="b">'


def test_split_inputs_skips_words_outside_tags():
    chunks = split_inputs('the input field <input name="a">')
    assert chunks == ['input name="a">']


def test_split_inputs_none():
    assert split_inputs("<p>no fields</p>") == []


def test_parse_form_direct():
    form = parse_form('form action="/x" method="put"><input name="k" value="v"></')
    assert form.url == "/x"
    assert form.method == "PUT"
    assert [(i.name, i.value) for i in form.inputs] == [("k", "v")]


def test_parsed_form_can_serve_as_template():
    template = FormSet(LOGIN)[0]
    filled = Form(template=template)
    filled.fill("user", "someone")
    assert filled.url == template.url
    assert filled.method == template.method
    with pytest.raises(KeyError):
        filled.fill("missing", "x")