"""Every form of an HTML page, parsed into :class:`~pplay.form_model.Form` objects."""

from __future__ import annotations

import copy
import logging
from itertools import pairwise
from typing import Iterator

from pplay.form_model import Form, InputField, Option, SelectField, TextareaField
from pplay.htmlscan import get_after_delimiter, get_between_two
from pplay.htmltext import (
    ascii_lower,
    get_after_equal,
    remove_html_comments,
    replace_all,
    word_in,
)

_log = logging.getLogger(__name__)

_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


def _opens_tag(lower: str, index: int) -> bool:
    """True when the first non-space character before ``index`` is ``<``."""
    pos = index - 1
    while pos >= 0 and lower[pos] == " ":
        pos -= 1
    return pos >= 0 and lower[pos] == "<"


def _occurrences(text: str, word: str) -> Iterator[int]:
    pos = text.find(word)
    while pos != -1:
        yield pos
        pos = text.find(word, pos + 1)


def split_inputs(raw: str) -> list[str]:
    """Cut a form into one chunk per ``<input`` tag.

    Each chunk starts at the word ``input`` and runs up to and including the
    first character of the next input tag; the last one runs to the end.
    Comments are dropped and newlines become spaces.
    """
    raw = replace_all(remove_html_comments(raw), "\n", " ")
    lower = ascii_lower(raw)
    starts = [i for i in _occurrences(lower, "input ") if _opens_tag(lower, i)]
    if not starts:
        return []
    chunks = [raw[first:last + 1] for first, last in pairwise(starts)]
    chunks.append(raw[starts[-1]:])
    return chunks


def _parse_select(block: str) -> SelectField:
    select = SelectField(name=get_after_equal(block, "name"))
    for raw_option in get_between_two(block, "option"):
        select.options.append(
            Option(
                value=get_after_equal(raw_option, "value"),
                selected=word_in(raw_option, " selected"),
            )
        )
    return select


def parse_form(raw: str) -> Form:
    """Build a form from the text of one ``<form>`` element."""
    form = Form(url=get_after_equal(raw, "action"))
    form.multipart = get_after_equal(raw, "enctype") == "multipart/form-data"
    method = get_after_equal(raw, "method").translate(_ASCII_UPPER)
    form.method = "GET" if method in ("", " ") else method

    if word_in(raw, "textarea "):
        for block in get_after_delimiter(raw, "textarea"):
            form.textareas.append(TextareaField(name=get_after_equal(block, "name")))

    if word_in(raw, "select "):
        for block in get_after_delimiter(raw, "select"):
            form.selects.append(_parse_select(block))

    for chunk in split_inputs(raw):
        form.inputs.append(
            InputField(
                name=get_after_equal(chunk, "name"),
                type=get_after_equal(chunk, "type"),
                value=get_after_equal(chunk, "value"),
            )
        )
    return form


def _report(form: Form) -> str:
    out = [f'--- FORM report. Uses {form.method} to URL "{form.url}"\n']
    if form.multipart:
        out.append("--- type: multipart form upload\n")
    for area in form.textareas:
        out.append(f'Textarea: NAME="{area.name}"\n')
    for select in form.selects:
        out.append(f'Select: NAME="{select.name}"\n')
        for option in select.options:
            mark = "(SELECTED)" if option.selected else ""
            out.append(f'    Option VALUE="{option.value}" {mark}\n')
    if form.selects:
        out.append("[end of select]\n")
    for item in form.inputs:
        if item.name in ("", " "):
            out.append(f'Button: "{item.value}"')
        else:
            text = f'Input: NAME="{item.name}'
            if item.value not in ("", " "):
                text += f'" VALUE="{item.value}'
            out.append(text + '"')
        out.append(f" ({item.type})\n")
    out.append("--- end of FORM\n")
    return "".join(out)


class FormSet:
    """All forms found in a page, in document order."""

    def __init__(self, html: str = "") -> None:
        self.raw_forms: list[str] = get_after_delimiter(html, "form")
        self.forms: list[Form] = [parse_form(raw) for raw in self.raw_forms]

    def __len__(self) -> int:
        return len(self.forms)

    def __iter__(self) -> Iterator[Form]:
        return iter(self.forms)

    def __getitem__(self, index: int) -> Form:
        """Copy of the form at ``index``.

        An index out of range (negative ones included) gives the first form,
        or an empty form when the page has none.
        """
        if 0 <= index < len(self.forms):
            return copy.deepcopy(self.forms[index])
        if self.forms:
            _log.warning("no form at index %d, using the first form", index)
            return copy.deepcopy(self.forms[0])
        _log.warning("no form at all in the page")
        return Form()

    def report(self) -> str:
        """Description of every form and its fields."""
        return "".join(_report(form) for form in self.forms)