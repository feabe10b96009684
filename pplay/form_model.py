"""Data model of an HTML form: its fields, filling them in and a text report."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass
class Option:
    """One ``<option>`` of a select field."""

    value: str = ""
    selected: bool = False


@dataclass
class SelectField:
    """A ``<select>`` field and its options."""

    name: str = ""
    options: list[Option] = field(default_factory=list)


@dataclass
class InputField:
    """An ``<input>`` field."""

    name: str = ""
    type: str = ""
    value: str = ""


@dataclass
class TextareaField:
    """A ``<textarea>`` field."""

    name: str = ""
    value: str = ""


FilledField = Union[InputField, TextareaField, Option]


@dataclass
class Form:
    """A form, either as parsed from a page or as being filled in for sending.

    A form being filled in starts empty and refers to the parsed form in
    ``template``; :meth:`fill` adds only fields that the template has, unless
    ``direct_post`` is set, in which case every name becomes a text input.
    """

    url: str = ""
    method: str = ""
    multipart: bool = False
    selects: list[SelectField] = field(default_factory=list)
    inputs: list[InputField] = field(default_factory=list)
    textareas: list[TextareaField] = field(default_factory=list)
    bytes: dict[str, str] = field(default_factory=dict)
    direct_post: bool = False
    template: Optional["Form"] = None

    def fill(self, name: str, value: str) -> FilledField:
        """Add a field called ``name`` holding ``value`` and return it.

        Raises KeyError when the template has no field of that name.
        """
        if self.direct_post:
            created = InputField(name=name, type="text", value=value)
            self.inputs.append(created)
            return created

        template = self.template
        if template is None:
            raise KeyError(name)
        if not self.url:
            self.url = template.url
        if not self.method:
            self.method = template.method

        for source_input in template.inputs:
            if source_input.name == name:
                created_input = InputField(name=name, type=source_input.type, value=value)
                self.inputs.append(created_input)
                return created_input

        for source_area in template.textareas:
            if source_area.name == name:
                created_area = TextareaField(name=source_area.name, value=value)
                self.textareas.append(created_area)
                return created_area

        if any(select.name == name for select in template.selects):
            option = Option(value=value, selected=True)
            existing = next((s for s in self.selects if s.name == name), None)
            if existing is not None:
                existing.options.append(option)
            else:
                self.selects.append(SelectField(name=name, options=[option]))
            return option

        raise KeyError(name)

    def add_bytes(self, name: str, content_type: str = "") -> None:
        """Mark the field ``name`` to be sent as raw bytes of ``content_type``."""
        self.bytes[name] = content_type

    def clear(self) -> None:
        """Forget every field, the target and the template."""
        self.selects.clear()
        self.inputs.clear()
        self.textareas.clear()
        self.bytes.clear()
        self.url = ""
        self.method = ""
        self.multipart = False
        self.template = None

    def report(self) -> str:
        """Multi-line description of the form and its fields."""
        out = [f'--- FORM report. Uses {self.method} to URL "{self.url}"\n']
        if self.multipart:
            out.append("--- type: multipart form upload\n")
        for area in self.textareas:
            out.append(f'Textarea: NAME="{area.name}"\n')
        for select in self.selects:
            out.append(f'Select: NAME="{select.name}"\n')
            for option in select.options:
                mark = "(SELECTED)" if option.selected else ""
                out.append(f'    Option VALUE="{option.value}" {mark}\n')
        if self.selects:
            out.append("[end of select]\n")
        for item in self.inputs:
            if item.name in ("", " "):
                out.append(f'Button: "{item.value}"')
            else:
                text = f'Input: NAME="{item.name}'
                if item.value:
                    text += f'" VALUE="{item.value}'
                out.append(text + '"')
            out.append(f" ({item.type})\n")
        out.append("--- end of FORM\n")
        return "".join(out)

    def __str__(self) -> str:
        return self.report()