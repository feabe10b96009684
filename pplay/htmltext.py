"""Small text helpers for picking values out of loosely formed HTML."""

from __future__ import annotations

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def ascii_lower(text: str) -> str:
    """Lower-case ASCII letters only, keeping every index in place."""
    return text.translate(_ASCII_LOWER)


def remove_html_comment(html: str) -> tuple[str, bool]:
    """Remove the first ``<!-- ... -->`` comment.

    Returns the new text and whether a comment was found. A comment without an
    end removes everything from its start.
    """
    start = html.find("<!--")
    if start == -1:
        return html, False
    stop = html.find("-->")
    if stop == -1 or stop < start:
        return html[:start], True
    return html[:start] + html[stop + 3:], True


def remove_html_comments(html: str) -> str:
    """Remove every HTML comment."""
    removed = True
    while removed:
        html, removed = remove_html_comment(html)
    return html


def word_in(text: str, word: str) -> bool:
    """True when ``word`` occurs in ``text`` or in its lower-cased form."""
    return word in ascii_lower(text) or word in text


def replace_all(text: str, old: str, new: str) -> str:
    """Replace every occurrence of ``old``; an empty ``old`` changes nothing."""
    if not old:
        return text
    return text.replace(old, new)


def split(text: str, delim: str) -> list[str]:
    """Split on a single character; a trailing delimiter adds no empty field."""
    if len(delim) != 1:
        raise ValueError("delimiter must be a single character")
    if not text:
        return []
    parts = text.split(delim)
    if parts[-1] == "":
        parts.pop()
    return parts


def get_after_equal(html: str, seeking: str) -> str:
    """Value of the first ``seeking = value`` attribute preceded by a space.

    Quoted values run to the next double quote; unquoted ones to the next space
    or ``>``. Matching is case-insensitive, the value keeps its case, and
    comments are ignored. Returns an empty string when nothing is found.
    """
    if not seeking:
        raise ValueError("seeking must not be empty")
    html = replace_all(remove_html_comments(html), "\n", " ")
    lower = ascii_lower(html)
    length = len(lower)

    def ch(index: int) -> str:
        return lower[index] if 0 <= index < length else ""

    position = 0
    while True:
        first = lower.find(seeking, position)
        if first == -1:
            return ""
        position = max(first + len(seeking) - 1, first + 1)
        if ch(first - 1) != " ":
            continue
        forward = len(seeking)
        while ch(first + forward) == " ":
            forward += 1
        if ch(first + forward) != "=":
            continue
        forward += 1
        while ch(first + forward) == " ":
            forward += 1
        if ch(first + forward) in ('"', "'"):
            forward += 1
            start = first + forward
            while (
                first + forward < length
                and ch(first + forward) != '"'
                and ch(first + forward - 1) != "\\"
            ):
                forward += 1
            return html[start:first + forward]
        start = first + forward
        while first + forward < length and ch(first + forward) not in (" ", ">"):
            forward += 1
        return html[start:first + forward]