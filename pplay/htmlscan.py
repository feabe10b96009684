"""Scanners that cut tags and their contents out of loosely formed HTML."""

from __future__ import annotations

from pplay.htmltext import ascii_lower, remove_html_comments


def _skip_back(text: str, index: int) -> int:
    """Index of the first non-space character before ``index``, or -1."""
    pos = index - 1
    while pos >= 0 and text[pos] == " ":
        pos -= 1
    return pos


def _skip_forward(text: str, index: int) -> int:
    """Index of the first non-space character at or after ``index``."""
    while index < len(text) and text[index] == " ":
        index += 1
    return index


def _char(text: str, index: int) -> str:
    return text[index] if 0 <= index < len(text) else ""


def get_after_delimiter(html: str, seeking: str) -> list[str]:
    """Blocks opened by ``< seeking`` and closed by ``< / seeking``.

    Each block starts at the opening word and stops just before the closing
    word, so it still holds the ``</`` of the closing tag. Matching is
    case-insensitive and comments are ignored. An opening without a closing
    ends the scan.
    """
    if not seeking:
        raise ValueError("seeking must not be empty")
    html = remove_html_comments(html)
    lower = ascii_lower(html)
    results: list[str] = []
    position = 0
    while True:
        first = lower.find(seeking, position)
        if first == -1:
            return results
        position = first + len(seeking)
        before = _skip_back(lower, first)
        if before < 0 or lower[before] != "<":
            continue
        while True:
            last = lower.find(seeking, position)
            if last == -1:
                return results
            position = last + len(seeking)
            slash = _skip_back(lower, last)
            if slash < 0 or lower[slash] not in ("/", "\\"):
                continue
            opening = _skip_back(lower, slash)
            if opening >= 0 and lower[opening] == "<":
                results.append(html[first:last])
                break


def get_between_two(raw: str, seeking: str) -> list[str]:
    """Contents of every ``< seeking ... >`` tag, from the word to before ``>``.

    A tag that is never closed ends the scan; what was read of it is kept.
    """
    if not seeking:
        raise ValueError("seeking must not be empty")
    raw = remove_html_comments(raw)
    lower = ascii_lower(raw)
    length = len(lower)
    results: list[str] = []
    position = 0
    while True:
        first = lower.find(seeking, position)
        if first == -1:
            return results
        position = first + len(seeking)
        before = _skip_back(lower, first)
        if before < 0 or lower[before] != "<":
            continue
        end = position
        stop = False
        while True:
            if end >= length:
                stop = True
                break
            if lower[end] == ">":
                break
            end += 1
            if end == length - 1:
                stop = True
                break
        results.append(raw[first:end])
        if stop:
            return results
        position = end


def get_between_two_closed(raw: str, seeking: str) -> str:
    """Text between the first ``>`` and the last ``<`` of ``raw``.

    ``seeking`` names the enclosing tag and is not otherwise used. Without any
    ``<`` the result is empty; without any ``>`` the text starts at the
    beginning.
    """
    raw = remove_html_comments(raw)
    lower = ascii_lower(raw)
    first = lower.find(">") + 1
    last = lower.rfind("<")
    if last == -1:
        return ""
    if last < first:
        return raw[first:]
    return raw[first:last]


def _find_closing(lower: str, cursor: int, tag: str) -> int | None:
    """Index of the ``>`` ending the next ``< / tag >`` from ``cursor``."""
    while True:
        cursor = lower.find("<", cursor)
        if cursor == -1:
            return None
        cursor = _skip_forward(lower, cursor + 1)
        if _char(lower, cursor) not in ("/", "\\"):
            continue
        cursor = _skip_forward(lower, cursor + 1)
        if _char(lower, cursor) != tag[0]:
            continue
        cursor = _skip_forward(lower, cursor + len(tag))
        if _char(lower, cursor) == ">":
            return cursor


def get_from_intern(raw: str, word: str, word2: str) -> list[str]:
    """Whole ``< word2 ... word = ... </ word2 >`` elements.

    The scan is driven by ``word`` (such as ``href``), which must follow a
    space and be followed by ``=``; the tag it sits in must open with the
    first letter of ``word2`` and a space. Matching is case-insensitive and the
    elements keep their original case.
    """
    if not word or not word2:
        raise ValueError("word and word2 must not be empty")
    raw = remove_html_comments(raw)
    lower = ascii_lower(raw)
    needle = " " + word
    results: list[str] = []
    position = 0
    while position <= len(lower):
        middle = lower.find(needle, position)
        if middle == -1:
            break
        cursor = _skip_forward(lower, middle + len(needle))
        position = cursor
        if _char(lower, cursor) != "=":
            continue
        start = lower.rfind("<", 0, middle)
        if start == -1:
            continue
        tag = _skip_forward(lower, start + 1)
        if _char(lower, tag) != word2[0] or _char(lower, tag + 1) != " ":
            continue
        end = _find_closing(lower, cursor + 1, word2)
        if end is None:
            break
        results.append(raw[start:end + 1])
    return results