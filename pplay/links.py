"""Links found in an HTML page."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from pplay.htmlscan import get_between_two_closed, get_from_intern
from pplay.htmltext import get_after_equal

_log = logging.getLogger(__name__)


@dataclass
class Link:
    """One ``<a href=...>`` element."""

    url: str = ""
    name: str = ""
    title: str = ""
    target: str = ""
    css_class: str = ""
    id: str = ""

    def __str__(self) -> str:
        return self.url


class LinkList:
    """Links gathered from one or more pages."""

    def __init__(self) -> None:
        self._links: list[Link] = []

    def extract(self, html: str) -> None:
        """Append every link found in ``html``."""
        for raw in get_from_intern(html, "href", "a"):
            self._links.append(
                Link(
                    url=get_after_equal(raw, "href"),
                    name=get_between_two_closed(raw, "a"),
                    title=get_after_equal(raw, "title"),
                    target=get_after_equal(raw, "target"),
                    css_class=get_after_equal(raw, "class"),
                    id=get_after_equal(raw, "id"),
                )
            )

    def clear(self) -> None:
        """Forget every link."""
        self._links.clear()

    def report(self) -> str:
        """Every URL on its own line."""
        return "".join(f"{link.url}\n" for link in self._links)

    def __len__(self) -> int:
        return len(self._links)

    def __iter__(self) -> Iterator[Link]:
        return iter(self._links)

    def __getitem__(self, index: int) -> Link:
        """Link at ``index``; an index out of range gives the last link."""
        if not self._links:
            raise IndexError("no links")
        if 0 <= index < len(self._links):
            return self._links[index]
        _log.warning("no link at index %d, using the last link", index)
        return self._links[-1]