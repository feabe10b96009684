"""Finding media files to look up online and cleaning their names for searching."""

from __future__ import annotations

import os
from typing import Callable, Optional, Union

from pplay.utility import is_media

PathLike = Union[str, "os.PathLike[str]"]

RELEASE_TOKENS: tuple[str, ...] = (
    "720p",
    "1080p",
    "2160p",
    "hdrip",
    "dvdrip",
    "bdrip",
    "xvid",
    "divx",
    "web-dl",
    "webrip",
    "bluray",
)

_FIRST_YEAR = 1970
_LAST_YEAR = 2030


def _remove_ext(name: str) -> str:
    dot = name.rfind(".")
    return name[:dot] if dot != -1 else name


def clean_name(name: str) -> str:
    """Reduce a media file name to the part that is likely the title.

    The name is lower-cased and its extension dropped. Everything from the
    last year (1970 to 2030, searched from the newest) is cut away; if no year
    is found, everything from the first matching release token is cut away.
    """
    search = _remove_ext(name.lower())
    for year in range(_LAST_YEAR, _FIRST_YEAR - 1, -1):
        pos = search.rfind(str(year))
        if pos != -1 and pos > 3:
            return search[: pos - 1]
    for token in RELEASE_TOKENS:
        pos = search.rfind(token)
        if pos != -1 and pos > 1:
            return search[: pos - 1]
    return search


def find_medias(
    root: PathLike,
    should_continue: Optional[Callable[[], bool]] = None,
) -> list[str]:
    """Collect media file paths below ``root``, walking directories recursively.

    ``should_continue`` is asked before each entry; when it returns False the
    walk stops and the files found so far are returned.
    """
    keep_going = should_continue or (lambda: True)
    found: list[str] = []

    def walk(directory: str) -> None:
        try:
            entries = sorted(os.scandir(directory), key=lambda e: e.name)
        except OSError:
            return
        for entry in entries:
            if not keep_going():
                return
            if entry.is_dir():
                if entry.name in (".", ".."):
                    continue
                walk(entry.path)
            elif is_media(entry.name, entry.is_file()):
                found.append(entry.path)

    walk(os.fspath(root))
    return found