"""Helpers for media files: cache paths, extension checks and formatting."""

from __future__ import annotations

import hashlib
import math
import os
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

MEDIA_EXTENSIONS: tuple[str, ...] = (
    ".8svx",
    ".aac",
    ".ac3",
    ".aif",
    ".asf",
    ".avi",
    ".dv",
    ".flv",
    ".m2ts",
    ".m2v",
    ".m4a",
    ".mkv",
    ".mov",
    ".mp3",
    ".mp4",
    ".mpeg",
    ".mpg",
    ".mts",
    ".ogg",
    ".rmvb",
    ".swf",
    ".ts",
    ".vob",
    ".wav",
    ".wma",
    ".wmv",
    ".m3u",
    ".m3u8",
)

_SIZE_UNITS = ("B", "KB", "MB", "GB")


def media_cache_key(path: str) -> str:
    """Return a stable decimal key identifying a media path in the cache."""
    digest = hashlib.sha1(path.encode("utf-8", "surrogateescape")).digest()
    return str(int.from_bytes(digest[:8], "little"))


def _cache_file(data_dir: PathLike, path: str, suffix: str) -> str:
    return os.path.join(os.fspath(data_dir), "cache", media_cache_key(path) + suffix)


def get_media_info_path(data_dir: PathLike, path: str) -> str:
    """Path of the cached stream information for a media file."""
    return _cache_file(data_dir, path, ".info")


def get_media_scrap_path(data_dir: PathLike, path: str) -> str:
    """Path of the cached online search result for a media file."""
    return _cache_file(data_dir, path, ".scrap")


def get_media_poster_path(data_dir: PathLike, path: str) -> str:
    """Path of the cached poster image for a media file."""
    return _cache_file(data_dir, path, "-poster.jpg")


def get_media_backdrop_path(data_dir: PathLike, path: str) -> str:
    """Path of the cached backdrop image for a media file."""
    return _cache_file(data_dir, path, "-backdrop.jpg")


def media_extensions() -> list[str]:
    """File extensions recognised as playable media."""
    return list(MEDIA_EXTENSIONS)


def is_media(name: str, is_file: bool = True) -> bool:
    """True when ``name`` is a regular file with a media extension (any case)."""
    if not is_file:
        return False
    lower = name.lower()
    return any(lower.endswith(ext) for ext in MEDIA_EXTENSIONS)


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // b
    return -quotient if a < 0 else quotient


def _split_seconds(seconds: float) -> tuple[int, int, int]:
    total = int(seconds)
    hours = _trunc_div(total, 3600)
    minutes = _trunc_div(total, 60) - hours * 60
    secs = total - (hours * 60 + minutes) * 60
    return hours, minutes, secs


def format_time(seconds: float) -> str:
    """Format seconds as ``HH:MM:SS``; non-positive values give ``00:00:00``."""
    if seconds <= 0:
        return "00:00:00"
    hours, minutes, secs = _split_seconds(seconds)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def format_time_short(seconds: float) -> str:
    """Format seconds, leaving out hour and minute fields that are zero."""
    hours, minutes, secs = _split_seconds(seconds)
    parts = []
    if hours > 0:
        parts.append(f"{hours:02d}")
    if minutes > 0:
        parts.append(f"{minutes:02d}")
    parts.append(f"{secs:02d}")
    return ":".join(parts)


def format_size(size: int) -> str:
    """Human readable byte count rounded to two decimals, up to gigabytes."""
    if size < 0:
        raise ValueError("size must not be negative")
    div = 0
    rem = 0
    while size >= 1024 and div < len(_SIZE_UNITS) - 1:
        rem = size % 1024
        div += 1
        size //= 1024
    value = size + rem / 1024.0
    rounded = math.floor(value * 100.0 + 0.5) / 100.0
    return f"{rounded:g} {_SIZE_UNITS[div]}"