"""Stream information about a media file and its binary cache format."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass, field
from typing import Union

from pplay.utility import format_time_short

_SIZE = struct.Struct("<Q")
_INT = struct.Struct("<i")
_LONG = struct.Struct("<q")


@dataclass
class Track:
    """One video, audio or subtitle stream."""

    id: int = 0
    type: str = ""
    title: str = "Unknown"
    language: str = "N/A"
    codec: str = ""
    channels: int = 0
    bit_rate: int = 0
    sample_rate: int = 0
    width: int = 0
    height: int = 0


@dataclass
class Playback:
    """Selected streams and position of the last playback."""

    vid_id: int = -1
    aud_id: int = -1
    sub_id: int = -1
    position: int = 0


def _pack(fmt: struct.Struct, value: int) -> bytes:
    try:
        return fmt.pack(value)
    except struct.error as exc:
        raise ValueError(f"value out of range: {value!r}") from exc


def _pack_text(text: str) -> bytes:
    raw = text.encode("utf-8")
    return _SIZE.pack(len(raw)) + raw


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._view = memoryview(data)
        self._pos = 0

    def _take(self, count: int) -> bytes:
        end = self._pos + count
        if end > len(self._view):
            raise ValueError("truncated media info data")
        chunk = bytes(self._view[self._pos:end])
        self._pos = end
        return chunk

    def int(self) -> int:
        return _INT.unpack(self._take(_INT.size))[0]

    def long(self) -> int:
        return _LONG.unpack(self._take(_LONG.size))[0]

    def text(self) -> str:
        size = _SIZE.unpack(self._take(_SIZE.size))[0]
        raw = self._take(size).split(b"\0", 1)[0]
        return raw.decode("utf-8", errors="replace")

    def track_head(self) -> Track:
        track = Track(id=self.int())
        track.type = self.text()
        track.title = self.text()
        track.language = self.text()
        track.codec = self.text()
        return track


def _track_head(track: Track) -> list[bytes]:
    return [
        _pack(_INT, track.id),
        _pack_text(track.type),
        _pack_text(track.title),
        _pack_text(track.language),
        _pack_text(track.codec),
    ]


@dataclass
class MediaInfo:
    """Description of a media file and the state of its last playback."""

    title: str = "Unknown"
    path: str = ""
    duration: int = 0
    bit_rate: int = 0
    videos: list[Track] = field(default_factory=list)
    audios: list[Track] = field(default_factory=list)
    subtitles: list[Track] = field(default_factory=list)
    playback: Playback = field(default_factory=Playback)

    def to_bytes(self) -> bytes:
        """Serialise to the cache format."""
        parts = [
            _pack_text(self.title),
            _pack_text(self.path),
            _pack(_LONG, self.duration),
            _pack(_INT, self.bit_rate),
            _pack(_INT, self.playback.vid_id),
            _pack(_INT, self.playback.aud_id),
            _pack(_INT, self.playback.sub_id),
            _pack(_INT, self.playback.position),
        ]
        parts.append(_pack(_INT, len(self.videos)))
        for track in self.videos:
            parts.extend(_track_head(track))
            parts.append(_pack(_INT, track.bit_rate))
            parts.append(_pack(_INT, track.width))
            parts.append(_pack(_INT, track.height))
        parts.append(_pack(_INT, len(self.audios)))
        for track in self.audios:
            parts.extend(_track_head(track))
            parts.append(_pack(_INT, track.bit_rate))
            parts.append(_pack(_INT, track.sample_rate))
        parts.append(_pack(_INT, len(self.subtitles)))
        for track in self.subtitles:
            parts.extend(_track_head(track))
        return b"".join(parts)

    @classmethod
    def from_bytes(cls, data: bytes) -> "MediaInfo":
        """Parse the cache format; raises ValueError on truncated data."""
        reader = _Reader(data)
        info = cls(title=reader.text(), path=reader.text())
        info.duration = reader.long()
        info.bit_rate = reader.int()
        info.playback = Playback(
            vid_id=reader.int(),
            aud_id=reader.int(),
            sub_id=reader.int(),
            position=reader.int(),
        )
        for _ in range(reader.int()):
            track = reader.track_head()
            track.bit_rate = reader.int()
            track.width = reader.int()
            track.height = reader.int()
            info.videos.append(track)
        for _ in range(reader.int()):
            track = reader.track_head()
            track.bit_rate = reader.int()
            track.sample_rate = reader.int()
            info.audios.append(track)
        for _ in range(reader.int()):
            info.subtitles.append(reader.track_head())
        return info

    def save(self, path: Union[str, "os.PathLike[str]"]) -> None:
        """Write the cache file at ``path``."""
        data = self.to_bytes()
        with open(path, "wb") as handle:
            handle.write(data)

    @classmethod
    def load(cls, path: Union[str, "os.PathLike[str]"]) -> "MediaInfo":
        """Read a cache file written by :meth:`save`."""
        with open(path, "rb") as handle:
            return cls.from_bytes(handle.read())

    def describe(self) -> str:
        """Multi-line human readable summary of the streams."""
        lines = [
            "============= MEDIA ===============",
            f"title: {self.title}, duration: {format_time_short(self.duration)}",
            f"\tvideo streams: {len(self.videos)}",
        ]
        for t in self.videos:
            lines.append(
                f"\t\tlanguage: {t.language}, title: {t.title}, "
                f"resolution: {t.width}x{t.height}, codec: {t.codec} "
                f"@ {int(t.bit_rate / 1000)} kb/s"
            )
        lines.append(f"\taudio streams: {len(self.audios)}")
        for t in self.audios:
            lines.append(
                f"\t\tlanguage: {t.language}, title: {t.title}, "
                f"codec: {t.codec} @ {t.bit_rate} hz"
            )
        lines.append(f"\tsubtitle streams: {len(self.subtitles)}")
        for t in self.subtitles:
            lines.append(
                f"\t\tlanguage: {t.language}, title: {t.title}, codec: {t.codec}"
            )
        lines.append("===================================")
        return "\n".join(lines) + "\n"