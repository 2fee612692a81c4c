"""Small shared value types: colors, files, snowflakes and timestamps."""

from __future__ import annotations

import base64
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

Snowflake = str

_HEX = re.compile(r"\+?[0-9a-fA-F]+")
_MAX_COLOR = 0xFFFFFFFF


@dataclass(frozen=True)
class Color:
    """A colour held as a 32-bit integer."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("color value must be an integer")
        if not 0 <= self.value <= _MAX_COLOR:
            raise ValueError(f"color value out of range: {self.value}")

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Parse a hex code, with or without a leading '#'."""
        code = text[1:] if text.startswith("#") else text
        if not _HEX.fullmatch(code):
            raise ValueError(f"invalid hex color: {text!r}")
        parsed = int(code, 16)
        if parsed > _MAX_COLOR:
            raise ValueError(f"hex color out of range: {text!r}")
        return cls(parsed)

    def to_hex(self) -> str:
        """Return a '#rrggbb' style hex code."""
        return f"#{self.value:06x}"


_RIFF_KINDS = {
    b"WEBP": "image/webp",
    b"WAVE": "audio/x-wav",
    b"AVI ": "video/x-msvideo",
}

_PREFIXES = (
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"II*\x00", "image/tiff"),
    (b"MM\x00*", "image/tiff"),
    (b"\x00\x00\x01\x00", "image/vnd.microsoft.icon"),
    (b"%PDF", "application/pdf"),
    (b"PK\x03\x04", "application/zip"),
    (b"\x1f\x8b", "application/gzip"),
    (b"OggS", "audio/ogg"),
    (b"fLaC", "audio/x-flac"),
    (b"ID3", "audio/mpeg"),
    (b"\xff\xfb", "audio/mpeg"),
    (b"\x1a\x45\xdf\xa3", "video/webm"),
    (b"BM", "image/bmp"),
)


def guess_mime_type(data: bytes) -> str | None:
    """Guess a MIME type from the leading bytes, or None when unrecognised."""
    if len(data) >= 12 and data[:4] == b"RIFF" and data[8:12] in _RIFF_KINDS:
        return _RIFF_KINDS[data[8:12]]
    if len(data) >= 12 and data[4:8] == b"ftyp":
        brand = data[8:12]
        if brand in (b"avif", b"avis"):
            return "image/avif"
        if brand in (b"heic", b"heix", b"mif1"):
            return "image/heif"
        if brand == b"M4A ":
            return "audio/m4a"
        if brand == b"qt  ":
            return "video/quicktime"
        return "video/mp4"
    for prefix, mime in _PREFIXES:
        if data.startswith(prefix):
            return mime
    return None


@dataclass
class File:
    """A file to upload, with optional alt text and voice message data."""

    filename: str
    data: bytes
    description: str | None = None
    duration_secs: float | None = None
    waveform: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.data, str):
            self.data = self.data.encode()
        else:
            self.data = bytes(self.data)

    @classmethod
    def from_path(cls, path: str | Path, filename: str | None = None) -> "File":
        """Read a file from disk; the name defaults to the path's final part."""
        path = Path(path)
        return cls(filename if filename is not None else path.name, path.read_bytes())

    def to_data_url(self) -> str:
        """Return the contents as a base64 data URL."""
        mime = guess_mime_type(self.data) or "application/octet-stream"
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{mime};base64,{encoded}"

    def __str__(self) -> str:
        return self.to_data_url()


_TIMESTAMP = re.compile(
    r"(?P<base>\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<frac>\d+))?"
    r"(?P<tz>[Zz]|[+-]\d{2}:?\d{2})?"
)


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO 8601 timestamp with an offset into an aware UTC datetime."""
    if value is None:
        return None
    match = _TIMESTAMP.fullmatch(value)
    if match is None:
        raise ValueError(f"invalid timestamp: {value!r}")
    tz = match["tz"]
    if tz is None:
        raise ValueError(f"timestamp has no offset: {value!r}")
    if tz in ("Z", "z"):
        tz = "+00:00"
    elif ":" not in tz:
        tz = f"{tz[:3]}:{tz[3:]}"
    base = match["base"].replace("t", "T")
    frac = match["frac"]
    text = base + (f".{(frac + '000000')[:6]}" if frac else "") + tz
    return datetime.fromisoformat(text).astimezone(timezone.utc)