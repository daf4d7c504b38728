"""Notes, their attached images, and the identifiers they carry."""

from __future__ import annotations

import re
import secrets
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

_LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_TIMESTAMP_RE = re.compile(
    r"^(\d{4}-\d{2}-\d{2})T(\d{2}:\d{2}:\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})$"
)


def _now() -> datetime:
    return datetime.now().astimezone()


def _format_time(moment: datetime) -> str:
    """Format a timestamp as RFC 3339 with trailing fractional zeros trimmed."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    text = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    fraction = f"{moment.microsecond:06d}".rstrip("0")
    if fraction:
        text += "." + fraction
    offset = moment.utcoffset() or timedelta(0)
    if offset == timedelta(0):
        return text + "Z"
    sign = "+" if offset > timedelta(0) else "-"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def _parse_time(text: str) -> datetime:
    """Parse an RFC 3339 timestamp, accepting up to nanosecond precision."""
    match = _TIMESTAMP_RE.match(text)
    if match is None:
        raise ValueError(f"invalid timestamp: {text!r}")
    date_part, time_part, fraction, zone = match.groups()
    micro = (fraction or "")[:6].ljust(6, "0")
    if zone == "Z":
        zone = "+00:00"
    return datetime.fromisoformat(f"{date_part}T{time_part}.{micro}{zone}")


def random_string(n: int) -> str:
    """Return a random string of ``n`` ASCII letters and digits."""
    return "".join(secrets.choice(_LETTERS) for _ in range(n))


def generate_id() -> str:
    """Return a new identifier: a local timestamp followed by six random characters."""
    return datetime.now().strftime("%Y%m%d%H%M%S") + random_string(6)


@dataclass
class Image:
    """An image file attached to a note."""

    path: str
    caption: str = ""
    alt_text: str = ""
    id: str = ""
    position: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "path": self.path,
            "caption": self.caption,
            "alt_text": self.alt_text,
            "position": self.position,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Image:
        return cls(
            id=data.get("id", ""),
            path=data.get("path", ""),
            caption=data.get("caption", ""),
            alt_text=data.get("alt_text", ""),
            position=int(data.get("position", 0)),
        )


@dataclass
class Note:
    """A note with Markdown content, attached images and tags."""

    id: str
    title: str
    content: str = ""
    images: list[Image] = field(default_factory=list)
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)
    tags: list[str] = field(default_factory=list)

    @classmethod
    def new(cls, title: str) -> Note:
        """Create an empty note with a fresh identifier and timestamps."""
        now = _now()
        return cls(id=generate_id(), title=title, created_at=now, updated_at=now)

    def add_image(self, path: str, caption: str, alt_text: str) -> None:
        self.images.append(Image(path=path, caption=caption, alt_text=alt_text))
        self.updated_at = _now()

    def add_tag(self, tag: str) -> None:
        """Add a tag unless the note already carries it."""
        if tag in self.tags:
            return
        self.tags.append(tag)
        self.updated_at = _now()

    def remove_tag(self, tag: str) -> None:
        """Remove a tag if present; a missing tag leaves the note untouched."""
        if tag not in self.tags:
            return
        self.tags.remove(tag)
        self.updated_at = _now()

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "content": self.content,
        }
        if self.images:
            data["images"] = [image.to_dict() for image in self.images]
        data["created_at"] = _format_time(self.created_at)
        data["updated_at"] = _format_time(self.updated_at)
        if self.tags:
            data["tags"] = list(self.tags)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Note:
        created = data.get("created_at")
        updated = data.get("updated_at")
        return cls(
            id=data.get("id", ""),
            title=data.get("title", ""),
            content=data.get("content", ""),
            images=[Image.from_dict(item) for item in data.get("images") or []],
            created_at=_parse_time(created) if created else _ZERO_TIME,
            updated_at=_parse_time(updated) if updated else _ZERO_TIME,
            tags=list(data.get("tags") or []),
        )