"""List entries for notes and tags."""

from __future__ import annotations

from dataclasses import dataclass

from datapad.model import Note
from datapad.style import Style

_TAG_STYLE = Style(foreground="#5f5")
_PREVIEW_LENGTH = 50


@dataclass
class NoteItem:
    """A note as shown in the note list."""

    note: Note

    def title(self) -> str:
        return self.note.title

    def description(self) -> str:
        """The start of the content followed by the note's tags."""
        content = self.note.content
        if len(content) > _PREVIEW_LENGTH:
            content = content[:_PREVIEW_LENGTH] + "..."
        tags = ", ".join(self.note.tags)
        if tags:
            tags = f"[{tags}]"
        return f"{content} {_TAG_STYLE.render(tags)}"

    def filter_value(self) -> str:
        return f"{self.note.title} {self.note.content} {' '.join(self.note.tags)}"


@dataclass
class TagItem:
    """A tag as shown in the tag list."""

    tag: str

    def title(self) -> str:
        return self.tag

    def description(self) -> str:
        return ""

    def filter_value(self) -> str:
        return self.tag