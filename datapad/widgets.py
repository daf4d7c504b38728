"""Editable text fields and a selectable list for the terminal interface."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from datapad.style import Style, _truncate

_REVERSE_ON = "\x1b[7m"
_REVERSE_OFF = "\x1b[27m"
_PLACEHOLDER_STYLE = Style(foreground="#888888")
_LIST_TITLE_STYLE = Style(foreground="#FFFDF5", background="#25A065", padding=(0, 1))
_SELECTED_TITLE_STYLE = Style(foreground="#EE6FF8")
_SELECTED_DESC_STYLE = Style(foreground="#AD58B4")
_SELECTED_MARKER = Style(foreground="#EE6FF8").render("│") + " "


class ListItem(Protocol):
    def title(self) -> str: ...

    def description(self) -> str: ...


def _printable(key: str) -> str | None:
    """The character a key inserts, or None for a control key."""
    if key == "space":
        return " "
    if len(key) == 1 and key.isprintable():
        return key
    return None


def _with_cursor(text: str, position: int) -> str:
    under = text[position] if position < len(text) else " "
    return f"{text[:position]}{_REVERSE_ON}{under}{_REVERSE_OFF}{text[position + 1:]}"


@dataclass
class TextInput:
    """A single-line text field."""

    placeholder: str = ""
    char_limit: int = 0
    width: int = 0
    prompt: str = "> "
    value: str = ""
    cursor: int = 0
    focused: bool = False

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def reset(self) -> None:
        self.value = ""
        self.cursor = 0

    def set_value(self, value: str) -> None:
        if self.char_limit > 0:
            value = value[: self.char_limit]
        self.value = value
        self.cursor = len(value)

    def handle_key(self, key: str) -> None:
        """Edit the field in response to a key; ignored unless focused."""
        if not self.focused:
            return
        before, after = self.value[: self.cursor], self.value[self.cursor :]
        if key == "backspace":
            if before:
                self.value = before[:-1] + after
                self.cursor -= 1
        elif key == "delete":
            self.value = before + after[1:]
        elif key == "left":
            self.cursor = max(0, self.cursor - 1)
        elif key == "right":
            self.cursor = min(len(self.value), self.cursor + 1)
        elif key in ("home", "ctrl+a"):
            self.cursor = 0
        elif key in ("end", "ctrl+e"):
            self.cursor = len(self.value)
        elif key == "ctrl+u":
            self.value = after
            self.cursor = 0
        elif key == "ctrl+k":
            self.value = before
        elif key == "ctrl+w":
            trimmed = before.rstrip(" ")
            cut = trimmed.rfind(" ") + 1
            self.value = before[:cut] + after
            self.cursor = cut
        else:
            char = _printable(key)
            if char is None:
                return
            if self.char_limit > 0 and len(self.value) >= self.char_limit:
                return
            self.value = before + char + after
            self.cursor += 1

    def render(self) -> str:
        if not self.value and self.placeholder:
            shown = self.placeholder
            if self.focused:
                return (
                    self.prompt
                    + f"{_REVERSE_ON}{shown[0]}{_REVERSE_OFF}"
                    + _PLACEHOLDER_STYLE.render(shown[1:])
                )
            return self.prompt + _PLACEHOLDER_STYLE.render(shown)
        start = 0
        if self.width > 0 and self.cursor > self.width:
            start = self.cursor - self.width
        end = start + self.width + 1 if self.width > 0 else len(self.value)
        visible = self.value[start:end]
        if self.focused:
            visible = _with_cursor(visible, self.cursor - start)
        return self.prompt + visible


@dataclass
class TextArea:
    """A multi-line text editor with optional line numbers."""

    placeholder: str = ""
    char_limit: int = 0
    width: int = 80
    height: int = 20
    show_line_numbers: bool = True
    lines: list[str] = field(default_factory=lambda: [""])
    row: int = 0
    col: int = 0
    offset: int = 0
    focused: bool = False

    @property
    def value(self) -> str:
        return "\n".join(self.lines)

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def reset(self) -> None:
        self.lines = [""]
        self.row = self.col = self.offset = 0

    def set_value(self, value: str) -> None:
        if self.char_limit > 0:
            value = value[: self.char_limit]
        self.lines = value.split("\n")
        self.row = len(self.lines) - 1
        self.col = len(self.lines[-1])
        self._scroll()

    def _has_room(self) -> bool:
        return self.char_limit <= 0 or len(self.value) < self.char_limit

    def handle_key(self, key: str) -> None:
        """Edit the text in response to a key; ignored unless focused."""
        if not self.focused:
            return
        line = self.lines[self.row]
        last_row = len(self.lines) - 1
        if key == "enter":
            if self._has_room():
                self.lines[self.row : self.row + 1] = [line[: self.col], line[self.col :]]
                self.row += 1
                self.col = 0
        elif key == "backspace":
            if self.col > 0:
                self.lines[self.row] = line[: self.col - 1] + line[self.col :]
                self.col -= 1
            elif self.row > 0:
                previous = self.lines[self.row - 1]
                self.lines[self.row - 1 : self.row + 1] = [previous + line]
                self.row -= 1
                self.col = len(previous)
        elif key == "delete":
            if self.col < len(line):
                self.lines[self.row] = line[: self.col] + line[self.col + 1 :]
            elif self.row < last_row:
                self.lines[self.row : self.row + 2] = [line + self.lines[self.row + 1]]
        elif key == "left":
            if self.col > 0:
                self.col -= 1
            elif self.row > 0:
                self.row -= 1
                self.col = len(self.lines[self.row])
        elif key == "right":
            if self.col < len(line):
                self.col += 1
            elif self.row < last_row:
                self.row += 1
                self.col = 0
        elif key == "up":
            if self.row > 0:
                self.row -= 1
                self.col = min(self.col, len(self.lines[self.row]))
        elif key == "down":
            if self.row < last_row:
                self.row += 1
                self.col = min(self.col, len(self.lines[self.row]))
        elif key in ("home", "ctrl+a"):
            self.col = 0
        elif key in ("end", "ctrl+e"):
            self.col = len(line)
        else:
            char = _printable(key)
            if char is not None and self._has_room():
                self.lines[self.row] = line[: self.col] + char + line[self.col :]
                self.col += 1
        self._scroll()

    def _scroll(self) -> None:
        if self.row < self.offset:
            self.offset = self.row
        elif self.height > 0 and self.row >= self.offset + self.height:
            self.offset = self.row - self.height + 1

    def render(self) -> str:
        if self.height > 0:
            visible = self.lines[self.offset : self.offset + self.height]
        else:
            visible = self.lines
        empty = not self.value
        rows = []
        for number, text in enumerate(visible, start=self.offset + 1):
            prefix = f"{number:>3} " if self.show_line_numbers else ""
            on_cursor = self.focused and number - 1 == self.row
            if empty and self.placeholder and number == 1:
                body = _PLACEHOLDER_STYLE.render(self.placeholder)
                if on_cursor:
                    body = f"{_REVERSE_ON} {_REVERSE_OFF}" + body
            elif on_cursor:
                body = _with_cursor(text, self.col)
            else:
                body = text
            if self.width > 0:
                body = _truncate(body, max(1, self.width - len(prefix)), tail="")
            rows.append(prefix + body)
        blank_prefix = "    " if self.show_line_numbers else ""
        rows.extend([blank_prefix] * max(0, self.height - len(rows)))
        return "\n".join(rows)


@dataclass
class ItemList:
    """A paged list of items, each shown as a title and a description."""

    items: list[Any] = field(default_factory=list)
    title: str = ""
    width: int = 0
    height: int = 0
    index: int = 0

    def set_items(self, items: list[Any]) -> None:
        self.items = list(items)
        self.index = min(self.index, max(0, len(self.items) - 1))

    def selected_item(self) -> Any | None:
        if 0 <= self.index < len(self.items):
            return self.items[self.index]
        return None

    def _per_page(self) -> int:
        if self.height <= 0:
            return max(1, len(self.items))
        return max(1, (self.height - 2) // 3)

    def handle_key(self, key: str) -> None:
        """Move the selection in response to a navigation key."""
        if not self.items:
            return
        last = len(self.items) - 1
        page = self._per_page()
        moves = {
            "up": self.index - 1,
            "k": self.index - 1,
            "down": self.index + 1,
            "j": self.index + 1,
            "home": 0,
            "g": 0,
            "end": last,
            "G": last,
            "pgup": self.index - page,
            "left": self.index - page,
            "h": self.index - page,
            "pgdown": self.index + page,
            "right": self.index + page,
            "l": self.index + page,
        }
        if key in moves:
            self.index = min(last, max(0, moves[key]))

    def render(self) -> str:
        out: list[str] = []
        if self.title:
            out.extend([_LIST_TITLE_STYLE.render(self.title), ""])
        if not self.items:
            out.append("No items.")
            return "\n".join(out)
        per_page = self._per_page()
        start = (self.index // per_page) * per_page
        for position, item in enumerate(self.items[start : start + per_page], start=start):
            title = item.title()
            description = item.description().split("\n")[0]
            if self.width > 0:
                title = _truncate(title, max(1, self.width - 2))
                description = _truncate(description, max(1, self.width - 2))
            if position == self.index:
                out.append(_SELECTED_MARKER + _SELECTED_TITLE_STYLE.render(title))
                out.append(_SELECTED_MARKER + _SELECTED_DESC_STYLE.render(description))
            else:
                out.extend(["  " + title, "  " + description])
            out.append("")
        pages = -(-len(self.items) // per_page)
        if pages > 1:
            out.append(f"{self.index // per_page + 1}/{pages}")
        elif out[-1] == "":
            out.pop()
        return "\n".join(out)