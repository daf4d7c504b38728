"""Terminal text styling and block layout."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from itertools import zip_longest

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")
_TOKEN_RE = re.compile(r"\x1b\[[0-9;]*m|.", re.S)
_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_RESET = "\x1b[0m"


def _char_width(ch: str) -> int:
    if unicodedata.category(ch) in ("Mn", "Me", "Cf"):
        return 0
    if unicodedata.east_asian_width(ch) in ("W", "F"):
        return 2
    return 1


def _visible_width(text: str) -> int:
    return sum(_char_width(ch) for ch in _ANSI_RE.sub("", text))


def _pad(line: str, width: int) -> str:
    return line + " " * max(0, width - _visible_width(line))


def _split_at(text: str, width: int) -> tuple[str, str]:
    """Split ``text`` so that the head is at most ``width`` columns wide."""
    head: list[str] = []
    used = 0
    tokens = _TOKEN_RE.findall(text)
    for position, token in enumerate(tokens):
        if token.startswith("\x1b"):
            head.append(token)
            continue
        size = _char_width(token)
        if used + size > width and used > 0:
            return "".join(head), "".join(tokens[position:])
        head.append(token)
        used += size
    return "".join(head), ""


def _truncate(text: str, width: int, tail: str = "…") -> str:
    """Cut ``text`` to ``width`` columns, marking the cut with ``tail``."""
    if _visible_width(text) <= width:
        return text
    room = max(0, width - _visible_width(tail))
    head, _ = _split_at(text, room) if room else ("", text)
    if "\x1b" in text:
        head += _RESET
    return head + tail


def _wrap(line: str, width: int) -> list[str]:
    if width <= 0 or _visible_width(line) <= width:
        return [line]
    out: list[str] = []
    current = ""
    for word in line.split(" "):
        candidate = f"{current} {word}" if current else word
        if _visible_width(candidate) <= width:
            current = candidate
            continue
        if current:
            out.append(current)
        while _visible_width(word) > width:
            head, word = _split_at(word, width)
            out.append(head)
        current = word
    out.append(current)
    return out


def _color_params(color: str, base: int) -> str:
    digits = color[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    red, green, blue = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    return f"{base};2;{red};{green};{blue}"


def _paint(text: str, params: str) -> str:
    if not text or not params:
        return text
    return f"\x1b[{params}m{text}{_RESET}"


@dataclass(frozen=True)
class Style:
    """How a block of text is coloured, sized, padded and framed."""

    bold: bool = False
    italic: bool = False
    foreground: str | None = None
    background: str | None = None
    width: int = 0
    padding: tuple[int, int] = (0, 0)
    padding_bottom: int = 0
    margin_top: int = 0
    margin_bottom: int = 0
    border: bool = False
    border_foreground: str | None = None

    def __post_init__(self) -> None:
        for color in (self.foreground, self.background, self.border_foreground):
            if color is not None and not _HEX_RE.match(color):
                raise ValueError(f"invalid colour: {color!r}")

    def _params(self) -> str:
        codes = []
        if self.bold:
            codes.append("1")
        if self.italic:
            codes.append("3")
        if self.foreground:
            codes.append(_color_params(self.foreground, 38))
        if self.background:
            codes.append(_color_params(self.background, 48))
        return ";".join(codes)

    def render(self, text: str) -> str:
        """Return ``text`` laid out and coloured according to this style."""
        lines = text.split("\n")
        pad_v, pad_h = self.padding
        if self.width > 0:
            inner = max(1, self.width - 2 * pad_h)
            lines = [part for line in lines for part in _wrap(line, inner)]
        else:
            inner = max(_visible_width(line) for line in lines)
        full = inner + 2 * pad_h
        side = " " * pad_h
        lines = [side + _pad(line, inner) + side for line in lines]
        blank = " " * full
        lines = [blank] * pad_v + lines + [blank] * (pad_v + self.padding_bottom)

        params = self._params()
        lines = [_paint(line, params) for line in lines]

        if self.border:
            edge = _color_params(self.border_foreground, 38) if self.border_foreground else ""
            top = _paint("╭" + "─" * full + "╮", edge)
            bottom = _paint("╰" + "─" * full + "╯", edge)
            bar = _paint("│", edge)
            lines = [top] + [bar + line + bar for line in lines] + [bottom]
            full += 2

        margin = " " * full
        lines = [margin] * self.margin_top + lines + [margin] * self.margin_bottom
        return "\n".join(lines)


def join_vertical(*blocks: str) -> str:
    """Stack blocks on top of each other, aligned to the left."""
    if not blocks:
        return ""
    lines = [line for block in blocks for line in block.split("\n")]
    width = max(_visible_width(line) for line in lines)
    return "\n".join(_pad(line, width) for line in lines)


def join_horizontal(*blocks: str) -> str:
    """Place blocks side by side, aligned to the top."""
    if not blocks:
        return ""
    columns = [block.split("\n") for block in blocks]
    widths = [max(_visible_width(line) for line in column) for column in columns]
    rows = zip_longest(*columns, fillvalue="")
    return "\n".join(
        "".join(_pad(cell, width) for cell, width in zip(row, widths)) for row in rows
    )