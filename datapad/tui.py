"""The interactive terminal session: raw keyboard input and screen drawing."""

from __future__ import annotations

import codecs
import os
import re
import select
import shutil
import sys
from collections.abc import Callable, Iterable
from pathlib import Path

from datapad.app import AppModel
from datapad.manager import NotesManager
from datapad.views import render_view

_ENTER_ALT_SCREEN = "\x1b[?1049h\x1b[?25l"
_LEAVE_ALT_SCREEN = "\x1b[?25h\x1b[?1049l"
_CLEAR = "\x1b[H\x1b[2J"
_POLL_SECONDS = 0.25

_INPUT_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]|\x1bO.|\x1b.|.", re.S)

_CONTROL_KEYS = {
    "\r": "enter",
    "\n": "enter",
    "\t": "tab",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\x1b": "esc",
    "\x00": "ctrl+@",
}
_FINAL_KEYS = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
    "Z": "shift+tab",
}
_TILDE_KEYS = {
    "1": "home",
    "2": "insert",
    "3": "delete",
    "4": "end",
    "5": "pgup",
    "6": "pgdown",
    "7": "home",
    "8": "end",
}


def key_name(code: str) -> str:
    """The name of the key that produced ``code``, or "" if unknown."""
    if code in _CONTROL_KEYS:
        return _CONTROL_KEYS[code]
    if len(code) == 1:
        if 1 <= ord(code) <= 26:
            return "ctrl+" + chr(ord(code) + 96)
        return code if code.isprintable() else ""
    if code.startswith(("\x1b[", "\x1bO")):
        body = code[2:]
        if body.endswith("~"):
            return _TILDE_KEYS.get(body[:-1].split(";")[0], "")
        if body:
            return _FINAL_KEYS.get(body[-1], "")
        return ""
    if code.startswith("\x1b") and len(code) == 2:
        inner = key_name(code[1])
        return "alt+" + inner if inner else ""
    return ""


def _keys_from_input(data: str) -> list[str]:
    return [key_name(code) for code in _INPUT_RE.findall(data)]


def _drive(
    model: AppModel, keys: Iterable[str], draw: Callable[[str], None]
) -> None:
    """Feed keys to the model, redrawing after each, until it quits."""
    for key in keys:
        if not key:
            continue
        model.update(key)
        draw(render_view(model))
        if model.quitting:
            return


def run_app(storage_path: str | os.PathLike[str]) -> None:
    """Run the interactive interface on the notes stored at ``storage_path``."""
    model = AppModel(NotesManager(Path(storage_path)))

    stdin = sys.stdin
    if not stdin.isatty():
        raise OSError("standard input is not a terminal")

    import termios
    import tty

    out = sys.stdout
    fd = stdin.fileno()
    saved = termios.tcgetattr(fd)
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def draw(view: str) -> None:
        out.write(_CLEAR + view.replace("\n", "\r\n"))
        out.flush()

    out.write(_ENTER_ALT_SCREEN)
    try:
        tty.setraw(fd)
        size = None
        while not model.quitting:
            current = shutil.get_terminal_size()
            if current != size:
                size = current
                model.resize(size.columns, size.lines)
                draw(render_view(model))
            ready, _, _ = select.select([fd], [], [], _POLL_SECONDS)
            if not ready:
                continue
            chunk = os.read(fd, 4096)
            if not chunk:
                break
            _drive(model, _keys_from_input(decoder.decode(chunk)), draw)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        out.write(_LEAVE_ALT_SCREEN)
        out.flush()