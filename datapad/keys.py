"""Interface modes and the key bindings that drive them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto


class Mode(Enum):
    """The screen the interface is currently showing."""

    LIST = auto()
    VIEW = auto()
    EDIT = auto()
    NEW = auto()
    SEARCH = auto()
    ADD_IMAGE = auto()
    HELP = auto()
    ADD_TAG = auto()
    FILTER_BY_TAG = auto()
    VIEW_IMAGE = auto()


@dataclass(frozen=True)
class KeyBinding:
    """A set of key names that trigger one action, with its help text."""

    keys: tuple[str, ...]
    help_key: str
    help_desc: str

    def matches(self, key: str) -> bool:
        return key in self.keys


@dataclass(frozen=True)
class KeyMap:
    """All key bindings of the application."""

    up: KeyBinding
    down: KeyBinding
    enter: KeyBinding
    back: KeyBinding
    quit: KeyBinding
    new: KeyBinding
    edit: KeyBinding
    delete: KeyBinding
    save: KeyBinding
    add_image: KeyBinding
    search: KeyBinding
    help: KeyBinding
    add_tag: KeyBinding
    filter_by_tag: KeyBinding
    toggle_preview: KeyBinding
    view_image: KeyBinding
    next_image: KeyBinding
    prev_image: KeyBinding
    open_image: KeyBinding


def default_keymap() -> KeyMap:
    """The default key bindings."""
    return KeyMap(
        up=KeyBinding(("up", "k"), "↑/k", "up"),
        down=KeyBinding(("down", "j"), "↓/j", "down"),
        enter=KeyBinding(("enter",), "enter", "select"),
        back=KeyBinding(("esc",), "esc", "back"),
        quit=KeyBinding(("ctrl+c", "q"), "ctrl+c/q", "quit"),
        new=KeyBinding(("n",), "n", "new note"),
        edit=KeyBinding(("e",), "e", "edit"),
        delete=KeyBinding(("d",), "d", "delete"),
        save=KeyBinding(("ctrl+s",), "ctrl+s", "save"),
        add_image=KeyBinding(("i",), "i", "add image"),
        search=KeyBinding(("ctrl+f", "/"), "ctrl+f", "search"),
        help=KeyBinding(("?",), "?", "help"),
        add_tag=KeyBinding(("t",), "t", "add tag"),
        filter_by_tag=KeyBinding(("f",), "f", "filter by tag"),
        toggle_preview=KeyBinding(("ctrl+p",), "ctrl+p", "toggle preview"),
        view_image=KeyBinding(("v",), "v", "voir l'image"),
        next_image=KeyBinding(("right", "l"), "→/l", "image suivante"),
        prev_image=KeyBinding(("left", "h"), "←/h", "image précédente"),
        open_image=KeyBinding(("o",), "o", "ouvrir l'image"),
    )


def short_help(bindings: Iterable[KeyBinding]) -> str:
    """One line of help text listing the given bindings."""
    return " • ".join(
        f"{binding.help_key} {binding.help_desc}" for binding in bindings if binding.keys
    )