"""State of the terminal interface and how keys change it."""

from __future__ import annotations

import shutil
import subprocess
import sys
from pathlib import Path

from datapad.items import NoteItem, TagItem
from datapad.keys import KeyMap, Mode, default_keymap
from datapad.manager import NoteNotFoundError, NotesManager
from datapad.model import Note
from datapad.widgets import ItemList, TextArea, TextInput

_LINUX_OPENERS: tuple[tuple[str, ...], ...] = (
    ("xdg-open",),
    ("gio", "open"),
    ("gnome-open",),
    ("kde-open",),
)


def _current_system() -> str:
    if sys.platform == "darwin":
        return "darwin"
    if sys.platform.startswith("win"):
        return "windows"
    return "linux"


def opener_command(path: str | Path, system: str | None = None) -> list[str]:
    """The command that opens ``path`` in the system's default viewer.

    ``system`` is ``"darwin"``, ``"windows"`` or anything else for a
    desktop where the first available opener is used; by default the
    running system is detected.
    """
    target = str(path)
    system = system or _current_system()
    if system == "darwin":
        return ["open", target]
    if system == "windows":
        return ["cmd", "/c", "start", target]
    for opener in _LINUX_OPENERS:
        if shutil.which(opener[0]) is not None:
            return [*opener, target]
    return ["display", target]


class AppModel:
    """Everything the interface shows, changed one key press at a time."""

    def __init__(self, manager: NotesManager) -> None:
        self.manager = manager
        self.keys: KeyMap = default_keymap()
        self.mode = Mode.LIST
        self.note_list = ItemList(
            items=[NoteItem(note) for note in manager.notes], title="Notes"
        )
        self.text_area = TextArea(
            placeholder="Write your note here...",
            char_limit=0,
            width=80,
            height=20,
            show_line_numbers=True,
        )
        self.title_input = TextInput(placeholder="Note title", char_limit=100, width=40)
        self.image_path = TextInput(placeholder="Path to image", char_limit=500, width=40)
        self.image_caption = TextInput(
            placeholder="Image caption", char_limit=100, width=40
        )
        self.search_input = TextInput(placeholder="Search...", char_limit=100, width=40)
        self.tag_input = TextInput(placeholder="Tag name", char_limit=50, width=30)
        self.selected_note: Note | None = None
        self.selected_image = 0
        self.show_preview = False
        self.width = 0
        self.height = 0
        self.status_msg = ""
        self.quitting = False

    # ----------------------------------------------------------------- layout

    def resize(self, width: int, height: int) -> None:
        """Fit the widgets to a terminal of the given size."""
        self.width = width
        self.height = height
        self.note_list.width = width
        self.note_list.height = height - 4
        self.text_area.width = width
        self.text_area.height = height - 6

    # ------------------------------------------------------------------- keys

    def update(self, key: str) -> None:
        """Apply one key press to the interface state."""
        if self.keys.quit.matches(key):
            self.quitting = True
            return
        handler = {
            Mode.VIEW_IMAGE: self._update_view_image,
            Mode.ADD_TAG: self._update_add_tag,
            Mode.FILTER_BY_TAG: self._update_filter_by_tag,
            Mode.LIST: self._update_list,
            Mode.VIEW: self._update_view,
            Mode.EDIT: self._update_editor,
            Mode.NEW: self._update_editor,
            Mode.SEARCH: self._update_search,
            Mode.ADD_IMAGE: self._update_add_image,
        }.get(self.mode)
        if handler is not None:
            handler(key)

    def _update_view_image(self, key: str) -> None:
        if self.keys.back.matches(key):
            self.mode = Mode.VIEW
        elif self.keys.next_image.matches(key):
            self.next_image()
        elif self.keys.prev_image.matches(key):
            self.previous_image()
        elif self.keys.open_image.matches(key):
            self.open_image()

    def _update_add_tag(self, key: str) -> None:
        if self.keys.back.matches(key):
            self.mode = Mode.VIEW
        elif self.keys.enter.matches(key):
            tag = self.tag_input.value
            if tag and self.selected_note is not None:
                self.selected_note.add_tag(tag)
                self.manager.update_note(self.selected_note)
                self.status_msg = "Tag added successfully"
                self.mode = Mode.VIEW
        else:
            self.tag_input.handle_key(key)

    def _update_filter_by_tag(self, key: str) -> None:
        if self.keys.back.matches(key):
            self.mode = Mode.LIST
        elif self.keys.enter.matches(key):
            tags = self.manager.all_tags()
            if not tags:
                self.status_msg = "No tags available"
                self.mode = Mode.LIST
                return
            index = self.note_list.index
            if 0 <= index < len(tags):
                tag = tags[index]
                notes = self.manager.filter_by_tags([tag])
                self.note_list.set_items([NoteItem(note) for note in notes])
                self.status_msg = f"Notes filtered by tag: {tag}"
                self.mode = Mode.LIST
        else:
            self.note_list.handle_key(key)

    def _update_list(self, key: str) -> None:
        keys = self.keys
        if keys.new.matches(key):
            self.mode = Mode.NEW
            self.title_input.reset()
            self.text_area.reset()
            self.title_input.focus()
            return
        if keys.enter.matches(key):
            if not self.note_list.items:
                return
            item = self.note_list.selected_item()
            if isinstance(item, NoteItem):
                self.selected_note = item.note
                self.mode = Mode.VIEW
                return
        elif keys.search.matches(key):
            self.mode = Mode.SEARCH
            self.search_input.reset()
            self.search_input.focus()
            return
        elif keys.filter_by_tag.matches(key):
            tags = self.manager.all_tags()
            if not tags:
                self.status_msg = "No tags available"
                return
            self.note_list.set_items([TagItem(tag) for tag in tags])
            self.mode = Mode.FILTER_BY_TAG
            self.status_msg = "Select a tag"
            return
        self.note_list.handle_key(key)

    def _update_view(self, key: str) -> None:
        keys = self.keys
        note = self.selected_note
        if keys.back.matches(key):
            self.mode = Mode.LIST
        elif note is None:
            return
        elif keys.edit.matches(key):
            self.mode = Mode.EDIT
            self.title_input.set_value(note.title)
            self.text_area.set_value(note.content)
            self.title_input.focus()
        elif keys.delete.matches(key):
            try:
                self.manager.delete_note(note.id)
            except NoteNotFoundError:
                pass
            self._refresh_list()
            self.mode = Mode.LIST
            self.status_msg = "Note deleted"
        elif keys.add_image.matches(key):
            self.mode = Mode.ADD_IMAGE
            self.image_path.reset()
            self.image_caption.reset()
            self.image_path.focus()
        elif keys.add_tag.matches(key):
            self.mode = Mode.ADD_TAG
            self.tag_input.reset()
            self.tag_input.focus()
        elif keys.view_image.matches(key):
            self._start_image_view(note)

    def _start_image_view(self, note: Note) -> None:
        if not note.images:
            self.status_msg = "Cette note ne contient pas d'images"
            return
        first = next(
            (
                index
                for index, image in enumerate(note.images)
                if self.manager.image_exists(image.path)
            ),
            None,
        )
        if first is None:
            self.status_msg = "Aucune image valide à afficher"
            return
        self.selected_image = first
        self.mode = Mode.VIEW_IMAGE
        self.status_msg = (
            "Appuyez sur Échap pour revenir à la note, "
            "←/→ pour naviguer entre les images"
        )

    def _update_editor(self, key: str) -> None:
        keys = self.keys
        if keys.save.matches(key):
            self._save_note()
            return
        if keys.back.matches(key):
            self.mode = Mode.LIST if self.mode is Mode.NEW else Mode.VIEW
            return
        if keys.toggle_preview.matches(key):
            self.show_preview = not self.show_preview
            return
        if self.title_input.focused:
            self.title_input.handle_key(key)
        else:
            self.text_area.handle_key(key)
        if key == "tab":
            if self.title_input.focused:
                self.title_input.blur()
                self.text_area.focus()
            else:
                self.text_area.blur()
                self.title_input.focus()

    def _update_search(self, key: str) -> None:
        if self.keys.back.matches(key):
            self.mode = Mode.LIST
        elif self.keys.enter.matches(key):
            notes = self.manager.search_notes(self.search_input.value)
            self.note_list.set_items([NoteItem(note) for note in notes])
            self.mode = Mode.LIST
        else:
            self.search_input.handle_key(key)

    def _update_add_image(self, key: str) -> None:
        if self.keys.back.matches(key):
            self.mode = Mode.VIEW
            return
        if self.keys.enter.matches(key):
            if self.selected_note is None:
                return
            try:
                self.manager.import_image(
                    self.selected_note.id,
                    self.image_path.value,
                    self.image_caption.value,
                    "",
                )
            except (NoteNotFoundError, OSError) as exc:
                self.status_msg = f"Error: {exc}"
            else:
                self.status_msg = "Image added successfully"
                self.image_path.reset()
                self.image_caption.reset()
                self.mode = Mode.VIEW
            return
        if self.image_path.focused:
            self.image_path.handle_key(key)
        else:
            self.image_caption.handle_key(key)
        if key == "tab":
            if self.image_path.focused:
                self.image_path.blur()
                self.image_caption.focus()
            else:
                self.image_caption.blur()
                self.image_path.focus()

    # ----------------------------------------------------------------- images

    def _valid_image_count(self) -> int:
        if self.selected_note is None:
            return 0
        return sum(
            1 for image in self.selected_note.images if self.manager.image_exists(image.path)
        )

    def _step_image(self, step: int) -> None:
        note = self.selected_note
        if note is None or self._valid_image_count() <= 1:
            return
        count = len(note.images)
        index = self.selected_image
        while True:
            index = (index + step) % count
            if self.manager.image_exists(note.images[index].path):
                break
            if index == self.selected_image:
                break
        self.selected_image = index

    def next_image(self) -> None:
        """Select the next image whose file exists, wrapping around."""
        self._step_image(1)

    def previous_image(self) -> None:
        """Select the previous image whose file exists, wrapping around."""
        self._step_image(-1)

    def open_image(self) -> None:
        """Open the selected image in the system's default viewer."""
        note = self.selected_note
        if note is None or not 0 <= self.selected_image < len(note.images):
            return
        image = note.images[self.selected_image]
        path = self.manager.image_full_path(image.path)
        command = opener_command(path)
        try:
            subprocess.Popen(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as exc:
            self.status_msg = f"Erreur lors de l'ouverture de l'image: {exc}"
        else:
            self.status_msg = "Image ouverte dans le visualiseur par défaut"

    # ------------------------------------------------------------------ notes

    def _refresh_list(self) -> None:
        self.note_list.set_items([NoteItem(note) for note in self.manager.notes])

    def _save_note(self) -> None:
        if self.mode is Mode.NEW:
            note = self.manager.create_note(self.title_input.value)
            note.content = self.text_area.value
            self.manager.update_note(note)
            self.selected_note = note
            self.status_msg = "Note created successfully"
        else:
            note = self.selected_note
            if note is None:
                return
            note.title = self.title_input.value
            note.content = self.text_area.value
            self.manager.update_note(note)
            self.status_msg = "Note updated successfully"
        self._refresh_list()
        self.mode = Mode.VIEW