"""Storage of a collection of notes in a folder on disk."""

from __future__ import annotations

import json
import os
import shutil
from datetime import datetime
from pathlib import Path

from datapad.model import Note, generate_id

NOTES_FILE = "notes.json"
IMAGES_DIR = "images"


class NoteNotFoundError(LookupError):
    """Raised when no note has the requested identifier."""

    def __init__(self, note_id: str) -> None:
        super().__init__(f"note not found: {note_id}")
        self.note_id = note_id


def _extension(path: str) -> str:
    name = os.path.basename(path)
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


class NotesManager:
    """Holds the notes of one storage folder and keeps them saved as JSON."""

    def __init__(self, storage_path: str | os.PathLike[str]) -> None:
        self.storage_path = Path(storage_path)
        self.image_dir = self.storage_path / IMAGES_DIR
        self.notes: list[Note] = []
        self.storage_path.mkdir(parents=True, exist_ok=True)
        self.image_dir.mkdir(parents=True, exist_ok=True)
        try:
            self.load_notes()
        except FileNotFoundError:
            pass

    @property
    def notes_file(self) -> Path:
        return self.storage_path / NOTES_FILE

    def create_note(self, title: str) -> Note:
        note = Note.new(title)
        self.notes.append(note)
        return note

    def get_note_by_id(self, note_id: str) -> Note:
        for note in self.notes:
            if note.id == note_id:
                return note
        raise NoteNotFoundError(note_id)

    def update_note(self, note: Note) -> None:
        """Mark a note as modified now and save the collection."""
        note.updated_at = datetime.now().astimezone()
        self.save_notes()

    def delete_note(self, note_id: str) -> None:
        note = self.get_note_by_id(note_id)
        self.notes.remove(note)
        self.save_notes()

    def search_notes(self, query: str) -> list[Note]:
        """Notes whose title or content contains ``query``, ignoring case."""
        if not query:
            return list(self.notes)
        needle = query.lower()
        return [
            note
            for note in self.notes
            if needle in note.title.lower() or needle in note.content.lower()
        ]

    def filter_by_tags(self, tags: list[str]) -> list[Note]:
        """Notes carrying at least one of ``tags``; all notes if none given."""
        if not tags:
            return list(self.notes)
        wanted = set(tags)
        return [note for note in self.notes if wanted.intersection(note.tags)]

    def import_image(
        self, note_id: str, source_path: str, caption: str, alt_text: str
    ) -> None:
        """Copy an image into the images folder and attach it to a note."""
        note = self.get_note_by_id(note_id)
        if not os.path.exists(source_path):
            raise FileNotFoundError(f"image file not found at path: {source_path}")
        self.image_dir.mkdir(parents=True, exist_ok=True)
        filename = generate_id() + _extension(source_path)
        shutil.copyfile(source_path, self.image_dir / filename)
        note.add_image(filename, caption, alt_text)
        self.update_note(note)

    def image_full_path(self, image_path: str) -> Path:
        return self.image_dir / image_path

    def image_exists(self, image_path: str) -> bool:
        return self.image_full_path(image_path).exists()

    def save_notes(self) -> None:
        """Write all notes, most recently updated first."""
        self.notes.sort(key=lambda note: note.updated_at, reverse=True)
        payload = json.dumps(
            [note.to_dict() for note in self.notes], indent=2, ensure_ascii=False
        )
        self.notes_file.write_text(payload, encoding="utf-8")

    def load_notes(self) -> None:
        """Replace the notes in memory with those on disk.

        Raises FileNotFoundError when nothing has been saved yet and
        ValueError when the file cannot be understood.
        """
        text = self.notes_file.read_text(encoding="utf-8")
        try:
            records = json.loads(text)
            if records is None:
                records = []
            if not isinstance(records, list):
                raise ValueError("expected a list of notes")
            notes = [Note.from_dict(record) for record in records]
        except (ValueError, TypeError, AttributeError) as exc:
            raise ValueError(f"error deserializing notes: {exc}") from exc
        self.notes = notes

    def all_tags(self) -> list[str]:
        """Every tag used by any note, sorted and without repeats."""
        return sorted({tag for note in self.notes for tag in note.tags})