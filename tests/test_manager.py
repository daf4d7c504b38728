from datetime import datetime, timezone

import pytest

from datapad.manager import NoteNotFoundError, NotesManager


@pytest.fixture
def manager(tmp_path):
    return NotesManager(tmp_path / "store")


def test_creates_storage_and_image_directories(tmp_path):
    store = tmp_path / "deep" / "store"
    mgr = NotesManager(store)
    assert store.is_dir()
    assert (store / "images").is_dir()
    assert mgr.notes == []


def test_create_and_get(manager):
    note = manager.create_note("First")
    assert manager.get_note_by_id(note.id) is note
    assert manager.notes == [note]


def test_get_missing_raises(manager):
    with pytest.raises(NoteNotFoundError):
        manager.get_note_by_id("missing")


def test_update_persists_and_reloads(tmp_path):
    mgr = NotesManager(tmp_path)
    note = mgr.create_note("Title")
    note.content = "Body text"
    note.add_tag("work")
    mgr.update_note(note)
    assert (tmp_path / "notes.json").is_file()

    reloaded = NotesManager(tmp_path)
    assert len(reloaded.notes) == 1
    restored = reloaded.notes[0]
    assert restored.id == note.id
    assert restored.title == "Title"
    assert restored.content == "Body text"
    assert restored.tags == ["work"]


def test_update_refreshes_time(manager):
    note = manager.create_note("a")
    old = datetime(2000, 1, 1, tzinfo=timezone.utc)
    note.updated_at = old
    manager.update_note(note)
    assert note.updated_at > old


def test_delete_note(tmp_path):
    mgr = NotesManager(tmp_path)
    keep = mgr.create_note("keep")
    gone = mgr.create_note("gone")
    mgr.delete_note(gone.id)
    assert [n.id for n in mgr.notes] == [keep.id]
    assert [n.id for n in NotesManager(tmp_path).notes] == [keep.id]


def test_delete_missing_raises(manager):
    manager.create_note("a")
    with pytest.raises(NoteNotFoundError):
        manager.delete_note("missing")
    assert len(manager.notes) == 1


def test_search_is_case_insensitive(manager):
    a = manager.create_note("Shopping List")
    b = manager.create_note("Ideas")
    b.content = "buy a new LIST of things"
    manager.create_note("Other")
    assert manager.search_notes("list") == [a, b]
    assert manager.search_notes("nothing here") == []


def test_empty_search_returns_all(manager):
    notes = [manager.create_note("a"), manager.create_note("b")]
    assert manager.search_notes("") == notes


def test_filter_by_tags(manager):
    a = manager.create_note("a")
    a.add_tag("x")
    b = manager.create_note("b")
    b.add_tag("y")
    c = manager.create_note("c")
    c.add_tag("z")
    assert manager.filter_by_tags(["x", "y"]) == [a, b]
    assert manager.filter_by_tags(["none"]) == []
    assert manager.filter_by_tags([]) == [a, b, c]


def test_all_tags_sorted_unique(manager):
    a = manager.create_note("a")
    a.add_tag("zeta")
    a.add_tag("alpha")
    b = manager.create_note("b")
    b.add_tag("alpha")
    b.add_tag("mid")
    assert manager.all_tags() == ["alpha", "mid", "zeta"]


def test_save_orders_by_most_recent(manager):
    older = manager.create_note("older")
    newer = manager.create_note("newer")
    older.updated_at = datetime(2001, 1, 1, tzinfo=timezone.utc)
    newer.updated_at = datetime(2002, 1, 1, tzinfo=timezone.utc)
    manager.save_notes()
    assert manager.notes == [newer, older]


def test_import_image(tmp_path):
    mgr = NotesManager(tmp_path / "store")
    note = mgr.create_note("pics")
    source = tmp_path / "photo.jpg"
    source.write_bytes(b"\x89fake image bytes")

    mgr.import_image(note.id, str(source), "holiday", "beach")

    assert len(note.images) == 1
    image = note.images[0]
    assert image.path.endswith(".jpg")
    assert image.caption == "holiday"
    assert image.alt_text == "beach"
    assert mgr.image_exists(image.path)
    assert mgr.image_full_path(image.path).read_bytes() == source.read_bytes()
    assert mgr.image_full_path(image.path).parent == mgr.image_dir

    reloaded = NotesManager(tmp_path / "store")
    assert reloaded.notes[0].images[0].path == image.path


def test_import_missing_file_raises(tmp_path, manager):
    note = manager.create_note("a")
    with pytest.raises(FileNotFoundError):
        manager.import_image(note.id, str(tmp_path / "nope.png"), "", "")
    assert note.images == []


def test_import_into_missing_note_raises(tmp_path, manager):
    source = tmp_path / "p.png"
    source.write_bytes(b"data")
    with pytest.raises(NoteNotFoundError):
        manager.import_image("missing", str(source), "", "")


def test_image_exists_false_for_unknown(manager):
    assert manager.image_exists("absent.png") is False


def test_corrupt_notes_file_raises(tmp_path):
    (tmp_path / "notes.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        NotesManager(tmp_path)


def test_null_notes_file_loads_empty(tmp_path):
    (tmp_path / "notes.json").write_text("null", encoding="utf-8")
    assert NotesManager(tmp_path).notes == []


def test_load_missing_file_raises(manager):
    with pytest.raises(FileNotFoundError):
        manager.load_notes()