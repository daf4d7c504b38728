# datapad

datapad is a note-taking application that runs in your terminal. Notes are
written in Markdown, can carry tags and attached images, and are kept in a
single JSON file on disk.

## Installation

```
pip install .
```

## Running

```
datapad
```

By default notes are stored in `~/.datapad`. To use a different folder:

```
datapad -storage /path/to/notes
```

`--storage` is accepted as well. The storage folder holds `notes.json` and an
`images/` directory into which attached images are copied. The command exits
with status 1 and prints the error if the folder cannot be used or the notes
file cannot be read.

## Keys

`ctrl+c` and `q` quit from every screen, including while typing in a text
field.

In the note list:

| Key          | Action            |
|--------------|-------------------|
| ↑/k, ↓/j     | move              |
| enter        | open note         |
| n            | new note          |
| ctrl+f, /    | search            |
| f            | filter by tag     |

Searching matches the title or content, ignoring case; `enter` runs the
search. Filtering by tag shows the list of all tags; pick one with `enter`.
`esc` leaves either screen.

When viewing a note:

| Key  | Action                     |
|------|----------------------------|
| esc  | back to the list           |
| e    | edit                       |
| d    | delete                     |
| i    | attach an image            |
| t    | add a tag                  |
| v    | browse attached images     |

In the editor, `tab` switches between title and content, `ctrl+s` saves,
`ctrl+p` toggles a side-by-side Markdown preview and `esc` cancels. When
attaching an image, `tab` switches between the path and caption fields.

While browsing images, `←/h` and `→/l` move between images whose files still
exist, and `o` opens the current image in the system's default viewer
(`open` on macOS, `start` on Windows, otherwise the first of `xdg-open`,
`gio open`, `gnome-open` or `kde-open` found, falling back to `display`).

## Using the notes store from Python

```python
from datapad.manager import NotesManager

manager = NotesManager("/tmp/my-notes")
note = manager.create_note("Shopping")
note.content = "- milk\n- bread"
note.add_tag("home")
manager.update_note(note)

for found in manager.search_notes("milk"):
    print(found.title)

print(manager.all_tags())
```

`update_note` refreshes the note's modification time and writes every note
back to `notes.json`, most recently updated first. `get_note_by_id` and
`delete_note` raise `NoteNotFoundError` for an unknown identifier;
`import_image` copies a file into the images folder and attaches it to a note.

`datapad.markdown_render.render_markdown` turns Markdown into styled terminal
text, as used by the editor preview.

## Limitations

- The interactive interface needs a POSIX terminal: it reads raw keyboard
  input through `termios` and refuses to start when standard input is not a
  terminal. It does not run in a Windows console.
- Images are only listed and opened in an external viewer; they are not drawn
  inside the terminal.
- Notes are saved when they are created, edited, tagged, given an image or
  deleted; there is no separate undo or history.