"""Screens of the terminal interface, rendered from the application state."""

from __future__ import annotations

from datapad.app import AppModel
from datapad.keys import Mode, short_help
from datapad.markdown_render import render_markdown
from datapad.style import Style, join_horizontal, join_vertical

_DATE_FORMAT = "%d/%m/%Y %H:%M"
_NO_CAPTION = "(aucune légende)"

_HEADING_STYLE = Style(bold=True, foreground="#FFA500")
_HELP_STYLE = Style(foreground="#888888")
_TAGS_STYLE = Style(foreground="#5f5")
_IMAGE_STYLE = Style(foreground="#3498db")
_WARNING_STYLE = Style(foreground="#ff7700")
_METADATA_STYLE = Style(foreground="#888888", margin_top=1)


def status_bar(model: AppModel) -> str:
    """The status line at the bottom of the screen."""
    status = model.status_msg or "Ready"
    return Style(
        foreground="#FAFAFA",
        background="#555555",
        padding=(0, 1),
        width=model.width,
    ).render(status)


def help_view(model: AppModel) -> str:
    """A line of key help for the modes that show one."""
    keys = model.keys
    bindings = {
        Mode.LIST: (keys.up, keys.down, keys.enter, keys.new, keys.search, keys.quit),
        Mode.VIEW: (
            keys.back,
            keys.edit,
            keys.delete,
            keys.add_image,
            keys.add_tag,
            keys.view_image,
            keys.quit,
        ),
        Mode.VIEW_IMAGE: (
            keys.back,
            keys.next_image,
            keys.prev_image,
            keys.open_image,
            keys.quit,
        ),
    }.get(model.mode)
    return short_help(bindings) if bindings else ""


def view_add_image(model: AppModel) -> str:
    """The form for attaching an image to the selected note."""
    return join_vertical(
        _HEADING_STYLE.render("📷 Ajouter une image à la note"),
        "",
        "Chemin de l'image (chemin complet vers le fichier) :",
        model.image_path.render(),
        _HELP_STYLE.render("Exemple: /home/user/images/photo.jpg"),
        "",
        "Légende (optionnelle) :",
        model.image_caption.render(),
        "",
        _HELP_STYLE.render("Utilisez Tab pour naviguer entre les champs"),
        _HELP_STYLE.render("Entrée pour confirmer, Échap pour annuler"),
        "",
        status_bar(model),
    )


def _images_section(model: AppModel) -> str:
    note = model.selected_note
    if note is None or not note.images:
        return ""
    parts = [_IMAGE_STYLE.render("📷 Images attachées:\n")]
    valid = 0
    for number, image in enumerate(note.images, start=1):
        caption = image.caption or _NO_CAPTION
        if model.manager.image_exists(image.path):
            parts.append(_IMAGE_STYLE.render(f"{number}. {image.path}: {caption}\n"))
            valid += 1
        else:
            parts.append(
                _WARNING_STYLE.render(
                    f"{number}. {image.path}: {caption} (fichier manquant)\n"
                )
            )
    if valid == 0:
        parts.append(
            _WARNING_STYLE.render(
                "⚠️ Aucune image n'a pu être trouvée. "
                "Les fichiers ont peut-être été déplacés ou supprimés.\n"
            )
        )
    return "".join(parts)


def view_note(model: AppModel) -> str:
    """The selected note with its images, tags and dates."""
    note = model.selected_note
    if note is None:
        return "No note selected"

    title = Style(bold=True, foreground="#FFA500", margin_bottom=1).render(note.title)
    content = Style(margin_top=1, margin_bottom=1, width=model.width).render(note.content)
    created = _METADATA_STYLE.render(
        f"Created on: {note.created_at.strftime(_DATE_FORMAT)}"
    )
    updated = _METADATA_STYLE.render(
        f"Updated on: {note.updated_at.strftime(_DATE_FORMAT)}"
    )
    tags = _TAGS_STYLE.render("Tags: " + ", ".join(note.tags)) if note.tags else ""

    return join_vertical(
        title,
        content,
        _images_section(model),
        tags,
        created,
        updated,
        "",
        status_bar(model),
        help_view(model),
    )


def view_editor(model: AppModel) -> str:
    """The title and content editor, with an optional Markdown preview."""
    mode_text = "New note" if model.mode is Mode.NEW else "Editing"

    if model.show_preview:
        editor_width = model.width // 2
        preview_width = model.width - editor_width - 1
        editor_style = Style(width=editor_width)
        preview_style = Style(
            width=preview_width,
            border=True,
            border_foreground="#5f5",
            padding=(0, 1),
        )
        editor_section = join_vertical(
            mode_text,
            "Title:",
            model.title_input.render(),
            "Content:",
            model.text_area.render(),
        )
        preview_section = join_vertical(
            "Preview:",
            _HEADING_STYLE.render(model.title_input.value),
            "",
            render_markdown(model.text_area.value),
        )
        content = join_horizontal(
            editor_style.render(editor_section),
            "│",
            preview_style.render(preview_section),
        )
        return join_vertical(
            content,
            status_bar(model),
            "Ctrl+S to save, Esc to cancel, Ctrl+P to toggle preview",
        )

    return join_vertical(
        mode_text + " (Tab to switch between title and content)",
        "Title:",
        model.title_input.render(),
        "Content:",
        model.text_area.render(),
        status_bar(model),
        "Ctrl+S to save, Esc to cancel, Ctrl+P for preview",
    )


def view_image(model: AppModel) -> str:
    """Details of the selected image and how to open it."""
    note = model.selected_note
    index = model.selected_image
    if note is None or not note.images or not 0 <= index < len(note.images):
        return "Aucune image à afficher"

    image = note.images[index]
    manager = model.manager
    if not manager.image_exists(image.path):
        return Style(bold=True, foreground="#ff0000").render(
            f"❌ L'image '{image.path}' n'existe pas ou a été déplacée"
        )

    full_path = manager.image_full_path(image.path)
    title = Style(bold=True, foreground="#FFA500", padding_bottom=1).render("📷 Image")
    caption = image.caption or _NO_CAPTION

    present = [manager.image_exists(item.path) for item in note.images]
    position_text = f"Image {sum(present[: index + 1])}/{sum(present)}"
    info_text = f"Fichier: {image.path}\nLégende: {caption}"

    view_command = Style(bold=True, foreground="#2ecc71").render(
        f"\n\nPour voir cette image, exécutez:\n$ xdg-open {full_path}"
    )
    help_text = _HELP_STYLE.render(
        "\nUtilisez ←/→ pour naviguer entre les images, "
        "o pour ouvrir l'image, Échap pour revenir à la note"
    )

    return join_vertical(
        title,
        _IMAGE_STYLE.render(position_text),
        _IMAGE_STYLE.render(info_text),
        view_command,
        help_text,
        "",
        status_bar(model),
    )


def render_view(model: AppModel) -> str:
    """The whole screen for the current mode."""
    mode = model.mode
    if mode is Mode.LIST:
        return join_vertical(model.note_list.render(), status_bar(model), help_view(model))
    if mode is Mode.VIEW:
        return view_note(model)
    if mode is Mode.VIEW_IMAGE:
        return view_image(model)
    if mode in (Mode.EDIT, Mode.NEW):
        return view_editor(model)
    if mode is Mode.SEARCH:
        return join_vertical(
            "Search:",
            model.search_input.render(),
            status_bar(model),
            "Press Enter to search, Esc to cancel",
        )
    if mode is Mode.ADD_IMAGE:
        return view_add_image(model)
    if mode is Mode.ADD_TAG:
        return join_vertical(
            "Add a tag:",
            model.tag_input.render(),
            status_bar(model),
            "Press Enter to add, Esc to cancel",
        )
    if mode is Mode.FILTER_BY_TAG:
        return join_vertical(
            "Filter by tag:",
            model.note_list.render(),
            status_bar(model),
            "Press Enter to filter, Esc to cancel",
        )
    return "Unknown mode"