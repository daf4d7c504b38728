import re
from dataclasses import dataclass

from datapad.widgets import ItemList, TextArea, TextInput

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def plain(text):
    return ANSI.sub("", text)


def typed(widget, text):
    for char in text:
        widget.handle_key(char)
    return widget


@dataclass
class Entry:
    name: str

    def title(self):
        return self.name

    def description(self):
        return "about " + self.name


def test_text_input_types_when_focused():
    field = TextInput()
    field.focus()
    typed(field, "hi")
    assert field.value == "hi"
    assert field.cursor == 2


def test_text_input_ignores_keys_when_blurred():
    field = TextInput()
    typed(field, "hi")
    assert field.value == ""


def test_text_input_respects_char_limit():
    field = TextInput(char_limit=3)
    field.focus()
    typed(field, "abcdef")
    assert field.value == "abc"


def test_text_input_editing_keys():
    field = TextInput()
    field.focus()
    typed(field, "abc")
    field.handle_key("left")
    field.handle_key("backspace")
    field.handle_key("X")
    assert field.value == "aXc"
    field.handle_key("space")
    assert field.value == "aX c"


def test_text_input_set_value_and_reset():
    field = TextInput(char_limit=4)
    field.set_value("abcdefgh")
    assert field.value == "abcd"
    assert field.cursor == 4
    field.reset()
    assert field.value == ""
    assert field.cursor == 0


def test_text_input_render_shows_placeholder_then_value():
    field = TextInput(placeholder="Search...")
    assert "Search..." in plain(field.render())
    field.set_value("query")
    assert "query" in plain(field.render())


def test_text_area_enter_splits_lines():
    area = TextArea()
    area.focus()
    typed(area, "ab")
    area.handle_key("enter")
    typed(area, "c")
    assert area.value == "ab\nc"
    assert (area.row, area.col) == (1, 1)


def test_text_area_backspace_merges_lines():
    area = TextArea()
    area.focus()
    area.set_value("ab\ncd")
    area.handle_key("home")
    area.handle_key("backspace")
    assert area.value == "abcd"
    assert (area.row, area.col) == (0, 2)


def test_text_area_vertical_moves_clamp_column():
    area = TextArea()
    area.focus()
    area.set_value("a\nlonger line")
    area.handle_key("up")
    assert (area.row, area.col) == (0, 1)


def test_text_area_char_limit():
    area = TextArea(char_limit=2)
    area.focus()
    typed(area, "abc")
    area.handle_key("enter")
    assert area.value == "ab"


def test_text_area_reset():
    area = TextArea()
    area.set_value("x\ny")
    area.reset()
    assert area.value == ""
    assert area.lines == [""]


def test_text_area_render_has_line_numbers_and_height():
    area = TextArea(height=4, width=40)
    area.set_value("first\nsecond")
    lines = plain(area.render()).split("\n")
    assert len(lines) == 4
    assert lines[0].strip().startswith("1")
    assert "second" in lines[1]


def test_text_area_scrolls_to_cursor():
    area = TextArea(height=2)
    area.set_value("a\nb\nc\nd")
    rendered = plain(area.render())
    assert "d" in rendered
    assert "a" not in rendered


def test_item_list_navigation():
    items = ItemList()
    items.set_items([Entry("one"), Entry("two"), Entry("three")])
    items.handle_key("down")
    items.handle_key("j")
    items.handle_key("down")
    assert items.selected_item() == Entry("three")
    items.handle_key("home")
    assert items.selected_item() == Entry("one")


def test_item_list_set_items_clamps_index():
    items = ItemList(items=[Entry("a"), Entry("b"), Entry("c")], index=2)
    items.set_items([Entry("z")])
    assert items.index == 0
    assert items.selected_item() == Entry("z")


def test_empty_item_list():
    items = ItemList(title="Notes")
    assert items.selected_item() is None
    assert "No items." in items.render()


def test_item_list_render_shows_items():
    items = ItemList(title="Notes")
    items.set_items([Entry("alpha"), Entry("beta")])
    rendered = plain(items.render())
    assert "Notes" in rendered
    assert "alpha" in rendered
    assert "about beta" in rendered