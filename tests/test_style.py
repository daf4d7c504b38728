import re

import pytest

from datapad.style import Style, join_horizontal, join_vertical

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def plain(text):
    return ANSI.sub("", text)


def test_plain_style_leaves_text():
    assert Style().render("abc") == "abc"


def test_empty_text_renders_empty():
    assert Style(foreground="#fff").render("") == ""


def test_lines_are_padded_to_widest():
    assert Style().render("a\nbcd") == "a  \nbcd"


def test_width_pads_line():
    out = Style(width=10).render("hi")
    assert plain(out) == "hi" + " " * 8


def test_width_wraps_words():
    out = plain(Style(width=5).render("aaa bbb ccc"))
    lines = out.split("\n")
    assert all(len(line) == 5 for line in lines)
    assert [line.strip() for line in lines] == ["aaa", "bbb", "ccc"]


def test_long_word_is_broken():
    out = plain(Style(width=3).render("abcdefg"))
    assert "".join(line.strip() for line in out.split("\n")) == "abcdefg"
    assert all(len(line) == 3 for line in out.split("\n"))


def test_bold_adds_escape_codes():
    out = Style(bold=True, foreground="#FFA500").render("title")
    assert "\x1b[" in out
    assert plain(out) == "title"


def test_invalid_colour_rejected():
    with pytest.raises(ValueError):
        Style(foreground="orange")


def test_horizontal_padding():
    assert Style(padding=(0, 1)).render("x") == " x "


def test_margin_bottom_adds_line():
    assert Style(margin_bottom=1).render("ab") == "ab\n  "


def test_border_frames_text():
    lines = plain(Style(border=True, border_foreground="#5f5").render("hey")).split("\n")
    assert len(lines) == 3
    assert lines[0].startswith("╭") and lines[0].endswith("╮")
    assert lines[1] == "│hey│"
    assert lines[2].startswith("╰") and lines[2].endswith("╯")


def test_join_vertical_aligns_left():
    assert join_vertical("a", "bcd") == "a  \nbcd"


def test_join_vertical_keeps_empty_blocks():
    assert join_vertical("a", "", "b").split("\n") == ["a", " ", "b"]


def test_join_horizontal_aligns_top():
    assert join_horizontal("a\nb", "|", "xy") == "a|xy\nb   "


def test_join_of_nothing():
    assert join_vertical() == ""
    assert join_horizontal() == ""