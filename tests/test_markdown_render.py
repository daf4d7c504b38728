import re

from datapad.markdown_render import render_markdown

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def plain(text):
    return ANSI.sub("", text)


def test_empty_content():
    assert render_markdown("") == ""


def test_paragraph():
    assert render_markdown("hello") == "hello\n\n"


def test_heading_is_styled():
    out = render_markdown("# Title")
    assert "\x1b[" in out
    assert "Title" in plain(out)
    assert "<h1>" not in out


def test_bold_and_italic_lose_tags():
    out = render_markdown("**strong** and *soft*")
    text = plain(out)
    assert "strong and soft" in text
    assert "<" not in text


def test_list_items_get_bullets():
    text = plain(render_markdown("- a\n- b"))
    assert "• a\n" in text
    assert "• b\n" in text
    assert "<li>" not in text


def test_link_shows_url():
    text = plain(render_markdown("[site](https://example.com/page)"))
    assert "site (https://example.com/page)" in text


def test_entities_are_decoded():
    text = plain(render_markdown("a < b & c"))
    assert "a < b & c" in text


def test_inline_code_is_styled():
    out = render_markdown("run `make`")
    assert "<code>" not in out
    assert "run make" in plain(out)


def test_no_triple_blank_lines_between_paragraphs():
    text = plain(render_markdown("one\n\ntwo"))
    assert "one" in text and "two" in text
    assert text.index("one") < text.index("two")
    assert "\n\n\n\n" not in text