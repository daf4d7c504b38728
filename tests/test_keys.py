import pytest

from datapad.keys import KeyBinding, default_keymap, short_help


def test_quit_matches_both_keys():
    keys = default_keymap()
    assert keys.quit.matches("q")
    assert keys.quit.matches("ctrl+c")
    assert not keys.quit.matches("x")


@pytest.mark.parametrize(
    "name, key",
    [
        ("up", "k"),
        ("down", "j"),
        ("search", "/"),
        ("search", "ctrl+f"),
        ("next_image", "l"),
        ("prev_image", "h"),
        ("save", "ctrl+s"),
    ],
)
def test_default_bindings(name, key):
    assert getattr(default_keymap(), name).matches(key)


def test_custom_binding():
    binding = KeyBinding(("x", "y"), "x/y", "do")
    assert binding.matches("y")
    assert not binding.matches("z")


def test_short_help_joins_bindings():
    keys = default_keymap()
    assert short_help([keys.new, keys.quit]) == "n new note • ctrl+c/q quit"


def test_short_help_empty():
    assert short_help([]) == ""


def test_short_help_skips_bindings_without_keys():
    keys = default_keymap()
    text = short_help([KeyBinding((), "z", "nothing"), keys.edit])
    assert text == "e edit"


def test_navigation_keys_do_not_overlap():
    keys = default_keymap()
    assert keys.up.matches("up")
    assert not keys.up.matches("down")
    assert not keys.up.matches("j")
    assert keys.down.matches("down")
    assert not keys.down.matches("k")
    assert keys.next_image.matches("right")
    assert not keys.next_image.matches("h")
    assert keys.prev_image.matches("left")
    assert not keys.prev_image.matches("l")


def test_back_enter_and_help_bindings():
    keys = default_keymap()
    assert keys.back.matches("esc")
    assert keys.enter.matches("enter")
    assert keys.help.matches("?")
    assert not keys.back.matches("enter")
    assert short_help([keys.back, keys.enter]) == "esc back • enter select"