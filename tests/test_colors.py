import pytest

from asciireel.colors import Ansi, colorize


def test_red_code_matches_terminal_sequence():
    assert colorize("x", Ansi.RED) == "\033[31mx\033[0m"


def test_clear_screen_sequence():
    assert colorize("", Ansi.CLEAR_SCREEN) == "\033[2J\033[H\033[0m"


def test_every_code_is_an_escape_sequence():
    for member in Ansi:
        result = colorize("t", member)
        assert result.startswith("\033[")
        assert result.endswith("t\033[0m")


def test_colorize_wraps_with_codes_and_reset():
    result = colorize("hi", Ansi.BOLD, Ansi.RED)
    assert result == Ansi.BOLD.value + Ansi.RED.value + "hi" + Ansi.RESET.value


def test_colorize_without_codes_returns_text():
    assert colorize("plain") == "plain"


def test_colorize_accepts_raw_strings():
    result = colorize("x", "\033[1m")
    assert result == Ansi.BOLD.value + "x" + Ansi.RESET.value


@pytest.mark.parametrize("member", [Ansi.GREEN, Ansi.BG_BLUE, Ansi.ITALIC])
def test_colorize_single_code(member):
    result = colorize("abc", member)
    assert result.startswith(member.value)
    assert result.endswith("abc" + Ansi.RESET.value)