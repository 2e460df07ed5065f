"""ANSI terminal escape sequences and a helper to wrap text in them."""

from enum import Enum


class Ansi(str, Enum):
    """ANSI escape sequences for colours, styles and screen control."""

    RESET = "\033[0m"
    BLACK = "\033[30m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"

    BRIGHT_BLACK = "\033[90m"
    BRIGHT_RED = "\033[91m"
    BRIGHT_GREEN = "\033[92m"
    BRIGHT_YELLOW = "\033[93m"
    BRIGHT_BLUE = "\033[94m"
    BRIGHT_MAGENTA = "\033[95m"
    BRIGHT_CYAN = "\033[96m"
    BRIGHT_WHITE = "\033[97m"

    BG_BLACK = "\033[40m"
    BG_RED = "\033[41m"
    BG_GREEN = "\033[42m"
    BG_YELLOW = "\033[43m"
    BG_BLUE = "\033[44m"
    BG_MAGENTA = "\033[45m"
    BG_CYAN = "\033[46m"
    BG_WHITE = "\033[47m"

    BOLD = "\033[1m"
    UNDERLINE = "\033[4m"
    ITALIC = "\033[3m"

    CLEAR_SCREEN = "\033[2J\033[H"


def _code(value):
    return value.value if isinstance(value, Ansi) else str(value)


def colorize(text, *args):
    """Wrap ``text`` in the given escape codes, followed by a reset.

    With no codes the text is returned unchanged.
    """
    if not args:
        return text
    prefix = "".join(_code(code) for code in args)
    return f"{prefix}{text}{Ansi.RESET.value}"