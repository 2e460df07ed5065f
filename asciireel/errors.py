"""Error reporting: developer diagnostics with a log file, and user messages."""

import inspect
import os
import sys
from contextlib import suppress
from datetime import datetime

from .colors import Ansi

LOG_FILE = "err.log"

_FATAL_LABEL = "FATAL ERROR"
_WARNING_LABEL = "WARNING"


class FatalError(Exception):
    """Raised when the program cannot continue."""


def _active_errno():
    exc = sys.exc_info()[1]
    if isinstance(exc, OSError) and exc.errno:
        return exc.errno
    return None


def _caller_location():
    frame = inspect.currentframe()
    try:
        caller = frame.f_back.f_back if frame and frame.f_back else None
        if caller is None:
            return "<unknown>", 0, "<unknown>"
        return (
            os.path.basename(caller.f_code.co_filename),
            caller.f_lineno,
            caller.f_code.co_name,
        )
    finally:
        del frame


def log_error(message, fatal=False, log_file=LOG_FILE, stream=None):
    """Report a diagnostic with its location and append it to ``log_file``.

    A fatal report raises :class:`FatalError` after logging. When called while
    an ``OSError`` is being handled, its errno is reported as well.
    """
    out = stream if stream is not None else sys.stderr
    file_name, line, func = _caller_location()
    label = _FATAL_LABEL if fatal else _WARNING_LABEL
    color = Ansi.RED if fatal else Ansi.YELLOW
    reset = Ansi.RESET.value

    out.write(f"{color.value}{label}:{reset} {message}\n")
    out.write(
        f"{Ansi.CYAN.value}  ↪ Location:{reset} {file_name}:{line}, function: {func}()\n"
    )
    code = _active_errno()
    if code is not None:
        out.write(
            f"{Ansi.MAGENTA.value}  ↪ System Error:{reset} "
            f"{os.strerror(code)} (errno: {code})\n"
        )
    out.flush()

    if log_file is not None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        entry = f"[{timestamp}][{file_name}:{line}] {func}() - {label}: {message}"
        if code is not None:
            entry += f" (errno: {code}, {os.strerror(code)})"
        with suppress(OSError):
            with open(log_file, "a", encoding="utf-8") as handle:
                handle.write(entry + "\n")

    if fatal:
        raise FatalError(message)


def _emit(stream, default, text, end="\n"):
    out = stream if stream is not None else default
    out.write(f"{text}{Ansi.RESET.value}{end}")
    out.flush()


def user_error(message, stream=None):
    """Print a red error message to stderr."""
    _emit(stream, sys.stderr, f"{Ansi.RED.value}Error: {message}")


def user_warning(message, stream=None):
    """Print a yellow warning message to stderr."""
    _emit(stream, sys.stderr, f"{Ansi.YELLOW.value}Warning: {message}")


def user_info(message, stream=None):
    """Print a blue informational message to stdout."""
    _emit(stream, sys.stdout, f"{Ansi.BLUE.value}Info: {message}")


def user_success(message, stream=None):
    """Print a green success message to stdout."""
    _emit(stream, sys.stdout, f"{Ansi.GREEN.value}Success: {message}")


def user_response(message, stream=None):
    """Print a cyan feedback message to stdout."""
    _emit(stream, sys.stdout, f"{Ansi.CYAN.value}{message}")


def user_prompt(message, stream=None):
    """Print a magenta prompt to stdout without a newline."""
    _emit(stream, sys.stdout, f"{Ansi.MAGENTA.value}? {message}", end=" ")