"""Filesystem helpers for the asset directories."""

import os
import stat
from contextlib import suppress
from fnmatch import fnmatchcase

from .errors import log_error


def create_dir(path):
    """Create ``path`` with mode 0755 unless something already exists there."""
    if path is None:
        log_error("Invalid directory name provided, path is NULL", fatal=True)
    try:
        os.stat(path)
        return
    except OSError:
        pass
    try:
        os.mkdir(path, 0o755)
    except OSError as exc:
        log_error(
            f"Failed to create directory: {path} (Error: {os.strerror(exc.errno or 0)})",
            fatal=True,
        )


def empty_directory(path):
    """Remove everything inside ``path`` but keep the directory itself."""
    if path is None:
        log_error("Invalid directory name provided, path is NULL", fatal=True)
    try:
        names = os.listdir(path)
    except OSError:
        return
    for name in names:
        child = os.path.join(path, name)
        try:
            info = os.stat(child)
        except OSError:
            continue
        if stat.S_ISDIR(info.st_mode):
            empty_directory(child)
            with suppress(OSError):
                os.rmdir(child)
        else:
            with suppress(OSError):
                os.unlink(child)


def is_directory_empty(path):
    """Return True if ``path`` has no entries or cannot be read as a directory."""
    if path is None:
        return True
    try:
        with os.scandir(path) as entries:
            return next(entries, None) is None
    except OSError:
        return True


def directory_exists(path):
    """Return True if ``path`` exists and is a directory."""
    return os.path.isdir(path)


def dir_contains(path, pattern):
    """Return True if any entry of ``path`` matches the shell ``pattern``."""
    if path is None or pattern is None:
        return False
    try:
        names = os.listdir(path)
    except OSError:
        return False
    return any(fnmatchcase(name, pattern) for name in (os.curdir, os.pardir, *names))