"""A terminal spinner that animates in a background thread."""

import itertools
import sys
import threading

from .colors import Ansi

SYMBOLS = "|/-\\"


class Spinner:
    """Show ``message…`` followed by a rotating symbol until stopped."""

    def __init__(self, message, stream=None, interval=0.1):
        self.message = message
        self.interval = interval
        self._stream = stream if stream is not None else sys.stdout
        self._stopping = threading.Event()
        self._thread = None

    def _write(self, text):
        self._stream.write(text)
        self._stream.flush()

    def _spin(self):
        self._write(f"{Ansi.BOLD.value}{Ansi.BLUE.value}{self.message}…{Ansi.RESET.value} ")
        for symbol in itertools.cycle(SYMBOLS):
            if self._stopping.is_set():
                break
            self._write(f"{Ansi.BLUE.value}\b{symbol}")
            self._stopping.wait(self.interval)

    def start(self):
        """Begin animating in a background thread."""
        if self._thread is not None:
            raise RuntimeError("spinner is already running")
        self._stopping.clear()
        self._thread = threading.Thread(target=self._spin, daemon=True)
        self._thread.start()

    def stop(self, success=True):
        """Stop animating and print a check mark or a cross."""
        if self._thread is None:
            raise RuntimeError("spinner is not running")
        self._stopping.set()
        self._thread.join()
        self._thread = None
        if success:
            mark = f"{Ansi.BRIGHT_GREEN.value}✔{Ansi.RESET.value}"
        else:
            mark = f"{Ansi.BRIGHT_RED.value}✖{Ansi.RESET.value}"
        self._write(f"\b{mark}\n")

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop(exc_type is None)
        return False