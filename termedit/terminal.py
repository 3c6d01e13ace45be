"""Raw terminal handling and the editor's main loop."""

from __future__ import annotations

import codecs
import os
import select
import signal
import sys
import time
from typing import Optional, TextIO

try:
    import termios
except ImportError:
    termios = None

from termedit.edit import Editor, EditorExit
from termedit.toolkit import DIRTY, Keyword, Toolkit

_RESTORE_SEQUENCE = (
    "\x1b[?1000l\x1b[?1003l\x1b[?1015l\x1b[?1006l"
    "\x1b[r"
    "\x1b[?1049l"
)


def _ignore_interrupt(signum, frame):
    """Swallow SIGINT while the editor owns the terminal."""


class RawTerminal:
    """Context manager putting a terminal into unbuffered, non-echoing mode."""

    def __init__(self, fd: int = 0, out: Optional[TextIO] = None):
        self.fd = fd
        self.out = out if out is not None else sys.stdout
        self._saved = None
        self._old_sigint = None

    def __enter__(self) -> "RawTerminal":
        self._old_sigint = signal.signal(signal.SIGINT, _ignore_interrupt)
        if termios is not None and os.isatty(self.fd):
            self._saved = termios.tcgetattr(self.fd)
            attrs = termios.tcgetattr(self.fd)
            attrs[3] &= ~(termios.ICANON | termios.ECHO)
            attrs[6][termios.VMIN] = 0
            attrs[6][termios.VTIME] = 0
            termios.tcsetattr(self.fd, termios.TCSAFLUSH, attrs)
        self.out.flush()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.out.write(_RESTORE_SEQUENCE)
        self.out.flush()
        time.sleep(0.001)
        if self._saved is not None:
            termios.tcsetattr(self.fd, termios.TCSANOW, self._saved)
            self._saved = None
        if self._old_sigint is not None:
            signal.signal(signal.SIGINT, self._old_sigint)
            self._old_sigint = None

    def key_available(self, timeout: float = 0.01) -> bool:
        """Wait up to timeout seconds for input to become readable."""
        if termios is None:
            return True
        ready, _, _ = select.select([self.fd], [], [], timeout)
        return bool(ready)

    def read(self, size: int = 31) -> bytes:
        if termios is None:
            size = 1
        return os.read(self.fd, size)


def normalize_input(data: bytes) -> bytes:
    """Turn a lone Escape key press into the double escape that quits."""
    if data == b"\x1b":
        return b"\x1b\x1b"
    return data


def run(terminal, out: TextIO) -> int:
    """Run the editor loop until the user quits or input ends."""
    toolkit = Toolkit(out)
    window = toolkit.create(Keyword.BLOCK, 0, 0, Keyword.FULL, Keyword.FULL)
    window.add_text("hello world")
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    try:
        editor = Editor(toolkit, window)
        while True:
            window.draw(toolkit, DIRTY)
            editor.idle()
            if not terminal.key_available(0.01):
                continue
            try:
                data = terminal.read(31)
            except OSError:
                return 0
            if not data:
                return 0
            text = decoder.decode(normalize_input(data))
            if text:
                editor.event(text)
    except EditorExit as stop:
        out.write(f"{stop}\n")
        out.flush()
        return 0


def main(argv=None) -> int:
    with RawTerminal(sys.stdin.fileno(), sys.stdout) as terminal:
        return run(terminal, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())