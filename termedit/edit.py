"""Keystroke state machine driving the editor window."""

from __future__ import annotations

import enum

from termedit.toolkit import DIRTY, Block, Toolkit

MAX_ARG = 10


class EditorExit(Exception):
    """Raised when the user asks the editor to quit."""


class _State(enum.Enum):
    START = enum.auto()
    NORMAL = enum.auto()
    ESCAPE = enum.auto()
    CSI = enum.auto()


class Editor:
    """Interprets terminal input and moves the cursor over a block window."""

    def __init__(self, toolkit: Toolkit, window: Block):
        self.toolkit = toolkit
        self.window = window
        self.state = _State.START
        self.cell_width = 8
        self.cell_height = 12
        self.width = 80
        self.height = 25
        self.cx = 0
        self.cy = 0
        self.sequence_type = None
        self.index = -1
        self.args = [0] * (MAX_ARG + 1)
        toolkit.write("\033c\033[2J\033[9999;9999H\033[6n\n")

    def feed(self, data: str) -> None:
        """Process input characters, possibly splitting escape sequences across calls."""
        if not data:
            return
        if self.state is _State.START:
            self.toolkit.write("\033[0;0H")
            self.state = _State.NORMAL
        for ch in data:
            self._step(ch)

    def _step(self, ch: str) -> None:
        if self.state is _State.NORMAL:
            if ch == "\033":
                self.state = _State.ESCAPE
            elif ch in ("\b", "\x7f"):
                self.backspace()
            elif ch == "\n":
                self.enter()
            else:
                self.window.add_text(ch)
        elif self.state is _State.ESCAPE:
            if ch == "\033":
                self.state = _State.NORMAL
                self.escape()
            elif ch == "[":
                self.sequence_type = "["
                self.state = _State.CSI
                self.index = -1
                self.args[0] = 0
                self.args[1] = 0
            else:
                if "a" <= ch <= "z":
                    self.alt(ch)
                self.state = _State.NORMAL
        elif self.state is _State.CSI:
            self._step_csi(ch)

    def _step_csi(self, ch: str) -> None:
        if ch in "0123456789":
            if self.index < 0:
                self.index = 0
            self.args[self.index] = self.args[self.index] * 10 + int(ch)
            return
        if ch == ";":
            if self.index < MAX_ARG:
                self.index += 1
                self.args[self.index] = 0
            return
        moves = {"A": (0, -1), "B": (0, 1), "C": (1, 0), "D": (-1, 0)}
        if ch in moves:
            self.move(*moves[ch])
        elif ch == "~":
            self.special()
        self.index = -1
        self.state = _State.NORMAL

    def event(self, data: str) -> None:
        self.feed(data)
        self.toolkit.flush()

    def idle(self) -> None:
        self.window.draw(self.toolkit, DIRTY)

    def move(self, dx: int, dy: int) -> None:
        """Move the cursor, clamped to the screen."""
        self.cx = min(max(self.cx + dx, 0), self.width - 1)
        self.cy = min(max(self.cy + dy, 0), self.height - 1)
        self.toolkit.move_to(self.cx, self.cy)

    def enter(self) -> None:
        self.cx = 0
        self.move(0, 1)
        self.window.add_text("\n")

    def backspace(self) -> None:
        self.move(-1, 0)

    def alt(self, key: str) -> None:
        self.toolkit.write("^" + key)

    def special(self) -> None:
        """Handle a '~'-terminated key sequence such as Delete."""
        if self.index < 0:
            return
        if self.args[0] == 3:
            self.toolkit.write(" ")
            self.move(-1, 0)

    def escape(self) -> None:
        raise EditorExit("")