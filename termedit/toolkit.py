"""A small terminal widget toolkit: text nodes, inline runs, ranges and blocks."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, TextIO

DIRTY = 0x80000000


class Keyword(enum.IntEnum):
    """Style keywords, colours (ARGB) and widget kinds."""

    PERCENT = 0xA0000000
    FULL = 0xA0000000 + 10000
    BLACK = 0x7F000000
    SILVER = 0x7FC0C0C0
    GRAY = 0x7F808080
    GREY = 0x7F808080
    WHITE = 0x7FFFFFFF
    MAROON = 0x7F800000
    RED = 0x7FFF0000
    PURPLE = 0x7F800080
    FUCHSIA = 0x7FFF00FF
    GREEN = 0x7F008000
    LIME = 0x7F00FF00
    OLIVE = 0x7F808000
    YELLOW = 0x7FFFFF00
    NAVY = 0x7F000080
    BLUE = 0x7F0000FF
    TEAL = 0x7F008080
    AQUA = 0x7F00FFFF
    ORANGE = 0x7FFFA500
    DARKGRAY = 0x7FA9A9A9
    DARKGREY = 0x7FA9A9A9
    DIMGRAY = 0x7F696969
    DIMGREY = 0x7F696969
    GAINSBORO = 0x7FDCDCDC
    LIGHTGRAY = 0x7FD3D3D3
    LIGHTGREY = 0x7FD3D3D3
    WHITESMOKE = 0x7FF5F5F5
    TRANSPARENT = 0x4000000
    INHERIT = 0x80000000
    HIDDEN = 0x80000001
    AUTO = 0x80000002
    NONE = 0x80000003
    INITIAL = 0x80000004
    SCROLL = 0x80000005
    VISIBLE = 0x80000006
    SOLID = 0x20000000
    OUTSET = 0x20000001
    INSET = 0x20000002
    GROOVE = 0x20000003
    STATIC = 0x20000004
    ABSOLUTE = 0x20000005
    FIXED = 0x20000006
    RELATIVE = 0x20000007
    STICKY = 0x20000008
    LEFT = 0x20000009
    RIGHT = 0x2000000A
    CENTER = 0x2000000B
    JUSTIFY = 0x2000000C
    BASELINE = 0x2000000D
    TEXT_TOP = 0x2000000E
    TEXT_BOTTOM = 0x2000000F
    BOTTOM = 0x20000010
    TOP = 0x20000011
    SUB = 0x20000012
    SUPER = 0x20000013
    RTL = 0x20000014
    LTR = 0x20000015
    UNDERLINE = 0x20000016
    LINE_THROUGH = 0x20000017
    NOWRAP = 0x20000018
    PRE = 0x20000019
    NORMAL = 0x2000001A
    ITALIC = 0x2000001B
    SERIF = 0x2000001C
    SANS_SERIF = 0x2000001D
    MONOSPACE = 0x2000001E
    CURSIVE = 0x2000001F
    TEXT = 0x20000020
    RANGE = 0x20000021
    INLINE = 0x20000022
    BLOCK = 0x20000023
    CONTENTS = 0x20000024
    FLEX = 0x20000025
    GRID = 0x20000026
    INLINE_BLOCK = 0x20000027
    INLINE_FLEX = 0x20000028
    INLINE_GRID = 0x20000029
    INLINE_TABLE = 0x2000002A
    LIST_ITEM = 0x2000002B
    RUN_IN = 0x2000002C
    TABLE = 0x2000002D
    TABLE_CAPTION = 0x2000002E
    TABLE_COLUMN_GROUP = 0x2000002F
    TABLE_HEADER_GROUP = 0x20000030
    TABLE_FOOTER_GROUP = 0x20000031
    TABLE_ROW_GROUP = 0x20000032
    TABLE_CELL = 0x20000033
    TABLE_COLUMN = 0x20000034
    TABLE_ROW = 0x20000035


@dataclass
class Style:
    """Presentation properties of a widget."""

    color: int = 0
    background_color: int = 0
    border_style: int = 0
    border_width: int = 0
    border_color: int = 0
    margin_top: int = 0
    margin_right: int = 0
    margin_bottom: int = 0
    margin_left: int = 0
    padding: int = 0
    left: int = 0
    top: int = 0
    height: int = 0
    width: int = 0
    min_width: int = 0
    max_width: int = 0
    min_height: int = 0
    max_height: int = 0
    text_align: int = 0
    vertical_align: int = 0
    direction: int = 0
    text_decoration: int = 0
    line_height: int = 0
    white_space: int = 0
    font_family: int = 0
    font_style: int = 0
    font_size: int = 0
    display: int = 0
    position: int = 0
    overflow: int = 0


class Toolkit:
    """Renders widgets to a text stream using ANSI escape sequences."""

    def __init__(self, out: TextIO):
        self.out = out
        self.width = 80
        self.height = 25

    def write(self, text: str) -> None:
        self.out.write(text)

    def flush(self) -> None:
        self.out.flush()

    def draw_string(self, text: str) -> None:
        self.out.write(text)

    def move_to(self, x: int, y: int) -> None:
        """Place the cursor at zero-based column x, row y."""
        self.write(f"\033[{y + 1};{x + 1}H")

    def create(self, kind, *args):
        """Build a widget of the given kind from constructor arguments."""
        try:
            factory = _FACTORIES[kind]
        except KeyError:
            raise ValueError("unknown widget") from None
        return factory(*args)


class Text:
    """A run of character data."""

    display = Keyword.TEXT

    def __init__(self, data: str = ""):
        self.data = data

    @property
    def length(self) -> int:
        return len(self.data)

    def add(self, data: str) -> None:
        self.data += data


class Inline(Text):
    """A text run that can be linked and drawn."""

    display = Keyword.INLINE

    def __init__(self, data: str = ""):
        super().__init__(data)
        self.next: Optional[Inline] = None
        self.flags = 0

    def draw(self, toolkit: Toolkit, start: int, end: int) -> None:
        if self.display in (Keyword.INLINE, Keyword.TEXT) and self.data:
            toolkit.draw_string(self.data[start:end])


@dataclass(eq=False)
class Range:
    """A span between two offsets in inline containers."""

    start_container: Optional[Inline]
    start_offset: int
    end_container: Optional[Inline]
    end_offset: int
    flags: int = 0
    common_ancestor: Optional[Inline] = None

    display = Keyword.RANGE


class Block(Inline):
    """A positioned box holding inline children, laid out as lines."""

    display = Keyword.BLOCK

    def __init__(self, x: int, y: int, w: int, h: int):
        super().__init__()
        self.x = x
        self.y = y
        self.w = w
        self.h = h
        self.children: list[Inline] = []
        self.lines: list[Range] = []

    @property
    def first_child(self) -> Optional[Inline]:
        return self.children[0] if self.children else None

    @property
    def last_child(self) -> Optional[Inline]:
        return self.children[-1] if self.children else None

    def add_text(self, text: str) -> Inline:
        """Append text to the last inline child, creating one if needed."""
        if not self.children:
            node = Inline()
            self.children.append(node)
        else:
            node = self.children[-1]
            if self.lines:
                self.mark_dirty_after(node, node.length)
        node.add(text)
        self.flags |= DIRTY
        return node

    def mark_dirty_after(self, node: Inline, offset: int) -> None:
        """Flag lines touching node at or after offset, and every line after the first such one."""
        flag = 0
        for line in self.lines:
            if line.start_container is node and line.start_offset >= offset:
                flag = DIRTY
            if line.end_container is node and line.end_offset >= offset:
                flag = DIRTY
            line.flags |= flag

    def measure(self) -> None:
        """Recompute line ranges unless the first dirty line begins at the last child."""
        if not self.children:
            self.lines = []
            return
        dirty = next((line for line in self.lines if line.flags & DIRTY), None)
        if dirty is not None and dirty.start_container is self.last_child:
            return
        last = self.last_child
        self.lines = [Range(self.first_child, 0, last, last.length)]

    def draw_line(self, toolkit: Toolkit, line: Range) -> None:
        toolkit.move_to(self.x, self.y)
        if line.start_container is line.end_container:
            line.start_container.draw(toolkit, line.start_offset, line.end_offset)

    def draw(self, toolkit: Toolkit, flags: int) -> None:
        """Draw dirty lines, or every line when flags carries DIRTY."""
        if self.flags & DIRTY:
            self.measure()
        elif not flags & DIRTY:
            return
        for line in self.lines:
            if line.flags & DIRTY or flags & DIRTY:
                line.flags &= ~DIRTY
                self.draw_line(toolkit, line)


_FACTORIES = {
    Keyword.TEXT: Text,
    Keyword.INLINE: Inline,
    Keyword.RANGE: Range,
    Keyword.BLOCK: Block,
}