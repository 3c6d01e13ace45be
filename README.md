# termedit

A very small full-screen editor for ANSI/VT100 terminals. It puts the
terminal into non-canonical, no-echo mode and draws one text block in the
top-left corner, which starts out holding `hello world`. Whatever you type
is appended to the end of that block.

## Installing

```
pip install .
```

## Running

```
termedit
```

Keys:

- any other character: appended to the end of the block
- Enter: moves the cursor to the start of the next row and appends a newline
  to the block
- Backspace: moves the cursor one column left
- arrow keys: move the cursor, which is kept inside an 80x25 screen
- Delete (`ESC [ 3 ~`): writes a space and moves the cursor one column left
- Alt plus a lower-case letter: shows `^` followed by the letter
- Esc: quits (a lone Esc read on its own, or two Esc characters in a row)

Ctrl+C is ignored while the editor runs. When it quits, or when input ends,
the editor switches off mouse reporting and the alternate screen, resets the
scroll region and puts the terminal settings back the way it found them.

## Using the pieces

The layout toolkit (`termedit.toolkit`) and the input state machine
(`termedit.edit`) are ordinary Python objects that write to any text stream:

```python
import io
from termedit.toolkit import Toolkit, Keyword
from termedit.edit import Editor

out = io.StringIO()
toolkit = Toolkit(out)
window = toolkit.create(Keyword.BLOCK, 0, 0, Keyword.FULL, Keyword.FULL)
window.add_text("hello world")
editor = Editor(toolkit, window)
editor.event("abc\x1b[B")   # type text, then press the down arrow
editor.idle()               # redraw the window
print(repr(out.getvalue()))
```

- `Toolkit` writes text and cursor moves (`move_to`) to its stream;
  `Toolkit.create` builds a `Text`, `Inline`, `Range` or `Block` from a
  `Keyword` and raises `ValueError` for any other kind.
- `Block.add_text` appends to the block's last inline child; `Block.draw`
  lays the text out and redraws lines that are dirty, or all of them when
  passed the `DIRTY` flag.
- `Editor.feed` / `Editor.event` run input through the key state machine;
  escape sequences may be split across calls. Quitting raises `EditorExit`.
- `Keyword` lists the style keywords, colours and widget kinds, and `Style`
  holds a widget's presentation properties.

`termedit.terminal.RawTerminal` is a context manager that switches a
terminal file descriptor into raw mode and restores it on exit.
`termedit.terminal.run` drives the editor loop with it, and
`termedit.terminal.normalize_input` turns a lone Esc byte into the double
Esc that quits.

## What it does not do

termedit is a sketch of an editor rather than a working one. It does not
open or save files. Typed text is always appended to the end of the block,
not inserted at the cursor, and Backspace and Delete do not remove anything
from it. The whole block is drawn as a single line range, and `Style` is
not yet applied to anything when drawing.

## Running the tests

```
pip install .[test]
pytest
```