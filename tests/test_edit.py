import io

import pytest

from termedit.edit import Editor, EditorExit
from termedit.toolkit import Block, Keyword, Toolkit


class Recorder(io.StringIO):
    def __init__(self):
        super().__init__()
        self.flushes = 0

    def flush(self):
        self.flushes += 1
        super().flush()


def make_editor():
    out = Recorder()
    tk = Toolkit(out)
    window = Block(0, 0, Keyword.FULL, Keyword.FULL)
    return out, window, Editor(tk, window)


def reset(out):
    out.seek(0)
    out.truncate(0)


def cursor(x, y):
    out = io.StringIO()
    Toolkit(out).move_to(x, y)
    return out.getvalue()


def test_init_writes_reset_sequence():
    out, _, _ = make_editor()
    assert out.getvalue() == "\033c\033[2J\033[9999;9999H\033[6n\n"


def test_first_feed_homes_cursor_once():
    out, _, ed = make_editor()
    reset(out)
    ed.feed("a")
    assert out.getvalue().startswith("\033[0;0H")
    reset(out)
    ed.feed("b")
    assert "\033[0;0H" not in out.getvalue()


def test_typed_text_goes_to_window():
    _, window, ed = make_editor()
    ed.feed("ab")
    assert window.first_child.data == "ab"


def test_arrow_keys_move_cursor():
    _, _, ed = make_editor()
    ed.feed("\x1b[C\x1b[C\x1b[B")
    assert (ed.cx, ed.cy) == (2, 1)


def test_cursor_clamped_at_origin():
    _, _, ed = make_editor()
    ed.feed("\x1b[D\x1b[A")
    assert (ed.cx, ed.cy) == (0, 0)


def test_cursor_clamped_at_far_edges():
    _, _, ed = make_editor()
    ed.feed("\x1b[B" * (ed.height + 5) + "\x1b[C" * (ed.width + 5))
    assert ed.cy == ed.height - 1
    assert ed.cx == ed.width - 1


def test_move_writes_cursor_position():
    out, _, ed = make_editor()
    ed.feed("a")
    reset(out)
    ed.feed("\x1b[C")
    assert out.getvalue() == cursor(ed.cx, ed.cy)


def test_enter_starts_next_line():
    _, window, ed = make_editor()
    ed.feed("xy\x1b[C\n")
    assert ed.cx == 0
    assert ed.cy == 1
    assert window.first_child.data == "xy\n"


@pytest.mark.parametrize("key", ["\b", "\x7f"])
def test_backspace_moves_left(key):
    _, _, ed = make_editor()
    ed.feed("\x1b[C\x1b[C")
    before = ed.cx
    ed.feed(key)
    assert ed.cx == before - 1


def test_alt_key_echoed():
    out, _, ed = make_editor()
    ed.feed("a")
    reset(out)
    ed.feed("\x1bq")
    assert out.getvalue() == "^" + "q"


def test_non_letter_after_escape_ignored():
    out, window, ed = make_editor()
    ed.feed("a")
    reset(out)
    ed.feed("\x1b1z")
    assert out.getvalue() == ""
    assert window.first_child.data == "az"


def test_double_escape_exits():
    _, _, ed = make_editor()
    with pytest.raises(EditorExit):
        ed.feed("\x1b\x1b")


def test_csi_arguments_collected():
    _, _, ed = make_editor()
    ed.feed("\x1b[1;5A")
    assert ed.args[:2] == [1, 5]
    assert ed.index == -1


def test_delete_writes_blank_and_moves_left():
    out, _, ed = make_editor()
    ed.feed("\x1b[C\x1b[C")
    before = ed.cx
    reset(out)
    ed.feed("\x1b[3~")
    assert out.getvalue().startswith(" ")
    assert ed.cx == before - 1


def test_special_without_arguments_does_nothing():
    out, _, ed = make_editor()
    ed.feed("a")
    reset(out)
    ed.feed("\x1b[~")
    assert out.getvalue() == ""


def test_event_flushes():
    out, _, ed = make_editor()
    before = out.flushes
    ed.event("a")
    assert out.flushes == before + 1


def test_idle_draws_window():
    out, window, ed = make_editor()
    window.add_text("hi")
    reset(out)
    ed.idle()
    assert out.getvalue().endswith("hi")


def test_escape_sequence_split_across_feeds():
    _, _, ed = make_editor()
    ed.feed("\x1b")
    ed.feed("[C")
    assert ed.cx == 1