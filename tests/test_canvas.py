import pytest

from puebloquest.canvas import (
    KEY_ENTER,
    Color,
    Glyph,
    GridCanvas,
    Style,
)


def test_new_canvas_is_blank():
    canvas = GridCanvas(3, 5)
    assert canvas.row(1) == " " * 5
    assert canvas.style_at(0, 0) == Style()


def test_put_and_read_back():
    canvas = GridCanvas(4, 6)
    red = Style(color=Color.RED, bold=True)
    canvas.put(2, 3, "x", red)
    canvas.put(1, 1, Glyph.DIAMOND)
    assert canvas.char_at(2, 3) == "x"
    assert canvas.style_at(2, 3) == red
    assert canvas.char_at(1, 1) == Glyph.DIAMOND.value


def test_put_rejects_several_characters():
    with pytest.raises(ValueError):
        GridCanvas(2, 2).put(0, 0, "ab")


def test_out_of_bounds_writes_are_ignored():
    canvas = GridCanvas(2, 3)
    canvas.put(-1, 0, "a")
    canvas.put(0, 3, "b")
    canvas.text(1, 1, "xyz")
    assert canvas.row(0) == "   "
    assert canvas.row(1) == " xy"


def test_reading_outside_raises():
    canvas = GridCanvas(2, 2)
    with pytest.raises(IndexError):
        canvas.char_at(2, 0)
    with pytest.raises(IndexError):
        canvas.row(-1)


def test_text_writes_spaces_too():
    canvas = GridCanvas(1, 8)
    canvas.text(0, 0, "abcdefgh")
    canvas.text(0, 2, "  ")
    assert canvas.row(0) == "ab  efgh"


def test_box_draws_corners_and_edges():
    canvas = GridCanvas(4, 5)
    canvas.box()
    assert canvas.char_at(0, 0) == Glyph.ULCORNER.value
    assert canvas.char_at(0, 4) == Glyph.URCORNER.value
    assert canvas.char_at(3, 0) == Glyph.LLCORNER.value
    assert canvas.char_at(3, 4) == Glyph.LRCORNER.value
    assert canvas.char_at(0, 2) == Glyph.HLINE.value
    assert canvas.char_at(2, 0) == Glyph.VLINE.value
    assert canvas.char_at(1, 2) == " "


def test_clear_blanks_everything():
    canvas = GridCanvas(3, 3)
    canvas.box()
    canvas.clear()
    assert all(canvas.row(y) == "   " for y in range(3))


def test_scripted_keys_then_end_of_input():
    canvas = GridCanvas(1, 1, keys=["q", KEY_ENTER])
    assert canvas.get_key() == ord("q")
    assert canvas.get_key() == KEY_ENTER
    with pytest.raises(EOFError):
        canvas.get_key()


def test_invalid_key_script():
    with pytest.raises(ValueError):
        GridCanvas(1, 1, keys=["ab"])


def test_invalid_size():
    with pytest.raises(ValueError):
        GridCanvas(0, 4)


def test_window_draws_onto_parent_at_offset():
    parent = GridCanvas(10, 10)
    child = parent.window(3, 4, 2, 5)
    child.put(1, 1, "z")
    assert child.char_at(1, 1) == "z"
    assert parent.char_at(3, 6) == "z"
    assert (child.height, child.width) == (3, 4)


def test_window_clear_blanks_parent_region_only():
    parent = GridCanvas(5, 5)
    parent.text(0, 0, "#####")
    parent.text(1, 0, "#####")
    child = parent.window(1, 2, 1, 1)
    child.clear()
    assert parent.row(0) == "#####"
    assert parent.row(1) == "#  ##"


def test_window_shares_keys_and_pauses():
    parent = GridCanvas(5, 5, keys="ab")
    child = parent.window(2, 2, 0, 0)
    assert child.get_key() == ord("a")
    assert parent.get_key() == ord("b")
    child.pause(80)
    child.pause(20)
    assert parent.paused_ms == child.paused_ms == 100


def test_refresh_counts():
    canvas = GridCanvas(1, 1)
    canvas.refresh()
    canvas.refresh()
    assert canvas.refreshes == 2