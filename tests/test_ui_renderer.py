import pytest
from ui.drawables import Color, DEFAULT_PALETTE
from ui.renderer import Renderer, SurfaceDimensionError


def _text(console, row, start, length):
    return "".join(chr(c) for c in console.ch[row, start:start + length])


def test_renderer_initialization():
    r = Renderer(width=80, height=50, title="Test Window")
    assert r.width == 80
    assert r.height == 50
    assert r.title == "Test Window"
    assert r.root_console.width == 80
    assert r.root_console.height == 50

    assert (r.play.width, r.play.height, r.play.row, r.play.col) == (80, 45, 0, 0)
    assert (r.status.width, r.status.height, r.status.row, r.status.col) == (80, 5, 45, 0)
    assert (r.play.interior_width, r.play.interior_height) == (78, 43)


@pytest.mark.parametrize("width,height,status_height", [
    (80, 50, 5),
    (10, 8, 5),
    (3, 6, 3),
    (120, 30, 7),
])
def test_regions_are_disjoint_and_cover_screen(width, height, status_height):
    r = Renderer(width, height, status_height=status_height, status_anchor=(1, 1))
    play_rows = set(r.play.rows)
    status_rows = set(r.status.rows)
    assert not play_rows & status_rows
    assert play_rows | status_rows == set(range(height))
    assert r.status.height == status_height


@pytest.mark.parametrize("width,height,status_height", [
    (80, 5, 5),
    (80, 4, 5),
    (80, 7, 5),
    (2, 50, 5),
    (80, 50, 2),
])
def test_degenerate_dimensions_raise(width, height, status_height):
    with pytest.raises(SurfaceDimensionError):
        Renderer(width, height, status_height=status_height)


def test_border_glyphs():
    r = Renderer(10, 12)
    for region in (r.play, r.status):
        con = region.console
        assert chr(con.ch[0, 0]) == "+"
        assert chr(con.ch[0, region.width - 1]) == "+"
        assert _text(con, 0, 1, region.width - 2) == "-" * (region.width - 2)
        assert _text(con, region.height - 1, 1, region.width - 2) == "-" * (region.width - 2)
        assert chr(con.ch[1, 0]) == "|"
        assert chr(con.ch[1, region.width - 1]) == "|"
        assert chr(con.ch[1, 1]) == " "


def test_write_glyph_uses_interior_offset():
    r = Renderer(10, 12)
    r.write_glyph(r.play, 0, 0, "@")
    con = r.play.console
    assert chr(con.ch[1, 1]) == "@"
    assert chr(con.ch[0, 0]) == "+"
    assert chr(con.ch[0, 1]) == "-"
    assert chr(con.ch[1, 0]) == "|"


def test_write_glyph_applies_palette_color():
    r = Renderer(10, 12)
    r.write_glyph(r.play, 2, 3, "x", Color.RED)
    assert tuple(r.play.console.fg[3, 4]) == (255, 0, 0)


def test_write_glyph_outside_interior_raises():
    r = Renderer(10, 12)
    with pytest.raises(IndexError):
        r.write_glyph(r.play, 0, r.play.interior_width, "@")
    with pytest.raises(IndexError):
        r.write_glyph(r.play, r.play.interior_height, 0, "@")
    with pytest.raises(IndexError):
        r.write_glyph(r.play, 0, r.play.interior_width - 1, "ab")


def test_renderer_clear():
    r = Renderer(width=20, height=15)
    blank_play = r.play.console.ch.copy()
    blank_status = r.status.console.ch.copy()

    r.write_glyph(r.play, 0, 0, "@")
    r.write_glyph(r.play, r.play.interior_height - 1, r.play.interior_width - 1, "#", Color.BLUE)
    r.write_status("Score: 10")
    assert chr(r.play.console.ch[1, 1]) == "@"

    r.flush(r.play)
    r.flush(r.status)
    r.clear()

    assert (r.play.console.ch == blank_play).all()
    assert (r.status.console.ch == blank_status).all()
    assert tuple(r.play.console.fg[r.play.height - 2, r.play.width - 2]) == (255, 255, 255)


def test_clear_after_empty_frame_matches_construction():
    r = Renderer(width=20, height=15)
    blank_play = r.play.console.ch.copy()
    r.flush(r.play)
    r.flush(r.status)
    r.clear()
    assert (r.play.console.ch == blank_play).all()


def test_flush_copies_region_to_root_offset():
    r = Renderer(20, 15)
    r.write_glyph(r.status, 0, 0, "S")
    r.write_glyph(r.play, 0, 0, "P")
    r.flush(r.play)
    r.flush(r.status)
    assert chr(r.root_console.ch[1, 1]) == "P"
    assert chr(r.root_console.ch[r.status.row + 1, 1]) == "S"
    assert chr(r.root_console.ch[r.status.row, 0]) == "+"


@pytest.mark.parametrize("text", ["", "a", "Hits: 3", "x" * 200])
def test_status_anchor_is_fixed(text):
    r = Renderer(30, 15)
    r.write_status(text)
    con = r.status.console
    shown = text[:r.status.width - 1 - 3]
    assert _text(con, 2, 3, len(shown)) == shown
    assert chr(con.ch[2, 2]) == " "
    assert chr(con.ch[2, r.status.width - 1]) == "|"


def test_status_anchor_is_stable_across_frames():
    r = Renderer(30, 15)
    for frame in range(3):
        r.write_status(f"frame {frame}")
        assert _text(r.status.console, 2, 3, 7) == f"frame {frame}"
        r.clear()


@pytest.mark.parametrize("anchor", [(2, 3), (0, 1), (1, 0), (1, 19)])
def test_status_anchor_outside_interior_raises(anchor):
    with pytest.raises(SurfaceDimensionError):
        Renderer(20, 10, status_height=3, status_anchor=anchor)


def test_status_anchor_on_single_interior_row():
    r = Renderer(20, 10, status_height=3, status_anchor=(1, 1))
    blank = r.status.console.ch.copy()
    r.write_status("hi")
    assert _text(r.status.console, 1, 1, 2) == "hi"
    r.clear()
    assert (r.status.console.ch == blank).all()


def test_status_text_stops_at_line_break():
    r = Renderer(30, 15)
    blank = r.status.console.ch.copy()
    r.write_status("a\nb\nc")
    con = r.status.console
    assert _text(con, 2, 3, 2) == "a "
    assert _text(con, 3, 3, 1) == " "
    r.clear()
    assert (con.ch == blank).all()


def test_write_glyph_rejects_control_characters():
    r = Renderer(20, 15)
    before = r.play.console.ch.copy()
    for text in ("a\nb", "\t", "x\r"):
        with pytest.raises(ValueError):
            r.write_glyph(r.play, r.play.interior_height - 1, 0, text)
    assert (r.play.console.ch == before).all()


def test_custom_palette_colors_writes_and_border():
    palette = dict(DEFAULT_PALETTE)
    palette[Color.WHITE] = (200, 200, 200)
    palette[Color.RED] = (128, 10, 10)
    r = Renderer(20, 15, palette=palette)
    r.write_glyph(r.play, 0, 0, "r", Color.RED)
    assert tuple(r.play.console.fg[1, 1]) == (128, 10, 10)
    assert tuple(r.play.console.fg[0, 0]) == (200, 200, 200)
    r.clear()
    assert tuple(r.play.console.fg[1, 1]) == (200, 200, 200)


def test_palette_missing_colour_raises():
    palette = {c: rgb for c, rgb in DEFAULT_PALETTE.items() if c is not Color.CYAN}
    with pytest.raises(ValueError, match="CYAN"):
        Renderer(20, 15, palette=palette)
