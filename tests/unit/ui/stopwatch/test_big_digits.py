# tests/unit/ui/stopwatch/test_big_digits.py
# Unit tests for the five-row block digit renderer

from chronoterm.ui.stopwatch.big_digits import GLYPHS, GLYPH_HEIGHT, big_width, render_big


class TestGlyphs:

    # * Verify every glyph has uniform rows of the declared height
    def test_glyph_shapes(self):

        for ch, glyph in GLYPHS.items():
            assert len(glyph) == GLYPH_HEIGHT, ch
            assert len({len(row) for row in glyph}) == 1, ch

    # * Verify every character of a formatted duration has a glyph
    def test_duration_characters_covered(self):

        for ch in "0123456789:.":
            assert ch in GLYPHS


class TestRenderBig:

    # * Verify output is GLYPH_HEIGHT equal-width rows matching big_width
    def test_rows_and_width(self):

        text = "00:01:01.309"
        rows = render_big(text)

        assert len(rows) == GLYPH_HEIGHT
        assert {len(row) for row in rows} == {big_width(text)}

    # * Verify glyphs are joined w/ the requested spacing
    def test_spacing(self):

        rows = render_big("11", spacing=3)
        assert rows[0] == GLYPHS["1"][0] + "   " + GLYPHS["1"][0]
        assert big_width("11", spacing=3) == 2 * 5 + 3

    # * Verify unknown characters render as blanks
    def test_unknown_character(self):

        assert render_big("?") == list(GLYPHS[" "])

    # * Verify empty text
    def test_empty(self):

        assert render_big("") == [""] * GLYPH_HEIGHT
        assert big_width("") == 0
