# chronoterm/ui/stopwatch/big_digits.py
# Five-row block glyphs for rendering the primary time line in large digits

from __future__ import annotations

GLYPH_HEIGHT = 5

# each glyph is GLYPH_HEIGHT rows of equal width
GLYPHS: dict[str, tuple[str, ...]] = {
    "0": ("█████", "█   █", "█   █", "█   █", "█████"),
    "1": ("  ██ ", "   █ ", "   █ ", "   █ ", "  ███"),
    "2": ("█████", "    █", "█████", "█    ", "█████"),
    "3": ("█████", "    █", " ████", "    █", "█████"),
    "4": ("█   █", "█   █", "█████", "    █", "    █"),
    "5": ("█████", "█    ", "█████", "    █", "█████"),
    "6": ("█████", "█    ", "█████", "█   █", "█████"),
    "7": ("█████", "    █", "   █ ", "  █  ", "  █  "),
    "8": ("█████", "█   █", "█████", "█   █", "█████"),
    "9": ("█████", "█   █", "█████", "    █", "█████"),
    ":": ("   ", " █ ", "   ", " █ ", "   "),
    ".": ("  ", "  ", "  ", "  ", "█ "),
    " ": ("  ", "  ", "  ", "  ", "  "),
}


# * Render text as GLYPH_HEIGHT lines; unknown characters render as blanks
def render_big(text: str, spacing: int = 1) -> list[str]:
    gap = " " * spacing
    rows = [""] * GLYPH_HEIGHT
    for i, ch in enumerate(text):
        glyph = GLYPHS.get(ch, GLYPHS[" "])
        for row in range(GLYPH_HEIGHT):
            rows[row] += glyph[row] if i == 0 else gap + glyph[row]
    return rows


# width in cells of render_big(text) so callers can fall back when the terminal is too narrow
def big_width(text: str, spacing: int = 1) -> int:
    if not text:
        return 0
    widths = [len(GLYPHS.get(ch, GLYPHS[" "])[0]) for ch in text]
    return sum(widths) + spacing * (len(text) - 1)
