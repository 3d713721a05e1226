# chronoterm/ui/theming/theme_definitions.py
# Theme color palette definitions for the stopwatch display

from __future__ import annotations

DEFAULT_THEME = "deep_blue"

# palettes ordered light -> deep; index 0 drives the time line, 2 the panel borders
THEMES = {
    "deep_blue": [
        "#4a90e2",  # sky blue
        "#357abd",  # medium blue
        "#2563eb",  # royal blue
        "#1d4ed8",  # deep blue
        "#1e40af",  # dark blue
    ],
    "terminal_green": [
        "#39ff14",  # neon green
        "#32cd32",  # lime green
        "#2e8b57",  # sea green
        "#228b22",  # forest green
        "#006400",  # dark green
    ],
    "amber_crt": [
        "#ffbf00",  # amber
        "#ffb000",  # dark amber
        "#ff9f00",  # orange peel
        "#e68a00",  # burnt amber
        "#b36b00",  # brown amber
    ],
    "sunset_coral": [
        "#FF7F50",  # coral
        "#FF8C69",  # salmon
        "#FFA500",  # orange
        "#FFB347",  # peach
        "#FFD700",  # gold
    ],
    "mono": [
        "#ffffff",
        "#d0d0d0",
        "#a0a0a0",
        "#808080",
        "#606060",
    ],
}
