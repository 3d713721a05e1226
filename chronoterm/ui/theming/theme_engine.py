# chronoterm/ui/theming/theme_engine.py
# Theme engine: gradient color utilities & semantic styles for the stopwatch display

from __future__ import annotations

from typing import Any

from rich.text import Text
from rich.theme import Theme

from .theme_definitions import THEMES, DEFAULT_THEME

# lazy import to avoid circular dependency w/ config.settings
_settings_manager: Any = None
_import_attempted = False

# per-invocation theme chosen on the command line (takes precedence over settings)
_theme_override: str | None = None


def _get_settings_manager() -> Any:
    global _settings_manager, _import_attempted
    if not _import_attempted:
        _import_attempted = True
        from ...config.settings import settings_manager

        _settings_manager = settings_manager
    return _settings_manager


# * get current theme name: CLI override, then settings, then default
def get_active_theme_name() -> str:
    if _theme_override is not None:
        return _theme_override
    settings = _get_settings_manager().load()
    name = getattr(settings, "theme", DEFAULT_THEME)
    return name if name in THEMES else DEFAULT_THEME


def set_theme_override(name: str | None) -> None:
    global _theme_override
    if name is not None and name not in THEMES:
        raise ValueError(f"Unknown theme '{name}'. Valid themes: {', '.join(sorted(THEMES))}")
    _theme_override = name
    reset_color_cache()


def _get_theme_colors() -> list[str]:
    return THEMES[get_active_theme_name()]


# descriptor that lazily fetches color from active theme; re-evaluates when theme changes
class _LazyColorDescriptor:
    def __init__(self, index: int) -> None:
        self._index = index
        self._cached_theme: str | None = None
        self._cached_value: str | None = None

    def __get__(self, obj: object, objtype: type | None = None) -> str:
        current = get_active_theme_name()
        if self._cached_theme != current:
            self._cached_value = _get_theme_colors()[self._index]
            self._cached_theme = current
        return self._cached_value  # type: ignore[return-value]

    def reset(self) -> None:
        self._cached_theme = None
        self._cached_value = None


# * RGB color interpolation helpers for natural gradients
def _hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    hex_color = hex_color.lstrip("#")
    return (int(hex_color[0:2], 16), int(hex_color[2:4], 16), int(hex_color[4:6], 16))


def _rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    return f"#{rgb[0]:02x}{rgb[1]:02x}{rgb[2]:02x}"


def _lerp_color(a_hex: str, b_hex: str, t: float) -> str:
    ar, ag, ab = _hex_to_rgb(a_hex)
    br, bg, bb = _hex_to_rgb(b_hex)
    return _rgb_to_hex(
        (
            int(round(ar + (br - ar) * t)),
            int(round(ag + (bg - ag) * t)),
            int(round(ab + (bb - ab) * t)),
        )
    )


# * ChronoColors: theme-aware accents (lazy) plus fixed status colors
class ChronoColors:
    ACCENT_PRIMARY = _LazyColorDescriptor(0)
    ACCENT_LIGHT = _LazyColorDescriptor(1)
    ACCENT_SECONDARY = _LazyColorDescriptor(2)
    ACCENT_MEDIUM = _LazyColorDescriptor(3)
    ACCENT_DEEP = _LazyColorDescriptor(4)

    # status colors (shared by every theme)
    RUNNING = "#10b981"  # emerald green
    PAUSED = "#ffaa00"  # amber
    STOPPED = "#aaaaaa"  # gray
    CAPPED = "#ff4444"  # red
    ERROR = "#ff4444"
    DIM = "#aaaaaa"
    DEBUG = "#00b5b5"

    SUCCESS_BRIGHT = "#10b981"
    SUCCESS_MEDIUM = "#059669"
    SUCCESS_DIM = "#047857"

    @classmethod
    def gradient(cls) -> list[str]:
        return [
            cls.ACCENT_PRIMARY,
            cls.ACCENT_LIGHT,
            cls.ACCENT_SECONDARY,
            cls.ACCENT_MEDIUM,
            cls.ACCENT_DEEP,
        ]


def reset_color_cache() -> None:
    for attr in (
        "ACCENT_PRIMARY",
        "ACCENT_LIGHT",
        "ACCENT_SECONDARY",
        "ACCENT_MEDIUM",
        "ACCENT_DEEP",
    ):
        desc = ChronoColors.__dict__.get(attr)
        if isinstance(desc, _LazyColorDescriptor):
            desc.reset()


# * create natural gradient text w/ smooth RGB color interpolation
def natural_gradient(text: str, colors: list[str] | None = None) -> Text:
    if colors is None:
        colors = ChronoColors.gradient()

    if not text or not colors:
        return Text(text)

    if len(colors) < 2:
        return Text(text, style=colors[0])

    result = Text()
    n = len(text)
    n_stops = len(colors)

    for i, char in enumerate(text):
        if n == 1:
            result.append(char, style=colors[0])
            continue

        # map position along the text onto gradient segments
        seg_pos = (i / (n - 1)) * (n_stops - 1)
        idx = int(seg_pos)

        if idx >= n_stops - 1:
            color = colors[-1]
        else:
            color = _lerp_color(colors[idx], colors[idx + 1], seg_pos - idx)

        result.append(char, style=color)

    return result


def success_gradient(text: str) -> Text:
    return natural_gradient(
        text,
        [ChronoColors.SUCCESS_BRIGHT, ChronoColors.SUCCESS_MEDIUM, ChronoColors.SUCCESS_DIM],
    )


def accent_gradient(text: str) -> Text:
    return natural_gradient(
        text,
        [
            ChronoColors.ACCENT_PRIMARY,
            ChronoColors.ACCENT_SECONDARY,
            ChronoColors.ACCENT_DEEP,
        ],
    )


# * generate Rich theme configuration w/ current colors
def get_chrono_theme() -> Theme:
    return Theme(
        {
            "success": ChronoColors.SUCCESS_BRIGHT,
            "error": ChronoColors.ERROR,
            "dim": ChronoColors.DIM,
            "debug": ChronoColors.DEBUG,
            # stopwatch-specific styles
            "chrono.time": f"bold {ChronoColors.ACCENT_PRIMARY}",
            "chrono.accent": ChronoColors.ACCENT_PRIMARY,
            "chrono.accent2": ChronoColors.ACCENT_SECONDARY,
            "chrono.border": ChronoColors.ACCENT_SECONDARY,
            "chrono.lap": ChronoColors.ACCENT_LIGHT,
            "chrono.delta": ChronoColors.ACCENT_MEDIUM,
            "chrono.key": f"bold {ChronoColors.ACCENT_DEEP}",
            "chrono.running": f"bold {ChronoColors.RUNNING}",
            "chrono.paused": f"bold {ChronoColors.PAUSED}",
            "chrono.stopped": ChronoColors.STOPPED,
            "chrono.capped": f"bold {ChronoColors.CAPPED}",
        }
    )


# style helpers for common CLI patterns
def styled_checkmark() -> Text:
    return Text("✓", style=ChronoColors.SUCCESS_BRIGHT)


def styled_arrow() -> Text:
    return Text("->", style=ChronoColors.ACCENT_SECONDARY)


def styled_bullet() -> Text:
    return Text("•", style=ChronoColors.ACCENT_SECONDARY)
