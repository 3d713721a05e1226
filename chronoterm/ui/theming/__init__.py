# chronoterm/ui/theming/__init__.py
# Color palettes, gradient helpers & console theme management

from .theme_definitions import THEMES, DEFAULT_THEME
