# chronoterm/ui/__init__.py
# UI package: theming & the interactive stopwatch display
