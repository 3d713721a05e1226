# chronoterm/cli/__init__.py
# Typer CLI package; entry point is chronoterm.cli.app:app
