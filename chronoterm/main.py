# chronoterm/main.py
# Module entry point: `python -m chronoterm.main` runs the CLI

from .cli.app import app

if __name__ == "__main__":
    app()
