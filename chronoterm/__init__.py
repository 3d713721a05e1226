# chronoterm/__init__.py
# Terminal stopwatch w/ pause/resume, lap tracking & live rich display

__version__ = "0.1.0"
