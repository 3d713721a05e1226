# chronoterm/core/__init__.py
# Pure timing core: engine, formatting, output registry & exceptions (no terminal I/O)
