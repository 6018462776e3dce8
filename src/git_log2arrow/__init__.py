"""Git Log2Arrow - stream git commit history as Arrow IPC."""

__version__ = "0.1.0"
