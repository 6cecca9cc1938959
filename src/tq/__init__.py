"""tq: a personal task queue for the terminal."""

__version__ = "0.1.0"
