"""A terminal role-playing adventure drawn with curses."""

__version__ = "0.1.0"