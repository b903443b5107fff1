"""A small terminal air traffic controller game: map, planes, levels and a curses front end."""

__version__ = "0.1.0"