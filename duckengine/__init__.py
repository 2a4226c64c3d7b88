"""A small 2D game engine runtime that loads folder-format games and runs their main loop."""

__version__ = "0.1.0"