"""A small top-down arena shooter built on pygame: game logic, shapes and the main loop."""

__version__ = "0.1.0"