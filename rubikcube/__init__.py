"""A 3x3 Rubik's cube model with row and column turns and a coloured terminal view."""

__version__ = "0.1.0"
__all__ = ["cube", "cli"]