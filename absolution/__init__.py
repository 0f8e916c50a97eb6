"""A turn-based strategy game played through a terminal command prompt."""

__version__ = "0.1.0"