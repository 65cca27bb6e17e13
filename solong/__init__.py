"""A tile-based puzzle game with map validation, XPM textures and a pygame window."""

__version__ = "0.1.0"