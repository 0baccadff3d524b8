"""War card game simulator with configurable war depth and honor rule."""

__version__ = "0.1.0"
