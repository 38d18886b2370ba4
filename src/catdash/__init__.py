"""CATDASH - side-scrolling jump-the-dogs arcade game."""

__version__ = "0.1.0"
