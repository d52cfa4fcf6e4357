"""Validate .cub raycaster scene files and load XPM textures into pixel images."""

__version__ = "0.1.0"
__all__ = ["colors", "visual", "wordtab", "image", "xpm", "mapfile", "cli"]