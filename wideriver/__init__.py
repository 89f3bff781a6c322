"""Tiling layout calculations, per-tag state and border styles for river."""

__version__ = "1.2.1"