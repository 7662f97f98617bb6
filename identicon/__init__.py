"""Deterministic GitHub-style identicons.

``identicon.main("hoyups")`` writes ``hoyups.png``: a 250x250 image whose
color and symmetric 5x5 pattern are derived from the MD5 digest of the input.
Use :func:`identicon.build` to get the descriptor without touching the disk.
"""

from identicon.image import Cell, Image, Point, Rect
from identicon.pipeline import build, main

__all__ = ["Cell", "Image", "Point", "Rect", "build", "main"]
