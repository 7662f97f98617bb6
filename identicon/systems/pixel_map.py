"""Pixel mapping system.

Converts row-major cell indices into canvas rectangles. With 5 columns of 50px
cells the grid exactly fills the 250x250 canvas.
"""

from dataclasses import replace

from pyrsistent import pvector

from identicon.config import CELL_SIZE, GRID_COLUMNS
from identicon.image import Cell, Image, Point, Rect, require


def cell_to_rect(cell: Cell) -> Rect:
    """Return the 50x50 rectangle covered by ``cell``."""
    horizontal = (cell.index % GRID_COLUMNS) * CELL_SIZE
    vertical = (cell.index // GRID_COLUMNS) * CELL_SIZE
    return Rect(
        top_left=Point(horizontal, vertical),
        bottom_right=Point(horizontal + CELL_SIZE, vertical + CELL_SIZE),
    )


def build_pixel_map(image: Image) -> Image:
    """Populate ``pixel_map`` with one rectangle per grid cell, in grid order."""
    grid = require(image.grid, "grid")
    return replace(image, pixel_map=pvector(cell_to_rect(cell) for cell in grid))
