"""Odd square culling system.

Only even-valued cells are painted. Indices are left untouched so the pixel
mapper still places every surviving cell at its original grid position.
"""

from dataclasses import replace

from pyrsistent import pvector

from identicon.image import Image, require


def filter_odd_squares(image: Image) -> Image:
    """Drop every cell whose value is odd, preserving order.

    An all-odd grid yields an empty grid, which renders as background only.
    """
    grid = require(image.grid, "grid")
    return replace(image, grid=pvector(cell for cell in grid if cell.value % 2 == 0))
