"""Pipeline stages.

Each system is a pure ``Image -> Image`` function (the hasher takes the raw
input instead). They are re-exported here in pipeline order.
"""

from .hash import hash_input
from .color import pick_color
from .grid import build_grid, mirror_row
from .filter import filter_odd_squares
from .pixel_map import build_pixel_map

__all__ = [
    "hash_input",
    "pick_color",
    "build_grid",
    "mirror_row",
    "filter_odd_squares",
    "build_pixel_map",
]
