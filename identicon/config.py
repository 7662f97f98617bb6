"""Fixed layout constants.

The identicon layout is not configurable: a 5x5 grid of 50px cells exactly
fills a 250x250 canvas. Rows are generated from 3-byte chunks of the digest and
mirrored out to 5 columns.
"""

from identicon.types import RGBA

CELL_SIZE = 50
GRID_COLUMNS = 5
GRID_ROWS = 5
CHUNK_SIZE = 3
CANVAS_SIZE = CELL_SIZE * GRID_COLUMNS

# Only the first 15 digest bytes feed the grid.
GRID_BYTES = GRID_ROWS * CHUNK_SIZE

BACKGROUND: RGBA = (255, 255, 255, 255)
# Images are always PNG; the extension names the output file.
PILLOW_FORMAT = "PNG"
EXTENSION = "png"
