"""Grid building system.

The digest is cut into 3-byte chunks, each chunk is mirrored into a 5-wide
palindromic row, and the rows are flattened row-major into indexed cells. The
mirroring is what gives every identicon its left-right symmetry.

MD5 yields 16 bytes; only the first 15 (5 full chunks) are used, the trailing
byte would form a degenerate 1-element row.
"""

from dataclasses import replace
from typing import List, Sequence, TypeVar

import numpy as np
from pyrsistent import pvector

from identicon.config import CHUNK_SIZE, GRID_BYTES, GRID_ROWS
from identicon.image import Cell, Image

T = TypeVar("T")


def mirror_row(row: Sequence[T]) -> List[T]:
    """Append the second and first elements: ``[1, 2, 4] -> [1, 2, 4, 2, 1]``.

    Raises:
        ValueError: If ``row`` has fewer than two elements.
    """
    if len(row) < 2:
        raise ValueError(f"Cannot mirror a row of length {len(row)}")
    first, second = row[0], row[1]
    return list(row) + [second, first]


def build_grid(image: Image) -> Image:
    """Populate ``grid`` with 25 ``Cell`` values in row-major order.

    Raises:
        ValueError: If ``hex`` holds fewer than 15 bytes.
    """
    if len(image.hex) < GRID_BYTES:
        raise ValueError(
            f"Digest too short for a grid: {len(image.hex)} bytes, need {GRID_BYTES}"
        )

    chunks = np.asarray(list(image.hex[:GRID_BYTES]), dtype=np.uint8).reshape(
        GRID_ROWS, CHUNK_SIZE
    )
    rows = np.array([mirror_row(chunk) for chunk in chunks], dtype=np.uint8)
    grid = pvector(
        Cell(value=int(value), index=index) for index, value in enumerate(rows.flat)
    )
    return replace(image, grid=grid)
