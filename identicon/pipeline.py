"""Identicon generation pipeline.

This module wires the systems together in dependency order. :func:`build` is
pure and returns the finished :class:`identicon.image.Image` descriptor;
:func:`main` additionally renders it and writes the image file, the only
observable side effect.

Ordering:

1. ``hash_input`` digests the seed into ``hex``.
2. ``pick_color`` takes the fill color from the first three bytes.
3. ``build_grid`` mirrors 3-byte chunks into a symmetric 5x5 grid.
4. ``filter_odd_squares`` keeps only even cells.
5. ``build_pixel_map`` turns surviving cells into canvas rectangles.
"""

import logging
from pathlib import Path
from typing import Optional

from identicon.image import Image
from identicon.renderer import render
from identicon.systems import (
    build_grid,
    build_pixel_map,
    filter_odd_squares,
    hash_input,
    pick_color,
)
from identicon.writer import PathLike, display_path, save_image

logger = logging.getLogger(__name__)


def build(seed: str) -> Image:
    """Run every pure stage for ``seed``.

    Args:
        seed (str): Identity string. May be empty.

    Returns:
        Image: Descriptor with ``hex``, ``color``, filtered ``grid`` and
            ``pixel_map`` populated.
    """
    image = hash_input(seed)
    image = pick_color(image)
    image = build_grid(image)
    image = filter_odd_squares(image)
    image = build_pixel_map(image)
    logger.debug("Built identicon for %r: %s", seed, image.description)
    return image


def main(seed: str, directory: Optional[PathLike] = None) -> Path:
    """Generate the identicon for ``seed`` and write it as ``"<seed>.png"``.

    Args:
        seed (str): Identity string.
        directory (PathLike | None): Output directory, current working
            directory if ``None``.

    Returns:
        Path: The written file.

    Raises:
        OSError: If the output file cannot be written.
    """
    path = save_image(render(build(seed)), seed, directory)
    logger.info("Wrote identicon for %r to %s", seed, display_path(path))
    return path
