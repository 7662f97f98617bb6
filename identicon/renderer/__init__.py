"""Rendering subpackage.

Turns a fully built :class:`identicon.image.Image` into pixels:

* A fixed 250x250 RGBA canvas filled with the background color.
* One solid rectangle per pixel-map entry, painted in order.
* Lossless encoding (PNG) to bytes via Pillow, or a NumPy array view.

See :mod:`identicon.renderer.raster` for the drawing routines.
"""

from .raster import draw_image, render, to_array

__all__ = ["draw_image", "render", "to_array"]
