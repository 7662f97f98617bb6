import io

import numpy as np
import numpy.typing as npt
import PIL.Image
from PIL import ImageDraw
from PIL.Image import Image as PILImage

from identicon.config import BACKGROUND, CANVAS_SIZE, PILLOW_FORMAT
from identicon.image import Image, require

UInt8Array = npt.NDArray[np.uint8]


def draw_image(image: Image) -> PILImage:
    """
    Paints every rectangle of ``image.pixel_map`` with ``image.color`` on a blank
    250x250 canvas. Uncovered area keeps the background color.
    """
    color = require(image.color, "color")
    pixel_map = require(image.pixel_map, "pixel_map")

    canvas = PIL.Image.new("RGBA", (CANVAS_SIZE, CANVAS_SIZE), BACKGROUND)
    draw = ImageDraw.Draw(canvas)
    for rect in pixel_map:
        draw.rectangle(rect.box, fill=color)
    return canvas


def render(image: Image) -> bytes:
    """
    Draws the identicon and returns it encoded as PNG.
    """
    buffer = io.BytesIO()
    draw_image(image).save(buffer, format=PILLOW_FORMAT)
    return buffer.getvalue()


def to_array(image: Image) -> UInt8Array:
    """
    Returns the drawn canvas as a (250, 250, 4) uint8 array.
    """
    return np.asarray(draw_image(image), dtype=np.uint8)
