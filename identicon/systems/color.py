"""Color selection system."""

from dataclasses import replace

from identicon.image import Image


def pick_color(image: Image) -> Image:
    """Store the first three digest bytes as the ``(r, g, b)`` fill color.

    Raises:
        ValueError: If ``hex`` holds fewer than three bytes.
    """
    if len(image.hex) < 3:
        raise ValueError(f"Digest too short for a color: {len(image.hex)} bytes")
    r, g, b = image.hex[0], image.hex[1], image.hex[2]
    return replace(image, color=(r, g, b))
