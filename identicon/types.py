"""Common type aliases."""

from typing import Tuple

Byte = int
Color = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]
