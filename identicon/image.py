"""Core immutable identicon ``Image`` dataclass.

This module defines the frozen :class:`Image` descriptor that is threaded
through the generation pipeline. Every stage is a pure function that takes an
``Image`` and returns a *new* ``Image`` with one more field populated (or, for
the odd filter, one field replaced); no mutation happens in-place.

Design notes:

* Sequences are **persistent vectors** (``pyrsistent.PVector``) so a stage can
    never alter the data an earlier snapshot still references.
* Fields are populated strictly in dependency order:
    ``hex -> (color, grid) -> grid (filtered) -> pixel_map``. Stages call
    :func:`require` before reading a field, turning an out-of-order call into a
    ``ValueError`` instead of a silent ``None`` dereference.
* :class:`Cell` keeps the row-major ``index`` of each grid square so filtering
    can drop cells without losing their position on the canvas.

See :mod:`identicon.pipeline` for how the stages are composed.
"""

from dataclasses import dataclass
from typing import Any, Optional, TypeVar

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from identicon.types import Byte, Color


@dataclass(frozen=True)
class Cell:
    """Grid square.

    Attributes:
        value: Digest byte driving the square (even values are painted).
        index: Row-major position in the 5x5 grid, in ``[0, 25)``.
    """

    value: Byte
    index: int


@dataclass(frozen=True)
class Point:
    """Canvas coordinate in pixels (origin at top-left)."""

    x: int
    y: int


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle covering ``[top_left, bottom_right)``."""

    top_left: Point
    bottom_right: Point

    @property
    def box(self) -> tuple[int, int, int, int]:
        """Inclusive ``(x0, y0, x1, y1)`` box as expected by ``ImageDraw``."""
        return (
            self.top_left.x,
            self.top_left.y,
            self.bottom_right.x - 1,
            self.bottom_right.y - 1,
        )


@dataclass(frozen=True)
class Image:
    """Immutable identicon descriptor.

    Attributes:
        hex (PVector[int]): Digest bytes of the input (16 for MD5).
        color (Color | None): Fill color taken from the first three bytes.
        grid (PVector[Cell] | None): Mirrored 5x5 grid, later reduced to even cells.
        pixel_map (PVector[Rect] | None): One rectangle per grid cell, same order.
    """

    hex: PVector[Byte] = pvector()
    color: Optional[Color] = None
    grid: Optional[PVector[Cell]] = None
    pixel_map: Optional[PVector[Rect]] = None

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of populated fields.

        Returns:
            PMap[str, Any]: Field name to value for every field that is not
            ``None`` or empty. Useful for logging a descriptor without dumping
            placeholders.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if value is None or (hasattr(value, "__len__") and len(value) == 0):
                continue
            description = description.set(field, value)
        return description


T = TypeVar("T")


def require(value: Optional[T], name: str) -> T:
    """Return ``value`` or raise if an earlier stage has not populated it."""
    if value is None:
        raise ValueError(f"Image field '{name}' is not populated yet")
    return value
