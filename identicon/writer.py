"""Output file handling.

The output lives next to the caller: ``"<seed>.png"`` in the current working
directory unless a directory is given. Existing files are overwritten.
Failures surface as ``OSError`` and are not retried.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from identicon.config import EXTENSION

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def output_path(seed: str, directory: Optional[PathLike] = None) -> Path:
    """Return the path the identicon for ``seed`` is written to."""
    base = Path(directory) if directory is not None else Path.cwd()
    return base / f"{seed}.{EXTENSION}"


def display_path(path: Path) -> str:
    """Printable form of ``path``; undecodable bytes are shown as ``\\xNN``."""
    return str(path).encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")


def save_image(data: bytes, seed: str, directory: Optional[PathLike] = None) -> Path:
    """Write encoded image bytes for ``seed``.

    Args:
        data: Encoded PNG file contents.
        seed: Seed string the identicon was generated from.
        directory: Target directory; defaults to the current working directory.

    Returns:
        Path: The file that was written.

    Raises:
        OSError: If the file cannot be written.
    """
    path = output_path(seed, directory)
    logger.debug("Writing %d bytes to %s", len(data), display_path(path))
    path.write_bytes(data)
    return path
