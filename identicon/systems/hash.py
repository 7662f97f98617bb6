"""Input hashing system.

The digest only needs to be deterministic and well distributed; MD5 is used
for its 16-byte output, which covers the 3 color bytes and 15 grid bytes.
"""

import hashlib
from typing import Union

from pyrsistent import pvector

from identicon.image import Image


def hash_input(seed: Union[str, bytes]) -> Image:
    """Create a new ``Image`` holding the MD5 digest of ``seed``.

    Args:
        seed (str | bytes): Seed string. ``str`` seeds are UTF-8 encoded;
            surrogate-escaped characters (undecodable bytes from ``sys.argv``)
            are hashed as the raw bytes they stand for.

    Returns:
        Image: Descriptor with only ``hex`` populated (16 bytes).
    """
    data = seed.encode("utf-8", "surrogateescape") if isinstance(seed, str) else seed
    digest = hashlib.md5(data, usedforsecurity=False).digest()
    return Image(hex=pvector(digest))
