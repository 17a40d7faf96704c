"""Entry photo compression."""

import io
from pathlib import Path
from typing import BinaryIO

from PIL import Image, UnidentifiedImageError


def compress_image(source: Path | str | bytes | BinaryIO, quality: int = 80, max_size: int = 2048) -> bytes:
    """
    Re-encode an image as JPEG bytes suitable for an entry.

    The image is converted to RGB and shrunk so its longest edge is at most
    max_size pixels; smaller images keep their size.
    """
    if isinstance(source, bytes):
        source = io.BytesIO(source)

    try:
        with Image.open(source) as image:
            image.load()
            if image.mode != "RGB":
                image = image.convert("RGB")
            image.thumbnail((max_size, max_size))
            buffer = io.BytesIO()
            image.save(buffer, format="JPEG", quality=quality, optimize=True)
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Unreadable image: {e}") from e

    return buffer.getvalue()
