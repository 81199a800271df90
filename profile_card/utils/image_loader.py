"""
Avatar Image Loader

Default image decoding capability for avatar selection. The form controller
accepts any async callable mapping a selection handle to a decoded image;
this module provides one backed by Pillow.

Decoding runs in a worker thread so the event loop stays responsive while
a large image is read.
"""

import asyncio
from io import BytesIO
from pathlib import Path
from typing import Any, Awaitable, Callable, Union

from PIL import Image

ImageDecoder = Callable[[Any], Awaitable[Any]]

ImageSource = Union[bytes, bytearray, str, Path]


def decode_image_sync(source: ImageSource) -> Image.Image:
    """Decode an image from raw bytes or a file path.

    Args:
        source: Encoded image bytes, or a path to an image file

    Returns:
        Fully loaded PIL image

    Raises:
        TypeError: If source is not bytes or a path
        OSError: If the data cannot be decoded (PIL.UnidentifiedImageError)
    """
    if isinstance(source, (bytes, bytearray)):
        fp: Any = BytesIO(bytes(source))
    elif isinstance(source, (str, Path)):
        fp = Path(source)
    else:
        raise TypeError(f"Unsupported image source: {type(source).__name__}")

    with Image.open(fp) as image:
        image.load()
        return image.copy()


async def decode_image(source: ImageSource) -> Image.Image:
    """Decode an image without blocking the event loop."""
    return await asyncio.to_thread(decode_image_sync, source)
