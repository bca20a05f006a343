"""Loading and saving 24-bit RGB images as flat, unpadded byte strings."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Union

from PIL import Image

logger = logging.getLogger(__name__)

PathArg = Union[str, "PathLike[str]"]

CHANNELS = 3


@dataclass(frozen=True)
class RgbImage:
    """An image as row-major R, G, B bytes with no row padding."""

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"image dimensions must be non-negative, got {self.width}x{self.height}"
            )
        object.__setattr__(self, "data", bytes(self.data))
        expected = self.width * self.height * CHANNELS
        if len(self.data) != expected:
            raise ValueError(
                f"a {self.width}x{self.height} RGB image needs {expected} bytes, "
                f"got {len(self.data)}"
            )

    @property
    def size(self) -> int:
        """Total number of bytes (width * height * 3)."""
        return len(self.data)

    def with_data(self, data: bytes | bytearray | memoryview) -> RgbImage:
        """Return an image of the same dimensions holding ``data``."""
        return RgbImage(self.width, self.height, bytes(data))


def load_pixels(path: PathArg) -> RgbImage:
    """Read an image file and return its pixels converted to 8-bit RGB.

    Raises ``FileNotFoundError`` if the file is missing and ``OSError``
    if it cannot be decoded as an image.
    """
    with Image.open(path) as source:
        rgb = source.convert("RGB")
        width, height = rgb.size
        data = rgb.tobytes()
    return RgbImage(width, height, data)


def export_image(image: RgbImage, path: PathArg) -> Path:
    """Write ``image`` to ``path`` as a BMP file and return the path written."""
    target = Path(path)
    if target.exists():
        logger.debug("overwriting existing file %s", target)
    else:
        logger.debug("creating new file %s", target)
    picture = Image.frombytes("RGB", (image.width, image.height), image.data)
    picture.save(target, "BMP")
    logger.info("BMP image saved as %s", target)
    return target