"""A fixed sequence of transformations written out as step images."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Union

from .pixels import RgbImage, export_image
from .transforms import ROTATION_BITS, rotate_right, xor_bytes

PathArg = Union[str, "PathLike[str]"]

STEP_NAMES = ("P1.bmp", "P2.bmp", "P3.bmp")


def run_experiments(
    original: RgbImage, masked: RgbImage, directory: PathArg = "."
) -> list[Path]:
    """XOR, rotate right by 3 bits, then XOR again, saving each step.

    The steps go to ``P1.bmp``, ``P2.bmp`` and ``P3.bmp`` inside ``directory``;
    their paths are returned in that order.
    """
    if (original.width, original.height) != (masked.width, masked.height):
        raise ValueError(
            f"images differ in size: {original.width}x{original.height} "
            f"and {masked.width}x{masked.height}"
        )
    base = Path(directory)
    first = xor_bytes(original.data, masked.data)
    second = rotate_right(first, ROTATION_BITS)
    third = xor_bytes(second, masked.data)
    return [
        export_image(original.with_data(step), base / name)
        for step, name in zip((first, second, third), STEP_NAMES)
    ]