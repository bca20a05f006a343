"""Bitwise byte transformations and detection of the one applied to an image."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum
from os import PathLike
from pathlib import Path
from typing import Union

from .masking import MaskingData, verify_masking
from .pixels import RgbImage, export_image

logger = logging.getLogger(__name__)

PathArg = Union[str, "PathLike[str]"]

BYTE_BITS = 8
ROTATION_BITS = 3
SHIFT_BITS = 2
DEFAULT_OUTPUT = "I_O.bmp"


class Transformation(Enum):
    """The bitwise operations tried when looking for the one that was applied."""

    XOR = "XOR"
    ROTATE_LEFT = "rotate left"
    ROTATE_RIGHT = "rotate right"
    SHIFT_LEFT = "shift left"
    SHIFT_RIGHT = "shift right"

    def __str__(self) -> str:
        return self.value


def _check_shift(bits: int) -> None:
    if bits < 0:
        raise ValueError(f"bit count must be non-negative, got {bits}")


def _check_rotation(bits: int) -> None:
    if not 0 <= bits <= BYTE_BITS:
        raise ValueError(f"rotation must be between 0 and {BYTE_BITS} bits, got {bits}")


def _map_bytes(data: bytes | bytearray | memoryview, table: bytes) -> bytes:
    return bytes(data).translate(table)


def xor_bytes(
    first: bytes | bytearray | memoryview, second: bytes | bytearray | memoryview
) -> bytes:
    """Return the byte-wise XOR of two equally long byte strings."""
    if len(first) != len(second):
        raise ValueError(
            f"cannot XOR {len(first)} bytes with {len(second)} bytes"
        )
    return bytes(a ^ b for a, b in zip(bytes(first), bytes(second)))


def shift_left(data: bytes | bytearray | memoryview, bits: int) -> bytes:
    """Shift every byte left by ``bits``, filling with zeros."""
    _check_shift(bits)
    table = bytes((value << bits) & 0xFF for value in range(256))
    return _map_bytes(data, table)


def shift_right(data: bytes | bytearray | memoryview, bits: int) -> bytes:
    """Shift every byte right by ``bits``, filling with zeros."""
    _check_shift(bits)
    table = bytes(value >> bits for value in range(256))
    return _map_bytes(data, table)


def rotate_left(data: bytes | bytearray | memoryview, bits: int) -> bytes:
    """Rotate every byte left by ``bits`` (0 to 8)."""
    _check_rotation(bits)
    table = bytes(
        ((value << bits) | (value >> (BYTE_BITS - bits))) & 0xFF for value in range(256)
    )
    return _map_bytes(data, table)


def rotate_right(data: bytes | bytearray | memoryview, bits: int) -> bytes:
    """Rotate every byte right by ``bits`` (0 to 8)."""
    _check_rotation(bits)
    table = bytes(
        ((value >> bits) | (value << (BYTE_BITS - bits))) & 0xFF for value in range(256)
    )
    return _map_bytes(data, table)


def verify_transformation(
    transformed: Sequence[int],
    mask: Sequence[int],
    expected: Sequence[int],
    seed: int,
) -> bool:
    """Check a candidate result against a clue: ``transformed[k + seed] + mask[k] == expected[k]``."""
    return verify_masking(transformed, mask, expected, seed)


def _candidates(image: RgbImage, mask: RgbImage) -> list[tuple[Transformation, bytes]]:
    return [
        (Transformation.XOR, xor_bytes(image.data, mask.data)),
        (Transformation.ROTATE_LEFT, rotate_left(image.data, ROTATION_BITS)),
        (Transformation.ROTATE_RIGHT, rotate_right(image.data, ROTATION_BITS)),
        (Transformation.SHIFT_LEFT, shift_left(image.data, SHIFT_BITS)),
        (Transformation.SHIFT_RIGHT, shift_right(image.data, SHIFT_BITS)),
    ]


def probe_transformations(
    image: RgbImage,
    mask: RgbImage,
    masking: MaskingData,
    output: PathArg = DEFAULT_OUTPUT,
) -> list[Transformation]:
    """Try each transformation on ``image`` and keep those that agree with ``masking``.

    Every matching result is written to ``output`` as a BMP (a later match
    overwrites an earlier one). Returns the matching transformations in the
    order they were tried.
    """
    logger.info("probing with seed %d", masking.seed)
    detected: list[Transformation] = []
    for transformation, candidate in _candidates(image, mask):
        if verify_transformation(candidate, mask.data, masking.values, masking.seed):
            export_image(image.with_data(candidate), Path(output))
            logger.info("transformation detected: %s", transformation)
            detected.append(transformation)
    return detected