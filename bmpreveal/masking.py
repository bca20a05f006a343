"""Masking clue files: loading them, finding them and checking them against an image.

A clue file holds a seed ``s`` on its first line, followed by R G B triples
that record ``S(k) = ID(k + s) + M(k)`` for each byte ``k`` of the mask.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

PathArg = Union[str, "PathLike[str]"]

CHANNELS = 3


@dataclass(frozen=True)
class MaskingData:
    """The seed and masked RGB values read from one clue file."""

    seed: int
    values: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))
        if len(self.values) % CHANNELS:
            raise ValueError(
                f"masking values must come in RGB triples, got {len(self.values)} values"
            )

    @property
    def pixel_count(self) -> int:
        """Number of RGB triples held."""
        return len(self.values) // CHANNELS

    @property
    def size(self) -> int:
        """Number of individual byte values held (pixel_count * 3)."""
        return len(self.values)

    def pixels(self) -> Iterator[tuple[int, int, int]]:
        """Yield the values as (R, G, B) triples."""
        it = iter(self.values)
        return zip(it, it, it)


def verify_masking(
    transformed: Sequence[int],
    mask: Sequence[int],
    expected: Sequence[int],
    seed: int,
) -> bool:
    """Check that ``transformed[k + seed] + mask[k] == expected[k]`` for every ``k``.

    Returns ``False`` when the expected values would run past the end of
    ``transformed``.
    """
    if seed < 0:
        raise ValueError(f"seed must be non-negative, got {seed}")
    count = len(expected)
    if len(mask) < count:
        raise ValueError(
            f"mask holds {len(mask)} bytes but {count} expected values were given"
        )
    if seed + count > len(transformed):
        return False
    window = transformed[seed : seed + count]
    return all(
        byte + mask_byte == value
        for byte, mask_byte, value in zip(window, mask, expected)
    )


def _integers(text: str) -> Iterator[int]:
    """Yield whitespace-separated integers until the first token that is not one."""
    for token in text.split():
        try:
            yield int(token)
        except ValueError:
            return


def load_seed_masking(path: PathArg) -> MaskingData:
    """Read a clue file: the seed first, then as many complete RGB triples as follow.

    Reading stops at the first token that is not an integer; an incomplete
    trailing triple is ignored. A file without a readable seed yields seed 0
    and no values. Raises ``OSError`` if the file cannot be opened.
    """
    text = Path(path).read_text(encoding="utf-8", errors="replace")
    numbers = list(_integers(text))
    if not numbers:
        seed, values = 0, []
    else:
        seed, values = numbers[0], numbers[1:]
    complete = len(values) - len(values) % CHANNELS
    data = MaskingData(seed, tuple(values[:complete]))
    logger.info("seed: %d", data.seed)
    logger.info("pixels read: %d", data.pixel_count)
    return data


def detect_masking_files(folder: PathArg = ".", start: int = 1) -> list[Path]:
    """List ``M<n>.txt`` files in ``folder`` for n = start, start+1, ... up to the first gap."""
    base = Path(folder)
    found: list[Path] = []
    number = start
    while True:
        candidate = base / f"M{number}.txt"
        if not candidate.exists():
            break
        found.append(candidate)
        number += 1
    return found