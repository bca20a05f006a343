"""Command line entry point: recover the transformation hidden behind masking clues."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from .masking import detect_masking_files, load_seed_masking
from .pixels import RgbImage, export_image, load_pixels
from .transforms import DEFAULT_OUTPUT, probe_transformations

logger = logging.getLogger(__name__)

DEFAULT_TRANSFORMED = "I_D.bmp"
DEFAULT_MASK = "M.bmp"
STEP_TEMPLATE = "Paso{}.bmp"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bmpreveal",
        description=(
            "Check the M<n>.txt masking clues in a folder against a transformed "
            "BMP image and a mask, and report which bitwise transformation each "
            "clue confirms."
        ),
    )
    parser.add_argument(
        "folder",
        nargs="?",
        default=".",
        help="folder holding the images and clue files (default: current directory)",
    )
    parser.add_argument(
        "--transformed",
        default=DEFAULT_TRANSFORMED,
        help=f"transformed image, relative to the folder (default: {DEFAULT_TRANSFORMED})",
    )
    parser.add_argument(
        "--mask",
        default=DEFAULT_MASK,
        help=f"mask image, relative to the folder (default: {DEFAULT_MASK})",
    )
    parser.add_argument(
        "--output",
        default=DEFAULT_OUTPUT,
        help=f"where a detected result is written, relative to the folder (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--start",
        type=int,
        default=1,
        help="number of the first clue file, M<start>.txt (default: 1)",
    )
    parser.add_argument(
        "--steps",
        metavar="DIR",
        default=None,
        help="also save the image examined for each clue as Paso<n>.bmp in DIR",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="show progress messages",
    )
    return parser


def _load(path: Path, what: str) -> RgbImage | None:
    try:
        return load_pixels(path)
    except OSError as error:
        print(f"error: cannot load {what} {path}: {error}", file=sys.stderr)
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the detection over every clue file and return the process exit status."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(message)s",
    )

    folder = Path(args.folder)
    transformed = _load(folder / args.transformed, "transformed image")
    mask = _load(folder / args.mask, "mask")
    if transformed is None or mask is None:
        return 1
    if (transformed.width, transformed.height) != (mask.width, mask.height):
        print(
            f"error: transformed image is {transformed.width}x{transformed.height} "
            f"but mask is {mask.width}x{mask.height}",
            file=sys.stderr,
        )
        return 1

    clue_files = detect_masking_files(folder, args.start)
    if not clue_files:
        print(f"error: no masking clue files found in {folder}", file=sys.stderr)
        return 1

    output = folder / args.output
    steps = Path(args.steps) if args.steps is not None else None
    if steps is not None:
        steps.mkdir(parents=True, exist_ok=True)

    for index, clue in reversed(list(enumerate(clue_files, start=1))):
        try:
            masking = load_seed_masking(clue)
        except OSError as error:
            print(f"error: cannot read {clue}: {error}", file=sys.stderr)
            continue

        try:
            detected = probe_transformations(transformed, mask, masking, output)
        except ValueError as error:
            print(f"error: {clue}: {error}", file=sys.stderr)
            continue

        if detected:
            names = ", ".join(str(transformation) for transformation in detected)
            print(f"{clue} (seed {masking.seed}): {names}")
        else:
            print(f"{clue} (seed {masking.seed}): no transformation detected")

        if steps is not None:
            export_image(transformed, steps / STEP_TEMPLATE.format(index))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())