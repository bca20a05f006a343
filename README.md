# bmpreveal

Checks which bitwise byte transformation produced a distorted image, using
additive masking clues written along the way.

An image is handled as flat RGB bytes: three per pixel, row by row, with no
padding. The transformations tried are XOR with the mask image, rotation left
or right by 3 bits, and shift left or right by 2 bits. Each clue records a
masked slice of a transformed image:

    S(k) = ID(k + seed) + M(k)

where `ID` is the transformed image, `M` is the mask image and `seed` is a
byte offset. A clue file `M<n>.txt` holds the seed first, followed by
`R G B` triples.

## Installation

    pip install .

## Command line

Put the distorted image `I_D.bmp`, the mask `M.bmp` and the clue files
`M1.txt`, `M2.txt`, ... in one folder, then run:

    bmpreveal [FOLDER]

The clue files are found by counting up from `M<start>.txt` until a number is
missing. They are then taken from the last to the first. For each one, every
transformation is applied to the distorted image and checked against the
clue. The tool prints one line per clue:

    <clue file> (seed N): XOR, rotate left, ...

or `no transformation detected`. Each matching result is written to the
output file; a later match overwrites an earlier one.

Options:

- `FOLDER`: folder holding the images and clue files (default: `.`)
- `--transformed NAME`: transformed image, relative to the folder (default: `I_D.bmp`)
- `--mask NAME`: mask image, relative to the folder (default: `M.bmp`)
- `--output NAME`: where a matching result is written, relative to the folder (default: `I_O.bmp`)
- `--start N`: number of the first clue file (default: `1`)
- `--steps DIR`: also save the image examined for each clue as `Paso<n>.bmp` in `DIR`
- `-v`, `--verbose`: show progress messages

The exit status is 1 in three cases: an image cannot be loaded, the two images
differ in size, or no clue files are found. Otherwise it is 0.

## Library

```python
from bmpreveal.pixels import load_pixels
from bmpreveal.masking import load_seed_masking, detect_masking_files
from bmpreveal.transforms import probe_transformations

image = load_pixels("I_D.bmp")
mask = load_pixels("M.bmp")
for path in reversed(detect_masking_files(".", 1)):
    masking = load_seed_masking(path)
    found = probe_transformations(image, mask, masking, "I_O.bmp")
    print(path, [t.name for t in found])
```

- `bmpreveal.pixels`: `load_pixels(path)` returns an `RgbImage` (`width`,
  `height`, `data`, `size`, `with_data()`). `export_image(image, path)` saves
  one as a 24-bit BMP and returns the path.
- `bmpreveal.masking`: `load_seed_masking(path)` returns a `MaskingData` with
  `seed`, `values`, the `pixel_count` and `size` properties and `pixels()`.
  `detect_masking_files(folder, start)` lists the clue files.
  `verify_masking(transformed, mask, expected, seed)` checks the masking
  equation.
- `bmpreveal.transforms`: `xor_bytes`, `shift_left`, `shift_right`,
  `rotate_left` and `rotate_right` work on byte strings.
  `verify_transformation` checks a candidate against a clue.
  `probe_transformations` returns the matching `Transformation` members in the
  order they were tried.
- `bmpreveal.experiments`: `run_experiments(original, masked, directory)`
  writes the sample chain XOR → rotate right 3 → XOR as `P1.bmp`, `P2.bmp`
  and `P3.bmp`.

## What it does not do

bmpreveal only detects which transformation agrees with each clue. It does
not invert the transformations, and it does not chain them from one clue to
the next to rebuild the original image. Every clue is checked against the
same distorted input image. The file written to `--output` is that image with
the matching transformation applied once.