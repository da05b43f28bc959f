"""Command-line front end: shrink a PPM image by seam carving."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from workbench.imaging.image import Image, PpmError
from workbench.imaging.processing import seam_carve_height, seam_carve_width

USAGE = (
    "Usage: resize.exe IN_FILENAME OUT_FILENAME WIDTH [HEIGHT]\n"
    "WIDTH and HEIGHT must be less than or equal to original"
)


def main(argv: Sequence[str] | None = None) -> int:
    """Resize IN_FILENAME to WIDTH (and optionally HEIGHT), writing OUT_FILENAME."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (3, 4):
        print(USAGE)
        return 1

    filename_in, filename_out = args[0], args[1]
    try:
        wanted_width = int(args[2])
        wanted_height = int(args[3]) if len(args) == 4 else None
    except ValueError:
        print(USAGE)
        return 1

    try:
        with open(filename_in, encoding="ascii") as infile:
            text = infile.read()
    except OSError:
        print(f"Error opening file: {filename_in}")
        return 1

    try:
        img = Image.from_ppm(text)
    except PpmError as error:
        print(f"Error reading {filename_in}: {error}")
        return 1

    if wanted_height is None:
        wanted_height = img.height
    if not 0 < wanted_width <= img.width or not 0 < wanted_height <= img.height:
        print(USAGE)
        return 1

    img = seam_carve_width(img, wanted_width)
    img = seam_carve_height(img, wanted_height)

    try:
        with open(filename_out, "w", encoding="ascii") as outfile:
            outfile.write(img.to_ppm())
    except OSError:
        print(f"Error opening file: {filename_out}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())