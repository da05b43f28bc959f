"""RGB images held as three channel matrices, with plain PPM (P3) input and output."""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

from workbench.imaging.matrix import Matrix


class Pixel(NamedTuple):
    """An RGB colour."""

    r: int
    g: int
    b: int


class PpmError(ValueError):
    """Raised when text is not a valid plain PPM image."""


class Image:
    """An image of ``width`` by ``height`` pixels, indexed as ``img[row, column]``."""

    __slots__ = ("_width", "_height", "_red", "_green", "_blue")

    def __init__(self, width: int, height: int) -> None:
        self._red = Matrix(width, height)
        self._green = Matrix(width, height)
        self._blue = Matrix(width, height)
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def red_channel(self) -> Matrix:
        return self._red

    @property
    def green_channel(self) -> Matrix:
        return self._green

    @property
    def blue_channel(self) -> Matrix:
        return self._blue

    @classmethod
    def from_ppm(cls, text: str) -> Image:
        """Read an image in plain PPM format; any whitespace separates the values."""
        tokens = iter(text.split())

        def next_int(what: str) -> int:
            try:
                token = next(tokens)
            except StopIteration:
                raise PpmError(f"unexpected end of data while reading {what}") from None
            try:
                return int(token)
            except ValueError:
                raise PpmError(f"invalid {what}: {token!r}") from None

        header = next(tokens, None)
        if header != "P3":
            raise PpmError(f"expected header 'P3', got {header!r}")
        width = next_int("width")
        height = next_int("height")
        next_int("maximum value")
        if width <= 0 or height <= 0:
            raise PpmError(f"image dimensions must be positive, got {width}x{height}")

        img = cls(width, height)
        for row in range(height):
            for column in range(width):
                img[row, column] = Pixel(
                    next_int("red value"), next_int("green value"), next_int("blue value")
                )
        return img

    def _pixel_rows(self) -> Iterator[list[Pixel]]:
        for row in range(self._height):
            yield [self[row, column] for column in range(self._width)]

    def to_ppm(self) -> str:
        """Return the image in plain PPM format, each value followed by a space."""
        parts = [f"P3\n{self._width} {self._height}\n255\n"]
        for row in self._pixel_rows():
            parts.append("".join(f"{p.r} {p.g} {p.b} " for p in row) + "\n")
        return "".join(parts)

    def __getitem__(self, key: tuple[int, int]) -> Pixel:
        return Pixel(self._red[key], self._green[key], self._blue[key])

    def __setitem__(self, key: tuple[int, int], color: Pixel) -> None:
        r, g, b = color
        self._red[key] = r
        self._green[key] = g
        self._blue[key] = b

    def fill(self, color: Pixel) -> None:
        """Set every pixel to ``color``."""
        r, g, b = color
        self._red.fill(r)
        self._green.fill(g)
        self._blue.fill(b)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (
            self._red == other._red
            and self._green == other._green
            and self._blue == other._blue
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Image(width={self._width}, height={self._height})"