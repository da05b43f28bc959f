"""A rectangular grid of integers stored in row-major order."""

from __future__ import annotations

from collections.abc import Iterator


class Matrix:
    """A ``width`` by ``height`` grid of integers, indexed as ``m[row, column]``."""

    __slots__ = ("_width", "_height", "_data")

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"matrix dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._data = [0] * (width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _index(self, key: tuple[int, int]) -> int:
        row, column = key
        if not 0 <= row < self._height:
            raise IndexError(f"row {row} out of range for height {self._height}")
        if not 0 <= column < self._width:
            raise IndexError(f"column {column} out of range for width {self._width}")
        return row * self._width + column

    def __getitem__(self, key: tuple[int, int]) -> int:
        return self._data[self._index(key)]

    def __setitem__(self, key: tuple[int, int], value: int) -> None:
        self._data[self._index(key)] = value

    def _rows(self) -> Iterator[list[int]]:
        for start in range(0, len(self._data), self._width):
            yield self._data[start:start + self._width]

    def __str__(self) -> str:
        lines = [f"{self._width} {self._height}\n"]
        lines.extend("".join(f"{value} " for value in row) + "\n" for row in self._rows())
        return "".join(lines)

    def __repr__(self) -> str:
        return f"Matrix(width={self._width}, height={self._height})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._data == other._data
        )

    __hash__ = None  # type: ignore[assignment]

    def fill(self, value: int) -> None:
        """Set every element to ``value``."""
        self._data = [value] * (self._width * self._height)

    def fill_border(self, value: int) -> None:
        """Set every element in the first/last row and first/last column to ``value``."""
        last_row = self._height - 1
        last_column = self._width - 1
        for column in range(self._width):
            self[0, column] = value
            self[last_row, column] = value
        for row in range(1, last_row):
            self[row, 0] = value
            self[row, last_column] = value

    def max(self) -> int:
        """Return the largest element."""
        return max(self._data)

    def _check_region(self, row: int, column_start: int, column_end: int) -> None:
        if not 0 <= row < self._height:
            raise IndexError(f"row {row} out of range for height {self._height}")
        if column_start < 0 or column_end > self._width:
            raise IndexError(
                f"columns [{column_start}, {column_end}) out of range for width {self._width}"
            )
        if column_start >= column_end:
            raise ValueError(f"empty column range [{column_start}, {column_end})")

    def column_of_min_value_in_row(self, row: int, column_start: int, column_end: int) -> int:
        """Return the leftmost column in ``[column_start, column_end)`` holding the row's minimum."""
        self._check_region(row, column_start, column_end)
        return min(range(column_start, column_end), key=lambda column: self[row, column])

    def min_value_in_row(self, row: int, column_start: int, column_end: int) -> int:
        """Return the minimum of the row over columns ``[column_start, column_end)``."""
        self._check_region(row, column_start, column_end)
        base = row * self._width
        return min(self._data[base + column_start:base + column_end])