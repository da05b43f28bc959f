"""Image rotation and content-aware resizing by seam carving."""

from __future__ import annotations

from workbench.imaging.image import Image, Pixel
from workbench.imaging.matrix import Matrix


def rotate_left(img: Image) -> Image:
    """Return ``img`` rotated 90 degrees counterclockwise."""
    width, height = img.width, img.height
    rotated = Image(height, width)
    for row in range(height):
        for column in range(width):
            rotated[width - 1 - column, row] = img[row, column]
    return rotated


def rotate_right(img: Image) -> Image:
    """Return ``img`` rotated 90 degrees clockwise."""
    width, height = img.width, img.height
    rotated = Image(height, width)
    for row in range(height):
        for column in range(width):
            rotated[column, height - 1 - row] = img[row, column]
    return rotated


def _squared_difference(p1: Pixel, p2: Pixel) -> int:
    # Scaled down by 100 to keep accumulated costs small.
    return sum((b - a) ** 2 for a, b in zip(p1, p2)) // 100


def compute_energy_matrix(img: Image) -> Matrix:
    """Return the energy of every pixel; border pixels get the largest interior energy."""
    width, height = img.width, img.height
    energy = Matrix(width, height)
    max_energy = 0
    for row in range(1, height - 1):
        for column in range(1, width - 1):
            value = _squared_difference(
                img[row - 1, column], img[row + 1, column]
            ) + _squared_difference(img[row, column - 1], img[row, column + 1])
            energy[row, column] = value
            max_energy = max(max_energy, value)
    energy.fill_border(max_energy)
    return energy


def _neighbour_window(column: int, width: int) -> tuple[int, int]:
    """Return the half-open column range adjacent to ``column`` in the row above."""
    if column == 0:
        return 0, 2
    if column == width - 1:
        return width - 2, width
    return column - 1, column + 2


def compute_vertical_cost_matrix(energy: Matrix) -> Matrix:
    """Return the cumulative cost of the cheapest vertical path reaching each element."""
    width, height = energy.width, energy.height
    cost = Matrix(width, height)
    for column in range(width):
        cost[0, column] = energy[0, column]
    for row in range(1, height):
        for column in range(width):
            start, end = _neighbour_window(column, width)
            cost[row, column] = energy[row, column] + cost.min_value_in_row(row - 1, start, end)
    return cost


def find_minimal_vertical_seam(cost: Matrix) -> list[int]:
    """Return the column of each row, top to bottom, along the cheapest vertical seam.

    Ties are broken towards the leftmost column.
    """
    width = cost.width
    last_row = cost.height - 1
    seam = [cost.column_of_min_value_in_row(last_row, 0, width)]
    for row in range(last_row - 1, -1, -1):
        start, end = _neighbour_window(seam[-1], width)
        seam.append(cost.column_of_min_value_in_row(row, start, end))
    seam.reverse()
    return seam


def remove_vertical_seam(img: Image, seam: list[int]) -> Image:
    """Return a copy of ``img`` one column narrower, without the pixel ``seam[row]`` in each row."""
    if len(seam) != img.height:
        raise ValueError(f"seam has {len(seam)} entries, image height is {img.height}")
    old_width = img.width
    carved = Image(old_width - 1, img.height)
    for row, seam_column in enumerate(seam):
        if not 0 <= seam_column < old_width:
            raise ValueError(f"seam column {seam_column} out of range for width {old_width}")
        kept = (column for column in range(old_width) if column != seam_column)
        for new_column, column in enumerate(kept):
            carved[row, new_column] = img[row, column]
    return carved


def seam_carve_width(img: Image, new_width: int) -> Image:
    """Return ``img`` narrowed to ``new_width`` by repeatedly removing the cheapest seam."""
    if not 0 < new_width <= img.width:
        raise ValueError(f"new width {new_width} must be in 1..{img.width}")
    while img.width > new_width:
        cost = compute_vertical_cost_matrix(compute_energy_matrix(img))
        img = remove_vertical_seam(img, find_minimal_vertical_seam(cost))
    return img


def seam_carve_height(img: Image, new_height: int) -> Image:
    """Return ``img`` shortened to ``new_height`` by seam carving."""
    if not 0 < new_height <= img.height:
        raise ValueError(f"new height {new_height} must be in 1..{img.height}")
    return rotate_right(seam_carve_width(rotate_left(img), new_height))


def seam_carve(img: Image, new_width: int, new_height: int) -> Image:
    """Return ``img`` reduced to ``new_width`` by ``new_height``."""
    if not 0 < new_width <= img.width:
        raise ValueError(f"new width {new_width} must be in 1..{img.width}")
    if not 0 < new_height <= img.height:
        raise ValueError(f"new height {new_height} must be in 1..{img.height}")
    return seam_carve_height(seam_carve_width(img, new_width), new_height)