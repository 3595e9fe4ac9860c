"""
Hexagonal grid mathematics for the summoning board.

The board is a square array of ``MAP_SZ`` x ``MAP_SZ`` cells stored in a flat
list. Every cell is addressed by a single linear index:

    index = row * MAP_SZ + col

Layout:
-------
Cells are flat-topped hexes laid out in "offset columns": columns sit
``1.5`` hex sizes apart, rows sit ``sqrt(3)`` apart, and odd columns are
shifted by half a row height. Because of that shift the row delta of the
four diagonal neighbors depends on the parity of the column, so neighbor
lookup is table driven per parity.

Rows grow towards ``North``. In world space that is the ``-z`` direction,
which is also what the drag-angle mapping below assumes.

References:
-----------
Offset coordinates as described at https://www.redblobgames.com/grids/hexagons/
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from summoning.domain.enums import Direction

MAP_SZ = 10
"""Side length of the square board."""

INVALID = -1
"""Sentinel index meaning "no such cell". Never a valid list position."""

HEX_SZ = 1.0

_SQRT3 = math.sqrt(3.0)

# (drow, dcol) per direction, indexed by column parity (0 = even, 1 = odd)
_NEIGHBOR_DELTAS: dict[Direction, tuple[tuple[int, int], tuple[int, int]]] = {
    Direction.NORTH: ((1, 0), (1, 0)),
    Direction.NORTH_EAST: ((1, 1), (0, 1)),
    Direction.SOUTH_EAST: ((0, 1), (-1, 1)),
    Direction.SOUTH: ((-1, 0), (-1, 0)),
    Direction.SOUTH_WEST: ((0, -1), (-1, -1)),
    Direction.NORTH_WEST: ((1, -1), (0, -1)),
}

# Sector order used when turning a drag angle into a direction
_DRAG_SECTORS: tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.NORTH_EAST,
    Direction.SOUTH_EAST,
    Direction.SOUTH,
    Direction.SOUTH_WEST,
    Direction.NORTH_WEST,
)

DRAG_DEAD_ZONE = 1.0
DRAG_FULL_SPLIT_DISTANCE = 3.0


@dataclass(frozen=True, slots=True)
class HexGrid:
    """
    Coordinate and adjacency math for a square offset-hex board.

    Attributes:
        size: Number of rows (and columns) on the board

    Example:
        >>> grid = HexGrid()
        >>> grid.row_col(23)
        (2, 3)
        >>> grid.neighbor(23, Direction.NORTH)
        33
    """

    size: int = MAP_SZ

    def __post_init__(self) -> None:
        if self.size < 1:
            msg = f"Grid size must be positive, got {self.size}"
            raise ValueError(msg)

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    def contains(self, index: int) -> bool:
        """Return True when ``index`` addresses a cell of this grid."""
        return 0 <= index < self.cell_count

    def row_col(self, index: int) -> tuple[int, int]:
        """
        Split a linear index into ``(row, col)``.

        Args:
            index: Linear cell index

        Returns:
            A ``(row, col)`` tuple

        Raises:
            IndexError: If the index is outside the grid
        """
        if not self.contains(index):
            msg = f"Index {index} is outside a {self.size}x{self.size} grid"
            raise IndexError(msg)
        return index // self.size, index % self.size

    def index_of(self, row: int, col: int) -> int:
        """Inverse of :meth:`row_col`; returns ``INVALID`` when off-board."""
        if not (0 <= row < self.size and 0 <= col < self.size):
            return INVALID
        return row * self.size + col

    def world_position(self, index: int) -> tuple[float, float]:
        """
        Map a cell to planar world coordinates ``(x, z)``.

        The board is centred on the origin. Odd columns are pushed half a
        row height along ``+z``.

        Example:
            >>> x, z = HexGrid().world_position(0)
            >>> round(x, 2), round(z, 2)
            (-6.75, 8.66)
        """
        row, col = self.row_col(index)
        offset = HEX_SZ * _SQRT3 / 2.0 if col % 2 == 1 else 0.0
        x = (col - (self.size - 1) / 2.0) * (HEX_SZ * 1.5)
        z = (self.size / 2.0 - row) * (HEX_SZ * _SQRT3) + offset
        return x, z

    def neighbor(self, index: int, direction: Direction) -> int:
        """
        Return the adjacent index in ``direction``.

        Args:
            index: Starting cell
            direction: One of the six hex directions

        Returns:
            The neighbor's index, or ``INVALID`` if the neighbor would fall
            outside the board (or ``index`` itself is not on the board)
        """
        if not self.contains(index):
            return INVALID
        row, col = divmod(index, self.size)
        drow, dcol = neighbor_delta(direction, col)
        return self.index_of(row + drow, col + dcol)

    def neighbors(self, index: int) -> dict[Direction, int]:
        """All six neighbor lookups for ``index`` (values may be ``INVALID``)."""
        return {direction: self.neighbor(index, direction) for direction in Direction}


def neighbor_delta(direction: Direction, col: int) -> tuple[int, int]:
    """Return the ``(drow, dcol)`` step for ``direction`` from column ``col``."""
    return _NEIGHBOR_DELTAS[direction][col % 2]


def direction_from_drag(dx: float, dz: float) -> Direction:
    """
    Pick the hex direction closest to a drag vector in world space.

    The angle of the vector is rotated so that each 60 degree sector lines up
    with one direction, starting with ``North`` (the ``-z`` axis).

    Example:
        >>> direction_from_drag(0.0, -2.0)
        <Direction.NORTH: 'north'>
        >>> direction_from_drag(1.0, 0.5)
        <Direction.SOUTH_EAST: 'south_east'>
    """
    angle = math.degrees(math.atan2(dz, dx)) + 120.0
    if angle < 0.0:
        angle += 360.0
    sector = int(angle // 60.0)
    if 0 <= sector < len(_DRAG_SECTORS):
        return _DRAG_SECTORS[sector]
    return Direction.NORTH


def split_fraction_from_drag(distance: float) -> float:
    """
    Convert a drag distance into a split fraction in ``[0, 1]``.

    The first hex size of travel is a dead zone; the fraction then grows
    linearly and saturates after three more hex sizes.
    """
    fraction = max(distance - DRAG_DEAD_ZONE, 0.0) / DRAG_FULL_SPLIT_DISTANCE
    return min(fraction, 1.0)
