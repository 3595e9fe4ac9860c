"""Enumerations used across the summoning domain."""

from __future__ import annotations

from enum import StrEnum


class MapSpaceContents(StrEnum):
    """What occupies a board cell."""

    NOT_IN_MAP = "not_in_map"
    BLOCKED = "blocked"
    PLAYABLE = "playable"


class Direction(StrEnum):
    """The six hex adjacency directions, clockwise from north."""

    NORTH = "north"
    NORTH_EAST = "north_east"
    SOUTH_EAST = "south_east"
    SOUTH = "south"
    SOUTH_WEST = "south_west"
    NORTH_WEST = "north_west"

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.NORTH_EAST: Direction.SOUTH_WEST,
    Direction.SOUTH_EAST: Direction.NORTH_WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.SOUTH_WEST: Direction.NORTH_EAST,
    Direction.NORTH_WEST: Direction.SOUTH_EAST,
}


class PlayerType(StrEnum):
    """Who controls a roster seat."""

    LOCAL = "local"
    AI = "ai"
    NOT_ACTIVE = "not_active"


class SearchPolicy(StrEnum):
    """How a directional search treats blocked cells."""

    SKIP_BLOCKED = "skip_blocked"
    ADJACENT_ONLY = "adjacent_only"
