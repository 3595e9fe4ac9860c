"""Dataclasses describing the summoning board and turn state.

These types are the in-memory state of a single game. Rule modules
(:mod:`board`, :mod:`split`, :mod:`turn`) operate on them directly;
presentation only ever sees them through :mod:`summoning.schemas` snapshots.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import NewType

from summoning.utils.hex_math import HexGrid

from .enums import MapSpaceContents, PlayerType
from .rules_config import DEFAULT_RULES, RulesConfig

PlayerID = NewType("PlayerID", int)

UNOWNED = PlayerID(0)


@dataclass(slots=True)
class MapSpace:
    """One board cell."""

    index: int
    contents: MapSpaceContents = MapSpaceContents.NOT_IN_MAP
    owner: PlayerID = UNOWNED
    power: int = 0

    @property
    def is_playable(self) -> bool:
        return self.contents == MapSpaceContents.PLAYABLE

    @property
    def is_owned(self) -> bool:
        return self.owner != UNOWNED


@dataclass(slots=True)
class GameMap:
    """Fixed array of cells plus one opaque presentation handle per cell."""

    grid: HexGrid
    spaces: list[MapSpace]
    visuals: list[object | None] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.spaces) != self.grid.cell_count:
            msg = f"expected {self.grid.cell_count} spaces, got {len(self.spaces)}"
            raise ValueError(msg)
        for position, space in enumerate(self.spaces):
            if space.index != position:
                raise ValueError(f"space at position {position} has index {space.index}")
        if not self.visuals:
            self.visuals = [None] * len(self.spaces)
        elif len(self.visuals) != len(self.spaces):
            msg = f"expected {len(self.spaces)} visual handles, got {len(self.visuals)}"
            raise ValueError(msg)

    @classmethod
    def empty(cls, grid: HexGrid) -> GameMap:
        """Build a board where every cell is ``NotInMap``."""

        return cls(grid=grid, spaces=[MapSpace(index=i) for i in range(grid.cell_count)])

    def __len__(self) -> int:
        return len(self.spaces)

    def __iter__(self) -> Iterator[MapSpace]:
        return iter(self.spaces)

    def cell_at(self, index: int) -> MapSpace:
        if not self.grid.contains(index):
            raise IndexError(f"no cell at index {index}")
        return self.spaces[index]

    def cells_with(self, contents: MapSpaceContents) -> list[MapSpace]:
        return [space for space in self.spaces if space.contents == contents]

    def owned_by(self, player: int) -> list[MapSpace]:
        return [space for space in self.spaces if space.owner == player]

    # Presentation handles are stored, never inspected.

    def attach_visual(self, index: int, handle: object) -> None:
        self.cell_at(index)
        self.visuals[index] = handle

    def detach_visual(self, index: int) -> object | None:
        self.cell_at(index)
        handle = self.visuals[index]
        self.visuals[index] = None
        return handle

    def visual_at(self, index: int) -> object | None:
        self.cell_at(index)
        return self.visuals[index]


@dataclass(slots=True)
class TurnState:
    """Whose turn it is, plus the fixed roster of seat activity flags.

    Players are 1-based: seat ``roster[0]`` is player 1.
    """

    current_player: PlayerID
    roster: tuple[PlayerType, ...]

    @property
    def player_count(self) -> int:
        return len(self.roster)

    def activity(self, player: int) -> PlayerType:
        if not 1 <= player <= self.player_count:
            raise IndexError(f"no player {player} in a roster of {self.player_count}")
        return self.roster[player - 1]

    def is_active(self, player: int) -> bool:
        return self.activity(player) != PlayerType.NOT_ACTIVE

    @property
    def active_players(self) -> list[PlayerID]:
        return [
            PlayerID(seat)
            for seat, kind in enumerate(self.roster, start=1)
            if kind != PlayerType.NOT_ACTIVE
        ]


@dataclass(slots=True)
class GameState:
    """Root aggregate for one game, passed explicitly to every rule."""

    map: GameMap
    turn: TurnState
    rules: RulesConfig = DEFAULT_RULES

    @property
    def current_player(self) -> PlayerID:
        return self.turn.current_player
