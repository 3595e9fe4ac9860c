from pydantic import BaseModel, ConfigDict, Field

from summoning.domain.enums import PlayerType
from summoning.domain.models import GameState

from .map_space import MapSpaceRead


class GameSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    size: int = Field(..., gt=0, description="Side length of the square board")
    current_player: int = Field(..., ge=1, description="Player whose turn it is (1-based)")
    roster: list[PlayerType] = Field(..., description="Seat activity flags, seat 1 first")
    cells: list[MapSpaceRead] = Field(..., description="Every board cell in index order")

    @classmethod
    def from_state(cls, state: GameState) -> "GameSnapshot":
        grid = state.map.grid
        return cls(
            size=grid.size,
            current_player=int(state.current_player),
            roster=list(state.turn.roster),
            cells=[MapSpaceRead.from_space(space, grid) for space in state.map],
        )

    def cell(self, index: int) -> MapSpaceRead:
        return self.cells[index]

    def power_by_player(self) -> dict[int, int]:
        """Total power held by each player that owns at least one cell."""

        totals: dict[int, int] = {}
        for cell in self.cells:
            if cell.owner:
                totals[cell.owner] = totals.get(cell.owner, 0) + cell.power
        return totals
