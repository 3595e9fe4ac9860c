from pydantic import BaseModel, ConfigDict, Field

from summoning.domain.enums import MapSpaceContents
from summoning.domain.models import MapSpace
from summoning.utils.hex_math import HexGrid


class MapSpaceRead(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0, description="Linear board index")
    row: int = Field(..., ge=0, description="Board row (grows towards north)")
    col: int = Field(..., ge=0, description="Board column")
    contents: MapSpaceContents = Field(
        ..., description="What occupies the cell (not_in_map/blocked/playable)"
    )
    owner: int = Field(default=0, ge=0, description="Owning player, 0 if unowned")
    power: int = Field(default=0, ge=0, description="Circle power, 0 if unowned")

    @classmethod
    def from_space(cls, space: MapSpace, grid: HexGrid) -> "MapSpaceRead":
        row, col = grid.row_col(space.index)
        return cls(
            index=space.index,
            row=row,
            col=col,
            contents=space.contents,
            owner=int(space.owner),
            power=space.power,
        )
