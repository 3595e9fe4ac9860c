from .game import GameSnapshot
from .map_space import MapSpaceRead

__all__ = [
    "GameSnapshot",
    "MapSpaceRead",
]
