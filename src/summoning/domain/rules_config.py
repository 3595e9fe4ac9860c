"""Declarative rule configuration for the summoning domain."""

from __future__ import annotations

from dataclasses import dataclass, field

from .enums import PlayerType, SearchPolicy

N_PLAYERS = 4


@dataclass(frozen=True, slots=True)
class MapRules:
    """Board generation constants."""

    size: int = 10
    region_radius: float = 100.0  # world units from the board centre
    blocked_numerator: int = 1
    blocked_denominator: int = 8  # 1-in-8 cells are obstacles
    starting_power: int = 16


@dataclass(frozen=True, slots=True)
class SplitRules:
    """Power limits and directional search behaviour."""

    max_power: int = 20  # one visual tier per power level
    min_source_power: int = 2
    search_policy: SearchPolicy = SearchPolicy.SKIP_BLOCKED


@dataclass(frozen=True, slots=True)
class TurnRules:
    """Roster defaults for new games."""

    player_count: int = N_PLAYERS
    default_roster: tuple[PlayerType, ...] = field(
        default=(
            PlayerType.LOCAL,
            PlayerType.AI,
            PlayerType.LOCAL,
            PlayerType.LOCAL,
        )
    )


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Top-level configuration container for all subsystems."""

    map: MapRules = MapRules()
    split: SplitRules = SplitRules()
    turn: TurnRules = TurnRules()


DEFAULT_RULES = RulesConfig()
