"""Board generation and directional queries."""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Sequence

from summoning.errors import ConfigurationError, InvalidPowerError
from summoning.utils.hex_math import INVALID, HexGrid
from summoning.utils.rng import gen_ratio, random_index

from .enums import Direction, MapSpaceContents, PlayerType, SearchPolicy
from .models import UNOWNED, GameMap, MapSpace, PlayerID
from .rules_config import DEFAULT_RULES, RulesConfig
from .turn import validate_roster

logger = logging.getLogger(__name__)


def generate(
    rng: random.Random,
    roster: Sequence[PlayerType],
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> GameMap:
    """Build a fresh board and seat every active player on it.

    Cells within ``rules.map.region_radius`` of the board centre join the map;
    each of those is blocked with the configured odds and playable otherwise.
    Active seats, in roster order, then each claim a distinct random playable
    cell at the starting power.
    """

    checked = validate_roster(roster, rules=rules)
    grid = HexGrid(rules.map.size)
    game_map = GameMap.empty(grid)

    for space in game_map:
        x, z = grid.world_position(space.index)
        if math.hypot(x, z) >= rules.map.region_radius:
            continue
        if gen_ratio(rng, rules.map.blocked_numerator, rules.map.blocked_denominator):
            space.contents = MapSpaceContents.BLOCKED
        else:
            space.contents = MapSpaceContents.PLAYABLE

    candidates = [space.index for space in game_map if space.is_playable]
    active = [
        PlayerID(seat)
        for seat, kind in enumerate(checked, start=1)
        if kind != PlayerType.NOT_ACTIVE
    ]
    if len(candidates) < len(active):
        raise ConfigurationError(
            f"only {len(candidates)} playable cells for {len(active)} active players"
        )

    for player in active:
        selected = candidates.pop(random_index(rng, len(candidates)))
        set_occupant(
            game_map.spaces[selected],
            player,
            rules.map.starting_power,
            rules=rules,
        )
        logger.debug("player %d starts at cell %d", player, selected)

    logger.debug(
        "generated %dx%d board: %d playable, %d blocked",
        grid.size,
        grid.size,
        len(game_map.cells_with(MapSpaceContents.PLAYABLE)),
        len(game_map.cells_with(MapSpaceContents.BLOCKED)),
    )
    return game_map


def set_occupant(
    space: MapSpace,
    owner: int,
    power: int,
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> None:
    """Write an owner/power pair to a cell after checking the cell invariants."""

    if owner == UNOWNED:
        if power != 0:
            raise InvalidPowerError(f"unowned cell {space.index} cannot hold power {power}")
    else:
        if not space.is_playable:
            raise InvalidPowerError(f"cell {space.index} is {space.contents} and cannot be owned")
        if not 1 <= power <= rules.split.max_power:
            raise InvalidPowerError(
                f"power {power} for cell {space.index} is outside 1..{rules.split.max_power}"
            )
    space.owner = PlayerID(owner)
    space.power = power


def neighbor_in_direction(game_map: GameMap, index: int, direction: Direction) -> int:
    """Adjacent cell in ``direction``, or ``INVALID`` if off-board or not in the map."""

    neighbor = game_map.grid.neighbor(index, direction)
    if neighbor == INVALID:
        return INVALID
    if game_map.spaces[neighbor].contents == MapSpaceContents.NOT_IN_MAP:
        return INVALID
    return neighbor


def search_in_direction(
    game_map: GameMap,
    index: int,
    direction: Direction,
    *,
    policy: SearchPolicy = SearchPolicy.SKIP_BLOCKED,
) -> int:
    """Walk from ``index`` in ``direction`` looking for a playable cell.

    Returns the first playable cell reached. Returns ``index`` itself when
    no step can be taken at all (and, under ``ADJACENT_ONLY``, when the
    adjacent cell is blocked). Returns ``INVALID`` when the walk leaves the
    map after passing over blocked cells. The walk never takes more than
    ``grid.size`` steps.
    """

    if not game_map.grid.contains(index):
        return INVALID

    current = index
    for step in range(game_map.grid.size):
        following = neighbor_in_direction(game_map, current, direction)
        if following == INVALID:
            return index if step == 0 else INVALID
        if game_map.spaces[following].is_playable:
            return following
        if policy == SearchPolicy.ADJACENT_ONLY:
            return index
        current = following
    return INVALID


def has_target(index: int, found: int) -> bool:
    """True when a search result from ``index`` names a real target cell."""

    return found not in (index, INVALID)
