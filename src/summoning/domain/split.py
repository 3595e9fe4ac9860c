"""The split rule: move part of a circle's power into an empty cell."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from summoning.errors import (
    InsufficientPower,
    NoEffect,
    NotYourCell,
    NoValidTarget,
    TargetOccupied,
)

from .board import has_target, search_in_direction, set_occupant
from .enums import Direction
from .events import CellChanged, EventQueue
from .models import GameState, PlayerID

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SplitCommand:
    """A requested split. ``fraction`` must already be clamped to [0, 1]."""

    source: int
    direction: Direction
    fraction: float


@dataclass(frozen=True, slots=True)
class SplitCandidate:
    """A source/direction pair that currently has a legal target."""

    source: int
    direction: Direction
    target: int


@dataclass(frozen=True, slots=True)
class SplitOutcome:
    """What a committed split changed."""

    source: int
    target: int
    direction: Direction
    moved: int
    remaining: int
    player: PlayerID


def calc_split(fraction: float, power: int) -> int:
    """Power moved by a split: ``floor(fraction * (power - 1))``.

    The result is clamped so the source always keeps at least one.
    """

    available = max(power - 1, 0)
    count = math.floor(fraction * available)
    return min(max(count, 0), available)


def resolve_target(state: GameState, source: int, direction: Direction) -> int:
    """Check every split precondition except the amount and return the target.

    Raises a :class:`~summoning.errors.MoveError` subclass on the first
    violated precondition. Nothing is mutated.
    """

    game_map = state.map
    if not game_map.grid.contains(source):
        raise NoValidTarget(f"cell {source} is not on the board")

    space = game_map.spaces[source]
    if space.owner != state.current_player:
        raise NotYourCell(f"cell {source} does not belong to player {state.current_player}")
    if space.power < state.rules.split.min_source_power:
        raise InsufficientPower(f"cell {source} has only {space.power} power")

    target = search_in_direction(
        game_map, source, direction, policy=state.rules.split.search_policy
    )
    if not has_target(source, target):
        raise NoValidTarget(f"nothing to split into {direction} of cell {source}")
    occupant = game_map.spaces[target].owner
    if occupant:
        raise TargetOccupied(f"cell {target} already belongs to player {occupant}")
    return target


def apply_split(
    state: GameState,
    command: SplitCommand,
    *,
    events: EventQueue | None = None,
) -> SplitOutcome:
    """Validate and commit a split for the current player.

    On success the target is claimed with the moved power, the source keeps
    the rest, and one ``CellChanged`` per cell is queued (target first).
    Turn rotation is left to the caller.
    """

    target = resolve_target(state, command.source, command.direction)
    source_space = state.map.spaces[command.source]
    target_space = state.map.spaces[target]

    moved = calc_split(command.fraction, source_space.power)
    if moved == 0:
        raise NoEffect(
            f"fraction {command.fraction:.2f} of {source_space.power} power moves nothing"
        )
    remaining = source_space.power - moved
    player = state.current_player

    set_occupant(target_space, player, moved, rules=state.rules)
    set_occupant(source_space, player, remaining, rules=state.rules)

    if events is not None:
        events.emit(CellChanged(target))
        events.emit(CellChanged(command.source))

    logger.info(
        "player %d split %d power from cell %d to cell %d",
        player,
        moved,
        command.source,
        target,
    )
    return SplitOutcome(
        source=command.source,
        target=target,
        direction=command.direction,
        moved=moved,
        remaining=remaining,
        player=player,
    )


def can_act_from(state: GameState, index: int) -> bool:
    """True when the current player could start a split from ``index``."""

    if not state.map.grid.contains(index):
        return False
    space = state.map.spaces[index]
    return (
        space.is_playable
        and space.owner == state.current_player
        and space.power >= state.rules.split.min_source_power
    )


def preview_targets(state: GameState, index: int) -> dict[Direction, int]:
    """Search results in every direction that has a target, for hover previews."""

    if not can_act_from(state, index):
        return {}
    previews: dict[Direction, int] = {}
    for direction in Direction:
        found = search_in_direction(
            state.map, index, direction, policy=state.rules.split.search_policy
        )
        if has_target(index, found):
            previews[direction] = found
    return previews


def preview_split(state: GameState, source: int, fraction: float) -> tuple[int, int]:
    """Return ``(remaining, moved)`` for a split in progress."""

    power = state.map.cell_at(source).power
    moved = calc_split(fraction, power)
    return power - moved, moved


def legal_moves(state: GameState) -> list[SplitCandidate]:
    """Every source/direction the current player could split into right now."""

    candidates: list[SplitCandidate] = []
    for space in state.map.owned_by(state.current_player):
        for direction, target in preview_targets(state, space.index).items():
            if not state.map.spaces[target].is_owned:
                candidates.append(SplitCandidate(space.index, direction, target))
    return candidates
