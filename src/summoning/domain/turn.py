"""Turn rotation for summoning games."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from summoning.errors import ConfigurationError, DegenerateTurnStateError

from .enums import PlayerType
from .models import PlayerID, TurnState
from .rules_config import DEFAULT_RULES, RulesConfig

logger = logging.getLogger(__name__)


def validate_roster(
    roster: Sequence[PlayerType],
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> tuple[PlayerType, ...]:
    """Check a roster at setup time and return it as an immutable tuple."""

    if len(roster) != rules.turn.player_count:
        raise ConfigurationError(
            f"roster must list {rules.turn.player_count} seats, got {len(roster)}"
        )
    if all(kind == PlayerType.NOT_ACTIVE for kind in roster):
        raise ConfigurationError("roster has no active players")
    return tuple(PlayerType(kind) for kind in roster)


def first_active_player(roster: Sequence[PlayerType]) -> PlayerID:
    """Return the lowest-numbered active seat."""

    for seat, kind in enumerate(roster, start=1):
        if kind != PlayerType.NOT_ACTIVE:
            return PlayerID(seat)
    raise ConfigurationError("roster has no active players")


def start_turns(
    roster: Sequence[PlayerType],
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> TurnState:
    """Create the turn state for a new game."""

    checked = validate_roster(roster, rules=rules)
    return TurnState(current_player=first_active_player(checked), roster=checked)


def next_player(turn: TurnState) -> PlayerID:
    """Return the player after ``turn.current_player``, skipping inactive seats.

    Raises ``DegenerateTurnStateError`` if a full cycle finds nobody active.
    """

    start = turn.current_player
    candidate = start
    while True:
        candidate = PlayerID(candidate % turn.player_count + 1)
        if turn.is_active(candidate):
            return candidate
        if candidate == start:
            logger.error("no active players found while rotating from player %d", start)
            raise DegenerateTurnStateError("no active players in roster")


def advance(turn: TurnState, upcoming: PlayerID | None = None) -> PlayerID:
    """Hand the turn to the next active player and return them.

    ``upcoming`` is a result of :func:`next_player` computed earlier for the
    same turn, letting callers find out about a degenerate roster before
    they change anything else.
    """

    previous = turn.current_player
    turn.current_player = next_player(turn) if upcoming is None else upcoming
    logger.debug("turn passes from player %d to player %d", previous, turn.current_player)
    return turn.current_player
