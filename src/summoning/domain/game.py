"""Game session: the single owner of a game's state.

Presentation talks to the core only through :class:`GameSession`. Queries
return plain indices or frozen snapshots; the one command, :meth:`apply_split`,
either commits completely and publishes its events or raises a
:class:`~summoning.errors.MoveError` leaving the board and the event queue
untouched.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from summoning.errors import MoveError
from summoning.schemas import GameSnapshot, MapSpaceRead
from summoning.utils.rng import make_rng

from . import board, split, turn
from .enums import Direction, PlayerType
from .events import CellChanged, EventHandler, EventQueue, GameEvent, TurnAdvanced
from .models import GameState, PlayerID
from .rules_config import DEFAULT_RULES, RulesConfig

if TYPE_CHECKING:
    from summoning.interfaces import ISplitPolicy

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GameSession:
    """Owns one :class:`GameState` and the queue of events it produces."""

    state: GameState
    events: EventQueue = field(default_factory=EventQueue)
    history: list[split.SplitOutcome] = field(default_factory=list)

    @classmethod
    def new(
        cls,
        seed: random.Random | int | str | None = None,
        roster: Sequence[PlayerType] | None = None,
        *,
        rules: RulesConfig = DEFAULT_RULES,
    ) -> GameSession:
        """Generate a board and queue the events that prime presentation.

        One ``CellChanged`` is queued per starting circle, followed by
        ``TurnAdvanced`` for the starting player. They are delivered by the
        next :meth:`publish_pending` (or the first committed split).
        """

        rng = seed if isinstance(seed, random.Random) else make_rng(seed)
        turns = turn.start_turns(
            roster if roster is not None else rules.turn.default_roster, rules=rules
        )
        game_map = board.generate(rng, turns.roster, rules=rules)
        session = cls(state=GameState(map=game_map, turn=turns, rules=rules))

        for player in turns.active_players:
            for space in game_map.owned_by(player):
                session.events.emit(CellChanged(space.index))
        session.events.emit(TurnAdvanced(turns.current_player))

        logger.info(
            "new game: %d active players, player %d starts",
            len(turns.active_players),
            turns.current_player,
        )
        return session

    # --- events ------------------------------------------------------------

    def subscribe(self, handler: EventHandler) -> None:
        self.events.subscribe(handler)

    def unsubscribe(self, handler: EventHandler) -> None:
        self.events.unsubscribe(handler)

    def publish_pending(self) -> list[GameEvent]:
        return self.events.flush()

    # --- queries -----------------------------------------------------------

    @property
    def current_player(self) -> PlayerID:
        return self.state.current_player

    @property
    def current_player_kind(self) -> PlayerType:
        return self.state.turn.activity(self.state.current_player)

    def cell_at(self, index: int) -> MapSpaceRead:
        return MapSpaceRead.from_space(self.state.map.cell_at(index), self.state.map.grid)

    def neighbor_in_direction(self, index: int, direction: Direction) -> int:
        return board.neighbor_in_direction(self.state.map, index, direction)

    def search_in_direction(self, index: int, direction: Direction) -> int:
        return board.search_in_direction(
            self.state.map, index, direction, policy=self.state.rules.split.search_policy
        )

    def preview_targets(self, index: int) -> dict[Direction, int]:
        return split.preview_targets(self.state, index)

    def preview_split(self, source: int, fraction: float) -> tuple[int, int]:
        return split.preview_split(self.state, source, fraction)

    def legal_moves(self) -> list[split.SplitCandidate]:
        return split.legal_moves(self.state)

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot.from_state(self.state)

    # --- commands ----------------------------------------------------------

    def apply_split(
        self,
        source: int,
        direction: Direction | str,
        fraction: float,
    ) -> split.SplitOutcome:
        """Split ``fraction`` of the power at ``source`` towards ``direction``.

        ``fraction`` must already be clamped to ``[0, 1]``. On success the
        cell events and then ``TurnAdvanced`` are published before returning.
        """

        command = split.SplitCommand(source, Direction(direction), fraction)
        upcoming = turn.next_player(self.state.turn)
        try:
            outcome = split.apply_split(self.state, command, events=self.events)
        except MoveError as exc:
            logger.debug("rejected split from cell %d %s: %s", source, command.direction, exc)
            raise

        next_player = turn.advance(self.state.turn, upcoming)
        self.events.emit(TurnAdvanced(next_player))
        self.history.append(outcome)
        self.events.flush()
        return outcome

    def try_split(
        self,
        source: int,
        direction: Direction | str,
        fraction: float,
    ) -> split.SplitOutcome | None:
        """Like :meth:`apply_split` but a rejected move simply returns None."""

        try:
            return self.apply_split(source, direction, fraction)
        except MoveError:
            return None

    def play_policy(self, policy: ISplitPolicy) -> split.SplitOutcome | None:
        """Let ``policy`` choose a move for the current player and apply it."""

        command = policy.choose_split(self.snapshot(), self.legal_moves())
        if command is None:
            logger.info("player %d makes no move", self.current_player)
            return None
        return self.try_split(command.source, command.direction, command.fraction)
