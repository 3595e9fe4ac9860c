"""Tests for the game session facade."""

from __future__ import annotations

import copy
import random
from dataclasses import replace

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError

from summoning.domain.board import set_occupant
from summoning.domain.enums import Direction, MapSpaceContents, PlayerType, SearchPolicy
from summoning.domain.events import CellChanged, TurnAdvanced
from summoning.domain.game import GameSession
from summoning.domain.models import GameMap, GameState, PlayerID, TurnState
from summoning.domain.rules_config import DEFAULT_RULES
from summoning.domain.split import SplitCommand
from summoning.errors import (
    ConfigurationError,
    DegenerateTurnStateError,
    NoValidTarget,
    TargetOccupied,
)
from summoning.utils.hex_math import HexGrid

LOCAL = PlayerType.LOCAL
OFF = PlayerType.NOT_ACTIVE


def _session(roster=(LOCAL,) * 4) -> GameSession:
    """Open board with player 1 holding cell 5 and player 2 holding cell 47."""

    game_map = GameMap.empty(HexGrid())
    for space in game_map:
        space.contents = MapSpaceContents.PLAYABLE
    set_occupant(game_map.spaces[5], 1, 10)
    set_occupant(game_map.spaces[47], 2, 10)
    turn = TurnState(current_player=PlayerID(1), roster=tuple(roster))
    return GameSession(state=GameState(map=game_map, turn=turn))


class FirstMovePolicy:
    def __init__(self):
        self.seen = []

    def choose_split(self, snapshot, candidates):
        self.seen.append(snapshot.current_player)
        move = candidates[0]
        return SplitCommand(move.source, move.direction, 1.0)


class PassPolicy:
    def choose_split(self, snapshot, candidates):
        return None


class TestNew:
    def test_setup_events_are_queued_until_published(self):
        session = GameSession.new(7)
        received = []
        session.subscribe(received.append)
        assert received == []

        delivered = session.publish_pending()

        cell_events = [event for event in delivered if isinstance(event, CellChanged)]
        assert len(cell_events) == 4
        assert delivered[-1] == TurnAdvanced(1)
        assert received == delivered
        owned = {cell.index for cell in session.snapshot().cells if cell.owner}
        assert {event.index for event in cell_events} == owned

    def test_first_active_seat_starts(self):
        session = GameSession.new(7, [OFF, OFF, LOCAL, PlayerType.AI])
        assert session.current_player == 3
        assert session.current_player_kind == LOCAL
        assert session.publish_pending()[-1] == TurnAdvanced(3)

    def test_seed_reproduces_board(self):
        first = GameSession.new("12:board").snapshot()
        second = GameSession.new("12:board").snapshot()
        assert first == second

    def test_accepts_a_generator(self):
        session = GameSession.new(random.Random(4))
        assert session.snapshot().size == 10

    def test_no_active_players(self):
        with pytest.raises(ConfigurationError):
            GameSession.new(1, [OFF] * 4)


class TestApplySplit:
    def test_commit_publishes_cells_then_turn(self):
        session = _session()
        received = []
        session.subscribe(received.append)

        outcome = session.apply_split(5, Direction.NORTH, 0.5)

        assert (outcome.target, outcome.moved, outcome.remaining) == (15, 4, 6)
        assert received == [CellChanged(15), CellChanged(5), TurnAdvanced(2)]
        assert session.current_player == 2
        assert session.history == [outcome]

    def test_direction_may_be_given_as_text(self):
        session = _session()
        outcome = session.apply_split(5, "north", 0.5)
        assert outcome.direction == Direction.NORTH

    def test_rejected_split_leaves_no_trace(self):
        session = _session()
        set_occupant(session.state.map.spaces[15], 2, 1)
        received = []
        session.subscribe(received.append)
        before = copy.deepcopy(session.state.map.spaces)

        with pytest.raises(TargetOccupied):
            session.apply_split(5, Direction.NORTH, 0.5)

        assert session.state.map.spaces == before
        assert session.current_player == 1
        assert received == []
        assert session.events.pending == []
        assert session.history == []

    def test_try_split_returns_none_on_rejection(self):
        session = _session()
        assert session.try_split(95, Direction.NORTH, 0.5) is None
        assert session.current_player == 1

    def test_edge_rejection_type(self):
        session = _session()
        set_occupant(session.state.map.spaces[95], 1, 4)
        with pytest.raises(NoValidTarget):
            session.apply_split(95, Direction.NORTH, 0.5)

    def test_inactive_seat_never_gets_a_turn(self):
        session = _session(roster=(LOCAL, OFF, LOCAL, OFF))
        set_occupant(session.state.map.spaces[60], 3, 10)
        session.apply_split(5, Direction.NORTH, 0.5)
        assert session.current_player == 3
        session.apply_split(60, Direction.NORTH, 0.5)
        assert session.current_player == 1


class TestQueries:
    def test_cell_at_is_a_frozen_copy(self):
        session = _session()
        cell = session.cell_at(5)
        assert (cell.row, cell.col, cell.owner, cell.power) == (0, 5, 1, 10)
        with pytest.raises(ValidationError):
            cell.power = 3
        session.apply_split(5, Direction.NORTH, 0.5)
        assert cell.power == 10
        assert session.cell_at(5).power == 6

    def test_cell_at_off_board(self):
        with pytest.raises(IndexError):
            _session().cell_at(100)

    def test_directional_queries(self):
        session = _session()
        session.state.map.spaces[15].contents = MapSpaceContents.BLOCKED
        assert session.neighbor_in_direction(5, Direction.NORTH) == 15
        assert session.search_in_direction(5, Direction.NORTH) == 25

    def test_previews(self):
        session = _session()
        assert session.preview_targets(5)[Direction.NORTH] == 15
        assert session.preview_split(5, 0.5) == (6, 4)
        assert all(move.source == 5 for move in session.legal_moves())


class TestPlayPolicy:
    def test_policy_move_is_applied(self):
        session = _session()
        policy = FirstMovePolicy()
        outcome = session.play_policy(policy)
        assert outcome is not None
        assert outcome.player == 1
        assert policy.seen == [1]
        assert session.current_player == 2

    def test_pass_keeps_the_turn(self):
        session = _session()
        assert session.play_policy(PassPolicy()) is None
        assert session.current_player == 1


class TestDegenerateRoster:
    def test_failed_rotation_leaves_board_and_events_untouched(self):
        session = _session(roster=(OFF,) * 4)
        before = copy.deepcopy(session.state.map.spaces)

        with pytest.raises(DegenerateTurnStateError):
            session.apply_split(5, Direction.NORTH, 0.5)

        assert session.state.map.spaces == before
        assert session.events.pending == []
        assert session.history == []
        assert session.current_player == 1


rosters = st.lists(st.sampled_from(list(PlayerType)), min_size=4, max_size=4).filter(
    lambda roster: any(kind != OFF for kind in roster)
)
moves = st.tuples(
    st.booleans(),
    st.integers(min_value=-5, max_value=105),
    st.sampled_from(list(Direction)),
    st.floats(min_value=0.0, max_value=1.0),
)


@settings(max_examples=60, deadline=None)
@given(
    seed=st.integers(min_value=0, max_value=2**32),
    roster=rosters,
    policy=st.sampled_from(list(SearchPolicy)),
    script=st.lists(moves, max_size=40),
)
def test_play_keeps_board_consistent(seed, roster, policy, script):
    """Property-based test: any sequence of splits keeps every cell valid."""
    rules = replace(DEFAULT_RULES, split=replace(DEFAULT_RULES.split, search_policy=policy))
    session = GameSession.new(seed, roster, rules=rules)
    total_power = sum(space.power for space in session.state.map)

    for use_legal, source, direction, fraction in script:
        legal = session.legal_moves()
        if use_legal and legal:
            move = legal[source % len(legal)]
            source, direction = move.source, move.direction
        before = [(space.owner, space.power) for space in session.state.map]
        player = session.current_player

        outcome = session.try_split(source, direction, fraction)

        if outcome is None:
            assert [(space.owner, space.power) for space in session.state.map] == before
            assert session.current_player == player
        else:
            assert outcome.remaining >= 1
            assert outcome.moved + outcome.remaining == before[outcome.source][1]
        for space in session.state.map:
            if space.is_owned:
                assert space.is_playable
                assert 1 <= space.power <= rules.split.max_power
                assert session.state.turn.is_active(space.owner)
            else:
                assert space.power == 0
        assert session.state.turn.is_active(session.current_player)
        assert sum(space.power for space in session.state.map) == total_power
