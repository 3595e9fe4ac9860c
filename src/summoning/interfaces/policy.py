"""Split Policy Protocol Interface.

This module defines the extension point for computer-controlled seats.
No policy ships with the game yet; anything satisfying the protocol can be
handed to :meth:`summoning.domain.game.GameSession.play_policy`.
"""

from typing import Protocol

from summoning.domain.split import SplitCandidate, SplitCommand
from summoning.schemas import GameSnapshot


class ISplitPolicy(Protocol):
    """Protocol for choosing a split on behalf of the current player.

    A policy is a pure function of the board: it must finish choosing before
    the session applies its answer, and it never mutates game state itself.
    """

    def choose_split(
        self,
        snapshot: GameSnapshot,
        candidates: list[SplitCandidate],
    ) -> SplitCommand | None:
        """Pick the next split for ``snapshot.current_player``.

        Args:
            snapshot: Read-only copy of the board and turn state
            candidates: Every source/direction pair with a legal target

        Returns:
            The split to attempt, or None to make no move
        """
        ...
