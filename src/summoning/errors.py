"""Exception hierarchy for the summoning core.

Move errors are expected during play: a rejected split raises one of them
before anything is mutated, and callers are free to ignore it. The remaining
errors signal a broken setup and abort the game before play begins.
"""

from __future__ import annotations


class SummoningError(Exception):
    """Base class for every error raised by the summoning package."""


class MoveError(SummoningError):
    """A split was rejected; the board is unchanged."""


class InsufficientPower(MoveError):
    """The source cell cannot give anything away."""


class NotYourCell(InsufficientPower):
    """The source cell is not owned by the player whose turn it is."""


class NoValidTarget(MoveError):
    """No playable cell lies in the requested direction."""


class TargetOccupied(MoveError):
    """The target cell already belongs to a player."""


class NoEffect(MoveError):
    """The split fraction is too small to move any power."""


class DegenerateTurnStateError(SummoningError, RuntimeError):
    """Turn rotation found no active player."""


class ConfigurationError(SummoningError, ValueError):
    """The game cannot be set up with the requested roster or rules."""


class InvalidPowerError(SummoningError, ValueError):
    """A cell was about to hold an owner/power pair that breaks the invariants."""
