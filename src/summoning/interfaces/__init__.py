"""Protocol-based interfaces for the summoning game.

This module exports the protocols that outside collaborators implement,
giving them a clear contract and letting tests substitute simple fakes.
"""

from summoning.interfaces.policy import ISplitPolicy

__all__ = [
    "ISplitPolicy",
]
