"""Seeded random number helpers for board generation.

Every random decision in a game is drawn from one ``random.Random`` built
from a seed. Seeds may be integers or strings such as those produced by
:func:`generate_seed`; strings are hashed so that the same text always
yields the same board on every platform and Python version.

Examples:
    >>> rng = make_rng(generate_seed(7, "board"))
    >>> gen_ratio(rng, 1, 8) in (True, False)
    True
"""

import hashlib
import random


def generate_seed(game_id: int, context: str) -> str:
    """Generate a deterministic seed string from a game id and purpose.

    Format: "game_id:context"

    Args:
        game_id: Identifier of the game (non-negative)
        context: What the randomness is for (e.g. "board", "seating")

    Returns:
        Seed string

    Examples:
        >>> generate_seed(3, "board")
        '3:board'

    Raises:
        ValueError: If game_id is negative
    """
    if game_id < 0:
        raise ValueError(f"game_id must be non-negative, got {game_id}")

    return f"{game_id}:{context}"


def _seed_to_int(seed: str) -> int:
    """Convert seed string to a stable 64-bit integer for random.Random().

    Args:
        seed: Seed string

    Returns:
        64-bit integer derived from SHA-256(seed)
    """
    digest = hashlib.sha256(seed.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big", signed=False)


def make_rng(seed: int | str | None = None) -> random.Random:
    """Build a generator from an optional seed.

    ``None`` gives an OS-seeded generator; integers are used as-is; strings
    go through SHA-256 first.
    """
    if seed is None:
        return random.Random()
    if isinstance(seed, str):
        return random.Random(_seed_to_int(seed))
    return random.Random(seed)


def gen_ratio(rng: random.Random, numerator: int, denominator: int) -> bool:
    """Return True with probability ``numerator / denominator``.

    Raises:
        ValueError: If the ratio is not within [0, 1] or denominator is not positive
    """
    if denominator <= 0:
        raise ValueError(f"denominator must be positive, got {denominator}")
    if not 0 <= numerator <= denominator:
        raise ValueError(f"ratio {numerator}/{denominator} is outside [0, 1]")

    return rng.randrange(denominator) < numerator


def random_index(rng: random.Random, length: int) -> int:
    """Pick a uniformly random position in a sequence of ``length`` items.

    Raises:
        ValueError: If length is not positive
    """
    if length <= 0:
        raise ValueError("cannot pick from an empty sequence")

    return rng.randrange(length)
