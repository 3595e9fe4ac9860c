"""Utility functions for the summoning game."""

from summoning.utils.rng import (
    gen_ratio,
    generate_seed,
    make_rng,
    random_index,
)

__all__ = [
    "gen_ratio",
    "generate_seed",
    "make_rng",
    "random_index",
]
