"""Development entrypoint: generate a board, play scripted splits, print JSON."""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Sequence
from dataclasses import replace

from summoning.config import get_settings
from summoning.domain.enums import Direction, PlayerType, SearchPolicy
from summoning.domain.events import CellChanged, GameEvent
from summoning.domain.game import GameSession
from summoning.domain.split import SplitCommand
from summoning.errors import MoveError, SummoningError
from summoning.logging_config import configure_logging
from summoning.utils.rng import generate_seed

logger = logging.getLogger(__name__)

_DIRECTION_ALIASES = {
    "n": Direction.NORTH,
    "ne": Direction.NORTH_EAST,
    "se": Direction.SOUTH_EAST,
    "s": Direction.SOUTH,
    "sw": Direction.SOUTH_WEST,
    "nw": Direction.NORTH_WEST,
}


def parse_direction(text: str) -> Direction:
    key = text.strip().lower().replace("-", "_")
    if key in _DIRECTION_ALIASES:
        return _DIRECTION_ALIASES[key]
    try:
        return Direction(key)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"unknown direction: {text}") from exc


def parse_split(text: str) -> SplitCommand:
    """Parse ``SOURCE:DIRECTION:FRACTION``, e.g. ``42:ne:0.5``."""

    parts = text.split(":")
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"expected SOURCE:DIRECTION:FRACTION, got {text!r}")
    raw_source, raw_direction, raw_fraction = parts
    try:
        source = int(raw_source)
        fraction = float(raw_fraction)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"bad split {text!r}: {exc}") from exc
    if not 0.0 <= fraction <= 1.0:
        raise argparse.ArgumentTypeError(f"fraction must be within [0, 1], got {fraction}")
    return SplitCommand(source, parse_direction(raw_direction), fraction)


def parse_roster(text: str) -> list[PlayerType]:
    seats = []
    for raw in text.split(","):
        key = raw.strip().lower().replace("-", "_")
        if key in ("none", "off", "inactive"):
            key = PlayerType.NOT_ACTIVE.value
        try:
            seats.append(PlayerType(key))
        except ValueError as exc:
            raise argparse.ArgumentTypeError(f"unknown player type: {raw}") from exc
    return seats


def event_to_dict(event: GameEvent) -> dict[str, object]:
    if isinstance(event, CellChanged):
        return {"type": "cell_changed", "index": event.index}
    return {"type": "turn_advanced", "player": event.player}


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Play scripted summoning splits")
    parser.add_argument("--seed", type=int, default=settings.seed, help="Board seed")
    parser.add_argument(
        "--game-id",
        type=int,
        default=None,
        help="Derive the board seed from a game id (takes precedence over --seed)",
    )
    parser.add_argument(
        "--players",
        type=parse_roster,
        default=list(settings.roster),
        help="Comma separated seat types (local, ai, not_active)",
    )
    parser.add_argument(
        "--policy",
        type=SearchPolicy,
        choices=list(SearchPolicy),
        default=settings.search_policy,
        help="How directional searches treat blocked cells",
    )
    parser.add_argument(
        "--split",
        dest="splits",
        type=parse_split,
        action="append",
        default=[],
        metavar="SRC:DIR:FRACTION",
        help="Split to apply for the current player; may be repeated",
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    base = get_settings().build_rules()
    rules = replace(base, split=replace(base.split, search_policy=args.policy))

    seed: int | str | None = args.seed
    if args.game_id is not None:
        try:
            seed = generate_seed(args.game_id, "board")
        except ValueError as exc:
            logger.error("cannot start game: %s", exc)
            return 1

    published: list[GameEvent] = []
    try:
        session = GameSession.new(seed, args.players, rules=rules)
    except SummoningError as exc:
        logger.error("cannot start game: %s", exc)
        return 1
    session.subscribe(published.append)
    session.publish_pending()

    rejected: list[dict[str, object]] = []
    for command in args.splits:
        try:
            session.apply_split(command.source, command.direction, command.fraction)
        except MoveError as exc:
            logger.warning("split %s rejected: %s", command, exc)
            rejected.append(
                {
                    "source": command.source,
                    "direction": command.direction.value,
                    "fraction": command.fraction,
                    "error": type(exc).__name__,
                }
            )

    report = {
        "snapshot": session.snapshot().model_dump(mode="json"),
        "events": [event_to_dict(event) for event in published],
        "rejected": rejected,
    }
    print(json.dumps(report, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
