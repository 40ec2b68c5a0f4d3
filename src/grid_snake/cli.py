"""Headless command line for running and configuring games."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections import defaultdict
from dataclasses import fields

from grid_snake.config import GameConfig
from grid_snake.engine import GameState

logger = logging.getLogger(__name__)


def _parse_input(value: str) -> tuple[int, str]:
    tick, sep, key = value.partition(":")
    if not sep or not key:
        raise argparse.ArgumentTypeError(
            f"Expected TICK:KEY, got {value!r}.",
        )
    try:
        tick_index = int(tick)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Tick must be an integer, got {tick!r}.",
        ) from None
    if tick_index < 0:
        raise argparse.ArgumentTypeError("Tick must be >= 0.")
    return tick_index, key


def _add_config_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--grid-width", type=int, default=None)
    parser.add_argument("--grid-height", type=int, default=None)
    parser.add_argument("--tick-rate", type=int, default=None)
    parser.add_argument("--start-x", type=int, default=None)
    parser.add_argument("--start-y", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Headless grid snake simulation tools.",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Run a game without a window and print its state.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    _add_config_flags(sim_p)
    sim_p.add_argument("--ticks", type=int, default=100)
    sim_p.add_argument(
        "--input", type=_parse_input, action="append", default=[],
        metavar="TICK:KEY",
        help="Deliver KEY (e.g. up, ArrowLeft) before tick TICK. Repeatable.",
    )
    sim_p.add_argument(
        "--snapshots", action="store_true",
        help="Print one JSON snapshot per tick.",
    )

    # --- init-config ---
    init_p = sub.add_parser(
        "init-config", help="Write a JSON config file.",
    )
    init_p.add_argument("path", help="Destination file.")
    _add_config_flags(init_p)

    return parser


def _config_from_args(args: argparse.Namespace) -> GameConfig:
    config = (
        GameConfig.load(args.config)
        if getattr(args, "config", None) else GameConfig()
    )
    # Each config flag's dest matches its GameConfig field name.
    overrides = {
        f.name: getattr(args, f.name)
        for f in fields(GameConfig)
        if getattr(args, f.name, None) is not None
    }
    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = GameConfig(**d)
    return config


def _run_simulate(args: argparse.Namespace) -> int:
    if args.ticks < 0:
        raise ValueError("--ticks must be >= 0.")
    game = GameState(_config_from_args(args))
    game.add_food_listener(
        lambda pos: logger.debug("Food eaten at (%d, %d).", pos.x, pos.y),
    )

    inputs: dict[int, list[str]] = defaultdict(list)
    for tick_index, key in args.input:
        inputs[tick_index].append(key)

    for tick_index in range(args.ticks):
        for key in inputs.get(tick_index, []):
            if game.on_key(key) is None:
                logger.warning("Ignoring unrecognized key %r.", key)
        game.tick()
        if args.snapshots:
            print(json.dumps(game.render_snapshot().to_dict()))  # noqa: T201
        if game.game_over:
            break

    print(json.dumps(game.get_state()))  # noqa: T201
    return 0


def _run_init_config(args: argparse.Namespace) -> int:
    config = _config_from_args(args)
    config.save(args.path)
    print(f"Wrote config to {args.path}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``grid-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "init-config": _run_init_config,
    }
    try:
        return handlers[args.command](args)
    except (ValueError, OSError) as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
