"""Entry point: ``python -m hexsim``.

Runs a headless simulation: generate a map, tick until the player dies
or the tick budget runs out, then report who is left.
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hex-grid tactical simulation core")
    sub = parser.add_subparsers(dest="command")

    cli = sub.add_parser("cli", help="Run a headless simulation (default)")
    cli.add_argument("--seed", type=int, default=42)
    cli.add_argument("--ticks", type=int, default=200)
    cli.add_argument("--width", type=int, default=100)
    cli.add_argument("--height", type=int, default=100)
    cli.add_argument("--spawn-attempts", type=int, default=None,
                     help="Give up random placement after this many tries (default: never)")
    cli.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])
    cli.add_argument("--log-file", type=str, default=None)

    return parser


def _run_cli(args: argparse.Namespace) -> None:
    from hexsim.config import SimulationConfig
    from hexsim.engine.world_loop import WorldLoop
    from hexsim.utils.logging import setup_logging

    config = SimulationConfig(
        world_seed=args.seed,
        grid_width=args.width,
        grid_height=args.height,
        max_ticks=args.ticks,
        spawn_attempt_limit=args.spawn_attempts,
        log_level=args.log_level,
    )
    setup_logging(config.log_level, args.log_file)

    loop = WorldLoop.new(config)
    loop.randomize_map()
    loop.update_player_los()
    loop.run()

    for race, count in loop.world.census().items():
        logger.info("  %-6s %d", race.name.lower(), count)
    deaths = loop.world.event_log.by_category("death")
    logger.info("Done after %d ticks, %d deaths recorded.", loop.world.tick, len(deaths))


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    if args.command is None:
        args = parser.parse_args(["cli"])
    _run_cli(args)


if __name__ == "__main__":
    main()
