"""CLI entrypoint for managing and dry-running supply signal configs."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from supply_signal_commands import __version__
from supply_signal_commands.config import (
    config_to_document,
    default_config,
    load_config_file,
    save_config_file,
    validate_config_file,
)
from supply_signal_commands.constants.branding import CLI_DESCRIPTION, CLI_PROG
from supply_signal_commands.constants.config import CONFIG_FILENAME
from supply_signal_commands.constants.grid import DEFAULT_WORLD_SIZE
from supply_signal_commands.engine import CooldownTracker, MapGrid, SupplySignalCommands
from supply_signal_commands.exceptions import ConfigError, SignalCommandsError
from supply_signal_commands.exceptions.validation import format_errors
from supply_signal_commands.io import dump_document, is_json_path
from supply_signal_commands.simulation import ConsoleHost
from supply_signal_commands.types.host import Player, Position, ThrowEvent, ThrownItem


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog=CLI_PROG,
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init = subparsers.add_parser("init", help="Write the default config file")
    _add_config_argument(init)
    init.add_argument("--force", action="store_true", help="Overwrite an existing config file")

    validate = subparsers.add_parser("validate-config", help="Validate a config file without loading it")
    _add_config_argument(validate)

    migrate = subparsers.add_parser("migrate", help="Upgrade a config file to the current version")
    _add_config_argument(migrate)
    migrate.add_argument("-n", "--dry-run", action="store_true", help="Print the migrated config instead of saving")

    simulate = subparsers.add_parser("simulate", help="Dry-run supply signal throws against a config")
    _add_config_argument(simulate)
    simulate.add_argument("-s", "--skin", type=int, required=True, help="Skin id of the thrown signal")
    simulate.add_argument("--name", default=None, help="Item display name of the thrown signal")
    simulate.add_argument("--player-id", default="76561198000000000", help="Thrower's user id")
    simulate.add_argument("--player-name", default="Player", help="Thrower's display name")
    simulate.add_argument(
        "--position",
        type=float,
        nargs=3,
        metavar=("X", "Y", "Z"),
        default=(0.0, 0.0, 0.0),
        help="Thrower's world position",
    )
    simulate.add_argument("--locale", default="en", help="Thrower's locale")
    simulate.add_argument("--world-size", type=float, default=DEFAULT_WORLD_SIZE, help="Map size for grid labels")
    simulate.add_argument("--times", type=int, default=1, help="Number of throws to simulate")
    simulate.add_argument(
        "--interval",
        type=float,
        default=0.0,
        help="Seconds of simulated time between throws",
    )
    simulate.add_argument("--seed", type=int, default=None, help="Seed for random command selection")

    return parser


def _add_config_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path(CONFIG_FILENAME),
        help=f"Config file path (default: ./{CONFIG_FILENAME})",
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    handlers = {
        "init": _handle_init,
        "validate-config": _handle_validate_config,
        "migrate": _handle_migrate,
        "simulate": _handle_simulate,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.error(f"Unsupported command: {args.command}")

    try:
        return handler(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except SignalCommandsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


def _handle_init(args: argparse.Namespace) -> int:
    path: Path = args.config
    if path.exists() and not args.force:
        print(f"Config file already exists: {path} (use --force to overwrite)", file=sys.stderr)
        return 2
    save_config_file(path, default_config())
    print(f"Wrote default config to {path}")
    return 0


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Run collect-all validation and report results."""
    problems = validate_config_file(args.config)
    if problems:
        print(format_errors(problems), file=sys.stderr)
    if any(problem.is_error for problem in problems):
        return 2
    print("Configuration is valid.")
    return 0


def _handle_migrate(args: argparse.Namespace) -> int:
    path: Path = args.config
    if not path.exists():
        print(f"Config file not found: {path}", file=sys.stderr)
        return 2

    result = load_config_file(path, persist=not args.dry_run)
    if args.dry_run:
        print(dump_document(config_to_document(result.config), as_json=is_json_path(path)), end="")
        return 0
    if result.migrated:
        print(f"Migrated {path} from version {result.from_version} to {result.config.version}")
    else:
        print(f"{path} is already at version {result.config.version}")
    return 0


def _handle_simulate(args: argparse.Namespace) -> int:
    if args.times < 1:
        print("--times must be at least 1", file=sys.stderr)
        return 2
    if args.world_size <= 0:
        print("--world-size must be positive", file=sys.stderr)
        return 2

    result = load_config_file(args.config, persist=False)
    player = Player(
        user_id=args.player_id,
        display_name=args.player_name,
        position=Position(*args.position),
        locale=args.locale,
    )
    host = ConsoleHost(grid=MapGrid(args.world_size), players=[player])
    clock = _SimulatedClock()
    plugin = SupplySignalCommands(
        host,
        result.config,
        cooldowns=CooldownTracker(clock=clock),
        rng=random.Random(args.seed),
    )
    event = ThrowEvent(player=player, signal=object(), item=ThrownItem(skin_id=args.skin, name=args.name))

    for attempt in range(args.times):
        if attempt:
            clock.advance(args.interval)
        outcome = plugin.on_explosive_thrown(event)
        print(f"throw {attempt + 1} at t={clock():g}s: {outcome.status}")
    return 0


class _SimulatedClock:
    def __init__(self) -> None:
        self._now = 0.0

    def __call__(self) -> float:
        return self._now

    def advance(self, seconds: float) -> None:
        self._now += seconds


if __name__ == "__main__":
    raise SystemExit(main())
