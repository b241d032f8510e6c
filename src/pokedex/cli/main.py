"""CLI entry point for the Pokedex keypad."""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from ..core.config import Config
from . import commands


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="pokedex",
        description="Pokedex keypad - multi-tap species search and type matchups",
    )
    parser.add_argument("-v", "--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument(
        "--config",
        help="Path to a TOML config file (default: $POKEDEX_CONFIG)",
    )

    subparsers = parser.add_subparsers(dest="command", required=False)

    search_parser = subparsers.add_parser("search", help="Search the species catalog")
    commands.add_search_arguments(search_parser)

    types_parser = subparsers.add_parser(
        "types", help="Show defensive weaknesses, resistances and immunities"
    )
    commands.add_types_arguments(types_parser)

    keypad_parser = subparsers.add_parser(
        "keypad", help="Replay a key script through the multi-tap engine"
    )
    commands.add_keypad_arguments(keypad_parser)

    return parser


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_env_or_file(Path(args.config) if args.config else None)

        if args.command == "search":
            commands.handle_search(args, config)
        elif args.command == "types":
            commands.handle_types(args, config)
        elif args.command == "keypad":
            commands.handle_keypad(args, config)
        else:
            parser.print_help()

        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
