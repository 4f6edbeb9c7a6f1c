"""
Command-line interface for POJO Kit.

Uses focused components for argument parsing and command routing.
"""

import logging

from ..config.environment import get_environment_config
from ..utilities.console import print_error
from .argument_parser import CLIArgumentParser, create_cli_parser
from .command_router import CommandRouter, create_command_router


def configure_logging(verbose: bool = False) -> None:
    """DEBUG with ``-v``, otherwise the level from ``POJO_KIT_LOG_LEVEL``."""
    level = logging.DEBUG if verbose else getattr(logging, get_environment_config().log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def main(argv: list[str] | None = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Process exit code
    """
    parser = create_cli_parser()
    router = create_command_router()

    try:
        args = parser.parse_args(argv)
        configure_logging(args.verbose)

        if not args.command:
            parser.parser.print_help()
            return 0

        return 0 if router.route_command(args) else 1

    except KeyboardInterrupt:
        print("\n👋 Goodbye!")
        return 130
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        return 1


__all__ = ["CLIArgumentParser", "CommandRouter", "configure_logging", "main"]
