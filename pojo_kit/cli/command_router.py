"""
Routes parsed CLI arguments to command implementations.
"""

import argparse

from ..commands import discover_command, validate_command


class CommandRouter:
    """Maps a parsed command name to its implementation."""

    def route_command(self, args: argparse.Namespace) -> bool:
        """Run the command selected in ``args``; returns its success flag."""
        if args.command == "validate":
            return validate_command(
                args.targets,
                equality=args.equality,
                ignore=args.ignore,
                ignore_equality=args.ignore_equality,
                seed=args.seed,
                max_depth=args.max_depth,
                policy=args.policy,
            )
        if args.command == "discover":
            return discover_command(args.targets, ignore=args.ignore)
        raise ValueError(f"Unknown command: {args.command}")


def create_command_router() -> CommandRouter:
    """Factory function to create the command router."""
    return CommandRouter()
