"""
Argument parsing for the POJO Kit CLI.

Keeps argument definitions apart from command routing and execution.
"""

import argparse

from .. import __description__, __version__
from ..utilities.constants import ConstructorPolicy


class CLIArgumentParser:
    """
    Argument parser for the ``pojo-kit`` command.

    Separates argument parsing from command routing and execution,
    providing better organization and testability.
    """

    def __init__(self):
        """Initialize the argument parser."""
        self.parser = argparse.ArgumentParser(prog="pojo-kit", description=__description__)
        self.parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
        self.parser.add_argument(
            "-v", "--verbose", action="store_true", help="Enable debug logging"
        )
        self.subparsers = self.parser.add_subparsers(dest="command", help="Available commands")
        self._setup_all_parsers()

    def parse_args(self, args=None) -> argparse.Namespace:
        """Parse command line arguments."""
        return self.parser.parse_args(args)

    def _setup_all_parsers(self) -> None:
        """Set up all command parsers."""
        self._setup_validate_command()
        self._setup_discover_command()

    def _setup_validate_command(self) -> None:
        """Set up the validate command parser."""
        parser_validate = self.subparsers.add_parser(
            "validate", help="Validate accessor (and optionally equality) contracts of classes"
        )
        parser_validate.add_argument(
            "targets", nargs="+", metavar="MODULE:CLASS", help="Classes to validate"
        )
        parser_validate.add_argument(
            "--equality", action="store_true", help="Also verify __eq__/__hash__"
        )
        parser_validate.add_argument(
            "--ignore",
            action="append",
            default=[],
            metavar="NAME",
            help="Property or accessor name to skip (repeatable)",
        )
        parser_validate.add_argument(
            "--ignore-equality",
            action="append",
            default=[],
            metavar="NAME",
            help="Property excluded from the equality perturbation (repeatable)",
        )
        parser_validate.add_argument(
            "--seed", type=int, default=None, help="Seed for synthesized values"
        )
        parser_validate.add_argument(
            "--max-depth", type=int, default=None, help="Recursion bound for nested objects"
        )
        parser_validate.add_argument(
            "--policy",
            choices=[policy.value for policy in ConstructorPolicy],
            default=None,
            help="Which successful constructor supplies the object under test",
        )

    def _setup_discover_command(self) -> None:
        """Set up the discover command parser."""
        parser_discover = self.subparsers.add_parser(
            "discover", help="List the accessor pairs discovered on classes"
        )
        parser_discover.add_argument(
            "targets", nargs="+", metavar="MODULE:CLASS", help="Classes to inspect"
        )
        parser_discover.add_argument(
            "--ignore",
            action="append",
            default=[],
            metavar="NAME",
            help="Property or accessor name to skip (repeatable)",
        )


def create_cli_parser() -> CLIArgumentParser:
    """
    Factory function to create CLI argument parser.

    Returns:
        Configured CLIArgumentParser instance
    """
    return CLIArgumentParser()
