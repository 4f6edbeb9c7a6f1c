"""
Commands package for the POJO Kit CLI.

Each command is in its own module for better organization.
"""

from .discover import discover_command
from .validate import validate_class, validate_command

__all__ = [
    "discover_command",
    "validate_class",
    "validate_command",
]
