"""
Discover command - list the accessor pairs the harness would exercise.
"""

from rich.markup import escape
from rich.table import Table

from ..config.harness_config import HarnessConfig
from ..core.accessor_discovery import AccessorDiscoverer
from ..utilities.console import console, print_error, print_info
from ..utilities.formatters import format_type
from ..utilities.loader import load_class
from ..utilities.type_hints import describe_hint


def discover_command(targets: list[str], ignore: list[str] | None = None) -> bool:
    """Print the discovered properties of each target; False if any target cannot be loaded."""
    config = HarnessConfig.from_environment()
    discoverer = AccessorDiscoverer(config.ignored_accessors(frozenset(ignore or ())), config.registry)

    ok = True
    for path in targets:
        try:
            target = load_class(path)
        except (ImportError, ValueError) as e:
            print_error(f"Cannot load {path}: {e}")
            ok = False
            continue

        accessors = discoverer.discover(target)
        if not accessors:
            print_info(f"{format_type(target)}: no accessors found")
            continue

        table = Table(title=format_type(target), title_justify="left")
        table.add_column("Property", style="cyan")
        table.add_column("Getter")
        table.add_column("Setter")
        table.add_column("Type")
        table.add_column("Mode")
        for name, pair in accessors.items():
            if pair.has_both():
                mode = "read/write"
            elif pair.is_read_only():
                mode = "read-only"
            else:
                mode = "write-only"
            table.add_row(
                escape(name),
                escape(str(pair.getter)) if pair.getter else "-",
                escape(str(pair.setter)) if pair.setter else "-",
                escape(describe_hint(pair.declared_type)),
                mode,
            )
        console.print(table)
    return ok
