"""
Validate command - run the harness against classes named on the command line.
"""

import logging

from ..config.harness_config import HarnessConfig
from ..core.harness import PojoHarness
from ..domain.validation_report import ValidationReport
from ..utilities.console import (
    print_error,
    print_report,
    print_section_header,
    print_success,
    print_warning,
)
from ..utilities.constants import ConstructorPolicy
from ..utilities.errors import PojoKitError
from ..utilities.loader import load_class

logger = logging.getLogger(__name__)


def validate_class(
    path: str,
    config: HarnessConfig,
    equality: bool = False,
    ignored_accessors: list[str] | None = None,
    ignored_equality_fields: list[str] | None = None,
) -> ValidationReport | None:
    """Validate one class; returns its report, or None when it could not be built."""
    try:
        target = load_class(path)
    except (ImportError, ValueError) as e:
        print_error(f"Cannot load {path}: {e}")
        return None

    try:
        harness = PojoHarness(
            target,
            ignored_accessors=ignored_accessors,
            ignored_equality_fields=ignored_equality_fields,
            config=config,
        )
    except PojoKitError as e:
        print_error(f"{path}: {e}")
        return None

    try:
        harness.run(equality=equality)
    except PojoKitError:
        logger.debug(f"Validation of {path} failed", exc_info=True)
    except Exception as e:
        # Raised by the class's own accessors or dunder methods
        logger.debug(f"Accessor of {path} raised", exc_info=True)
        harness.report.fail(e)

    if harness.report.is_success() and not harness.accessors:
        print_warning(f"{path}: no accessors discovered")
    print_report(harness.report)
    return harness.report


def validate_command(
    targets: list[str],
    equality: bool = False,
    ignore: list[str] | None = None,
    ignore_equality: list[str] | None = None,
    seed: int | None = None,
    max_depth: int | None = None,
    policy: str | None = None,
) -> bool:
    """Validate every target; True when all of them pass."""
    config = HarnessConfig.from_environment(
        seed=seed,
        max_depth=max_depth,
        constructor_policy=ConstructorPolicy.from_string(policy) if policy else None,
    )

    mode = "accessor + equality" if equality else "accessor"
    print_section_header(f"POJO validation ({mode} contracts), seed={config.seed}")

    failures = 0
    for path in targets:
        report = validate_class(path, config, equality, ignore, ignore_equality)
        if report is None or not report.is_success():
            failures += 1

    if failures:
        print_error(f"{failures} of {len(targets)} classes failed")
        return False

    print_success(f"All {len(targets)} classes passed")
    return True
