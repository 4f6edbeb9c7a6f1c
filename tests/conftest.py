"""
Pytest configuration and shared fixtures for POJO Kit tests.

Provides markers, a seeded harness configuration and log capture helpers
shared by the unit, integration and property suites.
"""

import pytest

from pojo_kit.config import HarnessConfig, PropertyRegistry
from pojo_kit.core.value_synthesizer import ValueSynthesizer
from pojo_kit.utilities.constants import ENV_CONSTRUCTOR_POLICY, ENV_MAX_DEPTH, ENV_SEED

TEST_SEED = 20240917


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as unit test (fast, isolated)")
    config.addinivalue_line("markers", "integration: mark test as integration test (CLI end to end)")
    config.addinivalue_line("markers", "property: mark test as property-based test (hypothesis)")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test location."""
    for item in items:
        path = str(item.fspath)
        if "unit" in path:
            item.add_marker(pytest.mark.unit)
        elif "integration" in path:
            item.add_marker(pytest.mark.integration)
        elif "property" in path:
            item.add_marker(pytest.mark.property)


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Keep POJO_KIT_* variables from the outer shell out of the tests."""
    for name in (ENV_SEED, ENV_MAX_DEPTH, ENV_CONSTRUCTOR_POLICY):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def harness_config() -> HarnessConfig:
    """Seeded configuration so synthesized values are reproducible."""
    return HarnessConfig(seed=TEST_SEED)


@pytest.fixture
def registry() -> PropertyRegistry:
    """Empty property registry."""
    return PropertyRegistry()


@pytest.fixture
def value_synthesizer(harness_config) -> ValueSynthesizer:
    """Value synthesizer over the default factory table."""
    return ValueSynthesizer(harness_config.with_factories(None), harness_config.max_depth)


@pytest.fixture
def capture_logs():
    """Log capture utility."""
    import logging
    from io import StringIO

    handlers = []

    def _capture_logs(logger_name: str | None = None):
        """Capture logs for testing."""
        log_capture = StringIO()
        handler = logging.StreamHandler(log_capture)

        logger = logging.getLogger(logger_name) if logger_name else logging.getLogger()

        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        handlers.append((logger, handler))

        return log_capture, handler, logger

    yield _capture_logs

    for logger, handler in handlers:
        logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
