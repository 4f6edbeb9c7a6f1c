"""
Test package for POJO Kit.

Provides the testing infrastructure, fixtures and sample classes used to
validate the harness itself.
"""

__all__ = [
    "conftest",  # Pytest configuration and fixtures
    "fixtures",  # Sample classes under validation
    "integration",  # CLI end-to-end suite
    "property",  # Hypothesis property suite
    "unit",  # Unit test suite
]
