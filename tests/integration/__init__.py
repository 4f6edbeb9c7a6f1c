"""
CLI integration tests.
"""
