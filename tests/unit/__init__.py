"""
Unit tests for the harness components.
"""
