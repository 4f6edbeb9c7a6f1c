"""
Property-based testing suite for POJO Kit.

Uses Hypothesis to vary seeds and accessor names and verify the harness
behaves the same way for all of them.
"""
