"""
Test fixtures package for POJO Kit.

Sample classes exercising each accessor style and each way of breaking the
accessor or equality contract.
"""

from .pojos import (
    Account,
    EqualPair,
    FrozenQuote,
    GenericProduct,
    Pair,
    Point,
    Product,
)

__all__ = [
    "Account",
    "EqualPair",
    "FrozenQuote",
    "GenericProduct",
    "Pair",
    "Point",
    "Product",
]
