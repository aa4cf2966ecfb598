"""
Domain models and value objects.

Contains the BigNatural value type.
"""

from src.core.domain.big_natural import CANONICAL_PATTERN, BigNatural, isqrt

__all__ = [
    "BigNatural",
    "CANONICAL_PATTERN",
    "isqrt",
]
