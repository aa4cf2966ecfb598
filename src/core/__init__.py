"""
Core engine: arbitrary-precision non-negative integers.

This module contains the digit-level algorithms, the BigNatural value type,
and the JSON contracts used to exchange values with other systems.
"""
