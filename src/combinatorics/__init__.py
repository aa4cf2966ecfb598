"""Combinatorics — производные функции поверх BigNatural.

Используют только сложение, умножение и деление публичного API BigNatural:
- factorial(n)
- fibonacci(n)
- catalan(n)
"""

from .sequences import catalan, factorial, fibonacci

__all__ = [
    "factorial",
    "fibonacci",
    "catalan",
]
