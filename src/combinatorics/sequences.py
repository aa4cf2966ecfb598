"""Факториал, числа Фибоначчи и числа Каталана в BigNatural.

Аргументы — native int. Отрицательный аргумент → InvalidArgument
(значение по умолчанию не подставляется).
"""

import logging

from src.core.domain.big_natural import BigNatural
from src.core.math.errors import InvalidArgument

logger = logging.getLogger(__name__)


def _require_non_negative(n: int, what: str) -> None:
    if n < 0:
        raise InvalidArgument(f"Negative {what} argument: {n}")


def factorial(n: int) -> BigNatural:
    """
    n! как произведение BigNatural(2) .. BigNatural(n).

    Examples:
        >>> factorial(5)
        BigNatural('120')
        >>> factorial(0)
        BigNatural('1')
    """
    _require_non_negative(n, "factorial")

    result = BigNatural(1)
    for i in range(2, n + 1):
        result *= BigNatural(i)

    logger.debug("factorial(%d) has %d digits", n, result.length())
    return result


def fibonacci(n: int) -> BigNatural:
    """
    n-е число Фибоначчи: F(0) = 0, F(1) = 1, F(k) = F(k-1) + F(k-2).
    """
    _require_non_negative(n, "fibonacci")

    a, b = BigNatural(0), BigNatural(1)
    if n == 0:
        return a

    for _ in range(2, n + 1):
        a, b = b, a + b
    return b


def catalan(n: int) -> BigNatural:
    """
    n-е число Каталана: (2n)! / ((n+1)! * n!).

    Деление всегда точное.
    """
    _require_non_negative(n, "catalan")

    numerator = factorial(2 * n)
    denominator = factorial(n + 1) * factorial(n)
    return numerator // denominator
