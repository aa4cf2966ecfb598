"""
Тесты для Combinatorics — factorial, fibonacci, catalan

Проверяет:
1. Известные значения (включая значения демонстрации)
2. Граничные случаи n = 0, 1
3. InvalidArgument при отрицательном n
4. Рекуррентные соотношения
"""

import math

import pytest

from src.combinatorics import catalan, factorial, fibonacci
from src.core.domain import BigNatural
from src.core.math.errors import ErrorKind, InvalidArgument


class TestFactorial:
    """Тесты factorial"""

    def test_demo_value(self) -> None:
        assert factorial(5) == BigNatural(120)

    def test_zero_and_one(self) -> None:
        assert factorial(0) == 1
        assert factorial(1) == 1

    def test_large_value(self) -> None:
        """25! выходит за пределы 64-битных целых"""
        assert str(factorial(25)) == "15511210043330985984000000"

    def test_matches_math_factorial(self) -> None:
        for n in range(0, 40):
            assert int(factorial(n)) == math.factorial(n)

    def test_negative_raises(self) -> None:
        with pytest.raises(InvalidArgument) as exc_info:
            factorial(-1)
        assert exc_info.value.kind == ErrorKind.INVALID_ARGUMENT


class TestFibonacci:
    """Тесты fibonacci"""

    def test_demo_value(self) -> None:
        assert fibonacci(10) == BigNatural(55)

    def test_seeds(self) -> None:
        assert fibonacci(0) == 0
        assert fibonacci(1) == 1
        assert fibonacci(2) == 1

    def test_large_value(self) -> None:
        assert str(fibonacci(100)) == "354224848179261915075"

    def test_recurrence(self) -> None:
        """F(n) = F(n-1) + F(n-2)"""
        for n in range(2, 60):
            assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)

    def test_negative_raises(self) -> None:
        with pytest.raises(InvalidArgument):
            fibonacci(-3)


class TestCatalan:
    """Тесты catalan"""

    def test_demo_value(self) -> None:
        assert catalan(4) == BigNatural(14)

    def test_known_sequence(self) -> None:
        expected = [1, 1, 2, 5, 14, 42, 132, 429, 1430, 4862, 16796]
        assert [int(catalan(n)) for n in range(11)] == expected

    def test_matches_binomial_formula(self) -> None:
        """C(n) = binom(2n, n) / (n + 1)"""
        for n in range(0, 25):
            assert int(catalan(n)) == math.comb(2 * n, n) // (n + 1)

    def test_negative_raises(self) -> None:
        with pytest.raises(InvalidArgument, match="catalan"):
            catalan(-1)
