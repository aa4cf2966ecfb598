"""
Тесты для Comparison и Core Arithmetic на уровне последовательностей цифр

Проверяет:
1. Полный порядок (длина, затем поразрядно от старшей цифры)
2. Сложение с переносом, включая перенос за пределы длины
3. Вычитание с заёмом, нормализацию и Underflow без мутации
4. Умножение столбиком и короткое замыкание на нуле
5. Деление повторным вычитанием: специальные случаи и общий алгоритм
"""

import random

import pytest

from src.core.math.arithmetic import add_inplace, divmod_digits, mul_digits, sub_inplace
from src.core.math.comparison import compare_digits, digits_equal, digits_less
from src.core.math.digits import digits_from_int, digits_to_int
from src.core.math.errors import DivideByZero, ErrorKind, Underflow


def d(n: int) -> list[int]:
    return digits_from_int(n)


# =============================================================================
# ТЕСТЫ СРАВНЕНИЯ
# =============================================================================


class TestComparison:
    """Тесты digits_less / digits_equal / compare_digits"""

    def test_shorter_is_smaller(self) -> None:
        """Более короткая последовательность меньше"""
        assert digits_less(d(99), d(100))
        assert not digits_less(d(100), d(99))

    def test_same_length_most_significant_wins(self) -> None:
        """При равной длине решает старшая различающаяся цифра"""
        assert digits_less(d(129), d(130))
        assert digits_less(d(1000), d(1001))
        assert not digits_less(d(500), d(499))

    def test_equal_is_not_less(self) -> None:
        assert not digits_less(d(42), d(42))
        assert digits_equal(d(42), d(42))

    def test_compare_three_way(self) -> None:
        assert compare_digits(d(1), d(2)) == -1
        assert compare_digits(d(2), d(2)) == 0
        assert compare_digits(d(10), d(9)) == 1

    def test_matches_native_order(self) -> None:
        """Порядок совпадает с порядком native int"""
        rng = random.Random(7)
        for _ in range(200):
            x = rng.randrange(0, 10**12)
            y = rng.randrange(0, 10**12)
            assert compare_digits(d(x), d(y)) == (x > y) - (x < y)


# =============================================================================
# ТЕСТЫ СЛОЖЕНИЯ И ВЫЧИТАНИЯ
# =============================================================================


class TestAddInplace:
    """Тесты add_inplace"""

    def test_simple_sum(self) -> None:
        digits = d(123)
        add_inplace(digits, d(456))
        assert digits == d(579)

    def test_carry_extends_length(self) -> None:
        """Перенос за пределы более длинного операнда удлиняет результат"""
        digits = d(999)
        add_inplace(digits, d(1))
        assert digits == [0, 0, 0, 1]

    def test_shorter_left_operand(self) -> None:
        """Левый операнд короче правого"""
        digits = d(5)
        add_inplace(digits, d(99995))
        assert digits == d(100000)

    def test_add_zero(self) -> None:
        digits = d(0)
        add_inplace(digits, d(0))
        assert digits == [0]


class TestSubInplace:
    """Тесты sub_inplace"""

    def test_simple_difference(self) -> None:
        digits = d(987654321)
        sub_inplace(digits, d(123456789))
        assert digits == d(863197532)

    def test_borrow_and_normalization(self) -> None:
        """100 - 1 = 99: старший ноль удаляется"""
        digits = d(100)
        sub_inplace(digits, d(1))
        assert digits == [9, 9]

    def test_equal_operands_give_zero(self) -> None:
        digits = d(12345)
        sub_inplace(digits, d(12345))
        assert digits == [0]

    def test_underflow_raises_without_mutation(self) -> None:
        """minuend < subtrahend → Underflow, minuend не изменён"""
        digits = d(3)
        with pytest.raises(Underflow) as exc_info:
            sub_inplace(digits, d(5))
        assert exc_info.value.kind == ErrorKind.UNDERFLOW
        assert digits == d(3)

    def test_underflow_is_arithmetic_error(self) -> None:
        with pytest.raises(ArithmeticError, match="negative"):
            sub_inplace(d(0), d(1))


# =============================================================================
# ТЕСТЫ УМНОЖЕНИЯ
# =============================================================================


class TestMulDigits:
    """Тесты mul_digits"""

    def test_zero_short_circuit(self) -> None:
        assert mul_digits(d(0), d(123456)) == [0]
        assert mul_digits(d(123456), d(0)) == [0]

    def test_known_product(self) -> None:
        assert mul_digits(d(123456789), d(987654321)) == d(121932631112635269)

    def test_all_nines(self) -> None:
        """Максимальные переносы: 999 * 999 = 998001"""
        assert mul_digits(d(999), d(999)) == d(998001)

    def test_result_is_normalized(self) -> None:
        """Аккумулятор длины len(a)+len(b) обрезается"""
        result = mul_digits(d(2), d(3))
        assert result == [6]

    def test_does_not_mutate_operands(self) -> None:
        a, b = d(12), d(34)
        mul_digits(a, b)
        assert a == d(12)
        assert b == d(34)

    def test_matches_native_product(self) -> None:
        rng = random.Random(11)
        for _ in range(100):
            x = rng.randrange(0, 10**25)
            y = rng.randrange(0, 10**25)
            assert digits_to_int(mul_digits(d(x), d(y))) == x * y


# =============================================================================
# ТЕСТЫ ДЕЛЕНИЯ
# =============================================================================


class TestDivmodDigits:
    """Тесты divmod_digits"""

    def test_divide_by_zero(self) -> None:
        with pytest.raises(DivideByZero) as exc_info:
            divmod_digits(d(5), d(0))
        assert exc_info.value.kind == ErrorKind.DIVIDE_BY_ZERO

    def test_divide_by_zero_is_zero_division_error(self) -> None:
        with pytest.raises(ZeroDivisionError):
            divmod_digits(d(0), d(0))

    def test_dividend_less_than_divisor(self) -> None:
        """dividend < divisor → (0, dividend)"""
        assert divmod_digits(d(3), d(100)) == ([0], d(3))

    def test_dividend_equals_divisor(self) -> None:
        """dividend == divisor → (1, 0)"""
        assert divmod_digits(d(777), d(777)) == ([1], [0])

    def test_general_case(self) -> None:
        assert divmod_digits(d(100), d(3)) == (d(33), d(1))

    def test_zeros_inside_quotient(self) -> None:
        """Нулевые цифры частного в середине: 100200 / 2 = 50100"""
        assert divmod_digits(d(100200), d(2)) == (d(50100), [0])

    def test_multi_digit_divisor(self) -> None:
        quotient, remainder = divmod_digits(d(121932631112635269), d(123456789))
        assert quotient == d(987654321)
        assert remainder == [0]

    def test_matches_native_divmod(self) -> None:
        """Инвариант: dividend == q * divisor + r, 0 <= r < divisor"""
        rng = random.Random(13)
        for _ in range(100):
            x = rng.randrange(0, 10**20)
            y = rng.randrange(1, 10**8)
            quotient, remainder = divmod_digits(d(x), d(y))
            assert (digits_to_int(quotient), digits_to_int(remainder)) == divmod(x, y)
