"""
Core Arithmetic — школьные алгоритмы над последовательностями цифр

Все функции принимают нормализованные последовательности (младшая цифра
первой) и возвращают/оставляют нормализованные.

Операции:
- add_inplace: сложение с переносом
- sub_inplace: вычитание с заёмом (требует minuend >= subtrahend)
- mul_digits: умножение столбиком с немедленным переносом
- divmod_digits: деление столбиком повторным вычитанием

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат никогда не бывает отрицательным (Underflow до любой мутации)
2. Деление на ноль никогда не происходит (DivideByZero до любой работы)
3. dividend == quotient * divisor + remainder, 0 <= remainder < divisor

ПРИМЕЧАНИЕ О СЛОЖНОСТИ:
    Внутренний цикл деления — повторное вычитание, O(BASE) вычитаний на цифру
    частного. Это эталонное поведение; бинарный подбор цифры не применяется.
"""

from src.core.math.comparison import digits_equal, digits_less
from src.core.math.digits import BASE, is_zero, remove_leading_zeros
from src.core.math.errors import DivideByZero, Underflow

# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add_inplace(digits: list[int], other: list[int]) -> None:
    """
    digits += other (in-place).

    Итерация до длины более длинного операнда, затем продолжение, пока
    остаётся перенос. Сумма неотрицательных чисел не даёт старших нулей,
    поэтому нормализация не требуется.
    """
    carry = 0
    max_len = max(len(digits), len(other))

    i = 0
    while i < max_len or carry:
        if i == len(digits):
            digits.append(0)

        other_digit = other[i] if i < len(other) else 0
        total = digits[i] + other_digit + carry
        carry = total // BASE
        digits[i] = total % BASE
        i += 1


def sub_inplace(digits: list[int], other: list[int]) -> None:
    """
    digits -= other (in-place).

    Raises:
        Underflow: Если digits < other (проверяется до мутации)
    """
    if digits_less(digits, other):
        raise Underflow("Result would be negative")

    borrow = 0
    for i in range(len(digits)):
        other_digit = other[i] if i < len(other) else 0
        diff = digits[i] - borrow - other_digit

        if diff < 0:
            diff += BASE
            borrow = 1
        else:
            borrow = 0

        digits[i] = diff

    # 100 - 1 → [9, 9, 0] до нормализации
    remove_leading_zeros(digits)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def mul_digits(a: list[int], b: list[int]) -> list[int]:
    """
    Умножение столбиком.

    Аккумулятор длины len(a) + len(b). Перенос из слота i+j в i+j+1
    выполняется сразу после добавления частичного произведения, поэтому
    каждый слот остаётся ограниченным.

    Returns:
        Новая нормализованная последовательность a * b
    """
    if is_zero(a) or is_zero(b):
        return [0]

    result = [0] * (len(a) + len(b))

    for i, a_digit in enumerate(a):
        for j, b_digit in enumerate(b):
            result[i + j] += a_digit * b_digit
            result[i + j + 1] += result[i + j] // BASE
            result[i + j] %= BASE

    remove_leading_zeros(result)
    return result


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def divmod_digits(dividend: list[int], divisor: list[int]) -> tuple[list[int], list[int]]:
    """
    Деление столбиком повторным вычитанием.

    Специальные случаи (до основного алгоритма):
    - divisor == 0 → DivideByZero
    - dividend < divisor → (0, dividend)
    - dividend == divisor → (1, 0)

    Основной алгоритм: для каждой цифры делимого от старшей к младшей
    current = current * BASE + digit, затем divisor вычитается из current,
    пока current >= divisor. Число вычитаний — очередная цифра частного
    (всегда 0..BASE-1, так как до шага current < divisor * BASE).

    Args:
        dividend: Делимое
        divisor: Делитель

    Returns:
        (quotient, remainder) — новые нормализованные последовательности

    Raises:
        DivideByZero: Если divisor == 0
    """
    if is_zero(divisor):
        raise DivideByZero("Division by zero")
    if digits_less(dividend, divisor):
        return [0], list(dividend)
    if digits_equal(dividend, divisor):
        return [1], [0]

    quotient_msd_first: list[int] = []
    current: list[int] = [0]

    for i in range(len(dividend) - 1, -1, -1):
        # Приписывание цифры справа: current * BASE + dividend[i]
        current.insert(0, dividend[i])
        remove_leading_zeros(current)

        count = 0
        while not digits_less(current, divisor):
            sub_inplace(current, divisor)
            count += 1
        quotient_msd_first.append(count)

    quotient = quotient_msd_first[::-1]
    remove_leading_zeros(quotient)
    return quotient, current
