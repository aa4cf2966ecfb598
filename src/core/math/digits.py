"""
Digit Store — хранилище десятичных цифр и нормализация

Число хранится как list[int] десятичных цифр, младший разряд первым:
    1203 → [3, 0, 2, 1]

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нормальная форма: нет старших нулей, ноль — ровно [0]
2. Каждый элемент — цифра 0..9
3. Функции этого модуля не знают о BigNatural и работают с голыми списками

Десятичная система счисления — часть контракта: форматирование и деление
ориентированы на десятичные цифры.
"""

from typing import Final

from src.core.math.errors import InvalidArgument, InvalidFormat

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание системы счисления хранилища
BASE: Final[int] = 10

# Допустимые символы десятичной записи (только ASCII)
DIGIT_CHARS: Final[str] = "0123456789"


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def remove_leading_zeros(digits: list[int]) -> None:
    """
    Удаление старших нулей in-place (восстанавливает нормальную форму).

    Длина никогда не становится меньше 1: ноль остаётся [0].

    Examples:
        >>> d = [9, 9, 0, 0]
        >>> remove_leading_zeros(d); d
        [9, 9]
        >>> d = [0, 0, 0]
        >>> remove_leading_zeros(d); d
        [0]
    """
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()


def is_zero(digits: list[int]) -> bool:
    """True если последовательность ровно [0]."""
    return len(digits) == 1 and digits[0] == 0


# =============================================================================
# ПОСТРОЕНИЕ
# =============================================================================


def digits_from_int(n: int) -> list[int]:
    """
    Разложение неотрицательного native int на цифры (младшая первой).

    Args:
        n: Неотрицательное целое

    Returns:
        Нормализованная последовательность цифр

    Raises:
        InvalidArgument: Если n < 0

    Examples:
        >>> digits_from_int(0)
        [0]
        >>> digits_from_int(1203)
        [3, 0, 2, 1]
    """
    if n < 0:
        raise InvalidArgument(f"Value must be non-negative, got {n}")

    digits: list[int] = []
    # do-while: ноль даёт ровно одну цифру
    while True:
        digits.append(n % BASE)
        n //= BASE
        if n == 0:
            return digits


def digits_from_str(text: str) -> list[int]:
    """
    Разбор десятичной строки.

    Ведущие '0' пропускаются. Пустая строка и строка из одних нулей дают [0].
    После пропуска нулей каждый символ обязан быть ASCII-цифрой.
    Строка читается с конца, поэтому младшая цифра оказывается первой.

    Args:
        text: Десятичная запись

    Returns:
        Нормализованная последовательность цифр

    Raises:
        InvalidFormat: Если встретился символ вне '0'..'9'

    Examples:
        >>> digits_from_str("007")
        [7]
        >>> digits_from_str("")
        [0]
    """
    first_non_zero = len(text) - len(text.lstrip("0"))
    if first_non_zero == len(text):
        return [0]

    digits: list[int] = []
    for position in range(len(text) - 1, first_non_zero - 1, -1):
        char = text[position]
        if char not in DIGIT_CHARS:
            raise InvalidFormat(
                f"Non-digit character {char!r} at position {position} in {text!r}"
            )
        digits.append(ord(char) - ord("0"))
    return digits


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def digits_to_str(digits: list[int]) -> str:
    """Каноническая десятичная запись: старшая цифра первой, без ведущих нулей."""
    return "".join(DIGIT_CHARS[d] for d in reversed(digits))


def digits_to_int(digits: list[int]) -> int:
    """Обратное преобразование в native int (схема Горнера)."""
    result = 0
    for d in reversed(digits):
        result = result * BASE + d
    return result
