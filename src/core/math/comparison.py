"""
Comparison — полный порядок на нормализованных последовательностях цифр

Алгоритм:
1. Сравнение длин: более короткая последовательность строго меньше
   (корректно только для нормализованных входов, без ведущих нулей)
2. При равной длине — поразрядно от старшей цифры к младшей,
   первая различающаяся позиция определяет порядок

Только digits_less и digits_equal реализованы напрямую; остальные отношения
выводятся из них.
"""


def digits_less(a: list[int], b: list[int]) -> bool:
    """
    Строгое сравнение a < b.

    Args:
        a: Нормализованная последовательность (младшая цифра первой)
        b: Нормализованная последовательность (младшая цифра первой)

    Returns:
        True если a строго меньше b
    """
    if len(a) != len(b):
        return len(a) < len(b)

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return a[i] < b[i]
    return False


def digits_equal(a: list[int], b: list[int]) -> bool:
    """Точное равенство последовательностей."""
    return a == b


def compare_digits(a: list[int], b: list[int]) -> int:
    """
    Трёхзначное сравнение.

    Returns:
        -1 если a < b
         0 если a == b
        +1 если a > b

    Examples:
        >>> compare_digits([1, 2], [2, 1])
        -1
        >>> compare_digits([0], [0])
        0
        >>> compare_digits([0, 1], [9])
        1
    """
    if digits_less(a, b):
        return -1
    if digits_equal(a, b):
        return 0
    return 1
