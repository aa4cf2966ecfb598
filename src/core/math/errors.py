"""
BigNatural Errors — таксономия ошибок арифметического ядра

Четыре вида ошибок, различимые программно (isinstance или поле kind):
- INVALID_FORMAT: в строке после ведущих нулей встретился не-цифровой символ
- UNDERFLOW: вычитание, результат которого был бы отрицательным
- DIVIDE_BY_ZERO: деление или остаток по нулевому делителю
- INVALID_ARGUMENT: отрицательный native int (конструктор, isqrt, комбинаторика)

Каждый класс также наследует соответствующее встроенное исключение Python,
чтобы код, написанный для int, ловил те же ошибки.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Вид ошибки арифметического ядра"""

    INVALID_FORMAT = "INVALID_FORMAT"
    UNDERFLOW = "UNDERFLOW"
    DIVIDE_BY_ZERO = "DIVIDE_BY_ZERO"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"


class BigNaturalError(Exception):
    """
    Базовый класс ошибок BigNatural.

    Все ошибки детерминированы (зависят только от входов) и поднимаются
    синхронно в точке нарушения. Частичный результат не фиксируется.
    """

    kind: ErrorKind


class InvalidFormat(BigNaturalError, ValueError):
    """Строка содержит символ, не являющийся ASCII-цифрой."""

    kind = ErrorKind.INVALID_FORMAT


class Underflow(BigNaturalError, ArithmeticError):
    """Вычитание: уменьшаемое меньше вычитаемого."""

    kind = ErrorKind.UNDERFLOW


class DivideByZero(BigNaturalError, ZeroDivisionError):
    """Деление или взятие остатка по нулю."""

    kind = ErrorKind.DIVIDE_BY_ZERO


class InvalidArgument(BigNaturalError, ValueError):
    """Отрицательный аргумент там, где допустимы только неотрицательные."""

    kind = ErrorKind.INVALID_ARGUMENT
