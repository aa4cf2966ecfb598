"""
Core math modules для BigNatural

Алгоритмы над последовательностями десятичных цифр (младшая цифра первой)
и таксономия ошибок арифметического ядра.
"""

# Errors
from src.core.math.errors import (
    BigNaturalError,
    DivideByZero,
    ErrorKind,
    InvalidArgument,
    InvalidFormat,
    Underflow,
)

# Digit Store
from src.core.math.digits import (
    BASE,
    DIGIT_CHARS,
    digits_from_int,
    digits_from_str,
    digits_to_int,
    digits_to_str,
    is_zero,
    remove_leading_zeros,
)

# Comparison
from src.core.math.comparison import (
    compare_digits,
    digits_equal,
    digits_less,
)

# Core Arithmetic
from src.core.math.arithmetic import (
    add_inplace,
    divmod_digits,
    mul_digits,
    sub_inplace,
)

__all__ = [
    # Errors
    "BigNaturalError",
    "DivideByZero",
    "ErrorKind",
    "InvalidArgument",
    "InvalidFormat",
    "Underflow",
    # Digit Store — Constants
    "BASE",
    "DIGIT_CHARS",
    # Digit Store — Functions
    "digits_from_int",
    "digits_from_str",
    "digits_to_int",
    "digits_to_str",
    "is_zero",
    "remove_leading_zeros",
    # Comparison
    "compare_digits",
    "digits_equal",
    "digits_less",
    # Core Arithmetic
    "add_inplace",
    "divmod_digits",
    "mul_digits",
    "sub_inplace",
]
