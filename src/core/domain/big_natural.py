"""
BigNatural — неотрицательное целое произвольной точности

Value-тип над десятичным хранилищем цифр (src.core.math.digits):
- Построение из native int, десятичной строки или копированием
- Полный порядок (< и == напрямую, остальное через total_ordering)
- Арифметика: + - * // % divmod, составные формы += -= *= //= %=
- Производные операции: pow (повторное умножение), isqrt (бинарный поиск)
- Текст: str / repr / parse, потоковые read / write
- Интеграция с Pydantic v2 (поле модели, сериализуется в десятичную строку)

СЕМАНТИКА МУТАЦИИ:
    Составные операторы изменяют левый операнд и возвращают его же.
    Бинарные операторы копируют левый операнд и применяют составную форму.
    Все проверки предусловий выполняются до мутации, поэтому при ошибке
    значение не меняется. Из-за мутабельности тип не хэшируется (как list).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Хранилище нормализовано после каждой публичной операции
2. Отрицательное значение не может возникнуть (Underflow / InvalidArgument)
3. Каждый экземпляр владеет своим списком цифр эксклюзивно
"""

from functools import total_ordering
from typing import Any, Final, TextIO, Union

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from src.core.math.arithmetic import add_inplace, divmod_digits, mul_digits, sub_inplace
from src.core.math.comparison import digits_equal, digits_less
from src.core.math.digits import (
    digits_from_int,
    digits_from_str,
    digits_to_int,
    digits_to_str,
    is_zero,
)
from src.core.math.errors import DivideByZero, InvalidArgument

# Каноническая десятичная запись (без ведущих нулей, "0" для нуля)
CANONICAL_PATTERN: Final[str] = "^(0|[1-9][0-9]*)$"

Operand = Union["BigNatural", int]


@total_ordering
class BigNatural:
    """
    Неотрицательное целое произвольной точности.

    Examples:
        >>> BigNatural("123456789") + BigNatural("987654321")
        BigNatural('1111111110')
        >>> BigNatural(100) // 3, BigNatural(100) % 3
        (BigNatural('33'), BigNatural('1'))
        >>> BigNatural(2) ** 10
        BigNatural('1024')
    """

    __slots__ = ("_digits",)

    def __init__(self, value: Union["BigNatural", int, str] = 0) -> None:
        """
        Args:
            value: BigNatural (копия), неотрицательный int или десятичная строка

        Raises:
            InvalidArgument: Отрицательный int
            InvalidFormat: Строка с не-цифровым символом
            TypeError: Неподдерживаемый тип
        """
        if isinstance(value, BigNatural):
            self._digits: list[int] = list(value._digits)
        elif isinstance(value, bool):
            raise TypeError("bool is not a valid BigNatural source")
        elif isinstance(value, int):
            self._digits = digits_from_int(value)
        elif isinstance(value, str):
            self._digits = digits_from_str(value)
        else:
            raise TypeError(
                f"Cannot build BigNatural from {type(value).__name__}"
            )

    # =========================================================================
    # КОНСТРУКТОРЫ И КОПИРОВАНИЕ
    # =========================================================================

    @classmethod
    def parse(cls, text: str) -> "BigNatural":
        """Разбор десятичной строки (ведущие нули допустимы)."""
        return cls(text)

    @classmethod
    def read(cls, stream: TextIO) -> "BigNatural":
        """
        Чтение одного токена, разделённого пробельными символами, из потока.

        Ведущие пробелы пропускаются. Исчерпанный поток даёт пустой токен,
        то есть ноль.
        """
        chars: list[str] = []
        while True:
            char = stream.read(1)
            if not char:
                break
            if char.isspace():
                if chars:
                    break
                continue
            chars.append(char)
        return cls.parse("".join(chars))

    def copy(self) -> "BigNatural":
        return BigNatural(self)

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> "BigNatural":
        return BigNatural(self)

    # =========================================================================
    # ХРАНИЛИЩЕ
    # =========================================================================

    @property
    def digits(self) -> tuple[int, ...]:
        """Цифры, младшая первой (копия, только для чтения)."""
        return tuple(self._digits)

    def is_zero(self) -> bool:
        return is_zero(self._digits)

    def length(self) -> int:
        """Количество десятичных цифр."""
        return len(self._digits)

    def __len__(self) -> int:
        return len(self._digits)

    def __bool__(self) -> bool:
        return not self.is_zero()

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BigNatural):
            return digits_equal(self._digits, other._digits)
        if isinstance(other, int) and not isinstance(other, bool):
            return other >= 0 and digits_equal(self._digits, digits_from_int(other))
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, BigNatural):
            return digits_less(self._digits, other._digits)
        if isinstance(other, int) and not isinstance(other, bool):
            # Неотрицательное значение никогда не меньше отрицательного
            return other >= 0 and digits_less(self._digits, digits_from_int(other))
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    # =========================================================================
    # СОСТАВНЫЕ (IN-PLACE) ОПЕРАЦИИ
    # =========================================================================

    def __iadd__(self, other: Operand) -> "BigNatural":
        operand = _coerce(other)
        if operand is NotImplemented:
            return NotImplemented
        add_inplace(self._digits, _private_digits(self, operand))
        return self

    def __isub__(self, other: Operand) -> "BigNatural":
        operand = _coerce(other)
        if operand is NotImplemented:
            return NotImplemented
        sub_inplace(self._digits, _private_digits(self, operand))
        return self

    def __imul__(self, other: Operand) -> "BigNatural":
        operand = _coerce(other)
        if operand is NotImplemented:
            return NotImplemented
        self._digits = mul_digits(self._digits, operand._digits)
        return self

    def __ifloordiv__(self, other: Operand) -> "BigNatural":
        operand = _coerce(other)
        if operand is NotImplemented:
            return NotImplemented
        self._digits, _ = divmod_digits(self._digits, operand._digits)
        return self

    def __imod__(self, other: Operand) -> "BigNatural":
        """
        self = self - (self // other) * other

        Остаток выводится из деления, поэтому
        dividend == quotient * divisor + remainder выполняется по построению.
        """
        divisor = _coerce(other)
        if divisor is NotImplemented:
            return NotImplemented
        if divisor.is_zero():
            raise DivideByZero("Modulo by zero")

        quotient = self // divisor
        self -= quotient * divisor
        return self

    # =========================================================================
    # БИНАРНЫЕ ОПЕРАЦИИ (copy-then-mutate)
    # =========================================================================

    def __add__(self, other: Operand) -> "BigNatural":
        result = self.copy()
        return result.__iadd__(other)

    def __sub__(self, other: Operand) -> "BigNatural":
        result = self.copy()
        return result.__isub__(other)

    def __mul__(self, other: Operand) -> "BigNatural":
        result = self.copy()
        return result.__imul__(other)

    def __floordiv__(self, other: Operand) -> "BigNatural":
        result = self.copy()
        return result.__ifloordiv__(other)

    def __mod__(self, other: Operand) -> "BigNatural":
        result = self.copy()
        return result.__imod__(other)

    def __divmod__(self, other: Operand) -> tuple["BigNatural", "BigNatural"]:
        """
        (quotient, remainder) за одно деление.

        remainder = self - quotient * other, как и в операторе %.
        """
        divisor = _coerce(other)
        if divisor is NotImplemented:
            return NotImplemented
        quotient = self // divisor
        remainder = self - quotient * divisor
        return quotient, remainder

    # int слева: int + BigNatural, 5 - BigNatural(3) и т.д.

    def __radd__(self, other: int) -> "BigNatural":
        operand = _coerce(other)
        if operand is NotImplemented:
            return NotImplemented
        return operand + self

    def __rsub__(self, other: int) -> "BigNatural":
        operand = _coerce(other)
        if operand is NotImplemented:
            return NotImplemented
        return operand - self

    def __rmul__(self, other: int) -> "BigNatural":
        operand = _coerce(other)
        if operand is NotImplemented:
            return NotImplemented
        return operand * self

    def __rfloordiv__(self, other: int) -> "BigNatural":
        operand = _coerce(other)
        if operand is NotImplemented:
            return NotImplemented
        return operand // self

    def __rmod__(self, other: int) -> "BigNatural":
        operand = _coerce(other)
        if operand is NotImplemented:
            return NotImplemented
        return operand % self

    def __rdivmod__(self, other: int) -> tuple["BigNatural", "BigNatural"]:
        operand = _coerce(other)
        if operand is NotImplemented:
            return NotImplemented
        return divmod(operand, self)

    # =========================================================================
    # ПРОИЗВОДНЫЕ ОПЕРАЦИИ
    # =========================================================================

    def pow(self, exponent: Operand) -> "BigNatural":
        """
        Возведение в степень повторным умножением.

        Счётчик цикла — BigNatural, поэтому показатель может быть сколь угодно
        большим; время работы линейно по величине показателя.
        0 ** 0 == 1.

        Args:
            exponent: Показатель (BigNatural или неотрицательный int)

        Returns:
            self ** exponent (новое значение)
        """
        exponent = BigNatural(exponent)
        if exponent.is_zero():
            return BigNatural(1)

        result = BigNatural(1)
        counter = BigNatural(0)
        one = BigNatural(1)

        while counter < exponent:
            result *= self
            counter += one
        return result

    def __pow__(self, exponent: Operand) -> "BigNatural":
        if not isinstance(exponent, (BigNatural, int)) or isinstance(exponent, bool):
            return NotImplemented
        return self.pow(exponent)

    def __rpow__(self, base: int) -> "BigNatural":
        operand = _coerce(base)
        if operand is NotImplemented:
            return NotImplemented
        return operand.pow(self)

    def isqrt(self) -> "BigNatural":
        """
        Целая часть квадратного корня: floor(sqrt(self)).

        Бинарный поиск на [1, self]. Если mid * mid < self, mid запоминается
        как лучший floor и нижняя граница сдвигается на mid + 1; если больше,
        верхняя граница становится mid - 1 (mid >= 1, поэтому без Underflow).

        Examples:
            >>> BigNatural(1000000).isqrt()
            BigNatural('1000')
            >>> BigNatural(99).isqrt()
            BigNatural('9')
        """
        one = BigNatural(1)
        if self.is_zero() or self == one:
            return self.copy()

        low = BigNatural(1)
        high = self.copy()
        result = BigNatural(0)

        while low <= high:
            mid = (low + high) // 2
            mid_sq = mid * mid

            if mid_sq == self:
                return mid

            if mid_sq < self:
                low = mid + one
                result = mid
            else:
                high = mid - one
        return result

    # =========================================================================
    # ФОРМАТИРОВАНИЕ
    # =========================================================================

    def __str__(self) -> str:
        return digits_to_str(self._digits)

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self}')"

    def __int__(self) -> int:
        return digits_to_int(self._digits)

    def write(self, stream: TextIO) -> None:
        """Запись канонической десятичной формы в текстовый поток."""
        stream.write(str(self))

    # =========================================================================
    # PYDANTIC
    # =========================================================================

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Поле модели принимает BigNatural / int / str, в JSON — строка."""
        return core_schema.no_info_plain_validator_function(
            cls._validate_model_input,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize, info_arg=False, when_used="json"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "pattern": CANONICAL_PATTERN}

    @classmethod
    def _validate_model_input(cls, value: Any) -> "BigNatural":
        # Pydantic оборачивает только ValueError; InvalidFormat/InvalidArgument — ValueError
        if isinstance(value, bool) or not isinstance(value, (BigNatural, int, str)):
            raise ValueError(
                f"BigNatural expects int or decimal string, got {type(value).__name__}"
            )
        return cls(value)


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def _coerce(other: Any) -> Any:
    """BigNatural как есть, int → BigNatural, иначе NotImplemented."""
    if isinstance(other, BigNatural):
        return other
    if isinstance(other, int) and not isinstance(other, bool):
        return BigNatural(other)
    return NotImplemented


def _private_digits(target: BigNatural, operand: BigNatural) -> list[int]:
    """Цифры операнда; копия, если операнд — это сам target (a += a)."""
    if operand is target:
        return list(operand._digits)
    return operand._digits


def _serialize(value: BigNatural) -> str:
    return str(value)


def isqrt(value: Operand) -> BigNatural:
    """
    floor(sqrt(value)) для BigNatural или native int.

    Raises:
        InvalidArgument: Если value — отрицательный int
    """
    if isinstance(value, int) and not isinstance(value, bool) and value < 0:
        raise InvalidArgument(f"Square root of negative number: {value}")
    return BigNatural(value).isqrt()
