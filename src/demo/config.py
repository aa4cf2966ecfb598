"""Конфигурация демонстрационного драйвера."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DemoConfig:
    """Входные данные демонстрации.

    Операнды — десятичные строки (разбираются BigNatural.parse), аргументы
    комбинаторных функций и показатель степени — native int.
    """
    operand_a: str = "123456789"
    operand_b: str = "987654321"
    dividend: str = "100"
    divisor: str = "3"
    power_base: str = "2"
    power_exponent: int = 10
    sqrt_target: str = "1000000"
    factorial_n: int = 5
    fibonacci_n: int = 10
    catalan_n: int = 4
