"""
DemoReport — модель отчёта демонстрационного драйвера

Immutable Pydantic модели. Полная совместимость с JSON Schema
(contracts/schema/demo_report.json): model_dump(mode="json") проходит
validate_demo_report.
"""

from enum import Enum

from pydantic import BaseModel, Field

from src.core.domain.big_natural import BigNatural

# =============================================================================
# ENUMS
# =============================================================================


class DemoSection(str, Enum):
    """Группа вычислений (в тексте группы разделены пустой строкой)"""

    BASIC = "basic"
    DIVISION = "division"
    POWER = "power"
    SPECIAL = "special"


# =============================================================================
# MODELS
# =============================================================================


class Computation(BaseModel):
    """Одно вычисление: подпись и результат."""

    section: DemoSection = Field(..., description="Группа вычисления")
    label: str = Field(..., min_length=1, description="Подпись, например 'a + b'")
    result: BigNatural = Field(..., description="Результат (в JSON — десятичная строка)")

    model_config = {"frozen": True}


class DemoReport(BaseModel):
    """
    Отчёт демонстрации.

    Immutable модель (frozen=True). Порядок computations совпадает с порядком
    печати в текстовом режиме.
    """

    schema_version: str = Field(
        "1", pattern="^1$", description="Версия схемы для tracking совместимости"
    )
    computations: list[Computation] = Field(
        ..., min_length=1, description="Вычисления в порядке вывода"
    )

    model_config = {"frozen": True}

    def by_label(self, label: str) -> BigNatural:
        """Результат по подписи.

        Raises:
            KeyError: Если подписи нет в отчёте
        """
        for computation in self.computations:
            if computation.label == label:
                return computation.result
        raise KeyError(label)
