"""
Contract Validation Module

Модуль для валидации JSON контрактов BigNatural и демонстрационного отчёта.
"""

from .validators import (
    BigNaturalValidator,
    ContractValidator,
    DemoReportValidator,
    SchemaLoader,
    validate_big_natural,
    validate_demo_report,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigNaturalValidator",
    "DemoReportValidator",
    # Functions
    "validate_big_natural",
    "validate_demo_report",
]
