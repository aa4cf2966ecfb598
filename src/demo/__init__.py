"""Demo — демонстрационный драйвер BigNatural.

Печатает примеры вычислений (арифметика, деление, степень, корень,
комбинаторика) в текстовом виде или как JSON отчёт, валидируемый
контрактом contracts/schema/demo_report.json.
"""

from .config import DemoConfig
from .driver import build_report, main, render_text
from .report import Computation, DemoReport, DemoSection

__all__ = [
    "DemoConfig",
    "DemoSection",
    "Computation",
    "DemoReport",
    "build_report",
    "render_text",
    "main",
]
