"""Demo Driver — печать примеров вычислений BigNatural.

Режимы вывода:
- текст (по умолчанию): строки "label = result", группы через пустую строку
- JSON (--json): DemoReport, предварительно проверенный контрактом demo_report

Код возврата: 0 при успехе, 1 при ошибке арифметического ядра.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from src.combinatorics import catalan, factorial, fibonacci
from src.core.contracts import validate_demo_report
from src.core.domain.big_natural import BigNatural, isqrt
from src.core.math.errors import BigNaturalError
from src.demo.config import DemoConfig
from src.demo.report import Computation, DemoReport, DemoSection

logger = logging.getLogger(__name__)


def build_report(config: DemoConfig) -> DemoReport:
    """Выполнение всех вычислений демонстрации.

    Raises:
        BigNaturalError: Если входные данные конфигурации невалидны
            (например, операнд не является десятичной строкой или b < a)
    """
    a = BigNatural.parse(config.operand_a)
    b = BigNatural.parse(config.operand_b)
    dividend = BigNatural.parse(config.dividend)
    divisor = BigNatural.parse(config.divisor)
    power_base = BigNatural.parse(config.power_base)
    sqrt_target = BigNatural.parse(config.sqrt_target)

    entries = [
        (DemoSection.BASIC, "a", a),
        (DemoSection.BASIC, "b", b),
        (DemoSection.BASIC, "a + b", a + b),
        (DemoSection.BASIC, "b - a", b - a),
        (DemoSection.BASIC, "a * b", a * b),
        (DemoSection.DIVISION, f"{dividend} / {divisor}", dividend // divisor),
        (DemoSection.DIVISION, f"{dividend} % {divisor}", dividend % divisor),
        (
            DemoSection.POWER,
            f"{power_base}^{config.power_exponent}",
            power_base.pow(config.power_exponent),
        ),
        (DemoSection.POWER, f"sqrt({sqrt_target})", isqrt(sqrt_target)),
        (DemoSection.SPECIAL, f"{config.factorial_n}!", factorial(config.factorial_n)),
        (DemoSection.SPECIAL, f"fib({config.fibonacci_n})", fibonacci(config.fibonacci_n)),
        (DemoSection.SPECIAL, f"catalan({config.catalan_n})", catalan(config.catalan_n)),
    ]

    for section, label, result in entries:
        logger.debug("%s: %s = %s", section.value, label, result)

    return DemoReport(
        computations=[
            Computation(section=section, label=label, result=result)
            for section, label, result in entries
        ]
    )


def render_text(report: DemoReport) -> str:
    """Текстовый вывод: одна строка на вычисление, пустая строка между группами."""
    lines: List[str] = []
    previous_section: Optional[DemoSection] = None

    for computation in report.computations:
        if previous_section is not None and computation.section != previous_section:
            lines.append("")
        lines.append(f"{computation.label} = {computation.result}")
        previous_section = computation.section

    return "\n".join(lines)


def main(argv: Optional[List[str]] = None, config: Optional[DemoConfig] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m src.demo",
        description="Print sample BigNatural computations.",
    )
    parser.add_argument("--json", action="store_true", help="emit a JSON report")
    parser.add_argument("--verbose", action="store_true", help="enable DEBUG logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        report = build_report(config or DemoConfig())
    except BigNaturalError as e:
        logger.error("Demo failed (%s): %s", e.kind.value, e)
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.json:
        payload = report.model_dump(mode="json")
        validate_demo_report(payload)
        print(json.dumps(payload, indent=2))
    else:
        print(render_text(report))
    return 0
