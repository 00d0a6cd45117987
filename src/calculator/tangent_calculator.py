"""Tangent Calculator — оркестрация конвейера tan(x) для угла в градусах.

Конвейер строго линейный:
    parse_input → to_radians → normalize_radians → tan

Первая ошибка возвращается как есть; последующие шаги не выполняются.

Дополнительно модуль формирует текст результата для presentation-слоя:
- "Result: 1.000000"        — успех (число знаков из конфигурации)
- "Result: UNDEFINED"       — UNDEFINED_TANGENT
- "Result: INVALID INPUT"   — INVALID_INPUT
- "Result: ERROR"           — непредвиденный сбой операции
"""

import logging
from dataclasses import dataclass
from typing import Final, Optional

from src.calculator.input_validator import parse_input
from src.core.domain.outcome import ErrorKind, TrigOutcome
from src.core.math.angles import normalize_radians, to_radians
from src.core.math.tangent import tan

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

VERSION: Final[str] = "1.0.0"

APPLICATION_NAME: Final[str] = "tan(x) Calculator"

RESULT_PREFIX: Final[str] = "Result:"

# Текст результата в очищенном состоянии
CLEARED_RESULT_TEXT: Final[str] = RESULT_PREFIX

_ERROR_TEXT: Final = {
    ErrorKind.UNDEFINED_TANGENT: "UNDEFINED",
    ErrorKind.INVALID_INPUT: "INVALID INPUT",
}

UNEXPECTED_ERROR_TEXT: Final[str] = f"{RESULT_PREFIX} ERROR"


# =============================================================================
# PIPELINE
# =============================================================================


def calculate_tangent(text: Optional[str]) -> TrigOutcome:
    """Тангенс угла, заданного строкой в градусах.

    Args:
        text: Строка пользователя

    Returns:
        TrigOutcome с tan(угла) либо первой ошибкой конвейера
        (INVALID_INPUT или UNDEFINED_TANGENT)
    """
    parsed = parse_input(text)
    if not parsed.ok:
        logger.debug("Input rejected: %r (%s)", text, parsed.detail)
        return parsed

    radians = to_radians(parsed.value)
    reduced = normalize_radians(radians)
    logger.debug(
        "Converted degrees->radians: %s -> %s (reduced %s)", parsed.value, radians, reduced
    )

    result = tan(reduced)
    if not result.ok:
        logger.debug("Tangent not computed for %s degrees (%s)", parsed.value, result.detail)
    return result


def format_result(outcome: TrigOutcome, decimals: int = 6) -> str:
    """Текст результата в формате "Result: ...".

    Args:
        outcome: Результат calculate_tangent
        decimals: Число знаков после запятой для успешного результата

    Returns:
        Строка для отображения

    Raises:
        ValueError: Если decimals < 0
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    if outcome.ok:
        return f"{RESULT_PREFIX} {outcome.value:.{decimals}f}"
    return f"{RESULT_PREFIX} {_ERROR_TEXT[outcome.error]}"


def application_title() -> str:
    """Заголовок окна приложения: "tan(x) Calculator v<версия>"."""
    return f"{APPLICATION_NAME} v{VERSION}"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class TangentCalculatorConfig:
    """Конфигурация калькулятора.

    Численные константы (π, epsilon, число членов ряда) не конфигурируются.
    """

    # Число знаков после запятой в тексте результата
    display_decimals: int = 6

    def __post_init__(self) -> None:
        if self.display_decimals < 0:
            raise ValueError(
                f"display_decimals must be non-negative, got {self.display_decimals}"
            )


# =============================================================================
# CALCULATOR
# =============================================================================


class TangentCalculator:
    """Фасад конвейера для presentation-слоя.

    Не хранит состояния между вызовами: каждый вызов независим,
    экземпляр можно разделять между потоками.
    """

    def __init__(self, config: TangentCalculatorConfig | None = None):
        """Инициализация калькулятора.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or TangentCalculatorConfig()

    def calculate(self, text: Optional[str]) -> TrigOutcome:
        """Расчёт tan(x) для строки в градусах (см. calculate_tangent)."""
        return calculate_tangent(text)

    def result_text(self, text: Optional[str]) -> str:
        """Расчёт и форматирование результата для отображения.

        Непредвиденный сбой завершает только текущую операцию:
        он логируется и отображается как "Result: ERROR".
        """
        try:
            outcome = self.calculate(text)
            return format_result(outcome, self.config.display_decimals)
        except Exception:
            logger.exception("Unexpected error while calculating tangent for %r", text)
            return UNEXPECTED_ERROR_TEXT
