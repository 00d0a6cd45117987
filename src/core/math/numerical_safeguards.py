"""
Numerical Safeguards — константы и epsilon-примитивы тригонометрического ядра

Модуль задаёт все численные константы, от которых зависит воспроизводимость
расчёта tan(x):
- π в виде литерала (50+ значащих цифр), НЕ math.pi платформы
- Порог сингулярности tan(x) (|cos(x)| < EPS_TAN_UNDEFINED)
- Фиксированное число членов ряда Маклорена
- NaN/Inf проверки и epsilon-сравнения

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Конвертер углов и редуктор диапазона используют один и тот же PI
2. MAX_SERIES_TERMS не конфигурируется
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# МАТЕМАТИЧЕСКИЕ КОНСТАНТЫ
# =============================================================================

# π с 51 значащей цифрой; округляется до ближайшего double при импорте
PI: Final[float] = 3.14159265358979323846264338327950288419716939937510

# Полный оборот в радианах (для редукции диапазона)
TWO_PI: Final[float] = 2 * PI


# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Порог, ниже которого cos(x) считается нулём и tan(x) не определён.
# Применяется к cos, вычисленному рядом, а не к math.cos
EPS_TAN_UNDEFINED: Final[float] = 1e-12

# Количество членов ряда Маклорена для sin/cos на [-π, π]
MAX_SERIES_TERMS: Final[int] = 15


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_near_zero(value: float, eps: float = EPS_TAN_UNDEFINED) -> bool:
    """
    Строгая проверка близости к нулю: abs(value) < eps.

    Значение, равное eps по модулю, нулём НЕ считается.

    Args:
        value: Проверяемое значение
        eps: Положительный порог (default: EPS_TAN_UNDEFINED)

    Returns:
        True если abs(value) < eps

    Raises:
        ValueError: Если eps <= 0

    Examples:
        >>> is_near_zero(1e-13)
        True
        >>> is_near_zero(1e-12)
        False
        >>> is_near_zero(-0.5, eps=1.0)
        True
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    return abs(value) < eps
