"""
Angles — конверсия градусов в радианы и редукция диапазона

Единственный допустимый способ получить аргумент для рядов sin/cos:
    degrees → to_radians → normalize_radians → [-π, π]

Редукция обязательна: усечённый ряд Маклорена теряет точность при росте |x|.
Оба преобразования используют PI из numerical_safeguards.
"""

import math
from typing import Final

from src.core.math.numerical_safeguards import PI, TWO_PI, is_valid_float

# Полный оборот в градусах
FULL_TURN_DEGREES: Final[float] = 360.0


def to_radians(degrees: float) -> float:
    """
    Конверсия: градусы → радианы.

    radians = degrees * PI / 180

    Порядок операций фиксирован (сначала умножение на PI), чтобы результат
    совпадал бит-в-бит с эталонными значениями.

    Для |degrees| > ~5.7e307 произведение degrees * PI переполняет double.
    В этом случае угол сначала редуцируется по полному обороту
    (fmod(degrees, 360), остаток вычисляется точно), и результат остаётся
    конечным для любого конечного входа.

    Args:
        degrees: Угол в градусах (любое конечное значение)

    Returns:
        Угол в радианах

    Examples:
        >>> to_radians(0.0)
        0.0
        >>> to_radians(180.0) == PI
        True
        >>> math.isfinite(to_radians(1e308))
        True
    """
    radians = degrees * PI / 180.0

    if not is_valid_float(radians) and is_valid_float(degrees):
        radians = math.fmod(degrees, FULL_TURN_DEGREES) * PI / 180.0

    return radians


def normalize_radians(radians: float) -> float:
    """
    Редукция угла в интервал [-π, π].

    Алгоритм:
        r = fmod(radians, 2π)   # остаток со знаком делимого
        r > π  → r -= 2π
        r < -π → r += 2π

    math.fmod, а не оператор %: остаток Python берёт знак делителя,
    что сдвинуло бы отрицательные углы.

    Не выбрасывает исключений: для NaN/Inf эквивалентного угла нет,
    возвращается NaN (tan отклоняет такой аргумент явным исходом).

    Args:
        radians: Угол в радианах

    Returns:
        Эквивалентный угол в [-π, π]; для значений внутри интервала
        возвращается исходное значение (идемпотентность)

    Examples:
        >>> normalize_radians(3 * PI) == PI
        True
        >>> normalize_radians(-3 * PI) == -PI
        True
    """
    if not is_valid_float(radians):
        return math.nan

    r = math.fmod(radians, TWO_PI)

    if r > PI:
        r -= TWO_PI

    if r < -PI:
        r += TWO_PI

    return r
