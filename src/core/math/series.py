"""
Series — sin/cos через усечённые ряды Маклорена

ФОРМУЛЫ (ровно MAX_SERIES_TERMS = 15 членов):
    sin(x) = Σ_{n=0}^{14} (-1)^n x^(2n+1) / (2n+1)!
    cos(x) = Σ_{n=0}^{14} (-1)^n x^(2n)   / (2n)!

Члены считаются рекуррентно, без факториалов и степеней:
    sin: term_n = term_{n-1} * (-x² / ((2n)(2n+1))),   term_0 = x
    cos: term_n = term_{n-1} * (-x² / ((2n-1)(2n))),   term_0 = 1

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Аргумент предварительно редуцирован в [-π, π] (см. angles.normalize_radians)
2. Число членов и порядок операций фиксированы: результаты сравниваются
   с эталонными векторами бит-в-бит
3. sin(0) == 0.0 и cos(0) == 1.0 точно
"""

from src.core.math.numerical_safeguards import MAX_SERIES_TERMS


def sin(x: float) -> float:
    """
    sin(x) рядом Маклорена из MAX_SERIES_TERMS членов.

    Args:
        x: Угол в радианах, ожидается в [-π, π]

    Returns:
        Приближение sin(x)
    """
    term = x
    total = x

    for n in range(1, MAX_SERIES_TERMS):
        term *= -x * x / ((2 * n) * (2 * n + 1))
        total += term

    return total


def cos(x: float) -> float:
    """
    cos(x) рядом Маклорена из MAX_SERIES_TERMS членов.

    Args:
        x: Угол в радианах, ожидается в [-π, π]

    Returns:
        Приближение cos(x)
    """
    term = 1.0
    total = 1.0

    for n in range(1, MAX_SERIES_TERMS):
        term *= -x * x / ((2 * n - 1) * (2 * n))
        total += term

    return total
