"""
Tangent — политика вычисления tan(x) = sin(x) / cos(x)

1. x не конечен → INVALID_INPUT (угол не определён)
2. c = cos(x) рядом Маклорена
3. |c| < EPS_TAN_UNDEFINED → UNDEFINED_TANGENT (вертикальная асимптота)
4. иначе s = sin(x), результат s / c

Порог применяется к cos, вычисленному рядом: именно его погрешность около
±π/2 определяет, где tan считается неопределённым.
"""

from typing import Final

from src.core.domain.outcome import ErrorKind, TrigOutcome
from src.core.math.numerical_safeguards import EPS_TAN_UNDEFINED, is_near_zero, is_valid_float
from src.core.math.series import cos, sin

DETAIL_NON_FINITE_ANGLE: Final[str] = "NaN or Infinite angle"
DETAIL_COS_ZERO: Final[str] = "cos≈0"


def tan(x: float) -> TrigOutcome:
    """
    tan(x) для уже редуцированного угла.

    Args:
        x: Угол в радианах, ожидается в [-π, π]

    Returns:
        TrigOutcome.success(sin(x) / cos(x)) либо
        TrigOutcome.failure(UNDEFINED_TANGENT), если cos(x) ≈ 0, либо
        TrigOutcome.failure(INVALID_INPUT), если x равен NaN/Inf

    Examples:
        >>> tan(0.0).value
        0.0
        >>> tan(1.5707963267948966).error
        <ErrorKind.UNDEFINED_TANGENT: 'UNDEFINED_TANGENT'>
    """
    if not is_valid_float(x):
        return TrigOutcome.failure(ErrorKind.INVALID_INPUT, DETAIL_NON_FINITE_ANGLE)

    c = cos(x)
    if is_near_zero(c, EPS_TAN_UNDEFINED):
        return TrigOutcome.failure(ErrorKind.UNDEFINED_TANGENT, DETAIL_COS_ZERO)

    s = sin(x)
    return TrigOutcome.success(s / c)
