"""
Input Validator — разбор строки пользователя в угол (градусы)

Единственный источник истины для числового разбора ввода: и расчёт,
и live-валидация поля ввода в presentation-слое вызывают parse_input.

Грамматика совпадает с JVM Double.parseDouble:
- обрамляющие символы с кодом <= U+0020 игнорируются
- [+-] digits [. digits] [(e|E) [+-] digits] [f|F|d|D]
- шестнадцатеричные литералы: 0x1.8p1
- NaN / Infinity распознаются, но отклоняются как невалидный ввод

Python-специфичные формы (1_000, inf, nan, infinity) НЕ принимаются.
"""

import re
from enum import Enum
from typing import Final, Optional

from src.core.domain.outcome import ErrorKind, TrigOutcome
from src.core.math.numerical_safeguards import is_valid_float


# =============================================================================
# GRAMMAR
# =============================================================================

_DECIMAL_PATTERN: Final = re.compile(
    r"(?P<number>[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)[fFdD]?"
)

_HEX_PATTERN: Final = re.compile(
    r"(?P<number>[+-]?0[xX](?:[0-9a-fA-F]+\.?|[0-9a-fA-F]*\.[0-9a-fA-F]+)"
    r"[pP][+-]?[0-9]+)[fFdD]?"
)

_SPECIAL_PATTERN: Final = re.compile(r"(?P<sign>[+-]?)(?P<word>NaN|Infinity)")

# Ключевое слово выхода для presentation-слоя
EXIT_KEYWORD: Final[str] = "exit"

DETAIL_EMPTY: Final[str] = "Empty input"
DETAIL_NON_NUMERIC: Final[str] = "Non-numeric input"
DETAIL_NOT_FINITE: Final[str] = "NaN or Infinite value"


class InputStatus(str, Enum):
    """Состояние live-валидации поля ввода"""

    EMPTY = "EMPTY"
    VALID = "VALID"
    INVALID = "INVALID"


# =============================================================================
# HELPERS
# =============================================================================


def _strip_control(text: str) -> str:
    """Удаление обрамляющих пробелов и управляющих символов (код <= U+0020)."""
    start = 0
    end = len(text)
    while start < end and ord(text[start]) <= 0x20:
        start += 1
    while end > start and ord(text[end - 1]) <= 0x20:
        end -= 1
    return text[start:end]


def _parse_number(text: str) -> Optional[float]:
    """
    Разбор уже обрезанной строки.

    Returns:
        float (возможно NaN/Inf) либо None, если строка не число
    """
    special = _SPECIAL_PATTERN.fullmatch(text)
    if special is not None:
        if special.group("word") == "NaN":
            return float("nan")
        return float("-inf") if special.group("sign") == "-" else float("inf")

    decimal = _DECIMAL_PATTERN.fullmatch(text)
    if decimal is not None:
        return float(decimal.group("number"))

    hexadecimal = _HEX_PATTERN.fullmatch(text)
    if hexadecimal is not None:
        try:
            return float.fromhex(hexadecimal.group("number"))
        except OverflowError:
            # Экспонента за пределами double: эквивалент Infinity
            return float("inf")

    return None


# =============================================================================
# PUBLIC API
# =============================================================================


def parse_input(text: Optional[str]) -> TrigOutcome:
    """
    Валидация и разбор угла в градусах.

    Args:
        text: Строка, введённая пользователем (None трактуется как пустая)

    Returns:
        TrigOutcome.success(degrees) с неизменённым значением, либо
        TrigOutcome.failure(INVALID_INPUT) если строка пустая, не является
        числом или задаёт NaN/Infinity

    Examples:
        >>> parse_input("45").value
        45.0
        >>> parse_input("  -1.5e2  ").value
        -150.0
        >>> parse_input("abc").error
        <ErrorKind.INVALID_INPUT: 'INVALID_INPUT'>
    """
    if text is None:
        return TrigOutcome.failure(ErrorKind.INVALID_INPUT, DETAIL_EMPTY)

    stripped = _strip_control(text)
    if not stripped:
        return TrigOutcome.failure(ErrorKind.INVALID_INPUT, DETAIL_EMPTY)

    value = _parse_number(stripped)
    if value is None:
        return TrigOutcome.failure(ErrorKind.INVALID_INPUT, DETAIL_NON_NUMERIC)

    if not is_valid_float(value):
        return TrigOutcome.failure(ErrorKind.INVALID_INPUT, DETAIL_NOT_FINITE)

    return TrigOutcome.success(value)


def is_valid_input(text: Optional[str]) -> bool:
    """True если parse_input(text) успешен."""
    return parse_input(text).ok


def input_status(text: Optional[str]) -> InputStatus:
    """
    Состояние поля ввода для live-валидации.

    Пустая строка — EMPTY (не ошибка, пользователь ещё не начал ввод).
    """
    if text is None or not _strip_control(text):
        return InputStatus.EMPTY
    return InputStatus.VALID if is_valid_input(text) else InputStatus.INVALID


def is_exit_command(text: Optional[str]) -> bool:
    """True если введено ключевое слово выхода (без учёта регистра).

    Обрезка краёв та же, что в parse_input (символы с кодом <= U+0020).
    """
    if text is None:
        return False
    return _strip_control(text).lower() == EXIT_KEYWORD
