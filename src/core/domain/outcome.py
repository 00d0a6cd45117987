"""
TrigOutcome — результат шага тригонометрического конвейера

Immutable Pydantic модель: либо конечное число, либо одна из двух
доменных ошибок (ErrorKind). Ядро НЕ выбрасывает исключения для ожидаемых
доменных условий и НЕ возвращает NaN/Inf молча.

Исключения (TangentCalculationError и наследники) возникают только в
TrigOutcome.unwrap() — для вызывающего кода, которому удобнее try/except.
"""

import math
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class ErrorKind(str, Enum):
    """Вид доменной ошибки"""

    INVALID_INPUT = "INVALID_INPUT"
    UNDEFINED_TANGENT = "UNDEFINED_TANGENT"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class TangentCalculationError(Exception):
    """Базовое исключение доменных ошибок (только через TrigOutcome.unwrap)."""

    kind: ErrorKind

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class InvalidInputError(TangentCalculationError):
    """Строка пустая, не является числом, либо задаёт NaN/Infinity."""

    kind = ErrorKind.INVALID_INPUT


class UndefinedTangentError(TangentCalculationError):
    """
    cos(x) неотличим от нуля: угол в окрестности нечётного кратного π/2.

    Это корректный математический исход, а не сбой.
    """

    kind = ErrorKind.UNDEFINED_TANGENT


_ERRORS_BY_KIND = {
    ErrorKind.INVALID_INPUT: InvalidInputError,
    ErrorKind.UNDEFINED_TANGENT: UndefinedTangentError,
}


# =============================================================================
# OUTCOME
# =============================================================================


class TrigOutcome(BaseModel):
    """
    Результат: value XOR error.

    Поля:
        value: Конечный результат (None при ошибке)
        error: Вид ошибки (None при успехе)
        detail: Пояснение причины ошибки (пусто при успехе)
    """

    value: Optional[float] = Field(default=None, description="Конечный результат")
    error: Optional[ErrorKind] = Field(default=None, description="Вид доменной ошибки")
    detail: str = Field(default="", description="Пояснение причины ошибки")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_exclusive(self) -> "TrigOutcome":
        """Ровно одно из value/error; value всегда конечное"""
        if (self.value is None) == (self.error is None):
            raise ValueError("exactly one of value or error must be set")
        if self.value is not None and not math.isfinite(self.value):
            raise ValueError(f"value must be finite, got {self.value}")
        return self

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def success(cls, value: float) -> "TrigOutcome":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, detail: str = "") -> "TrigOutcome":
        return cls(error=kind, detail=detail)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> float:
        """
        Значение или исключение, соответствующее виду ошибки.

        Returns:
            value при успехе

        Raises:
            InvalidInputError: error == INVALID_INPUT
            UndefinedTangentError: error == UNDEFINED_TANGENT
        """
        if self.error is not None:
            raise _ERRORS_BY_KIND[self.error](self.detail or self.error.value)
        return self.value
