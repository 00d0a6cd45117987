"""
Domain models and value objects.

Contains the result type of the tangent pipeline and its error kinds.
"""

from src.core.domain.outcome import (
    ErrorKind,
    InvalidInputError,
    TangentCalculationError,
    TrigOutcome,
    UndefinedTangentError,
)

__all__ = [
    "ErrorKind",
    "InvalidInputError",
    "TangentCalculationError",
    "TrigOutcome",
    "UndefinedTangentError",
]
