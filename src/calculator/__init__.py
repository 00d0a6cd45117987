"""
Tangent Calculator — разбор ввода и оркестрация расчёта tan(x).

Точка входа для presentation-слоя: calculate_tangent(text).
"""

import logging

from src.calculator.input_validator import (
    EXIT_KEYWORD,
    InputStatus,
    input_status,
    is_exit_command,
    is_valid_input,
    parse_input,
)
from src.calculator.tangent_calculator import (
    CLEARED_RESULT_TEXT,
    UNEXPECTED_ERROR_TEXT,
    VERSION,
    TangentCalculator,
    TangentCalculatorConfig,
    application_title,
    calculate_tangent,
    format_result,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = VERSION

__all__ = [
    # Input validation
    "EXIT_KEYWORD",
    "InputStatus",
    "input_status",
    "is_exit_command",
    "is_valid_input",
    "parse_input",
    # Calculation
    "CLEARED_RESULT_TEXT",
    "UNEXPECTED_ERROR_TEXT",
    "VERSION",
    "TangentCalculator",
    "TangentCalculatorConfig",
    "application_title",
    "calculate_tangent",
    "format_result",
    "__version__",
]
