"""
Тесты для Input Validator

Проверяет:
1. Разбор корректных чисел (десятичные, экспонента, суффиксы, hex)
2. INVALID_INPUT для пустых, нечисловых строк и NaN/Infinity
3. Отклонение Python-специфичных форм (1_000, inf, nan)
4. Live-валидацию поля ввода и ключевое слово выхода
"""

import pytest

from src.calculator.input_validator import (
    DETAIL_EMPTY,
    DETAIL_NON_NUMERIC,
    DETAIL_NOT_FINITE,
    InputStatus,
    input_status,
    is_exit_command,
    is_valid_input,
    parse_input,
)
from src.core.domain.outcome import ErrorKind


# =============================================================================
# ТЕСТЫ: валидный ввод
# =============================================================================


class TestParseValid:
    """Корректный ввод возвращается без изменений."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("45", 45.0),
            ("0", 0.0),
            ("-90", -90.0),
            ("+7", 7.0),
            ("3.25", 3.25),
            (".5", 0.5),
            ("5.", 5.0),
            ("1e3", 1000.0),
            ("-1.5E-2", -0.015),
            ("720", 720.0),
            ("1.5f", 1.5),
            ("2D", 2.0),
            ("0x1.8p1", 3.0),
            ("-0X10P-4", -1.0),
        ],
    )
    def test_numbers(self, text, expected):
        result = parse_input(text)
        assert result.ok
        assert result.value == expected

    def test_surrounding_whitespace_ignored(self):
        """Пробелы и управляющие символы по краям игнорируются."""
        assert parse_input("  45  ").value == 45.0
        assert parse_input("\t-1.5\n").value == -1.5

    def test_negative_zero_preserved(self):
        """-0 сохраняет знак."""
        assert str(parse_input("-0").value) == "-0.0"

    def test_large_finite_value(self):
        """Большие конечные значения допустимы."""
        assert parse_input("1e300").value == 1e300


# =============================================================================
# ТЕСТЫ: невалидный ввод
# =============================================================================


class TestParseInvalid:
    """Невалидный ввод → INVALID_INPUT."""

    @pytest.mark.parametrize("text", ["", "   ", "\t\n", None])
    def test_empty(self, text):
        result = parse_input(text)
        assert result.error == ErrorKind.INVALID_INPUT
        assert result.detail == DETAIL_EMPTY

    @pytest.mark.parametrize(
        "text",
        [
            "abc",
            "45deg",
            "1.2.3",
            "1e",
            "e5",
            "--5",
            "+",
            ".",
            "0x10",
            "1_000",
            "inf",
            "nan",
            "infinity",
            "1 000",
            "١٢",
        ],
    )
    def test_non_numeric(self, text):
        result = parse_input(text)
        assert result.error == ErrorKind.INVALID_INPUT
        assert result.detail == DETAIL_NON_NUMERIC

    @pytest.mark.parametrize(
        "text", ["NaN", "-NaN", "Infinity", "-Infinity", "+Infinity", "1e400", "-1e400", "0x1p2000"]
    )
    def test_not_finite(self, text):
        result = parse_input(text)
        assert result.error == ErrorKind.INVALID_INPUT
        assert result.detail == DETAIL_NOT_FINITE

    def test_failure_has_no_value(self):
        """При ошибке value не задан (никогда не NaN)."""
        assert parse_input("abc").value is None


# =============================================================================
# ТЕСТЫ: live-валидация
# =============================================================================


class TestLiveValidation:
    """is_valid_input / input_status используют parse_input."""

    def test_is_valid_input(self):
        assert is_valid_input("45")
        assert not is_valid_input("abc")
        assert not is_valid_input("")
        assert not is_valid_input("NaN")

    def test_input_status(self):
        assert input_status("") == InputStatus.EMPTY
        assert input_status("   ") == InputStatus.EMPTY
        assert input_status(None) == InputStatus.EMPTY
        assert input_status("12.5") == InputStatus.VALID
        assert input_status("12,5") == InputStatus.INVALID
        assert input_status("Infinity") == InputStatus.INVALID


class TestExitCommand:
    """Ключевое слово выхода."""

    @pytest.mark.parametrize("text", ["exit", "EXIT", "  Exit  "])
    def test_exit(self, text):
        assert is_exit_command(text)

    @pytest.mark.parametrize("text", ["", "quit", "exit now", None, "45"])
    def test_not_exit(self, text):
        assert not is_exit_command(text)

    def test_trimming_matches_parse_input(self):
        """Края обрезаются так же, как в parse_input (код <= U+0020)."""
        assert is_exit_command("\texit\n")
        assert is_exit_command("\x00exit\x1f")
        assert not is_exit_command("\u00a0exit")
        assert not is_valid_input("\u00a045")
