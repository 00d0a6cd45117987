"""
Тесты для политики tan(x)

Проверяемые инварианты:
1. tan(x) = sin(x) / cos(x) для редуцированного угла
2. |cos(x)| < 1e-12 → UNDEFINED_TANGENT, без NaN/Inf
3. Порог применяется к cos, вычисленному рядом
"""

import math

import pytest

from src.core.domain.outcome import ErrorKind, TrigOutcome
from src.core.math import series
from src.core.math.tangent import tan


class TestTanDefined:
    """Тесты определённого тангенса."""

    def test_zero(self):
        """tan(0) == 0."""
        result = tan(0.0)
        assert result.ok
        assert result.value == pytest.approx(0.0, abs=1e-10)

    def test_quarter_pi(self):
        """tan(π/4) ≈ 1."""
        result = tan(math.pi / 4)
        assert result.ok
        assert result.value == pytest.approx(1.0, abs=1e-6)

    def test_negative_quarter_pi(self):
        """tan(-π/4) ≈ -1."""
        assert tan(-math.pi / 4).value == pytest.approx(-1.0, abs=1e-6)

    def test_pi(self):
        """tan(±π) ≈ 0."""
        assert tan(math.pi).value == pytest.approx(0.0, abs=1e-6)
        assert tan(-math.pi).value == pytest.approx(0.0, abs=1e-6)

    @pytest.mark.parametrize("x", [0.1, 0.5, 1.0, 1.5, -1.2, 2.5, -3.0])
    def test_matches_math_tan(self, x):
        """Вдали от асимптот совпадает с math.tan."""
        assert tan(x).value == pytest.approx(math.tan(x), rel=1e-9)

    def test_is_sin_over_cos(self):
        """Результат в точности sin(x) / cos(x) рядов."""
        x = 0.7
        assert tan(x).value == series.sin(x) / series.cos(x)


class TestTanUndefined:
    """Тесты неопределённого тангенса."""

    def test_half_pi_undefined(self):
        """tan(π/2) не определён."""
        result = tan(math.pi / 2)
        assert not result.ok
        assert result.error == ErrorKind.UNDEFINED_TANGENT
        assert result.value is None

    def test_minus_half_pi_undefined(self):
        """tan(-π/2) не определён."""
        assert tan(-math.pi / 2).error == ErrorKind.UNDEFINED_TANGENT

    def test_returns_outcome_not_nan(self):
        """Неопределённость — явный исход, не NaN/Inf и не исключение."""
        result = tan(math.pi / 2)
        assert isinstance(result, TrigOutcome)
        assert result.detail == "cos≈0"

    def test_near_but_not_at_asymptote_defined(self):
        """В 1e-6 рад от π/2 cos ≈ 1e-6 > eps → тангенс определён и велик."""
        result = tan(math.pi / 2 - 1e-6)
        assert result.ok
        assert result.value == pytest.approx(1e6, rel=1e-6)

    def test_threshold_uses_series_cosine(self, monkeypatch):
        """Решение принимается по cos из ряда, а не по math.cos."""
        monkeypatch.setattr("src.core.math.tangent.cos", lambda x: 5e-13)
        assert tan(0.3).error == ErrorKind.UNDEFINED_TANGENT

        monkeypatch.setattr("src.core.math.tangent.cos", lambda x: 1e-12)
        assert tan(0.3).ok


class TestTanNonFinite:
    """Неконечный аргумент — явный исход INVALID_INPUT."""

    @pytest.mark.parametrize("x", [math.nan, math.inf, -math.inf])
    def test_non_finite_rejected(self, x):
        result = tan(x)
        assert result.error == ErrorKind.INVALID_INPUT
        assert result.value is None
