"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Деление по правилам IEEE-754 (inf/nan вместо ZeroDivisionError)
2. NaN-пропагирующие min/max
3. Epsilon-сравнения float
"""

import math

import pytest

from src.core.math.numerical_safeguards import (
    EPS_GEOM_COMPARE_ABS,
    ieee_cos,
    ieee_divide,
    ieee_max,
    ieee_min,
    ieee_sin,
    is_close,
    is_valid_float,
    is_zero,
)

# =============================================================================
# ТЕСТЫ IEEE-754 ДЕЛЕНИЯ
# =============================================================================


class TestIeeeDivide:
    """Тесты для ieee_divide"""

    def test_regular_division(self) -> None:
        """Обычное деление не отличается от оператора /"""
        assert ieee_divide(10.0, 4.0) == 2.5
        assert ieee_divide(-3.0, 2.0) == -1.5

    def test_positive_by_zero_is_inf(self) -> None:
        """x / 0 → +inf для положительного x"""
        assert ieee_divide(1.0, 0.0) == math.inf

    def test_negative_by_zero_is_minus_inf(self) -> None:
        """x / 0 → -inf для отрицательного x"""
        assert ieee_divide(-1.0, 0.0) == -math.inf

    def test_signed_zero_denominator(self) -> None:
        """Знак результата учитывает -0.0 в знаменателе"""
        assert ieee_divide(1.0, -0.0) == -math.inf
        assert ieee_divide(-1.0, -0.0) == math.inf

    def test_zero_by_zero_is_nan(self) -> None:
        """0 / 0 → nan"""
        assert math.isnan(ieee_divide(0.0, 0.0))
        assert math.isnan(ieee_divide(-0.0, 0.0))

    def test_nan_numerator_propagates(self) -> None:
        """nan / 0 → nan"""
        assert math.isnan(ieee_divide(math.nan, 0.0))

    def test_integer_zero_denominator(self) -> None:
        """Целочисленный ноль ведёт себя как 0.0"""
        assert ieee_divide(5, 0) == math.inf

    def test_never_raises(self) -> None:
        """ZeroDivisionError не возникает"""
        for numerator in (-2.0, -0.0, 0.0, 3.0, math.inf, -math.inf, math.nan):
            ieee_divide(numerator, 0.0)


# =============================================================================
# ТЕСТЫ NaN-ПРОПАГИРУЮЩИХ MIN/MAX
# =============================================================================


class TestIeeeMinMax:
    """Тесты для ieee_min / ieee_max"""

    def test_regular_values(self) -> None:
        """Обычные значения"""
        assert ieee_min(1.0, 2.0) == 1.0
        assert ieee_min(2.0, 1.0) == 1.0
        assert ieee_max(1.0, 2.0) == 2.0
        assert ieee_max(2.0, 1.0) == 2.0

    @pytest.mark.parametrize("a,b", [(math.nan, 1.0), (1.0, math.nan), (math.nan, math.nan)])
    def test_nan_propagates_in_any_order(self, a: float, b: float) -> None:
        """NaN возвращается независимо от порядка аргументов"""
        assert math.isnan(ieee_min(a, b))
        assert math.isnan(ieee_max(a, b))

    def test_infinities(self) -> None:
        """Бесконечности сравниваются как обычные числа"""
        assert ieee_min(-math.inf, 0.0) == -math.inf
        assert ieee_max(math.inf, 0.0) == math.inf


# =============================================================================
# ТЕСТЫ EPSILON-СРАВНЕНИЙ
# =============================================================================


class TestFloatChecks:
    """Тесты для is_close / is_zero / is_valid_float"""

    def test_is_close_default_tolerance(self) -> None:
        """Различие ниже толерантности считается равенством"""
        assert is_close(1.0, 1.0 + 1e-12)
        assert not is_close(1.0, 1.0001)

    def test_is_close_custom_abs_tol(self) -> None:
        """Пользовательская абсолютная толерантность"""
        assert is_close(0.0, 5e-5, abs_tol=1e-4)
        assert not is_close(0.0, 5e-4, abs_tol=1e-4)

    def test_nan_is_never_close(self) -> None:
        """NaN не близок ни к чему"""
        assert not is_close(math.nan, math.nan)

    def test_is_zero(self) -> None:
        """Проверка близости к нулю"""
        assert is_zero(0.0)
        assert is_zero(-EPS_GEOM_COMPARE_ABS)
        assert not is_zero(1e-6)
        assert is_zero(1e-6, tol=1e-5)

    def test_is_valid_float(self) -> None:
        """Конечные значения валидны, NaN/Inf — нет"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1e300)
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)


class TestIeeeMinMaxSignedZeros:
    """Упорядочивание нулей разного знака"""

    @pytest.mark.parametrize("a,b", [(-0.0, 0.0), (0.0, -0.0)])
    def test_min_prefers_negative_zero(self, a: float, b: float) -> None:
        """min(-0.0, +0.0) = -0.0 при любом порядке"""
        assert math.copysign(1.0, ieee_min(a, b)) == -1.0

    @pytest.mark.parametrize("a,b", [(-0.0, 0.0), (0.0, -0.0)])
    def test_max_prefers_positive_zero(self, a: float, b: float) -> None:
        """max(-0.0, +0.0) = +0.0 при любом порядке"""
        assert math.copysign(1.0, ieee_max(a, b)) == 1.0

    def test_equal_values(self) -> None:
        """Равные ненулевые значения возвращаются как есть"""
        assert ieee_min(2.5, 2.5) == 2.5
        assert ieee_max(-1.0, -1.0) == -1.0


# =============================================================================
# ТЕСТЫ IEEE-754 ТРИГОНОМЕТРИИ
# =============================================================================


class TestIeeeTrig:
    """Тесты для ieee_cos / ieee_sin"""

    def test_finite_matches_math(self) -> None:
        """Для конечных аргументов совпадает с math.cos/math.sin"""
        for x in (0.0, 1.0, -2.5, math.pi / 3):
            assert ieee_cos(x) == math.cos(x)
            assert ieee_sin(x) == math.sin(x)

    @pytest.mark.parametrize("x", [math.inf, -math.inf, math.nan])
    def test_non_finite_is_nan(self, x: float) -> None:
        """±inf и nan дают nan без ValueError"""
        assert math.isnan(ieee_cos(x))
        assert math.isnan(ieee_sin(x))
