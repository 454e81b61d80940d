"""
Numerical Safeguards — IEEE-754 примитивы для геометрического ядра

Модуль фиксирует численные соглашения всех геометрических операций:
- Деление по правилам IEEE-754 (x/0 → ±inf, 0/0 → nan) без исключений Python
- min/max с распространением NaN (как в IEEE-754 minimum/maximum)
- Epsilon-сравнения float для проверок с допуском

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль НЕ перехватывается и НЕ заменяется fallback-значением:
   результат — inf или nan, как в аппаратной арифметике double
2. NaN пропагирует через min/max независимо от порядка аргументов
3. Все операции детерминированы и не имеют побочных эффектов
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность для сравнения компонент векторов и элементов матриц
EPS_GEOM_COMPARE_ABS: Final[float] = 1e-9

# Относительная толерантность для сравнения компонент
EPS_GEOM_COMPARE_REL: Final[float] = 1e-9

# Допуск |h·v| для строгой проверки ортогональности базиса плоскости
EPS_ORTHOGONALITY: Final[float] = 1e-9


# =============================================================================
# IEEE-754 ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с семантикой IEEE-754 double.

    Python бросает ZeroDivisionError при делении float на ноль; геометрическое
    ядро вместо этого обязано воспроизводить аппаратный результат:

    - x / ±0 → ±inf (знак = XOR знаков числителя и знаменателя, включая -0.0)
    - 0 / 0 → nan
    - nan / 0 → nan

    Args:
        numerator: Числитель
        denominator: Знаменатель (может быть 0.0 или -0.0)

    Returns:
        numerator / denominator по правилам IEEE-754

    Examples:
        >>> ieee_divide(1.0, 2.0)
        0.5
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator != 0:
        return numerator / denominator

    if math.isnan(numerator) or numerator == 0:
        return math.nan

    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


# =============================================================================
# NaN-ПРОПАГИРУЮЩИЕ MIN/MAX
# =============================================================================


def ieee_min(a: float, b: float) -> float:
    """
    Минимум двух float с распространением NaN.

    Встроенный min() зависит от порядка аргументов, если один из них NaN
    (min(nan, 1) → nan, но min(1, nan) → 1). Здесь NaN возвращается всегда.
    При равенстве нулей разного знака результат — -0.0 при любом порядке.

    Examples:
        >>> ieee_min(1.0, 2.0)
        1.0
        >>> ieee_min(1.0, float("nan"))
        nan
    """
    if math.isnan(a) or math.isnan(b):
        return math.nan
    if a == b:
        return a if math.copysign(1.0, a) < 0 else b
    return a if a < b else b


def ieee_max(a: float, b: float) -> float:
    """
    Максимум двух float с распространением NaN.

    При равенстве нулей разного знака результат — +0.0 при любом порядке.

    Examples:
        >>> ieee_max(1.0, 2.0)
        2.0
        >>> ieee_max(float("nan"), 2.0)
        nan
    """
    if math.isnan(a) or math.isnan(b):
        return math.nan
    if a == b:
        return a if math.copysign(1.0, a) > 0 else b
    return a if a > b else b


# =============================================================================
# IEEE-754 ТРИГОНОМЕТРИЯ
# =============================================================================


def ieee_cos(radians: float) -> float:
    """
    Косинус с семантикой IEEE-754: cos(±inf) → nan.

    math.cos бросает ValueError (math domain error) для бесконечного
    аргумента; здесь результат — nan, как в аппаратной арифметике.

    Examples:
        >>> ieee_cos(0.0)
        1.0
        >>> ieee_cos(float("inf"))
        nan
    """
    if math.isinf(radians):
        return math.nan
    return math.cos(radians)


def ieee_sin(radians: float) -> float:
    """
    Синус с семантикой IEEE-754: sin(±inf) → nan.

    Examples:
        >>> ieee_sin(0.0)
        0.0
        >>> ieee_sin(float("-inf"))
        nan
    """
    if math.isinf(radians):
        return math.nan
    return math.sin(radians)


# =============================================================================
# ПРОВЕРКИ И EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_GEOM_COMPARE_REL,
    abs_tol: float = EPS_GEOM_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм (как math.isclose):
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-9)

    Returns:
        True если значения близки с учётом толерантности.
        NaN не близок ни к чему, включая NaN.

    Examples:
        >>> is_close(1.0, 1.0 + 1e-12)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-5, abs_tol=1e-4)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_GEOM_COMPARE_ABS) -> bool:
    """
    Проверка, близко ли значение к нулю с учётом толерантности.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (default: EPS_GEOM_COMPARE_ABS)

    Returns:
        True если abs(value) <= tol
    """
    return abs(value) <= tol
