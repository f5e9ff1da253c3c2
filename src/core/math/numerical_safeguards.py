"""
Numerical Safeguards — Float Primitives for Vector2

Модуль обеспечивает численные примитивы для покомпонентных операций Vector2:
- NaN/Inf предикаты для диагностики невалидных компонент
- Деление по семантике IEEE-754 (±Inf / NaN вместо ZeroDivisionError)
- Округление вниз и округление "half away from zero" без потери float-типа
- Epsilon-сравнения float с учётом машинной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция не бросает исключение на NaN/Inf входах
2. Деление на ноль не перехватывается: результат ±Inf или NaN, как в IEEE-754
3. Результаты округления всегда float (не int)
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close и Vector2.is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется в is_close и Vector2.is_close
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ПРЕДИКАТЫ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_nan(value: float) -> bool:
    """
    Проверка на NaN.

    В отличие от is_valid_float, бесконечность NaN не считается.

    Examples:
        >>> is_nan(float('nan'))
        True
        >>> is_nan(float('inf'))
        False
    """
    return math.isnan(value)


# =============================================================================
# ДЕЛЕНИЕ ПО IEEE-754
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с семантикой IEEE-754.

    Python бросает ZeroDivisionError на x / 0.0, а Vector2.divide обязан
    распространять ±Inf/NaN. Знак нуля в знаменателе учитывается
    (x / -0.0 = -Inf для x > 0).

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        numerator / denominator, либо:
        - ±Inf если denominator == 0 и numerator != 0
        - NaN если denominator == 0 и numerator == 0 или NaN

    Examples:
        >>> ieee_divide(10.0, 4.0)
        2.5
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

    if numerator == 0 or math.isnan(numerator):
        return math.nan

    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def floor_float(value: float) -> float:
    """
    Округление вниз (к -Inf) с сохранением float-типа.

    math.floor бросает исключение на NaN/Inf и возвращает int,
    поэтому невалидные значения возвращаются без изменений.

    Examples:
        >>> floor_float(2.7)
        2.0
        >>> floor_float(-2.2)
        -3.0
        >>> floor_float(float('inf'))
        inf
    """
    if not is_valid_float(value):
        return value
    return float(math.floor(value))


def round_half_away_from_zero(value: float) -> float:
    """
    Округление до ближайшего целого, половины — от нуля.

    Встроенный round() использует banker's rounding (round(2.5) == 2),
    здесь 2.5 → 3.0 и -2.5 → -3.0.

    Examples:
        >>> round_half_away_from_zero(2.5)
        3.0
        >>> round_half_away_from_zero(-2.5)
        -3.0
        >>> round_half_away_from_zero(2.4)
        2.0
        >>> round_half_away_from_zero(float('nan'))
        nan
    """
    if not is_valid_float(value):
        return value

    # Дробная часть вычисляется точно (без value + 0.5, которое
    # округляет 0.49999999999999994 до 1.0)
    if value >= 0:
        whole = math.floor(value)
        return float(whole + 1 if value - whole >= 0.5 else whole)
    else:
        whole = math.ceil(value)
        return float(whole - 1 if whole - value >= 0.5 else whole)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)