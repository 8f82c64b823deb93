"""
Numerical Safeguards — Series Conversion & Validation Primitives

Модуль обеспечивает единую точку входа для всех операторов над рядами:
- Конвертация элементов ряда в float один раз на границе API
- Отклонение NaN/Inf до начала вычислений
- Валидация периода скользящего окна
- Epsilon-сравнения float с учётом машинной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входной ряд никогда не мутируется (создаётся новый list[float])
2. NaN/Inf во входном ряде отклоняются (NonFiniteValue); переполнение
   сумм конечных значений не проверяется
3. str/bytes не считаются числами, даже если float() их принимает
4. Все операции детерминированы и воспроизводимы
"""

import math
import numbers
from collections.abc import Iterable
from typing import Final

from src.core.math.errors import InvalidPeriod, NonFiniteValue, NonNumericValue

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close, например для проверки stddev**2 == variance
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ПРОВЕРКИ
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

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# КОНВЕРТАЦИЯ РЯДОВ
# =============================================================================


def to_float(value: object, name: str = "series", index: int = 0) -> float:
    """
    Конвертация одного элемента ряда в finite float.

    Принимает всё, что реализует __float__ (int, float, Decimal, Fraction,
    numpy scalars). bool допускается как подкласс int.

    Args:
        value: Элемент ряда
        name: Имя ряда (для сообщения об ошибке)
        index: Позиция элемента (для сообщения об ошибке)

    Returns:
        float(value)

    Raises:
        NonNumericValue: если value это str/bytes, не приводится к float
            или выходит за диапазон float (например, 10**400)
        NonFiniteValue: если результат NaN или Inf
    """
    if isinstance(value, (str, bytes, bytearray)):
        raise NonNumericValue(name, index, value)

    try:
        result = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError) as exc:
        raise NonNumericValue(name, index, value) from exc

    if not is_valid_float(result):
        raise NonFiniteValue(name, index, result)

    return result


def to_float_series(values: Iterable[object], name: str = "series") -> list[float]:
    """
    Конвертация всего ряда в новый list[float].

    Итерируемый объект материализуется ровно один раз, поэтому генераторы
    допустимы. Исходная коллекция не изменяется.

    Examples:
        >>> to_float_series([1, 2, 3])
        [1.0, 2.0, 3.0]
        >>> to_float_series((x / 2 for x in range(3)))
        [0.0, 0.5, 1.0]
    """
    return [to_float(v, name, i) for i, v in enumerate(values)]


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_periods(periods: object, length: int) -> int:
    """
    Валидация периода скользящего окна.

    Период должен быть целым (numbers.Integral, не bool) и удовлетворять 0 < periods < length.
    При periods >= length ни одно окно не завершается, при periods == 0
    деление на период не определено.

    Args:
        periods: Размер окна
        length: Длина ряда

    Returns:
        periods как int

    Raises:
        InvalidPeriod: если период невалиден
    """
    if isinstance(periods, bool) or not isinstance(periods, numbers.Integral):
        raise InvalidPeriod(periods, length)

    periods = int(periods)
    if periods <= 0 or periods >= length:
        raise InvalidPeriod(periods, length)

    return periods
