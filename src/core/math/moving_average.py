"""
Moving Average — SMA & EMA over ordered series

Скользящие средние вычисляются за один проход с инкрементальной суммой окна.

ФОРМУЛЫ:
    SMA[k] = mean(series[k .. k + periods - 1]),  k = 0 .. n - periods - 1

    multiplier = 2 / (periods + 1)
    EMA[0] = mean(series[0 .. periods - 1])
    EMA[k] = (1 - multiplier) * EMA[k - 1] + multiplier * series[periods + k]

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(result) == len(series) - periods для обоих операторов
2. 0 < periods < len(series), иначе InvalidPeriod
3. Последний элемент ряда не входит ни в одно окно SMA (окно эмитится
   до добавления series[i] в сумму)
4. EMA строго последовательна: каждое значение зависит от предыдущего
5. Порядок float-операций фиксирован, результаты воспроизводимы побитово
"""

import logging
from collections.abc import Iterable
from typing import Final

from src.core.math.numerical_safeguards import to_float_series, validate_periods

logger = logging.getLogger(__name__)

# Минимальный допустимый размер окна
MOVING_AVERAGE_MIN_PERIODS: Final[int] = 1


# =============================================================================
# SIMPLE MOVING AVERAGE
# =============================================================================


def sma(series: Iterable[float], periods: int) -> list[float]:
    """
    Простая скользящая средняя по окну из `periods` элементов.

    Сумма окна поддерживается инкрементально: на шаге i >= periods сначала
    эмитится текущее среднее, затем из суммы вычитается выпадающий элемент
    series[i - periods], и только после этого добавляется series[i].

    Args:
        series: Упорядоченный ряд чисел, приводимых к float
        periods: Размер окна, 0 < periods < len(series)

    Returns:
        Список из len(series) - periods средних

    Raises:
        InvalidPeriod: если periods вне (0, len(series))
        NonNumericValue, NonFiniteValue: если элемент ряда невалиден

    Examples:
        >>> sma([5, 7, 8, 6, 5, 5.5, 4.5], 2)
        [6.0, 7.5, 7.0, 5.5, 5.25]
    """
    values = to_float_series(series)
    periods = validate_periods(periods, len(values))

    window_sum = 0.0
    result: list[float] = []

    for i, value in enumerate(values):
        if i >= periods:
            result.append(window_sum / periods)
            window_sum -= values[i - periods]
        window_sum += value

    logger.debug("sma: n=%d periods=%d -> %d values", len(values), periods, len(result))
    return result


# =============================================================================
# EXPONENTIAL MOVING AVERAGE
# =============================================================================


def ema(series: Iterable[float], periods: int) -> list[float]:
    """
    Экспоненциальная скользящая средняя.

    Первое значение равно SMA первых `periods` элементов, далее
    v_i = (1 - multiplier) * v_{i-1} + multiplier * series[i] для i > periods.

    Args:
        series: Упорядоченный ряд чисел, приводимых к float
        periods: Размер окна, 0 < periods < len(series)

    Returns:
        Список из len(series) - periods значений

    Raises:
        InvalidPeriod: если periods вне (0, len(series))
        NonNumericValue, NonFiniteValue: если элемент ряда невалиден

    Examples:
        >>> ema([2, 4, 6, 8, 12], 2)
        [3.0, 6.333333333333333, 10.11111111111111]
    """
    values = to_float_series(series)
    periods = validate_periods(periods, len(values))

    multiplier = 2.0 / (periods + 1)
    seed_sum = 0.0
    result: list[float] = []

    for i, value in enumerate(values):
        if i == periods:
            result.append(seed_sum / periods)
        elif i > periods:
            result.append((1.0 - multiplier) * result[-1] + multiplier * value)
        else:
            seed_sum += value

    logger.debug("ema: n=%d periods=%d -> %d values", len(values), periods, len(result))
    return result
