"""
Central Moment — mean, population variance, standard deviation

ФОРМУЛЫ:
    mean     = Σ x_i / n
    variance = Σ (x_i - mean)² / n      (population, знаменатель n)
    stddev   = sqrt(variance)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустой ряд → EmptySeries
2. Значения приводятся к float до суммирования
3. Оба прохода variance используют одно и то же float-значение mean
4. stddev² == variance в пределах EPS_FLOAT_COMPARE_REL
"""

import logging
import math
from collections.abc import Iterable

from src.core.math.errors import EmptySeries
from src.core.math.numerical_safeguards import to_float_series

logger = logging.getLogger(__name__)


def _mean_of(values: list[float]) -> float:
    return sum(values) / len(values)


def _variance_of(values: list[float]) -> float:
    center = _mean_of(values)
    return sum((v - center) ** 2 for v in values) / len(values)


def _non_empty(series: Iterable[float], operation: str) -> list[float]:
    values = to_float_series(series)
    if not values:
        raise EmptySeries(operation)
    return values


def mean(series: Iterable[float]) -> float:
    """
    Арифметическое среднее ряда.

    Raises:
        EmptySeries: если ряд пустой

    Examples:
        >>> mean([5, 4, 3, 4])
        4.0
    """
    values = _non_empty(series, "mean")
    result = _mean_of(values)
    logger.debug("mean: n=%d -> %r", len(values), result)
    return result


def variance(series: Iterable[float]) -> float:
    """
    Популяционная дисперсия ряда (знаменатель n, не n - 1).

    Для выборочной оценки парных рядов см. covariance, которая
    использует знаменатель n - 1.

    Raises:
        EmptySeries: если ряд пустой

    Examples:
        >>> variance([5, 5, 10, 3])
        6.6875
    """
    values = _non_empty(series, "variance")
    result = _variance_of(values)
    logger.debug("variance: n=%d -> %r", len(values), result)
    return result


def stddev(series: Iterable[float]) -> float:
    """
    Стандартное отклонение: sqrt(variance(series)).

    Raises:
        EmptySeries: если ряд пустой
    """
    values = _non_empty(series, "stddev")
    result = math.sqrt(_variance_of(values))
    logger.debug("stddev: n=%d -> %r", len(values), result)
    return result


# Короткие имена
var = variance
std = stddev
