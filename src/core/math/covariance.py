"""
Covariance — sample covariance of two paired series

ФОРМУЛА:
    covariance(a, b) = Σ (a_i - mean(a)) * (b_i - mean(b)) / (n - 1)

Знаменатель выборочный (n - 1), в отличие от популяционного variance (n).
Для одинаковых рядов: covariance(s, s) * (n - 1) / n == variance(s).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(a) != len(b) → LengthMismatch (проверяется первым)
2. n < 2 → InsufficientData (деление на n - 1 = 0 не выполняется)
3. Средние считаются через central_moment.mean
"""

import logging
from collections.abc import Iterable

from src.core.math.central_moment import mean
from src.core.math.errors import InsufficientData, LengthMismatch
from src.core.math.numerical_safeguards import to_float_series

logger = logging.getLogger(__name__)


def covariance(series_a: Iterable[float], series_b: Iterable[float]) -> float:
    """
    Выборочная ковариация двух рядов одинаковой длины.

    Args:
        series_a: Первый ряд
        series_b: Второй ряд, сопоставленный с первым по индексу

    Returns:
        Выборочная ковариация (float)

    Raises:
        LengthMismatch: если длины рядов различаются
        InsufficientData: если в рядах меньше двух точек

    Examples:
        >>> round(covariance([10, 3, 19, 8, 7], [13, 4, 21, 8, 3]), 10)
        41.35
    """
    a = to_float_series(series_a, "series_a")
    b = to_float_series(series_b, "series_b")

    if len(a) != len(b):
        raise LengthMismatch(len(a), len(b))

    n = len(a)
    if n < 2:
        raise InsufficientData(n)

    mean_a = mean(a)
    mean_b = mean(b)

    total = 0.0
    for x, y in zip(a, b):
        total += (x - mean_a) * (y - mean_b)

    result = total / (n - 1)
    logger.debug("covariance: n=%d -> %r", n, result)
    return result


covar = covariance
