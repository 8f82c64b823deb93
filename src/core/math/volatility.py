"""
Volatility — range-based dispersion

range_volatility = max(series) - min(series), один проход.

Функция тотальная: ряд длины 0 или 1 не имеет наблюдаемого разброса и
возвращает 0. Элементы не конвертируются в float, результат имеет тип
элементов (int → int, Decimal → Decimal).
"""

import logging
from collections.abc import Iterable
from typing import Any

logger = logging.getLogger(__name__)


def range_volatility(series: Iterable[Any]) -> Any:
    """
    Размах ряда: max - min.

    Args:
        series: Ряд элементов с упорядочиванием и вычитанием

    Returns:
        max - min, либо 0 для ряда длины <= 1

    Examples:
        >>> range_volatility([10, 5, 2, 1, 3, 7])
        9
        >>> range_volatility([5])
        0
        >>> range_volatility([])
        0
    """
    iterator = iter(series)
    try:
        first = next(iterator)
    except StopIteration:
        return 0

    lowest = highest = first
    count = 1
    for value in iterator:
        count += 1
        if value < lowest:
            lowest = value
        elif value > highest:
            highest = value

    if count == 1:
        return 0

    result = highest - lowest
    logger.debug("range_volatility: n=%d -> %r", count, result)
    return result
