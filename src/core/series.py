"""
PriceSeries — immutable series with operator methods

Обёртка над tuple[float], предоставляющая операторы ядра как методы:
    PriceSeries.from_values([5, 7, 8]).sma(2)

Конвертация в float и проверка NaN/Inf выполняются один раз при создании.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from src.core.math.central_moment import mean, stddev, variance
from src.core.math.covariance import covariance
from src.core.math.moving_average import ema, sma
from src.core.math.numerical_safeguards import to_float_series
from src.core.math.volatility import range_volatility


@dataclass(frozen=True)
class PriceSeries:
    """Упорядоченный ряд цен (или любых измерений) во времени."""

    values: tuple[float, ...]

    @classmethod
    def from_values(cls, values: Iterable[object]) -> "PriceSeries":
        """
        Создание ряда из любых значений, приводимых к float.

        Raises:
            NonNumericValue, NonFiniteValue: если элемент невалиден
        """
        return cls(tuple(to_float_series(values)))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)

    def sma(self, periods: int) -> list[float]:
        return sma(self.values, periods)

    def ema(self, periods: int) -> list[float]:
        return ema(self.values, periods)

    def mean(self) -> float:
        return mean(self.values)

    def variance(self) -> float:
        return variance(self.values)

    def stddev(self) -> float:
        return stddev(self.values)

    def range_volatility(self) -> float:
        return range_volatility(self.values)

    def covariance(self, other: "PriceSeries | Iterable[float]") -> float:
        """Выборочная ковариация с другим рядом той же длины."""
        return covariance(self.values, other)
