"""
Тесты для PriceSeries — immutable ряд с операторами-методами
"""

import dataclasses

import pytest

from src.core.math.errors import EmptySeries, InvalidPeriod, LengthMismatch, NonFiniteValue
from src.core.series import PriceSeries


@pytest.fixture
def closes() -> PriceSeries:
    """Цены закрытия из демонстрационного примера."""
    return PriceSeries.from_values([5.0, 10.0, 3.0, 9.0, 8.0, 7.0, 2.5, 8.5, 1.9, 2.2])


class TestPriceSeries:
    def test_from_values_converts(self) -> None:
        series = PriceSeries.from_values([1, 2, 3])
        assert series.values == (1.0, 2.0, 3.0)
        assert len(series) == 3
        assert list(series) == [1.0, 2.0, 3.0]

    def test_frozen(self, closes) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            closes.values = ()

    def test_rejects_nan(self) -> None:
        with pytest.raises(NonFiniteValue):
            PriceSeries.from_values([1.0, float("nan")])

    def test_sma_ema_lengths(self, closes) -> None:
        assert len(closes.sma(2)) == 8
        assert len(closes.ema(2)) == 8

    def test_methods_match_functions(self) -> None:
        series = PriceSeries.from_values([5, 7, 8, 6, 5, 5.5, 4.5])
        assert series.sma(2) == [6.0, 7.5, 7.0, 5.5, 5.25]
        assert PriceSeries.from_values([5, 4, 3, 4]).mean() == 4.0
        assert PriceSeries.from_values([5, 5, 10, 3]).variance() == pytest.approx(6.6875)
        assert PriceSeries.from_values([10, 5, 2, 1, 3, 7]).range_volatility() == 9.0

    def test_stddev(self) -> None:
        series = PriceSeries.from_values([2, 4, 4, 4, 5, 5, 7, 9])
        assert series.stddev() == pytest.approx(2.0)

    def test_covariance_with_series_and_list(self) -> None:
        a = PriceSeries.from_values([10, 3, 19, 8, 7])
        b = PriceSeries.from_values([13, 4, 21, 8, 3])
        assert a.covariance(b) == pytest.approx(41.35)
        assert a.covariance([13, 4, 21, 8, 3]) == pytest.approx(41.35)

    def test_errors_propagate(self) -> None:
        empty = PriceSeries.from_values([])
        with pytest.raises(EmptySeries):
            empty.mean()
        with pytest.raises(InvalidPeriod):
            empty.sma(1)
        assert empty.range_volatility() == 0
        with pytest.raises(LengthMismatch):
            PriceSeries.from_values([1, 2]).covariance([1, 2, 3])
