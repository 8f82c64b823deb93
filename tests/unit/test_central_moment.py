"""
Тесты для Central Moment — mean, variance, stddev

Проверяемые инварианты:
1. Эталонные значения mean/variance
2. Популяционный знаменатель n
3. stddev² == variance (rel 1e-9)
4. EmptySeries на пустом ряде
"""

import logging
import math
import random
import statistics
from decimal import Decimal

import pytest

from src.core.math.central_moment import mean, std, stddev, var, variance
from src.core.math.errors import EmptySeries, NonFiniteValue
from src.core.math.numerical_safeguards import is_close


class TestMean:
    """Тесты арифметического среднего."""

    def test_reference_value(self) -> None:
        assert mean([5, 4, 3, 4]) == 4.0

    def test_single_element(self) -> None:
        assert mean([7.5]) == 7.5

    def test_returns_float_for_ints(self) -> None:
        result = mean([1, 2])
        assert isinstance(result, float)
        assert result == 1.5

    def test_decimal_input(self) -> None:
        assert mean([Decimal("1.5"), Decimal("2.5")]) == 2.0

    def test_matches_statistics_fmean(self) -> None:
        rng = random.Random(1)
        series = [rng.uniform(-50.0, 50.0) for _ in range(200)]
        assert mean(series) == pytest.approx(statistics.fmean(series))

    def test_empty_series(self) -> None:
        with pytest.raises(EmptySeries, match="mean"):
            mean([])

    def test_nan_rejected(self) -> None:
        with pytest.raises(NonFiniteValue):
            mean([1.0, float("nan")])


class TestVariance:
    """Тесты популяционной дисперсии."""

    def test_reference_value(self) -> None:
        assert variance([5, 5, 10, 3]) == pytest.approx(6.6875)

    def test_population_denominator(self) -> None:
        """Знаменатель n, совпадает с statistics.pvariance."""
        series = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
        assert variance(series) == pytest.approx(4.0)
        assert variance(series) == pytest.approx(statistics.pvariance(series))
        assert variance(series) != pytest.approx(statistics.variance(series))

    def test_constant_series_zero(self) -> None:
        assert variance([3.0, 3.0, 3.0]) == 0.0

    def test_single_element_zero(self) -> None:
        assert variance([42]) == 0.0

    def test_alias(self) -> None:
        assert var is variance
        assert var([5, 5, 10, 3]) == variance([5, 5, 10, 3])

    def test_empty_series(self) -> None:
        with pytest.raises(EmptySeries, match="variance"):
            variance([])


class TestStddev:
    """Тесты стандартного отклонения."""

    def test_reference_value(self) -> None:
        series = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
        assert stddev(series) == pytest.approx(2.0)

    def test_square_equals_variance(self) -> None:
        """stddev² == variance в пределах 1e-9 относительной точности."""
        rng = random.Random(2024)
        for n in range(1, 60):
            series = [rng.uniform(-1e3, 1e3) for _ in range(n)]
            assert is_close(stddev(series) ** 2, variance(series), abs_tol=1e-12)

    def test_sqrt_of_variance(self) -> None:
        series = [5, 5, 10, 3]
        assert stddev(series) == math.sqrt(variance(series))

    def test_alias(self) -> None:
        assert std is stddev

    def test_debug_log(self, caplog) -> None:
        """stddev пишет DEBUG-строку так же, как mean и variance."""
        with caplog.at_level(logging.DEBUG, logger="src.core.math.central_moment"):
            stddev([2, 4, 4, 4, 5, 5, 7, 9])
        assert any(r.getMessage().startswith("stddev: n=8") for r in caplog.records)

    def test_empty_series(self) -> None:
        with pytest.raises(EmptySeries, match="stddev"):
            stddev([])
