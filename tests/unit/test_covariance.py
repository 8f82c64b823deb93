"""
Тесты для Covariance — sample covariance

Проверяемые инварианты:
1. Эталонное значение 41.35
2. LengthMismatch при разных длинах (проверяется до InsufficientData)
3. InsufficientData при n < 2
4. Знаменатель n - 1 против популяционного n у variance
"""

import random
import statistics

import pytest

from src.core.math.central_moment import variance
from src.core.math.covariance import covar, covariance
from src.core.math.errors import InsufficientData, LengthMismatch, SeriesError


class TestCovariance:
    """Тесты выборочной ковариации."""

    def test_reference_value(self) -> None:
        a = [10, 3, 19, 8, 7]
        b = [13, 4, 21, 8, 3]
        assert covariance(a, b) == pytest.approx(41.35)

    def test_symmetric(self) -> None:
        a = [10, 3, 19, 8, 7]
        b = [13, 4, 21, 8, 3]
        assert covariance(a, b) == pytest.approx(covariance(b, a))

    def test_matches_statistics_covariance(self) -> None:
        rng = random.Random(11)
        a = [rng.gauss(0.0, 1.0) for _ in range(100)]
        b = [x * 0.5 + rng.gauss(0.0, 0.2) for x in a]
        assert covariance(a, b) == pytest.approx(statistics.covariance(a, b))

    def test_sample_vs_population_denominator(self) -> None:
        """covariance(s, s) использует n - 1, variance(s) использует n."""
        series = [5, 5, 10, 3]
        n = len(series)
        assert covariance(series, series) == pytest.approx(variance(series) * n / (n - 1))
        assert covariance(series, series) * (n - 1) / n == pytest.approx(6.6875)

    def test_two_points(self) -> None:
        assert covariance([1, 3], [2, 6]) == pytest.approx(4.0)

    def test_independent_of_shift(self) -> None:
        a = [1.0, 2.0, 4.0, 7.0]
        b = [2.0, 1.0, 5.0, 3.0]
        shifted = [x + 1000.0 for x in a]
        assert covariance(shifted, b) == pytest.approx(covariance(a, b))

    def test_alias(self) -> None:
        assert covar is covariance


class TestCovarianceErrors:
    """Ошибки ковариации."""

    def test_length_mismatch_reference(self) -> None:
        with pytest.raises(LengthMismatch) as exc_info:
            covariance([10, 3, 19, 8, 7], [13, 4, 21, 8])
        assert exc_info.value.length_a == 5
        assert exc_info.value.length_b == 4

    def test_length_mismatch_all_pairs(self) -> None:
        """Любая пара рядов разной длины отвергается."""
        for len_a in range(0, 6):
            for len_b in range(0, 6):
                if len_a == len_b:
                    continue
                with pytest.raises(LengthMismatch):
                    covariance([1.0] * len_a, [2.0] * len_b)

    def test_length_checked_before_size(self) -> None:
        """[x] против [] — это LengthMismatch, а не InsufficientData."""
        with pytest.raises(LengthMismatch):
            covariance([1.0], [])

    def test_single_point(self) -> None:
        with pytest.raises(InsufficientData) as exc_info:
            covariance([1.0], [2.0])
        assert exc_info.value.length == 1

    def test_empty(self) -> None:
        with pytest.raises(InsufficientData):
            covariance([], [])

    def test_errors_are_series_errors(self) -> None:
        with pytest.raises(SeriesError):
            covariance([1.0], [2.0])
        with pytest.raises(ValueError):
            covariance([1.0, 2.0], [2.0])
