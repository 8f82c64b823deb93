"""
Series Errors — таксономия ошибок статистических операторов

Все операторы над рядами либо возвращают результат, либо немедленно
выбрасывают одно из исключений ниже. Частичных результатов нет.

Иерархия:
    SeriesError (ValueError)
    ├── InvalidPeriod      — periods == 0, не int или periods >= len(series)
    ├── EmptySeries        — моменты на пустом ряде
    ├── LengthMismatch     — covariance на рядах разной длины
    ├── InsufficientData   — covariance при n < 2
    ├── NonNumericValue    — элемент не приводится к float
    └── NonFiniteValue     — NaN/Inf в операторе с float-конвертацией
"""


class SeriesError(ValueError):
    """Базовое исключение для операций над рядами."""

    pass


class InvalidPeriod(SeriesError):
    """Период окна невалиден для данного ряда."""

    def __init__(self, periods: object, length: int):
        self.periods = periods
        self.length = length
        super().__init__(
            f"periods must be an integer in [1, {length - 1}] "
            f"for a series of length {length}, got {periods!r}"
        )


class EmptySeries(SeriesError):
    """Оператор требует непустой ряд."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation} requires a non-empty series")


class LengthMismatch(SeriesError):
    """Парные ряды имеют разную длину."""

    def __init__(self, length_a: int, length_b: int):
        self.length_a = length_a
        self.length_b = length_b
        super().__init__(
            f"series lengths differ: len(a)={length_a}, len(b)={length_b}"
        )


class InsufficientData(SeriesError):
    """Недостаточно точек для несмещённой оценки (n - 1 == 0)."""

    def __init__(self, length: int, required: int = 2):
        self.length = length
        self.required = required
        super().__init__(
            f"at least {required} paired points required, got {length}"
        )


class NonNumericValue(SeriesError):
    """Элемент ряда не приводится к float."""

    def __init__(self, name: str, index: int, value: object):
        self.index = index
        self.value = value
        super().__init__(
            f"{name}[{index}] is not convertible to float: {value!r}"
        )


class NonFiniteValue(SeriesError):
    """Элемент ряда равен NaN или Inf."""

    def __init__(self, name: str, index: int, value: float):
        self.index = index
        self.value = value
        super().__init__(f"{name}[{index}] must be finite (not NaN/Inf), got {value}")
