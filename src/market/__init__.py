"""Market — value objects и билдеры для запросов котировок.

Не зависит от src.core.math: вычислительное ядро получает ряды от вызывающего
кода, а эти модели лишь описывают, откуда ряд можно получить.
"""

from .builders import Builder, MissingField
from .endpoint import (
    DEFAULT_BASE_URL,
    EndpointConfig,
    YahooFinance,
    YahooFinanceBuilder,
)
from .history import History, HistoryBuilder, Interval
from .stock import Stock, StockBuilder

__all__ = [
    "Builder",
    "MissingField",
    "Stock",
    "StockBuilder",
    "History",
    "HistoryBuilder",
    "Interval",
    "DEFAULT_BASE_URL",
    "EndpointConfig",
    "YahooFinance",
    "YahooFinanceBuilder",
]
