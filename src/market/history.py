"""
History — описание запроса исторических данных

Immutable Pydantic модель: инструмент, две границы периода (UNIX-секунды,
period1 < period2) и интервал свечей.

Границы можно задать в билдере как int или как datetime; naive datetime
трактуется как UTC.
"""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from src.core.contracts import HISTORY_QUERY_CONTRACT
from src.market.builders import Builder
from src.market.stock import Stock


# =============================================================================
# ENUMS
# =============================================================================


class Interval(str, Enum):
    """Интервал свечей исторического ряда"""

    DAILY = "1d"
    WEEKLY = "1wk"
    MONTHLY = "1mo"


# =============================================================================
# HISTORY MODEL
# =============================================================================


class History(BaseModel):
    """
    Запрос исторических котировок одного инструмента.

    Immutable модель (frozen=True).
    """

    stock: Stock = Field(..., description="Инструмент")
    period1: int = Field(..., ge=0, description="Начало периода (UTC, секунды)")
    period2: int = Field(..., ge=0, description="Конец периода (UTC, секунды)")
    interval: Interval = Field(Interval.DAILY, description="Интервал свечей")

    model_config = {"frozen": True}

    @field_validator("period2")
    @classmethod
    def validate_period_order(cls, v: int, info) -> int:
        """Проверка, что period2 строго позже period1"""
        if "period1" in info.data:
            period1 = info.data["period1"]
            if v <= period1:
                raise ValueError(f"period2 {v} must be > period1 {period1}")
        return v

    def to_contract(self) -> dict:
        """Сериализация в форму контракта history_query."""
        return {
            "symbol": self.stock.symbol,
            "period1": self.period1,
            "period2": self.period2,
            "interval": self.interval.value,
        }


# =============================================================================
# BUILDER
# =============================================================================


def to_timestamp(value: int | datetime) -> int:
    """UNIX-секунды из int или datetime (naive → UTC)."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return int(value.timestamp())
    return value


class HistoryBuilder(Builder[History]):
    """
    Пошаговая сборка History.

    Example:
        HistoryBuilder().stock(aapl).period1(1_600_000_000).period2(1_700_000_000).build()
    """

    model = History
    required = ("stock", "period1", "period2")
    contract = HISTORY_QUERY_CONTRACT

    def stock(self, value: Stock | None) -> "HistoryBuilder":
        return self._set("stock", value)

    def period1(self, value: int | datetime | None) -> "HistoryBuilder":
        return self._set("period1", None if value is None else to_timestamp(value))

    def period2(self, value: int | datetime | None) -> "HistoryBuilder":
        return self._set("period2", None if value is None else to_timestamp(value))

    def interval(self, value: Interval | str | None) -> "HistoryBuilder":
        return self._set("interval", value)
