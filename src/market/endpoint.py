"""
YahooFinance — endpoint для выгрузки исторических котировок

Модуль только форматирует URL запроса, сетевых вызовов нет.

Формат:
    {base_url}/{SYMBOL}?period1={p1}&period2={p2}&interval={iv}&events=history
"""

from dataclasses import dataclass
from typing import Final
from urllib.parse import quote, urlencode

from pydantic import BaseModel, Field, field_validator

from src.market.builders import Builder
from src.market.history import History

# =============================================================================
# CONSTANTS
# =============================================================================

DEFAULT_BASE_URL: Final[str] = "https://query1.finance.yahoo.com/v7/finance/download"

# Тип событий в выгрузке (котировки, не дивиденды/сплиты)
EVENTS_HISTORY: Final[str] = "history"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EndpointConfig:
    """Конфигурация endpoint.

    Параметры по умолчанию для YahooFinanceBuilder.
    """

    base_url: str = DEFAULT_BASE_URL


# =============================================================================
# ENDPOINT MODEL
# =============================================================================


class YahooFinance(BaseModel):
    """Endpoint сервиса котировок вместе с описанием запроса."""

    base_url: str = Field(..., pattern=r"^https?://\S+$", description="Базовый URL сервиса")
    events: History = Field(..., description="Запрос исторических данных")

    model_config = {"frozen": True}

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    def url(self) -> str:
        """
        URL запроса исторических котировок.

        Example:
            https://query1.finance.yahoo.com/v7/finance/download/AAPL?period1=1600000000&period2=1700000000&interval=1d&events=history
        """
        query = urlencode(
            {
                "period1": self.events.period1,
                "period2": self.events.period2,
                "interval": self.events.interval.value,
                "events": EVENTS_HISTORY,
            }
        )
        symbol = quote(self.events.stock.symbol, safe="")
        return f"{self.base_url}/{symbol}?{query}"


# =============================================================================
# BUILDER
# =============================================================================


class YahooFinanceBuilder(Builder[YahooFinance]):
    """Сборка endpoint; base_url берётся из EndpointConfig, если не задан."""

    model = YahooFinance
    required = ("base_url", "events")

    def __init__(self, config: EndpointConfig | None = None):
        super().__init__()
        self.config = config or EndpointConfig()
        self._set("base_url", self.config.base_url)

    def base_url(self, value: str | None) -> "YahooFinanceBuilder":
        return self._set("base_url", value)

    def events(self, value: History | None) -> "YahooFinanceBuilder":
        return self._set("events", value)
