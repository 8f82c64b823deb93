"""
Stock — биржевой символ

Immutable Pydantic модель. Символ нормализуется (strip + upper) и
проверяется на допустимые символы тикера (буквы, цифры, '.', '-', '^', '=').
"""

from pydantic import BaseModel, Field, field_validator

from src.core.contracts import STOCK_CONTRACT
from src.market.builders import Builder


class Stock(BaseModel):
    """Биржевой инструмент, идентифицируемый тикером."""

    symbol: str = Field(
        ...,
        min_length=1,
        max_length=16,
        pattern=r"^[A-Z0-9.=^-]+$",
        description="Тикер (например, 'AAPL', '^GSPC', 'EURUSD=X')",
    )

    model_config = {"frozen": True}

    @field_validator("symbol", mode="before")
    @classmethod
    def normalize_symbol(cls, v: object) -> object:
        """Нормализация тикера: пробелы по краям убираются, регистр верхний"""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    def to_contract(self) -> dict:
        return {"symbol": self.symbol}


class StockBuilder(Builder[Stock]):
    """StockBuilder().symbol("aapl").build() -> Stock(symbol='AAPL')"""

    model = Stock
    required = ("symbol",)
    contract = STOCK_CONTRACT

    def symbol(self, value: str | None) -> "StockBuilder":
        return self._set("symbol", value)
