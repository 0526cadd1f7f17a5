"""Trading simulator configuration models, loaded from YAML.

These live in ``models/`` because they are shared data contracts used by the
market, the ledger store and the console shell.
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator


class StockSeed(BaseModel):
    """One listing the market starts with."""

    ticker: str = Field(description="Ticker symbol; stored uppercased.")
    name: str = Field(description="Display name, e.g. 'Infosys'.")
    price: Decimal = Field(gt=0, description="Opening price.")

    @field_validator("ticker")
    @classmethod
    def _upper_ticker(cls, value: str) -> str:
        value = value.strip().upper()
        if not value:
            raise ValueError("ticker must not be empty")
        return value


def _default_stocks() -> list[StockSeed]:
    return [
        StockSeed(ticker="TCS", name="TCS Ltd", price=Decimal("3930")),
        StockSeed(ticker="INFY", name="Infosys", price=Decimal("1650")),
        StockSeed(ticker="RELI", name="Reliance Ind.", price=Decimal("2935")),
        StockSeed(ticker="HDFB", name="HDFC Bank", price=Decimal("1560")),
        StockSeed(ticker="ITC", name="ITC Ltd", price=Decimal("470")),
        StockSeed(ticker="WIPR", name="Wipro", price=Decimal("475")),
        StockSeed(ticker="SBIN", name="State Bank", price=Decimal("845")),
    ]


class MarketConfig(BaseModel):
    """Listings and price-tick parameters for the simulated market."""

    stocks: list[StockSeed] = Field(
        default_factory=_default_stocks,
        description="Stocks listed at start-up.",
    )
    max_move_pct: Decimal = Field(
        default=Decimal("0.04"),
        gt=0,
        le=1,
        description="Largest fractional move per tick, in either direction.",
    )
    floor_price: Decimal = Field(
        default=Decimal("1.00"),
        ge=0,
        description="Prices never tick below this value.",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the price-tick random source. None = nondeterministic.",
    )


class AccountConfig(BaseModel):
    """Starting state of the trading account."""

    name: str = "Trader"
    initial_cash: Decimal = Field(
        default=Decimal("100000"),
        ge=0,
        description="Starting cash balance.",
    )


class LedgerConfig(BaseModel):
    """Where the ledger files are written."""

    data_dir: str = Field(default=".", description="Directory holding the ledger files.")
    prefix: str = Field(
        default="data",
        min_length=1,
        description="File name prefix, e.g. 'data' -> data_cash.txt.",
    )


class TradingConfig(BaseModel):
    """Top-level configuration for the trading simulator, loaded from YAML.

    Every section has defaults, so an empty mapping is a valid config.
    """

    market: MarketConfig = Field(default_factory=MarketConfig)
    account: AccountConfig = Field(default_factory=AccountConfig)
    ledger: LedgerConfig = Field(default_factory=LedgerConfig)
    currency_symbol: str = Field(default="₹", description="Prefix used when printing money.")

    @classmethod
    def from_yaml(cls, path: str | Path) -> TradingConfig:
        """Load and validate a ``TradingConfig`` from a YAML file.

        Raises ``FileNotFoundError`` if the file does not exist and
        ``ValueError`` if the content is not a valid YAML mapping.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with path.open(encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ValueError(
                f"Expected a YAML mapping in {path}, got {type(raw).__name__}."
            )

        return cls(**raw)
