"""Simulated market: owns the live stock records and ticks their prices.

Callers never see the mutable records.  ``get`` and ``list`` return frozen
``StockQuote`` snapshots, and only ``tick_all`` changes a price.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from decimal import Decimal

from models.config import MarketConfig
from models.market import StockQuote
from models.money import round2, to_decimal

logger = logging.getLogger(__name__)


@dataclass
class _Stock:
    ticker: str
    name: str
    price: Decimal

    def snapshot(self) -> StockQuote:
        return StockQuote(ticker=self.ticker, name=self.name, price=self.price)


class Market:
    """Registry of listed stocks with a randomized price tick.

    The random source is injected so ticking is reproducible under a fixed
    seed.  Each tick moves every price by a uniform fraction in
    ``[-max_move_pct, +max_move_pct)``, rounds it to cents, and clamps it at
    ``floor_price``.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        max_move_pct: Decimal = Decimal("0.04"),
        floor_price: Decimal = Decimal("1.00"),
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._max_move_pct = to_decimal(max_move_pct)
        self._floor_price = to_decimal(floor_price)
        self._stocks: dict[str, _Stock] = {}

    @classmethod
    def from_config(cls, config: MarketConfig, rng: random.Random | None = None) -> Market:
        """Build a market listing every seed in *config*.

        An explicit *rng* wins over ``config.seed``.
        """
        if rng is None:
            rng = random.Random(config.seed)
        market = cls(rng=rng, max_move_pct=config.max_move_pct, floor_price=config.floor_price)
        for seed in config.stocks:
            market.add_stock(seed.ticker, seed.name, seed.price)
        logger.debug("Seeded market with %d stock(s).", len(config.stocks))
        return market

    # ------------------------------------------------------------------
    # Listings
    # ------------------------------------------------------------------

    def add_stock(self, ticker: str, name: str, price: Decimal | int | str) -> StockQuote:
        """List a new stock.  Raises ``ValueError`` on a duplicate or bad price."""
        key = _normalize(ticker)
        if not key:
            raise ValueError("Ticker must not be empty.")
        if key in self._stocks:
            raise ValueError(f"Ticker '{key}' is already listed.")
        price = to_decimal(price)
        if price < 0:
            raise ValueError(f"Price must be non-negative, got {price} for {key}.")
        stock = _Stock(ticker=key, name=name, price=price)
        self._stocks[key] = stock
        return stock.snapshot()

    def get(self, ticker: str) -> StockQuote | None:
        """Return a quote for *ticker* (case-insensitive), or ``None``."""
        stock = self._stocks.get(_normalize(ticker))
        return stock.snapshot() if stock is not None else None

    def price_of(self, ticker: str) -> Decimal | None:
        stock = self._stocks.get(_normalize(ticker))
        return stock.price if stock is not None else None

    def list(self) -> list[StockQuote]:
        """All listings as quotes, sorted by ticker."""
        return [self._stocks[key].snapshot() for key in sorted(self._stocks)]

    def __contains__(self, ticker: object) -> bool:
        return isinstance(ticker, str) and _normalize(ticker) in self._stocks

    def __len__(self) -> int:
        return len(self._stocks)

    # ------------------------------------------------------------------
    # Price updates
    # ------------------------------------------------------------------

    def tick_all(self) -> None:
        """Move every listed price by one random step."""
        span = float(self._max_move_pct)
        for stock in self._stocks.values():
            pct = self._rng.random() * 2 * span - span
            moved = round2(stock.price * (1 + to_decimal(pct)))
            stock.price = max(self._floor_price, moved)
        logger.debug("Ticked %d price(s).", len(self._stocks))


def _normalize(ticker: str) -> str:
    return ticker.strip().upper()
