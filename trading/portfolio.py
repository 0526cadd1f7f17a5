"""Portfolio: ticker -> Position map with market valuation."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from typing import TYPE_CHECKING

from models.money import ZERO, round2
from models.position import Position

if TYPE_CHECKING:
    from trading.market import Market


class Portfolio:
    """One ``Position`` per held ticker; zero-share positions are dropped."""

    def __init__(self) -> None:
        self._positions: dict[str, Position] = {}

    def get(self, ticker: str) -> Position | None:
        return self._positions.get(ticker)

    def positions(self) -> list[Position]:
        return list(self._positions.values())

    def tickers(self) -> list[str]:
        return list(self._positions)

    def buy(self, ticker: str, qty: int, price: Decimal) -> None:
        """Add *qty* shares at *price*, opening the position if needed."""
        position = self._positions.get(ticker)
        if position is None:
            position = Position(ticker=ticker)
            self._positions[ticker] = position
        position.apply_buy(qty, price)

    def can_sell(self, ticker: str, qty: int) -> bool:
        position = self._positions.get(ticker)
        return position is not None and position.shares >= qty

    def sell(self, ticker: str, qty: int) -> None:
        """Remove *qty* shares; closes the position when none are left.

        Selling a ticker that is not held is a no-op.  Callers check
        ``can_sell`` first.
        """
        position = self._positions.get(ticker)
        if position is None:
            return
        position.apply_sell(qty)
        if position.shares == 0:
            del self._positions[ticker]

    def market_value(self, market: Market) -> Decimal:
        """Current value of all holdings; delisted tickers count as zero."""
        total = ZERO
        for position in self._positions.values():
            price = market.price_of(position.ticker)
            if price is not None:
                total += price * position.shares
        return round2(total)

    def replace(self, positions: Iterable[Position]) -> None:
        """Swap the whole holding set, e.g. after loading from disk."""
        self._positions = {p.ticker: p for p in positions if p.shares > 0}

    def __len__(self) -> int:
        return len(self._positions)

    def __contains__(self, ticker: object) -> bool:
        return ticker in self._positions
