"""Trading account: cash, portfolio and transaction history.

``buy`` and ``sell`` either apply fully (cash, portfolio and history all
change) or not at all.  Invalid trades return ``False`` instead of raising,
with the reason logged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from decimal import Decimal

from models.money import round2, to_decimal
from models.transaction import TradeType, Transaction
from trading.market import Market
from trading.portfolio import Portfolio

logger = logging.getLogger(__name__)


class Account:
    """Single-user paper-trading account."""

    def __init__(
        self,
        name: str = "Trader",
        initial_cash: Decimal | int | str = Decimal("100000"),
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.name = name
        self.cash: Decimal = round2(to_decimal(initial_cash))
        self.portfolio = Portfolio()
        self.history: list[Transaction] = []
        self._clock = clock

    # ------------------------------------------------------------------
    # Trading
    # ------------------------------------------------------------------

    def buy(self, market: Market, ticker: str, qty: int) -> bool:
        """Buy *qty* shares of *ticker* at the current market price."""
        quote = market.get(ticker)
        if quote is None:
            logger.info("BUY rejected: unknown ticker '%s'.", ticker)
            return False
        if qty <= 0:
            logger.info("BUY rejected: quantity must be positive, got %d.", qty)
            return False

        cost = round2(quote.price * qty)
        if self.cash < cost:
            logger.info(
                "BUY rejected: %d %s costs %s, only %s cash available.",
                qty, quote.ticker, cost, self.cash,
            )
            return False

        self.cash = round2(self.cash - cost)
        self.portfolio.buy(quote.ticker, qty, quote.price)
        self.history.append(
            Transaction.record(TradeType.BUY, quote.ticker, qty, quote.price, self._clock())
        )
        logger.info("BUY %d %s @ %s (cash now %s).", qty, quote.ticker, quote.price, self.cash)
        return True

    def sell(self, market: Market, ticker: str, qty: int) -> bool:
        """Sell *qty* held shares of *ticker* at the current market price."""
        quote = market.get(ticker)
        if quote is None:
            logger.info("SELL rejected: unknown ticker '%s'.", ticker)
            return False
        if qty <= 0:
            logger.info("SELL rejected: quantity must be positive, got %d.", qty)
            return False
        if not self.portfolio.can_sell(quote.ticker, qty):
            position = self.portfolio.get(quote.ticker)
            held = position.shares if position is not None else 0
            logger.info("SELL rejected: %d %s requested, only %d held.", qty, quote.ticker, held)
            return False

        proceeds = round2(quote.price * qty)
        self.cash = round2(self.cash + proceeds)
        self.portfolio.sell(quote.ticker, qty)
        self.history.append(
            Transaction.record(TradeType.SELL, quote.ticker, qty, quote.price, self._clock())
        )
        logger.info("SELL %d %s @ %s (cash now %s).", qty, quote.ticker, quote.price, self.cash)
        return True

    # ------------------------------------------------------------------
    # Valuation
    # ------------------------------------------------------------------

    def net_worth(self, market: Market) -> Decimal:
        """Cash plus the market value of every holding."""
        return round2(self.cash + self.portfolio.market_value(market))
