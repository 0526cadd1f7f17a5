"""
Tests for Account buy/sell bookkeeping.

Invalid trades must return False and leave cash, portfolio and history
untouched; valid trades update all three together.
"""

from datetime import datetime
from decimal import Decimal

import pytest

from models.money import round2
from models.transaction import TradeType
from trading.account import Account
from trading.market import Market


def _set_price(market: Market, ticker: str, price: str) -> Market:
    """Return a copy-like market where *ticker* trades at *price*."""
    fresh = Market()
    for quote in market.list():
        fresh.add_stock(quote.ticker, quote.name, Decimal(price) if quote.ticker == ticker else quote.price)
    return fresh


def _state(account: Account):
    return (
        account.cash,
        {p.ticker: (p.shares, p.avg_cost) for p in account.portfolio.positions()},
        list(account.history),
    )


# ===================================================================
# Worked example
# ===================================================================


def test_buy_then_sell_example(account, market):
    assert account.buy(market, "TCS", 10) is True
    assert account.cash == Decimal("60700")
    position = account.portfolio.get("TCS")
    assert (position.shares, position.avg_cost) == (10, Decimal("3930"))

    later = _set_price(market, "TCS", "4000")
    assert account.sell(later, "TCS", 5) is True
    assert account.cash == Decimal("80700")
    position = account.portfolio.get("TCS")
    assert (position.shares, position.avg_cost) == (5, Decimal("3930"))


# ===================================================================
# Buys
# ===================================================================


class TestBuy:

    def test_records_transaction(self, account, market):
        account.buy(market, "tcs", 2)
        tx = account.history[-1]
        assert tx.type is TradeType.BUY
        assert tx.ticker == "TCS"
        assert tx.shares == 2
        assert tx.price == Decimal("3930")
        assert tx.total == Decimal("7860.00")
        assert tx.time == datetime(2025, 3, 15, 10, 0, 0)

    def test_debits_sum_of_rounded_costs(self, account, market):
        start = account.cash
        orders = [("ITC", 3), ("INFY", 1), ("ITC", 7), ("TCS", 2)]
        expected = Decimal("0")
        for ticker, qty in orders:
            expected += round2(market.get(ticker).price * qty)
            assert account.buy(market, ticker, qty)
        assert start - account.cash == expected

    def test_weighted_average_across_two_prices(self, account, market):
        account.buy(market, "TCS", 3)
        account.buy(_set_price(market, "TCS", "4001.25"), "TCS", 4)
        expected = ((3 * Decimal("3930") + 4 * Decimal("4001.25")) / 7).quantize(Decimal("0.0001"))
        assert account.portfolio.get("TCS").avg_cost == expected

    def test_exact_cash_is_enough(self, market):
        acct = Account(initial_cash=Decimal("3930"))
        assert acct.buy(market, "TCS", 1)
        assert acct.cash == 0

    @pytest.mark.parametrize(
        "ticker,qty",
        [("NOPE", 1), ("TCS", 0), ("TCS", -5), ("TCS", 26)],
        ids=["unknown-ticker", "zero-qty", "negative-qty", "insufficient-cash"],
    )
    def test_rejections_leave_state_unchanged(self, account, market, ticker, qty):
        account.buy(market, "INFY", 1)
        before = _state(account)
        assert account.buy(market, ticker, qty) is False
        assert _state(account) == before


# ===================================================================
# Sells
# ===================================================================


class TestSell:

    def test_exact_sell_closes_position(self, account, market):
        account.buy(market, "INFY", 4)
        assert account.sell(market, "INFY", 4)
        assert account.portfolio.get("INFY") is None
        assert account.cash == Decimal("100000")

    def test_sell_total_is_negative(self, account, market):
        account.buy(market, "ITC", 3)
        account.sell(market, "ITC", 2)
        tx = account.history[-1]
        assert tx.type is TradeType.SELL
        assert tx.total == Decimal("-941.10")

    @pytest.mark.parametrize(
        "ticker,qty",
        [("NOPE", 1), ("INFY", 0), ("INFY", -1), ("INFY", 5), ("TCS", 1)],
        ids=["unknown-ticker", "zero-qty", "negative-qty", "oversell", "not-held"],
    )
    def test_rejections_leave_state_unchanged(self, account, market, ticker, qty):
        account.buy(market, "INFY", 4)
        before = _state(account)
        assert account.sell(market, ticker, qty) is False
        assert _state(account) == before


# ===================================================================
# Valuation
# ===================================================================


def test_net_worth(account, market):
    account.buy(market, "TCS", 10)
    later = _set_price(market, "TCS", "4000.005")
    # 60700 + round2(40000.05) = 100700.05
    assert account.net_worth(later) == Decimal("100700.05")


def test_initial_cash_rounded_to_cents():
    assert Account(initial_cash="10.005").cash == Decimal("10.01")
