"""
Tests for the interactive TradingShell, driven by scripted input.
"""

import io
from decimal import Decimal

import pytest

from trading.account import Account
from trading.ledger_store import LedgerStore
from trading.shell import TradingShell, parse_quantity


def _run(account, market, store, answers):
    """Run the shell over *answers* and return everything it printed."""
    feed = iter(answers)

    def fake_input(prompt: str) -> str:
        try:
            return next(feed)
        except StopIteration:
            raise EOFError from None

    out = io.StringIO()
    TradingShell(account, market, store, input_fn=fake_input, out=out).run()
    return out.getvalue()


@pytest.fixture
def store(tmp_path) -> LedgerStore:
    return LedgerStore(tmp_path, prefix="data")


def test_buy_and_sell_flow(account, market, store):
    output = _run(account, market, store, ["3", "tcs", "10", "4", "TCS", "4", "0"])
    assert "BUY executed." in output
    assert "SELL executed." in output
    assert "Goodbye!" in output
    assert account.portfolio.get("TCS").shares == 6


def test_bad_quantity_fails_trade(account, market, store):
    output = _run(account, market, store, ["3", "TCS", "ten", "0"])
    assert "BUY failed." in output
    assert account.history == []


def test_invalid_option(account, market, store):
    output = _run(account, market, store, ["x", "0"])
    assert "Invalid option." in output


def test_portfolio_and_history_views(account, market, store):
    output = _run(account, market, store, ["3", "ITC", "2", "5", "6", "9", "0"])
    assert "Your Portfolio" in output
    assert "ITC" in output
    assert "₹941.10" in output
    assert "2025-03-15 10:00:00  BUY  ITC" in output
    assert "Net Worth: ₹100,000.00" in output


def test_empty_history(account, market, store):
    output = _run(account, market, store, ["6", "0"])
    assert "(none)" in output


def test_save_then_load(account, market, store, clock):
    _run(account, market, store, ["3", "INFY", "3", "7", "0"])
    assert store.cash_path.exists()

    fresh = Account(initial_cash=Decimal("1"), clock=clock)
    output = _run(fresh, market, store, ["8", "0"])
    assert "Loaded from data_* files." in output
    assert fresh.cash == account.cash
    assert fresh.portfolio.get("INFY").shares == 3


def test_load_failure_is_reported(account, market, store):
    store.cash_path.write_text("garbage\n", encoding="utf-8")
    output = _run(account, market, store, ["8", "0"])
    assert "Load failed:" in output
    assert account.cash == Decimal("100000")


def test_list_market_ticks_and_prints(account, market, store):
    output = _run(account, market, store, ["2", "0"])
    assert "TICKER NAME" in output
    assert "Infosys" in output


def test_eof_ends_loop(account, market, store):
    output = _run(account, market, store, [])
    assert output.rstrip().endswith("Goodbye!")


@pytest.mark.parametrize("text,expected", [("5", 5), (" 12 ", 12), ("-3", -3), ("abc", -1), ("", -1), ("1.5", -1)])
def test_parse_quantity(text, expected):
    assert parse_quantity(text) == expected
