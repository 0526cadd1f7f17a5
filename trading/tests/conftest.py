"""Shared fixtures for the trading tests."""

import random
from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from trading.account import Account
from trading.market import Market


class FixedClock:
    """Deterministic clock: each call advances one second from a fixed start."""

    def __init__(self, start: datetime = datetime(2025, 3, 15, 10, 0, 0)) -> None:
        self._now = start

    def __call__(self) -> datetime:
        current = self._now
        self._now += timedelta(seconds=1)
        return current


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def market() -> Market:
    """Small market with fixed prices and a seeded random source."""
    m = Market(rng=random.Random(7))
    m.add_stock("TCS", "TCS Ltd", Decimal("3930"))
    m.add_stock("INFY", "Infosys", Decimal("1650"))
    m.add_stock("ITC", "ITC Ltd", Decimal("470.55"))
    return m


@pytest.fixture
def account(clock) -> Account:
    return Account(name="Trader", initial_cash=Decimal("100000"), clock=clock)
