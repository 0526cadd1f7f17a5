"""Paper-trading ledger: market, portfolio bookkeeping and flat-file persistence.

The bookkeeping classes are usable without the console shell::

    from models.config import MarketConfig
    from trading import Account, LedgerStore, Market

    market = Market.from_config(MarketConfig(seed=7))
    account = Account(initial_cash=100_000)
    account.buy(market, "TCS", 10)
    LedgerStore("ledger").save(account)
"""

from .account import Account
from .ledger_store import LedgerFormatError, LedgerStore
from .market import Market
from .portfolio import Portfolio
from .reporting import build_portfolio_report

__all__ = [
    "Account",
    "LedgerFormatError",
    "LedgerStore",
    "Market",
    "Portfolio",
    "build_portfolio_report",
]
