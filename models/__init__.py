"""Data models for the trading simulator.

Shared by the market, the account bookkeeping, the ledger store and the shell.
"""

from models.config import AccountConfig, LedgerConfig, MarketConfig, StockSeed, TradingConfig
from models.market import StockQuote
from models.position import Position
from models.report import PortfolioReport, PositionLine
from models.transaction import TradeType, Transaction

__all__ = [
    # config
    "AccountConfig",
    "LedgerConfig",
    "MarketConfig",
    "StockSeed",
    "TradingConfig",
    # market
    "StockQuote",
    # position
    "Position",
    # report
    "PortfolioReport",
    "PositionLine",
    # transaction
    "TradeType",
    "Transaction",
]
